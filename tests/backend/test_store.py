"""
Tests for the document store backends.

These tests cover:
- Empty/legacy document loading and id counters
- Whole-document save for the JSON and MongoDB backends
- Transaction semantics (no save on failure, serialized spans)
- Storage failures surfacing as StoreError
"""

import asyncio
import json

import pytest


class TestDocumentModel:
    """Tests for Document id assignment."""

    def test_fresh_document_numbers_from_one(self):
        from app.models.document import Document

        doc = Document()

        assert doc.next_user_id() == 1
        assert doc.next_item_id() == 1
        assert doc.next_item_id() == 2

    def test_legacy_document_derives_counters_from_ids(self):
        """A document without counters continues after the highest id."""
        from app.models.document import Document

        doc = Document.model_validate({
            "users": [{"id": 1, "username": "root", "password": "x", "role": "admin"}],
            "items": [
                {"id": 1, "name": "a", "createdBy": "root"},
                {"id": 5, "name": "b", "createdBy": "root"},
            ],
        })

        assert doc.counters.users == 1
        assert doc.counters.items == 5
        assert doc.next_item_id() == 6

    def test_item_serializes_owner_as_created_by(self):
        from app.models.document import Document
        from app.models.item import Item

        doc = Document(items=[Item(id=1, name="lamp", created_by="alice")])

        assert doc.to_dict()["items"][0]["createdBy"] == "alice"


class TestJsonFileDocumentStore:
    """Tests for JsonFileDocumentStore."""

    @pytest.mark.asyncio
    async def test_missing_file_loads_empty_document(self, json_store):
        doc = await json_store.load()

        assert doc.users == []
        assert doc.items == []

    @pytest.mark.asyncio
    async def test_save_writes_whole_document(self, json_store, db_path):
        from app.models.user import User

        doc = await json_store.load()
        doc.users.append(User(id=doc.next_user_id(), username="root", password="pw", role="admin"))
        await json_store.save(doc)

        with open(db_path) as f:
            raw = json.load(f)

        assert set(raw) == {"users", "items", "counters"}
        assert raw["users"] == [{"id": 1, "username": "root", "password": "pw", "role": "admin"}]
        assert raw["counters"] == {"users": 1, "items": 0}

    @pytest.mark.asyncio
    async def test_save_leaves_no_temporary_files(self, json_store, db_path):
        await json_store.save(await json_store.load())

        assert [p.name for p in db_path.parent.iterdir()] == ["db.json"]

    @pytest.mark.asyncio
    async def test_corrupt_file_raises_store_error(self, json_store, db_path):
        from app.core.exceptions import StoreError

        db_path.write_text("{not json")

        with pytest.raises(StoreError):
            await json_store.load()

    @pytest.mark.asyncio
    async def test_unwritable_location_raises_store_error(self, tmp_path):
        from app.core.exceptions import StoreError
        from app.database.store import JsonFileDocumentStore
        from app.models.document import Document

        blocker = tmp_path / "blocker"
        blocker.write_text("")
        store = JsonFileDocumentStore(blocker / "db.json")

        with pytest.raises(StoreError):
            await store.save(Document())

    @pytest.mark.asyncio
    async def test_ping_fails_when_directory_missing(self, tmp_path):
        from app.core.exceptions import StoreError
        from app.database.store import JsonFileDocumentStore

        store = JsonFileDocumentStore(tmp_path / "missing" / "db.json")

        with pytest.raises(StoreError):
            await store.ping()


class TestTransaction:
    """Tests for DocumentStore.transaction."""

    @pytest.mark.asyncio
    async def test_changes_saved_on_normal_exit(self, json_store):
        from app.models.item import Item

        async with json_store.transaction() as doc:
            doc.items.append(Item(id=doc.next_item_id(), name="lamp", created_by="alice"))

        reloaded = await json_store.load()
        assert [item.name for item in reloaded.items] == ["lamp"]

    @pytest.mark.asyncio
    async def test_exception_discards_changes_and_releases_lock(self, json_store):
        from app.models.item import Item

        with pytest.raises(RuntimeError):
            async with json_store.transaction() as doc:
                doc.items.append(Item(id=doc.next_item_id(), name="lamp", created_by="alice"))
                raise RuntimeError("boom")

        assert (await json_store.load()).items == []
        assert not json_store._lock.locked()

    @pytest.mark.asyncio
    async def test_concurrent_spans_do_not_lose_updates(self, json_store):
        """Interleaved load-modify-save spans each see the previous write."""
        from app.models.item import Item

        async def add(n: int):
            async with json_store.transaction() as doc:
                item_id = doc.next_item_id()
                # Yield to the loop between load and save
                await asyncio.sleep(0)
                doc.items.append(Item(id=item_id, name=f"item-{n}", created_by="alice"))

        await asyncio.gather(*(add(n) for n in range(20)))

        doc = await json_store.load()
        assert len(doc.items) == 20
        assert sorted(item.id for item in doc.items) == list(range(1, 21))


class TestMongoDocumentStore:
    """Tests for MongoDocumentStore."""

    @pytest.mark.asyncio
    async def test_missing_record_loads_empty_document(self, mongo_store):
        doc = await mongo_store.load()

        assert doc.users == []
        assert doc.items == []

    @pytest.mark.asyncio
    async def test_document_kept_as_single_record(self, mongo_store):
        from app.models.item import Item

        async with mongo_store.transaction() as doc:
            doc.items.append(Item(id=doc.next_item_id(), name="lamp", created_by="alice"))
        async with mongo_store.transaction() as doc:
            doc.items.append(Item(id=doc.next_item_id(), name="desk", created_by="bob"))

        records = await mongo_store.collection.find({}).to_list(length=10)
        assert len(records) == 1
        assert records[0]["_id"] == "document"
        assert [item["createdBy"] for item in records[0]["items"]] == ["alice", "bob"]

        reloaded = await mongo_store.load()
        assert [item.id for item in reloaded.items] == [1, 2]
