"""
The single persisted document holding every user and item.
"""
from pydantic import BaseModel, Field, model_validator

from app.models.item import Item
from app.models.user import User


def _record_id(record) -> int:
    value = record.get("id") if isinstance(record, dict) else getattr(record, "id", None)
    return int(value or 0)


class Counters(BaseModel):
    """Last id issued per collection. Ids are never handed out twice."""
    users: int = 0
    items: int = 0


class Document(BaseModel):
    """
    Aggregate ``{users, items, counters}`` read and written as a whole.
    """
    users: list[User] = Field(default_factory=list)
    items: list[Item] = Field(default_factory=list)
    counters: Counters = Field(default_factory=Counters)

    @model_validator(mode="before")
    @classmethod
    def derive_missing_counters(cls, data):
        # Documents written before counters existed only have the two arrays
        if isinstance(data, dict) and "counters" not in data:
            data = dict(data)
            data["counters"] = {
                name: max(
                    [len(data.get(name) or [])]
                    + [_record_id(record) for record in data.get(name) or []]
                )
                for name in ("users", "items")
            }
        return data

    def next_user_id(self) -> int:
        self.counters.users = max(self.counters.users, len(self.users)) + 1
        return self.counters.users

    def next_item_id(self) -> int:
        self.counters.items = max(self.counters.items, len(self.items)) + 1
        return self.counters.items

    def find_user(self, username: str) -> User | None:
        for user in self.users:
            if user.username == username:
                return user
        return None

    def to_dict(self) -> dict:
        return self.model_dump(by_alias=True, mode="json")
