"""
Items database configuration.
Holds the shared document when the MongoDB backend is selected.
"""


class Collections:
    """Collection names in the items database."""
    DOCUMENTS = "documents"


# The whole dataset lives in a single record with this _id
DOCUMENT_ID = "document"
