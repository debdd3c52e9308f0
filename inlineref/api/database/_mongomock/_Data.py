"""Mock MongoDB-specific configuration data for testing."""

from pydantic import BaseModel


class _Data(BaseModel):
    """MongoMock configuration data.

    MongoMock is in-memory, so there is no URI. All instances share one client,
    which means collections persist for the lifetime of the process.
    """

    pass
