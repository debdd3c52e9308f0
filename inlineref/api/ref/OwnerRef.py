"""Owner reference: the (entity, field) a reference record belongs to."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class OwnerRef(BaseModel):
    """Composite key embedded in every reference record."""

    model_config = ConfigDict(frozen=True)

    entity_id: int | str = Field(..., description="Identity of the owning entity")
    entity_type: str = Field(..., min_length=1, description="Type name of the owning entity")
    field_name: str = Field(..., min_length=1, description="Content field holding the tokens")

    @classmethod
    def of(cls, entity: Any, field_name: str) -> "OwnerRef | None":
        """Build the owner reference for `field_name` on `entity`.

        The entity type is the entity's class name. Returns None for an
        entity without an `id` yet (unsaved), which owns no records.
        """
        entity_id = getattr(entity, "id", None)
        if entity_id is None:
            return None
        return cls(entity_id=entity_id, entity_type=type(entity).__name__, field_name=str(field_name))

    def query(self) -> dict[str, Any]:
        """Stored-document filter selecting this owner's records."""
        return {"owner_id": self.entity_id, "owner_type": self.entity_type, "field_name": self.field_name}

    def __str__(self) -> str:
        return f"{self.entity_type} id: {self.entity_id} field: {self.field_name}"
