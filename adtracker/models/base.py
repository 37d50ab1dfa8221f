"""
Base model for persisted entities.

Entities are flat pydantic models: snake_case attributes in Python,
camelCase keys on the wire and in the data file.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class EntityModel(BaseModel):
    """Immutable record stored in a collection and keyed by ``id``."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    id: str

    def to_document(self) -> dict:
        """Serialize for the JSON data file."""
        return self.model_dump(by_alias=True)
