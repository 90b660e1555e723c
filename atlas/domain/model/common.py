"""Base models for domain entities and read models."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class DomainModel(BaseModel):
    """Base class for all domain models.

    Entities are immutable; the moderation API never mutates what it reads.
    """

    model_config = ConfigDict(
        frozen=True,
        arbitrary_types_allowed=True,  # Allow NewType identifiers
    )


class CamelModel(DomainModel):
    """Domain model serialized with camelCase keys.

    Used for the shapes handed to the moderation UI. Construction accepts
    either the snake_case field name or the camelCase alias.
    """

    model_config = ConfigDict(
        frozen=True,
        arbitrary_types_allowed=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )
