"""Base class for value objects."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ValueObject(BaseModel):
    """Base class for all value objects.

    Value objects are immutable and compared by value, not identity.
    """

    model_config = ConfigDict(
        frozen=True,  # All value objects are immutable
        arbitrary_types_allowed=True,
    )


class CamelValueObject(ValueObject):
    """Value object serialized with camelCase keys on the API surface."""

    model_config = ConfigDict(
        frozen=True,
        arbitrary_types_allowed=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )
