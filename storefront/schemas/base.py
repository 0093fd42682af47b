"""Base schema configuration shared by all records"""

from pydantic import BaseModel, ConfigDict


class BaseSchema(BaseModel):
    """Base schema with common configuration"""

    model_config = ConfigDict(from_attributes=True, use_enum_values=False)


class FrozenSchema(BaseSchema):
    """Immutable record; use model_copy(update=...) to derive changes"""

    model_config = ConfigDict(from_attributes=True, frozen=True)
