"""Shared schema plumbing."""
from typing import Any, ClassVar

from pydantic import BaseModel, model_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Snake_case in Python, camelCase on the wire; accepts either on input."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True


class RecordCreate(CamelModel):
    """Body of a create request. Unknown fields (including ``userId``) are dropped."""

    def to_record(self) -> dict[str, Any]:
        return self.model_dump(mode="json")


class PartialUpdate(CamelModel):
    """Body of a PATCH request: only the supplied fields are applied."""

    # Fields that may be omitted but never set to null
    non_nullable: ClassVar[tuple[str, ...]] = ()

    @model_validator(mode="after")
    def reject_null_required_fields(self):
        for name in self.non_nullable:
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"{name} cannot be null")
        return self

    def changes(self) -> dict[str, Any]:
        return self.model_dump(mode="json", exclude_unset=True)
