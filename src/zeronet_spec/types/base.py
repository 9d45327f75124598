"""Pydantic base model for documents that carry addresses."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class StrictCamelModel(BaseModel):
    """
    An immutable, strictly validated model with camelCase JSON keys.

    Fields are populated by their Python names or by their aliases, so
    `short_form=...` and `{"shortForm": ...}` both work. Unknown keys are rejected.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
        frozen=True,
        strict=True,
    )
