"""Base model for raw API payloads.

Architecture:
    Every model that is validated straight from a JSON object derives from
    WireModel. Fields carry defaults so absent optional fields never fail.

Design Decisions:
    - Frozen models: decoded values are never mutated; derived values are
      produced with ``model_copy``
    - Strict verification: when validated with ``context={"strict": True}``
      any key not declared on the model (at any nesting level) is rejected.
      This is used by the test suite to catch schema drift.
"""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationInfo, model_validator
from pydantic_core import PydanticCustomError

from ..core.enums import BrowseSortType, MediaType, RatingStar, ReviewSortType

STRICT_CONTEXT_KEY = "strict"

UNEXPECTED_FIELDS_ERROR = "unexpected_fields"

# Enum values the library does not know yet are kept as plain strings
MediaTypeValue = Annotated[MediaType | str, Field(union_mode="left_to_right")]
BrowseSortValue = Annotated[BrowseSortType | str, Field(union_mode="left_to_right")]
RatingStarValue = Annotated[RatingStar | str, Field(union_mode="left_to_right")]
ReviewSortValue = Annotated[ReviewSortType | str, Field(union_mode="left_to_right")]


class WireModel(BaseModel):
    """Frozen model decoded from a raw JSON object."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def _reject_undeclared_fields(cls, data: Any, info: ValidationInfo) -> Any:
        if not isinstance(data, dict) or not (info.context or {}).get(STRICT_CONTEXT_KEY):
            return data
        unexpected = sorted(key for key in data if key not in cls.wire_names())
        if unexpected:
            raise PydanticCustomError(
                UNEXPECTED_FIELDS_ERROR,
                "unexpected fields: {fields}",
                {"fields": ",".join(unexpected)},
            )
        return data

    @classmethod
    def wire_names(cls) -> set[str]:
        """Keys this model accepts on the wire (field names and aliases)."""
        names: set[str] = set()
        for name, field in cls.model_fields.items():
            names.add(name)
            if field.alias:
                names.add(field.alias)
            if isinstance(field.validation_alias, str):
                names.add(field.validation_alias)
            elif isinstance(field.validation_alias, AliasChoices):
                names.update(c for c in field.validation_alias.choices if isinstance(c, str))
        return names
