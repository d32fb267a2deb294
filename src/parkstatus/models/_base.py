"""Base model for collaborator payloads.

Every parsed collaborator model inherits from :class:`ParkBaseModel`
which provides:

* ``alias_generator=to_camel`` so camelCase payload keys map
  automatically to snake_case fields.
* A ``model_validator(mode="before")`` that strips empty sentinel
  values (``None``, ``""``, NaN) so the field default is used.
"""

from __future__ import annotations

import math
from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel

_SENTINELS = frozenset({"", "null", "None"})


class ParkBaseModel(BaseModel):
    """Frozen base for domain models built from collaborator payloads."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        alias_generator=to_camel,
    )

    @staticmethod
    def _clean_dict(values: dict[str, Any]) -> dict[str, Any]:
        cleaned: dict[str, Any] = {}
        for key, value in values.items():
            if value is None:
                continue
            if isinstance(value, str) and value.strip() in _SENTINELS:
                continue
            if isinstance(value, float) and math.isnan(value):
                continue
            cleaned[key] = value
        return cleaned

    @model_validator(mode="before")
    @classmethod
    def _clean_values(cls, values: Any) -> Any:
        """Drop sentinel values so field defaults apply."""
        if not isinstance(values, dict):
            return values
        return ParkBaseModel._clean_dict(values)
