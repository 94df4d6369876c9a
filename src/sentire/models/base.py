"""
Base record model for Sentry API payloads.

Every record is a frozen pydantic model that accepts the API's camelCase keys,
ignores keys it does not declare, reads JSON null as the field's zero value,
and can describe itself as ordered label/value pairs for the generic output
path.
"""

from __future__ import annotations

from typing import Any, Protocol, get_args, runtime_checkable

from pydantic import BaseModel, ConfigDict, model_validator


@runtime_checkable
class Describable(Protocol):
    """Anything that can list its own fields for display."""

    def describe(self) -> list[tuple[str, Any]]: ...


class Record(BaseModel):
    """
    Base class for decoded Sentry records.

    Subclasses declare their fields with API aliases; `describe()` returns the
    declared fields in declaration order, labelled by their Python names.
    Records with a curated display order override it.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def _null_as_default(cls, data: Any) -> Any:
        """
        Treat JSON null as a missing value for fields that do not accept None.

        Optional fields keep their None. Fields with a default fall back to
        it; required string fields become "".
        """
        if not isinstance(data, dict):
            return data

        cleaned = dict(data)
        for name, field in cls.model_fields.items():
            if type(None) in get_args(field.annotation):
                continue
            for key in {field.alias or name, name}:
                if key not in cleaned or cleaned[key] is not None:
                    continue
                if not field.is_required():
                    del cleaned[key]
                elif field.annotation is str:
                    cleaned[key] = ""
        return cleaned

    def describe(self) -> list[tuple[str, Any]]:
        """Return (label, value) pairs for every declared field."""
        return [(name, getattr(self, name)) for name in type(self).model_fields]

    def to_json_data(self) -> dict[str, Any]:
        """Dump to JSON-compatible data using the API's field names."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
