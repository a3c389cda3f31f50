# =============================================================================
# givebutter/operations/base.py  —  Shared argument schema building blocks
# =============================================================================
#
# Argument models follow one convention:
#
#   - Required fields have no default.
#   - Optional fields default to None but are NOT nullable.  An omitted field
#     stays "unset" and is dropped by model_dump(exclude_unset=True); an
#     explicit null fails validation.  There is no way to clear a field.
#   - Unknown argument names are rejected.
# =============================================================================

from datetime import datetime
from typing import Annotated, Any

from pydantic import AfterValidator, BaseModel, BeforeValidator, ConfigDict, Field
from pydantic.fields import FieldInfo


class ArgumentsModel(BaseModel):
    """Base class for every operation's argument schema."""

    model_config = ConfigDict(extra="forbid")


def _reject_bool(value: Any) -> Any:
    # bool is an int subclass; lax mode would turn true into id 1
    if isinstance(value, bool):
        raise ValueError("must be an integer, not a boolean")
    return value


# Integer argument (identifier, page, amount).  Numeric strings such as "42"
# are still coerced; booleans are rejected.
Integer = Annotated[int, BeforeValidator(_reject_bool)]


def is_integer_field(info: FieldInfo) -> bool:
    return info.annotation is int and any(
        isinstance(meta, BeforeValidator) and meta.func is _reject_bool
        for meta in info.metadata
    )


def _check_iso8601(value: str) -> str:
    try:
        datetime.fromisoformat(value)
    except ValueError as exc:
        raise ValueError("must be an ISO 8601 date or date-time") from exc
    return value


# ISO-8601 date string, passed through unchanged once it parses.
IsoDateTime = Annotated[str, AfterValidator(_check_iso8601)]


def optional(description: str) -> Any:
    """Field() for an optional, non-nullable argument."""
    return Field(default=None, description=description)


def required(description: str) -> Any:
    return Field(description=description)


PAGE_DESCRIPTION = "Page number for pagination"


def input_schema(model: type[BaseModel]) -> dict[str, Any]:
    """JSON schema for `model` as advertised to the agent.

    The None defaults of optional fields are an implementation detail of
    the "unset" convention and are removed from the published schema.
    """
    schema = model.model_json_schema()
    for prop in schema.get("properties", {}).values():
        if "default" in prop and prop["default"] is None:
            del prop["default"]
    return schema
