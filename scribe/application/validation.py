"""Request field validation.

Turns pydantic validation errors into per-field message lists, e.g.
``{"title": ["The title field is required."]}``.
"""

from typing import Any, Iterable, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from scribe.domain.error import ValidationError

TITLE_MAX_LENGTH = 255


class PostFields(BaseModel):
    """Validated post input."""

    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")

    title: str = Field(min_length=1, max_length=TITLE_MAX_LENGTH)
    content: str = Field(min_length=1)
    is_published: Optional[bool] = None


def _attribute(field: str) -> str:
    return field.replace("_", " ")


def _message(field: str, error: Mapping[str, Any]) -> str:
    """Render one pydantic error for a field."""
    attribute = _attribute(field)
    kind = error.get("type", "")
    ctx = error.get("ctx") or {}

    if kind in ("missing", "string_too_short") or (
        kind == "string_type" and error.get("input") is None
    ):
        return f"The {attribute} field is required."
    if kind == "string_type":
        return f"The {attribute} field must be a string."
    if kind == "string_too_long":
        limit = ctx.get("max_length")
        return f"The {attribute} field must not be greater than {limit} characters."
    if kind.startswith("bool"):
        return f"The {attribute} field must be true or false."
    if kind.startswith("int"):
        return f"The {attribute} field must be an integer."
    return f"The {attribute} field is invalid."


def format_errors(errors: Iterable[Mapping[str, Any]]) -> dict[str, list[str]]:
    """Group pydantic errors by field name.

    The field name is the last string element of each error location, so
    both model errors (``("title",)``) and FastAPI request errors
    (``("query", "page")``) are keyed by the bare field.

    Args:
        errors: Errors as returned by ``ValidationError.errors()``

    Returns:
        Mapping of field name to its messages, in first-seen order
    """
    grouped: dict[str, list[str]] = {}
    for error in errors:
        names = [part for part in error.get("loc", ()) if isinstance(part, str)]
        field = names[-1] if names else "request"
        message = _message(field, error)
        messages = grouped.setdefault(field, [])
        if message not in messages:
            messages.append(message)
    return grouped


def validate_post_fields(data: Mapping[str, Any]) -> PostFields:
    """Validate title, content and is_published.

    Blank strings count as missing values.

    Args:
        data: Raw request fields

    Returns:
        Validated fields

    Raises:
        ValidationError: With the per-field messages
    """
    cleaned = {
        key: None if isinstance(value, str) and not value.strip() else value
        for key, value in data.items()
    }
    try:
        return PostFields.model_validate(cleaned)
    except PydanticValidationError as e:
        raise ValidationError(format_errors(e.errors()))
