"""
Declarative validation for the author create/update forms.

Each form is a Pydantic model whose validators implement the per-field
rules. `validate_author_form()` runs a model against a submitted form
body and collects rule violations as `FieldError` entries instead of
raising, so handlers can re-render the form with the messages.

Example:
    ```python
    result = validate_author_form(AuthorCreateForm, await request.form())
    if not result.is_empty():
        return render_form(author=result.values, errors=result.errors)
    author = await CreateAuthorCommand(repo).execute(result.cleaned)
    ```
"""

from collections.abc import Mapping
from datetime import date, datetime
from typing import Any, ClassVar

from pydantic import (
    BaseModel,
    ConfigDict,
    ValidationError,
    ValidationInfo,
    field_validator,
)
from pydantic_core import PydanticCustomError

from catalog.constants import (
    ALPHANUMERIC_PATTERN,
    AUTHOR_CREATE_NAME_MIN_LENGTH,
    AUTHOR_NAME_MAX_LENGTH,
    AUTHOR_UPDATE_NAME_MIN_LENGTH,
)

FORM_FIELDS = ("first_name", "family_name", "date_of_birth", "date_of_death")


class FieldError(BaseModel):
    """A single rule violation, shown next to the form."""

    field: str
    message: str


class AuthorCreateForm(BaseModel):
    """
    Author form as submitted on the create page.

    Rules:
        first_name, family_name: trimmed, required with at least
            `name_min_length` characters, at most AUTHOR_NAME_MAX_LENGTH,
            ASCII letters and digits only.
        date_of_birth, date_of_death: optional; when given, must be an
            ISO 8601 date (a date-time is accepted and truncated).

    Only the first failing rule of a field is reported.
    """

    model_config = ConfigDict(str_strip_whitespace=True, validate_default=True)

    name_min_length: ClassVar[int] = AUTHOR_CREATE_NAME_MIN_LENGTH
    messages: ClassVar[dict[str, str]] = {
        "first_name_required": "First name must be specified.",
        "first_name_too_long": f"First name must be at most {AUTHOR_NAME_MAX_LENGTH} characters.",
        "first_name_alphanumeric": "First name has non-alphanumeric character.",
        "family_name_required": "Family name must be specified.",
        "family_name_too_long": f"Family name must be at most {AUTHOR_NAME_MAX_LENGTH} characters.",
        "family_name_alphanumeric": "Family name has non-alphanumeric character.",
        "date_of_birth_invalid": "Invalid date of birth",
        "date_of_death_invalid": "Invalid date of death",
    }

    first_name: str = ""
    family_name: str = ""
    date_of_birth: date | None = None
    date_of_death: date | None = None

    @classmethod
    def _fail(cls, field: str, rule: str) -> PydanticCustomError:
        return PydanticCustomError(
            f"author_{rule}", cls.messages[f"{field}_{rule}"]
        )

    @field_validator("first_name", "family_name")
    @classmethod
    def validate_name(cls, value: str, info: ValidationInfo) -> str:
        if len(value) < cls.name_min_length:
            raise cls._fail(info.field_name, "required")
        if len(value) > AUTHOR_NAME_MAX_LENGTH:
            raise cls._fail(info.field_name, "too_long")
        if not ALPHANUMERIC_PATTERN.match(value):
            raise cls._fail(info.field_name, "alphanumeric")
        return value

    @field_validator("date_of_birth", "date_of_death", mode="before")
    @classmethod
    def parse_date(cls, value: Any, info: ValidationInfo) -> date | None:
        if value is None or isinstance(value, date):
            return value
        value = str(value).strip()
        if not value:
            return None
        try:
            return datetime.fromisoformat(value).date()
        except ValueError:
            raise cls._fail(info.field_name, "invalid") from None


class AuthorUpdateForm(AuthorCreateForm):
    """Author form as submitted on the update page (longer minimum name)."""

    name_min_length: ClassVar[int] = AUTHOR_UPDATE_NAME_MIN_LENGTH
    messages: ClassVar[dict[str, str]] = {
        "first_name_required": "First name must be specified",
        "first_name_too_long": f"First name must be at most {AUTHOR_NAME_MAX_LENGTH} characters",
        "first_name_alphanumeric": "First name has non alphanumeric character",
        "family_name_required": "Family name must be specified",
        "family_name_too_long": f"Family name must be at most {AUTHOR_NAME_MAX_LENGTH} characters",
        "family_name_alphanumeric": "Family name has non alphanumeric character",
        "date_of_birth_invalid": "Invalid date",
        "date_of_death_invalid": "Invalid date",
    }


class FormResult(BaseModel):
    """
    Outcome of validating a submitted author form.

    Attributes:
        values: Submitted values (strings trimmed), used to re-fill the form.
        errors: Rule violations in field order.
        cleaned: Typed form when no rule failed, None otherwise.
    """

    values: dict[str, Any]
    errors: list[FieldError] = []
    cleaned: AuthorCreateForm | None = None

    def is_empty(self) -> bool:
        """True when the submission passed every rule."""
        return not self.errors


def validate_author_form(
    form_cls: type[AuthorCreateForm], data: Mapping[str, Any]
) -> FormResult:
    """
    Validate a submitted form body against an author form model.

    Args:
        form_cls: AuthorCreateForm or AuthorUpdateForm.
        data: Form body (e.g. Starlette FormData); unknown keys are ignored.

    Returns:
        FormResult with either `cleaned` set or a non-empty `errors` list.
    """
    values: dict[str, Any] = {}
    for field in FORM_FIELDS:
        raw = data.get(field)
        values[field] = raw.strip() if isinstance(raw, str) else raw

    try:
        cleaned = form_cls.model_validate(
            {k: v for k, v in values.items() if v is not None}
        )
    except ValidationError as e:
        errors = [
            FieldError(field=str(err["loc"][0]), message=err["msg"])
            for err in e.errors()
        ]
        return FormResult(values=values, errors=errors)

    return FormResult(values=values, cleaned=cleaned)
