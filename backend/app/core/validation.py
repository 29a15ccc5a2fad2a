"""
Validation and canonicalization of profile input.

All three entry points take the raw decoded JSON body and either return
clean data or raise ``ProfileValidationError`` listing every failing field
in form order. Casing rules are applied only after validation passed, so
length limits are measured on what the user typed (trimmed).
"""
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from app.core.errors import FieldError, ProfileValidationError
from app.schemas.profile import LoginRequest, ProfileCreate, ProfileUpdate

REQUIRED_MESSAGES = {
    "fullName": "Full name is required",
    "documentId": "Document id is required",
    "phone": "Phone number is required",
    "email": "Email is required",
    "profession": "Profession is required",
    "city": "City is required",
    "department": "Department is required",
    "academicLevel": "Academic level is required",
    "consentGiven": "Consent is required",
}

INVALID_MESSAGES = {
    "fullName": "Full name must be between 2 and 100 characters",
    "documentId": "Document id must be 5 to 20 alphanumeric characters",
    "phone": "Enter a valid phone number",
    "email": "Enter a valid email address",
    "profession": "Profession must be between 2 and 100 characters",
    "city": "City must be between 2 and 100 characters",
    "department": "Select a valid department",
    "academicLevel": "Select a valid academic level",
    "consentGiven": "You must accept the data processing consent to continue",
}


def _upper_initial(value: str) -> str:
    # Initials whose upper case is longer than one character ("ß") stay as typed
    initial = value[:1]
    upper = initial.upper()
    if len(upper) != 1:
        upper = initial
    return upper + value[1:].lower()


def capitalize_words(value: str) -> str:
    """Upper-case the first letter of every space-separated word, lower the rest."""
    return " ".join(_upper_initial(word) for word in value.split(" "))


def capitalize_first(value: str) -> str:
    """Upper-case the first character of the string, lower the rest."""
    return _upper_initial(value)


def canonicalize_fields(fields: dict[str, Any]) -> dict[str, Any]:
    """Apply the stored casing rules to whichever of the fields are present."""
    canonical = dict(fields)
    if canonical.get("full_name") is not None:
        canonical["full_name"] = capitalize_words(canonical["full_name"])
    if canonical.get("profession") is not None:
        canonical["profession"] = capitalize_first(canonical["profession"])
    if canonical.get("city") is not None:
        canonical["city"] = capitalize_first(canonical["city"])
    if canonical.get("email") is not None:
        canonical["email"] = canonical["email"].lower()
    return canonical


def _field_errors(exc: PydanticValidationError) -> list[FieldError]:
    errors: list[FieldError] = []
    seen: set[str] = set()
    for error in exc.errors():
        field = str(error["loc"][0]) if error["loc"] else "body"
        if field in seen:
            continue
        seen.add(field)
        if error["type"] == "missing":
            message = REQUIRED_MESSAGES.get(field, f"{field} is required")
        else:
            message = INVALID_MESSAGES.get(field, error["msg"])
        errors.append(FieldError(field, message))
    return errors


def _parse(model: type[BaseModel], candidate: Any) -> BaseModel:
    if not isinstance(candidate, Mapping):
        raise ProfileValidationError([FieldError("body", "Request body must be a JSON object")])
    try:
        return model.model_validate(dict(candidate))
    except PydanticValidationError as exc:
        raise ProfileValidationError(_field_errors(exc)) from None


def validate_and_normalize(candidate: Any) -> ProfileCreate:
    """
    Validate a registration candidate and return its canonical form.

    Args:
        candidate: Decoded request body (camelCase or snake_case keys)

    Returns:
        ProfileCreate with trimmed, cased and lower-cased email values

    Raises:
        ProfileValidationError: With one entry per failing field
    """
    profile = _parse(ProfileCreate, candidate)
    return profile.model_copy(update=canonicalize_fields(profile.model_dump()))


def validate_update(candidate: Any) -> dict[str, Any]:
    """
    Validate a profile update and return the canonical changes.

    Only full name, phone, email and profession are accepted; any other key
    is ignored, and absent or blank fields are left unchanged.
    """
    update = _parse(ProfileUpdate, candidate)
    return canonicalize_fields(update.model_dump(exclude_none=True))


def validate_login(candidate: Any) -> str:
    """Check the login body shape and return the trimmed document id."""
    return _parse(LoginRequest, candidate).document_id
