"""
passgen.service

Caller-side validation and response building shared by the HTTP API and the CLI.
The generator only rejects empty charsets; length, count and input checks live here.
"""

from typing import Any, Dict, Mapping, Optional

from .errors import InvalidCountError, InvalidLengthError, MissingInputError
from .evaluator import score_password
from .generator import generate, generate_many
from .models import DEFAULT_LENGTH, GenerationPolicy

MIN_LENGTH = 4
MAX_LENGTH = 128
MIN_COUNT = 1
MAX_COUNT = 20
DEFAULT_COUNT = 5

# request key -> (policy field, value when absent)
_FLAG_FIELDS = {
    "includeUppercase": ("include_uppercase", True),
    "includeLowercase": ("include_lowercase", True),
    "includeNumbers": ("include_numbers", True),
    "includeSymbols": ("include_symbols", True),
    "excludeAmbiguous": ("exclude_ambiguous", False),
}


def _as_int(value: Any) -> Optional[int]:
    """Whole numbers only; JSON 16.0 counts, True and "16" do not."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return None


def validate_length(length: Any) -> int:
    if length is None:
        return DEFAULT_LENGTH
    value = _as_int(length)
    if value is None or not MIN_LENGTH <= value <= MAX_LENGTH:
        raise InvalidLengthError(
            f"Password length must be between {MIN_LENGTH} and {MAX_LENGTH} characters"
        )
    return value


def validate_count(count: Any) -> int:
    value = _as_int(count)
    if value is None or not MIN_COUNT <= value <= MAX_COUNT:
        raise InvalidCountError(
            f"You can generate between {MIN_COUNT} and {MAX_COUNT} passwords at a time"
        )
    return value


def require_password(value: Any) -> str:
    if value is None or value == "":
        raise MissingInputError("Password not provided")
    if not isinstance(value, str):
        raise MissingInputError("Password must be a non-empty string")
    return value


def resolve_policy(options: Optional[Mapping[str, Any]] = None) -> GenerationPolicy:
    """
    Build a policy from loose request options. A missing flag keeps its default;
    a present one is disabled only by a falsy value.
    """
    options = options or {}
    kwargs = {"length": validate_length(options.get("length"))}
    for key, (field_name, default) in _FLAG_FIELDS.items():
        kwargs[field_name] = bool(options[key]) if key in options else default
    return GenerationPolicy(**kwargs)


def _describe(password: str) -> Dict[str, Any]:
    return {"password": password, "strength": score_password(password).to_dict()}


def quick_payload() -> Dict[str, Any]:
    password = generate()
    return {
        "success": True,
        "password": password,
        "length": len(password),
        "strength": score_password(password).to_dict(),
    }


def generate_payload(options: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
    policy = resolve_policy(options)
    password = generate(policy)
    return {
        "success": True,
        "password": password,
        "length": len(password),
        "options": policy.to_dict(),
        "strength": score_password(password).to_dict(),
    }


def bulk_payload(options: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
    options = dict(options or {})
    count = validate_count(options.pop("count", DEFAULT_COUNT))
    policy = resolve_policy(options)
    passwords = [_describe(pw) for pw in generate_many(policy, count)]
    return {
        "success": True,
        "count": len(passwords),
        "passwords": passwords,
    }


def strength_payload(options: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
    password = require_password((options or {}).get("password"))
    return {
        "success": True,
        "password": password,
        "length": len(password),
        "strength": score_password(password).to_dict(),
    }
