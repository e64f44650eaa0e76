"""Request Validation — declarative field rules evaluated into one error list.

Invariants:
    - A rule is pure data: (location, field, predicate, message)
    - check_rules() evaluates EVERY rule in declaration order; no short-circuit
    - Each failing rule contributes exactly one error entry
    - Predicates never raise; any input (missing, null, nested) yields True/False
    - A price that passes the rules coerces to a finite positive float
    - Patterns match the whole text; a trailing newline is not tolerated

Design Decisions:
    - Loose, string-based predicates (a form validator's semantics): "25" is numeric,
      "true" is boolean. Clients send form-ish JSON and the existing contract accepts it
    - Rules on the same field are independent: an empty price fails is_numeric,
      not_empty and greater_than_zero, and all three are reported
    - Coercion to store types lives here too, next to the predicates that guarantee
      it cannot fail
"""

import math
import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Mapping

from product_api.core.messages import Locale, Message, get_message


class Location(str, Enum):
    """Where in the request a field is read from."""
    BODY = "body"
    PARAMS = "params"


class _Missing:
    """Sentinel for a field absent from its source."""

    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()

NAME_MAX_LENGTH = 100

_NUMERIC_RE = re.compile(r"[+-]?([0-9]*[.])?[0-9]+")
_INT_RE = re.compile(r"[+-]?[0-9]+")
_BOOLEAN_TEXT = frozenset({"true", "false", "1", "0"})
_TRUE_TEXT = frozenset({"true", "1"})


def as_text(value: Any) -> str:
    """String form used by every predicate. Missing and null become ""."""
    if value is MISSING or value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def as_number(value: Any) -> float | None:
    """Finite float for a JSON number or numeric-looking text, else None.

    JSON numbers are taken as numbers, never through their printed form:
    str(1e-05) would not look numeric. Booleans are not numbers.
    """
    if isinstance(value, bool):
        return None
    try:
        if isinstance(value, (int, float)):
            number = float(value)
        else:
            number = float(as_text(value))
    except (ValueError, OverflowError):
        return None
    return number if math.isfinite(number) else None


# ─── Predicates ──────────────────────────────────────────────────

def not_empty(value: Any) -> bool:
    return as_text(value) != ""


def within_name_length(value: Any) -> bool:
    return len(as_text(value)) <= NAME_MAX_LENGTH


def is_numeric(value: Any) -> bool:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return as_number(value) is not None
    text = as_text(value)
    return bool(_NUMERIC_RE.fullmatch(text)) and as_number(text) is not None


def greater_than_zero(value: Any) -> bool:
    number = as_number(value)
    return number is not None and number > 0


def is_boolean(value: Any) -> bool:
    return isinstance(value, bool) or as_text(value) in _BOOLEAN_TEXT


def is_int(value: Any) -> bool:
    return bool(_INT_RE.fullmatch(as_text(value)))


# ─── Rules ───────────────────────────────────────────────────────

@dataclass(frozen=True)
class FieldRule:
    """One predicate bound to one field, with the message reported on failure."""
    location: Location
    field: str
    predicate: Callable[[Any], bool]
    message: Message

    def check(self, value: Any, locale: Locale | str = Locale.EN) -> dict | None:
        """Return an error entry if the predicate rejects value, else None."""
        if self.predicate(value):
            return None
        entry: dict[str, Any] = {"type": "field"}
        if value is not MISSING:
            entry["value"] = value
        entry["msg"] = get_message(self.message, locale)
        entry["path"] = self.field
        entry["location"] = self.location.value
        return entry


ID_PARAM_RULES: tuple[FieldRule, ...] = (
    FieldRule(Location.PARAMS, "id", is_int, Message.ID_INVALID),
)

PRODUCT_BODY_RULES: tuple[FieldRule, ...] = (
    FieldRule(Location.BODY, "name", not_empty, Message.NAME_EMPTY),
    FieldRule(Location.BODY, "name", within_name_length, Message.NAME_TOO_LONG),
    FieldRule(Location.BODY, "price", is_numeric, Message.PRICE_NOT_NUMERIC),
    FieldRule(Location.BODY, "price", not_empty, Message.PRICE_EMPTY),
    FieldRule(Location.BODY, "price", greater_than_zero, Message.PRICE_INVALID),
)

UPDATE_BODY_RULES: tuple[FieldRule, ...] = PRODUCT_BODY_RULES + (
    FieldRule(
        Location.BODY, "availability", is_boolean, Message.AVAILABILITY_INVALID,
    ),
)


def check_rules(
    rules: tuple[FieldRule, ...],
    sources: Mapping[Location, Mapping[str, Any]],
    locale: Locale | str = Locale.EN,
) -> list[dict]:
    """Run every rule against its source and collect all failures in order."""
    errors = []
    for rule in rules:
        source = sources.get(rule.location, {})
        entry = rule.check(source.get(rule.field, MISSING), locale)
        if entry is not None:
            errors.append(entry)
    return errors


def malformed_body_error(locale: Locale | str = Locale.EN) -> dict:
    """Single error entry for a body that is not a JSON object."""
    return {
        "type": "body",
        "msg": get_message(Message.MALFORMED_BODY, locale),
        "location": Location.BODY.value,
    }


# ─── Coercion (only called after the rules passed) ───────────────

def to_bool(value: Any) -> bool:
    return as_text(value) in _TRUE_TEXT


def parse_product_id(raw: str) -> int:
    return int(raw)


def product_fields(body: Mapping[str, Any], *, full: bool) -> dict[str, Any]:
    """Map a validated body onto store columns.

    With full=True (update) availability is required and always written.
    Otherwise (create) it is written only when supplied as a boolean, and the
    column default applies when it is absent.
    """
    fields: dict[str, Any] = {
        "name": as_text(body["name"]),
        "price": as_number(body["price"]),
    }
    availability = body.get("availability", MISSING)
    if full or (availability is not MISSING and is_boolean(availability)):
        fields["availability"] = to_bool(availability)
    return fields
