"""Message Catalogue — centralized locale-specific text for API responses.

Invariants:
    - All strings are pure data (no IO, no computation beyond lookup)
    - Every Message key exists in every Locale catalogue
    - Locale.EN strings are the public contract (clients match on them)

Design Decisions:
    - Enum keys over raw strings: a typo in a rule declaration fails at import,
      not at request time
    - Spanish catalogue kept alongside English: the API was first shipped to a
      Spanish-speaking audience and some deployments still expect those texts
"""

from enum import Enum


class Locale(str, Enum):
    """Supported response locales."""
    EN = "en"
    ES = "es"


class Message(str, Enum):
    """Keys for every client-facing string."""
    NAME_EMPTY = "name_empty"
    NAME_TOO_LONG = "name_too_long"
    PRICE_NOT_NUMERIC = "price_not_numeric"
    PRICE_EMPTY = "price_empty"
    PRICE_INVALID = "price_invalid"
    AVAILABILITY_INVALID = "availability_invalid"
    ID_INVALID = "id_invalid"
    MALFORMED_BODY = "malformed_body"
    PRODUCT_NOT_FOUND = "product_not_found"
    PRODUCT_DELETED = "product_deleted"
    CORS_REJECTED = "cors_rejected"
    DATABASE_UNAVAILABLE = "database_unavailable"
    INTERNAL_ERROR = "internal_error"


_MESSAGES: dict[Locale, dict[Message, str]] = {
    Locale.EN: {
        Message.NAME_EMPTY: "name cannot be empty",
        Message.NAME_TOO_LONG: "name cannot exceed 100 characters",
        Message.PRICE_NOT_NUMERIC: "invalid value",
        Message.PRICE_EMPTY: "price cannot be empty",
        Message.PRICE_INVALID: "invalid price",
        Message.AVAILABILITY_INVALID: "invalid availability value",
        Message.ID_INVALID: "invalid ID",
        Message.MALFORMED_BODY: "malformed JSON body",
        Message.PRODUCT_NOT_FOUND: "product not found",
        Message.PRODUCT_DELETED: "product deleted",
        Message.CORS_REJECTED: "CORS error",
        Message.DATABASE_UNAVAILABLE: "database unavailable",
        Message.INTERNAL_ERROR: "an unexpected error occurred",
    },
    Locale.ES: {
        Message.NAME_EMPTY: "El nombre de producto no puede estar vacio",
        Message.NAME_TOO_LONG: "El nombre de producto no puede superar 100 caracteres",
        Message.PRICE_NOT_NUMERIC: "valor no valido",
        Message.PRICE_EMPTY: "El precio de producto no puede estar vacio",
        Message.PRICE_INVALID: "Precio no valido",
        Message.AVAILABILITY_INVALID: "Valor para disponibilidad no valido",
        Message.ID_INVALID: "ID no valido",
        Message.MALFORMED_BODY: "cuerpo JSON mal formado",
        Message.PRODUCT_NOT_FOUND: "producto no encontrado",
        Message.PRODUCT_DELETED: "producto eliminado",
        Message.CORS_REJECTED: "Error de CORS",
        Message.DATABASE_UNAVAILABLE: "base de datos no disponible",
        Message.INTERNAL_ERROR: "ocurrio un error inesperado",
    },
}


def get_message(key: Message, locale: Locale | str = Locale.EN) -> str:
    """Look up a client-facing string. Unknown locales fall back to English."""
    try:
        catalogue = _MESSAGES[Locale(locale)]
    except ValueError:
        catalogue = _MESSAGES[Locale.EN]
    return catalogue[key]
