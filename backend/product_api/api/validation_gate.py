"""Validation Gate — the pipeline stage between field rules and the handler.

Invariants:
    - The body is parsed once, here; a non-object body fails before any rule runs
    - Every declared rule runs before the gate decides (errors accumulate)
    - If any rule failed, RequestValidationFailed is raised and the handler never runs
    - The gate is declared as the FIRST dependency of each route, so no store
      access happens for a rejected request

Design Decisions:
    - Gate built per route by a factory over a rule tuple: the route declaration
      reads as [rules -> gate -> handler]
    - Two gate signatures: routes with a path id declare it so it appears in the
      OpenAPI document as a string parameter (an int annotation would let FastAPI
      answer 422 before the rules run)
"""

import json
import logging
from dataclasses import dataclass, field
from typing import Annotated, Any

from fastapi import Depends, Path, Request

from product_api.api.dependencies import get_locale
from product_api.core.errors import RequestValidationFailed
from product_api.core.messages import Locale
from product_api.core.validation import (
    FieldRule, Location, check_rules, malformed_body_error, parse_product_id,
)

logger = logging.getLogger(__name__)

ProductIdPath = Annotated[
    str, Path(description="Product ID (integer)", examples=["1"]),
]


@dataclass
class ValidatedRequest:
    """Inputs that passed the gate, handed to the handler."""
    params: dict[str, Any] = field(default_factory=dict)
    body: dict[str, Any] = field(default_factory=dict)
    locale: Locale = Locale.EN

    @property
    def product_id(self) -> int:
        return parse_product_id(self.params["id"])


async def read_json_object(request: Request, locale: Locale) -> dict[str, Any]:
    """Parse the body as a JSON object. An empty body is an empty object."""
    raw = await request.body()
    if not raw.strip():
        return {}
    try:
        body = json.loads(raw)
    except (UnicodeDecodeError, json.JSONDecodeError):
        body = None
    if not isinstance(body, dict):
        logger.warning(
            "Malformed JSON body",
            extra={"method": request.method, "path": request.url.path},
        )
        raise RequestValidationFailed([malformed_body_error(locale)])
    return body


def validation_gate(rules: tuple[FieldRule, ...]):
    """Build the dependency that runs `rules` and rejects on any failure."""
    reads_body = any(rule.location is Location.BODY for rule in rules)

    async def _run(request: Request, locale: Locale) -> ValidatedRequest:
        body = await read_json_object(request, locale) if reads_body else {}
        params = dict(request.path_params)
        errors = check_rules(
            rules, {Location.PARAMS: params, Location.BODY: body}, locale,
        )
        if errors:
            logger.warning(
                f"Validation failed on {request.url.path}: "
                f"{[e['msg'] for e in errors]}",
                extra={"method": request.method, "path": request.url.path},
            )
            raise RequestValidationFailed(errors)
        return ValidatedRequest(params=params, body=body, locale=locale)

    if any(rule.location is Location.PARAMS for rule in rules):
        async def gate_with_id(
            request: Request,
            id: ProductIdPath,
            locale: Locale = Depends(get_locale),
        ) -> ValidatedRequest:
            return await _run(request, locale)
        return gate_with_id

    async def gate(
        request: Request, locale: Locale = Depends(get_locale),
    ) -> ValidatedRequest:
        return await _run(request, locale)
    return gate
