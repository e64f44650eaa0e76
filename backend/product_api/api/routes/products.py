"""Product Routes — list, fetch, create, update, toggle availability, delete.

Invariants:
    - Every route runs [rules -> validation gate -> handler]; the gate is the first
      dependency, the repository the second
    - Path id is validated as an integer by the gate, then looked up; a valid but
      unknown id is 404 regardless of the body
    - Success bodies: {data: record}, {data: [records]} or {message: str}
    - Mutations are committed before the response is returned

Design Decisions:
    - Request bodies documented through openapi_extra: the body is read by the gate,
      not declared as a Pydantic parameter, so every violation is reported at once
    - Collection routes answer on both "/api/products" and "/api/products/"
"""

import logging

from fastapi import APIRouter, Depends, status

from product_api.api.dependencies import get_product_repository
from product_api.api.validation_gate import ValidatedRequest, validation_gate
from product_api.core.errors import ProductNotFoundError
from product_api.core.messages import Locale, Message, get_message
from product_api.core.repository_protocols import ProductLike, ProductRepository
from product_api.core.validation import (
    ID_PARAM_RULES, PRODUCT_BODY_RULES, UPDATE_BODY_RULES, product_fields,
)
from product_api.schemas.product import (
    MessageEnvelope, ProductCreate, ProductEnvelope, ProductListEnvelope,
    ProductUpdate, ValidationErrorEnvelope, serialize_product,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/products", tags=["products"])

_BAD_REQUEST = {
    status.HTTP_400_BAD_REQUEST: {
        "model": ValidationErrorEnvelope,
        "description": "Bad Request - invalid ID or invalid input data",
    },
}
_NOT_FOUND = {
    status.HTTP_404_NOT_FOUND: {
        "model": MessageEnvelope,
        "description": "Product Not Found",
    },
}


def _request_body(schema) -> dict:
    return {
        "requestBody": {
            "required": True,
            "content": {
                "application/json": {"schema": schema.model_json_schema()},
            },
        },
    }


async def _get_product_or_404(
    repo: ProductRepository, product_id: int, locale: Locale,
) -> ProductLike:
    product = await repo.get(product_id)
    if product is None:
        raise ProductNotFoundError(
            product_id, get_message(Message.PRODUCT_NOT_FOUND, locale),
        )
    return product


@router.get(
    "",
    summary="Get a list of products",
    description="Returns every product, ordered by ID",
    responses={status.HTTP_200_OK: {"model": ProductListEnvelope}},
)
@router.get("/", include_in_schema=False)
async def list_products(
    repo: ProductRepository = Depends(get_product_repository),
):
    products = await repo.list_all()
    return {"data": [serialize_product(p) for p in products]}


@router.get(
    "/{id}",
    summary="Get a product by ID",
    description="Returns a product based on its unique ID",
    responses={
        status.HTTP_200_OK: {"model": ProductEnvelope},
        **_BAD_REQUEST, **_NOT_FOUND,
    },
)
async def get_product(
    req: ValidatedRequest = Depends(validation_gate(ID_PARAM_RULES)),
    repo: ProductRepository = Depends(get_product_repository),
):
    product = await _get_product_or_404(repo, req.product_id, req.locale)
    return {"data": serialize_product(product)}


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Create a new product",
    description="Stores a new product and returns it; availability defaults to true",
    responses={
        status.HTTP_201_CREATED: {"model": ProductEnvelope},
        **_BAD_REQUEST,
    },
    openapi_extra=_request_body(ProductCreate),
)
@router.post(
    "/", status_code=status.HTTP_201_CREATED, include_in_schema=False,
)
async def create_product(
    req: ValidatedRequest = Depends(validation_gate(PRODUCT_BODY_RULES)),
    repo: ProductRepository = Depends(get_product_repository),
):
    product = await repo.create(product_fields(req.body, full=False))
    logger.info(
        f"Product {product.id} created", extra={"product_id": product.id},
    )
    return {"data": serialize_product(product)}


@router.put(
    "/{id}",
    summary="Update a product with user input",
    description="Overwrites name, price and availability; returns the updated product",
    responses={
        status.HTTP_200_OK: {"model": ProductEnvelope},
        **_BAD_REQUEST, **_NOT_FOUND,
    },
    openapi_extra=_request_body(ProductUpdate),
)
async def update_product(
    req: ValidatedRequest = Depends(
        validation_gate(ID_PARAM_RULES + UPDATE_BODY_RULES),
    ),
    repo: ProductRepository = Depends(get_product_repository),
):
    product = await _get_product_or_404(repo, req.product_id, req.locale)
    product = await repo.update(product, product_fields(req.body, full=True))
    logger.info(
        f"Product {product.id} updated", extra={"product_id": product.id},
    )
    return {"data": serialize_product(product)}


@router.patch(
    "/{id}",
    summary="Toggle product availability",
    description="Flips the availability flag and returns the updated product",
    responses={
        status.HTTP_200_OK: {"model": ProductEnvelope},
        **_BAD_REQUEST, **_NOT_FOUND,
    },
)
async def update_availability(
    req: ValidatedRequest = Depends(validation_gate(ID_PARAM_RULES)),
    repo: ProductRepository = Depends(get_product_repository),
):
    product = await _get_product_or_404(repo, req.product_id, req.locale)
    product = await repo.toggle_availability(product)
    logger.info(
        f"Product {product.id} availability set to {product.availability}",
        extra={"product_id": product.id},
    )
    return {"data": serialize_product(product)}


@router.delete(
    "/{id}",
    summary="Delete a product by ID",
    description="Permanently removes the product and returns a confirmation message",
    responses={
        status.HTTP_200_OK: {"model": MessageEnvelope},
        **_BAD_REQUEST, **_NOT_FOUND,
    },
)
async def delete_product(
    req: ValidatedRequest = Depends(validation_gate(ID_PARAM_RULES)),
    repo: ProductRepository = Depends(get_product_repository),
):
    product = await _get_product_or_404(repo, req.product_id, req.locale)
    await repo.delete(product)
    logger.info(
        f"Product {req.product_id} deleted",
        extra={"product_id": req.product_id},
    )
    return {"message": get_message(Message.PRODUCT_DELETED, req.locale)}
