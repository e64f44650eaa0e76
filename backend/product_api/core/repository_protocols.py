"""Boundary Protocols — contracts between route handlers and the product store.

Invariants:
    - Handlers depend on ProductRepository, never on the ORM session directly
    - Every mutating method commits before returning (one unit of work per call)
    - get() returns None for an unknown id; it never raises for "not found"

Design Decisions:
    - Protocol over ABC: structural subtyping, so a test double needs no base class
    - Methods return ProductLike, not dicts: response shaping happens once, in schemas/
"""

from datetime import datetime
from typing import Any, Protocol, Sequence


class ProductLike(Protocol):
    """Structural contract for product records handed back by a repository."""
    id: int
    name: str
    price: float
    availability: bool
    created_at: datetime | None
    updated_at: datetime | None


class ProductRepository(Protocol):
    """Contract for product persistence — implemented by infrastructure/."""
    async def list_all(self) -> Sequence[ProductLike]: ...
    async def get(self, product_id: int) -> ProductLike | None: ...
    async def create(self, fields: dict[str, Any]) -> ProductLike: ...
    async def update(
        self, product: ProductLike, fields: dict[str, Any],
    ) -> ProductLike: ...
    async def toggle_availability(self, product: ProductLike) -> ProductLike: ...
    async def delete(self, product: ProductLike) -> None: ...
