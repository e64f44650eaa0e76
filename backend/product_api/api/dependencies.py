"""Route Dependencies — injected store and locale, overridable in tests.

Invariants:
    - Handlers obtain the store ONLY through get_product_repository
    - get_locale is the single source of the response language
    - Settings are read from request.app.state, the same object create_app()
      handed to the middleware

Design Decisions:
    - Repository built per request from the request's session: no store handle is
      imported as ambient global state by any handler
"""

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from product_api.core.messages import Locale
from product_api.core.repository_protocols import ProductRepository
from product_api.infrastructure.database import get_db
from product_api.infrastructure.product_repository import SqlProductRepository


def get_locale(request: Request) -> Locale:
    """Locale of the settings this app was built with."""
    return request.app.state.settings.message_locale


def get_product_repository(
    db: AsyncSession = Depends(get_db),
) -> ProductRepository:
    return SqlProductRepository(db)
