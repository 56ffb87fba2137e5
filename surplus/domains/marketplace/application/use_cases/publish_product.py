"""
Publish Product Use Case

Seller lists a new surplus-food product in one of their stores.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal, InvalidOperation

from surplus.core.domain import AuthorizationException, EntityNotFoundException, Money, ValidationException
from surplus.domains.marketplace.application.ports import ICatalog
from surplus.domains.marketplace.domain.entities import Product
from surplus.domains.marketplace.domain.services import CodeGenerator

logger = logging.getLogger(__name__)


@dataclass
class PublishProductRequest:
    """Request for listing a product."""

    seller_id: int
    store_id: int
    name: str
    price: Decimal | float | str
    quantity: int
    available_until: datetime
    available_from: datetime | None = None
    original_price: Decimal | float | str | None = None
    description: str | None = None


class PublishProductUseCase:
    """
    Use Case: Publish Product

    Responsibilities:
    - Check the seller owns the store
    - Validate price, stock and availability window
    - Assign a unique product code
    """

    def __init__(self, catalog: ICatalog, code_generator: CodeGenerator):
        self.catalog = catalog
        self.code_generator = code_generator

    async def execute(self, request: PublishProductRequest) -> Product:
        """
        Publish a product.

        Raises:
            EntityNotFoundException: Unknown store
            AuthorizationException: Seller does not own the store
            ValidationException: Invalid product data
            OrderCodeGenerationException: No unique code could be generated
        """
        store = await self.catalog.get_store(request.store_id)
        if store is None:
            raise EntityNotFoundException("Store", request.store_id)
        if not store.is_owned_by(request.seller_id):
            raise AuthorizationException(
                operation="publish_product",
                resource=f"store:{store.id}",
                user_id=request.seller_id,
            )

        price = _to_money(request.price, "price")
        original_price = _to_money(request.original_price, "original_price") if request.original_price else None

        code = await self.code_generator.generate_unique(self.catalog.product_code_exists, kind="product")
        product = Product(
            store_id=store.id or request.store_id,
            name=request.name,
            description=request.description,
            price=price,
            original_price=original_price,
            quantity=request.quantity,
            available_from=request.available_from,
            available_until=request.available_until,
            code=code,
        )
        created = await self.catalog.create_product(product)
        logger.info(f"Product published: {created.code} in store {created.store_id} (qty {created.quantity})")
        return created


def _to_money(value: Decimal | float | str, field: str) -> Money:
    try:
        return Money(Decimal(str(value)))
    except (InvalidOperation, ValueError) as e:
        raise ValidationException(f"Invalid {field}: {value}", field=field) from e


__all__ = ["PublishProductUseCase", "PublishProductRequest"]
