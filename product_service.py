import logging
from operator import attrgetter
from typing import List

from sqlalchemy.orm import Session

import mappers
from exceptions import ProductNotFound, PurchaseFailed
from models import Product
from schemas import ProductRequest, ProductResponse, PurchaseRequest, PurchaseResponse
from utils import fits_db_integer

logger = logging.getLogger(__name__)

DEMO_PRODUCTS = [
    {"name": "Pen", "description": "Blue ballpoint pen", "available_quantity": 100, "price": 10.0},
    {"name": "Notebook", "description": "A5 ruled notebook", "available_quantity": 50, "price": 50.0},
    {"name": "Eraser", "description": "Soft white eraser", "available_quantity": 200, "price": 5.0},
]


def create_product(db: Session, request: ProductRequest) -> int:
    product = mappers.to_product(request)
    db.add(product)
    db.commit()
    db.refresh(product)
    logger.info("Created product %s (%s)", product.id, product.name)
    return product.id


def find_by_id(db: Session, product_id: int) -> ProductResponse:
    product = db.get(Product, product_id) if fits_db_integer(product_id) else None
    if product is None:
        raise ProductNotFound(f"Product not found with ID:: {product_id}")
    return mappers.to_product_response(product)


def find_all(db: Session) -> List[ProductResponse]:
    products = db.query(Product).order_by(Product.id.asc()).all()
    return [mappers.to_product_response(p) for p in products]


def purchase_products(db: Session, requests: List[PurchaseRequest]) -> List[PurchaseResponse]:
    """Apply a batch of purchases as one transaction.

    Requests and stored products are both sorted by product id and walked
    together, so the result is always in ascending product-id order no
    matter how the batch was submitted.  Repeated ids in a batch hit the
    same row, one decrement after another.  Any failure rolls back every
    decrement made by this call and raises ``PurchaseFailed``.
    """
    product_ids = {r.product_id for r in requests}
    # Ids outside the column range cannot be stored, so they only count as missing.
    lookup_ids = sorted(pid for pid in product_ids if fits_db_integer(pid))
    try:
        stored_products = (
            db.query(Product)
            .filter(Product.id.in_(lookup_ids))
            .order_by(Product.id.asc())
            .all()
        )
        if len(stored_products) != len(product_ids):
            raise PurchaseFailed("One or more products does not exist")

        sorted_requests = sorted(requests, key=attrgetter("product_id"))
        purchased: List[PurchaseResponse] = []
        position = 0
        for item in sorted_requests:
            while stored_products[position].id != item.product_id:
                position += 1
            product = stored_products[position]

            if product.available_quantity < item.quantity:
                raise PurchaseFailed(
                    f"Insufficient stock quantity for product with ID:: {item.product_id}",
                    product_id=item.product_id,
                )
            product.available_quantity -= item.quantity
            db.flush()
            purchased.append(mappers.to_purchase_response(product, item.quantity))

        db.commit()
    except Exception:
        db.rollback()
        raise

    logger.info("Purchased %d line(s) across %d product(s)", len(purchased), len(product_ids))
    return purchased


def seed_demo_products(db: Session) -> None:
    if db.query(Product).count() > 0:
        return
    db.add_all([Product(**row) for row in DEMO_PRODUCTS])
    db.commit()
    logger.info("Seeded %d demo products", len(DEMO_PRODUCTS))
