"""Conversions between wire schemas and ORM rows.  No I/O here."""

from typing import Optional

from models import Customer, Product
from schemas import (
    Address,
    CustomerRequest,
    CustomerResponse,
    ProductRequest,
    ProductResponse,
    PurchaseResponse,
)


def _address_to_row(address: Optional[Address]) -> Optional[dict]:
    if address is None:
        return None
    return address.model_dump()


def to_customer(request: CustomerRequest) -> Customer:
    return Customer(
        first_name=request.first_name,
        last_name=request.last_name,
        email=request.email,
        address=_address_to_row(request.address),
    )


def from_customer(customer: Customer) -> CustomerResponse:
    address = None
    if customer.address is not None:
        address = Address.model_validate(customer.address)
    return CustomerResponse(
        id=customer.id,
        first_name=customer.first_name,
        last_name=customer.last_name,
        email=customer.email,
        address=address,
    )


def to_product(request: ProductRequest) -> Product:
    return Product(
        name=request.name,
        description=request.description,
        available_quantity=request.available_quantity,
        price=request.price,
    )


def to_product_response(product: Product) -> ProductResponse:
    return ProductResponse(
        id=product.id,
        name=product.name,
        description=product.description,
        available_quantity=product.available_quantity,
        price=product.price,
    )


def to_purchase_response(product: Product, quantity: int) -> PurchaseResponse:
    return PurchaseResponse(
        product_id=product.id,
        name=product.name,
        description=product.description,
        price=product.price,
        quantity=quantity,
    )
