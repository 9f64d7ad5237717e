import logging
from typing import List

from sqlalchemy.orm import Session

import mappers
from exceptions import CustomerNotFound
from models import Customer
from schemas import CustomerRequest, CustomerResponse, CustomerUpdate

logger = logging.getLogger(__name__)


def _get_or_raise(db: Session, customer_id: str, message: str) -> Customer:
    customer = db.get(Customer, customer_id)
    if customer is None:
        raise CustomerNotFound(message)
    return customer


def create_customer(db: Session, request: CustomerRequest) -> str:
    customer = mappers.to_customer(request)
    db.add(customer)
    db.commit()
    db.refresh(customer)
    logger.info("Created customer %s", customer.id)
    return customer.id


def merge_customer(customer: Customer, patch: CustomerUpdate) -> None:
    """Copy every field present in ``patch`` onto ``customer``."""
    if patch.first_name is not None:
        customer.first_name = patch.first_name
    if patch.last_name is not None:
        customer.last_name = patch.last_name
    if patch.email is not None:
        customer.email = patch.email
    if patch.address is not None:
        customer.address = patch.address.model_dump()


def update_customer(db: Session, customer_id: str, patch: CustomerUpdate) -> None:
    customer = _get_or_raise(db, customer_id, f"Customer {customer_id} not found")
    merge_customer(customer, patch)
    db.commit()
    logger.info("Updated customer %s", customer_id)


def find_all_customers(db: Session) -> List[CustomerResponse]:
    customers = db.query(Customer).order_by(Customer.created_at.asc(), Customer.id.asc()).all()
    return [mappers.from_customer(c) for c in customers]


def exists_by_id(db: Session, customer_id: str) -> bool:
    return db.query(Customer.id).filter(Customer.id == customer_id).first() is not None


def find_by_id(db: Session, customer_id: str) -> CustomerResponse:
    customer = _get_or_raise(
        db, customer_id, f"No customer found with the provided id :: {customer_id}"
    )
    return mappers.from_customer(customer)


def delete_by_id(db: Session, customer_id: str) -> None:
    customer = _get_or_raise(
        db, customer_id, f"No customer found with the provided id :: {customer_id}"
    )
    db.delete(customer)
    db.commit()
    logger.info("Deleted customer %s", customer_id)
