import uuid
from datetime import datetime

from sqlalchemy import JSON, CheckConstraint, Column, DateTime, Float, Integer, String

from database import Base


def _new_customer_id() -> str:
    return str(uuid.uuid4())


class Customer(Base):
    __tablename__ = "customers"
    id = Column(String(36), primary_key=True, default=_new_customer_id)
    first_name = Column(String, nullable=False)
    last_name = Column(String, nullable=False)
    email = Column(String, index=True, nullable=False)
    # {"street": ..., "house_number": ..., "zip_code": ...}
    address = Column(JSON, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    def __repr__(self):
        return f"<Customer {self.id} {self.email}>"


class Product(Base):
    __tablename__ = "products"
    __table_args__ = (
        CheckConstraint("available_quantity >= 0", name="ck_products_available_quantity"),
    )
    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)
    description = Column(String, nullable=False)
    available_quantity = Column(Integer, nullable=False, default=0)
    price = Column(Float, nullable=False)

    def __repr__(self):
        return f"<Product {self.id} {self.name}>"
