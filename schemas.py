# Pydantic schemas (camelCase on the wire, snake_case in Python)

from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator
from pydantic.alias_generators import to_camel

from utils import MAX_DB_INTEGER, is_blank, normalize_email


class WireModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class Address(WireModel):
    street: Optional[str] = None
    house_number: Optional[str] = None
    zip_code: Optional[str] = None


class CustomerRequest(WireModel):
    first_name: str
    last_name: str
    email: EmailStr
    address: Optional[Address] = None

    @field_validator("first_name", "last_name")
    @classmethod
    def _not_blank(cls, v: str) -> str:
        if is_blank(v):
            raise ValueError("must not be blank")
        return v.strip()

    @field_validator("email", mode="before")
    @classmethod
    def _normalize_email(cls, v):
        if isinstance(v, str):
            return normalize_email(v)
        return v


class CustomerUpdate(WireModel):
    """Partial customer update.

    ``None`` means "leave unchanged".  Blank strings are folded into
    ``None`` before validation, so clearing a field is not possible
    through this model.
    """

    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[EmailStr] = None
    address: Optional[Address] = None

    @field_validator("first_name", "last_name", mode="before")
    @classmethod
    def _blank_to_none(cls, v):
        if isinstance(v, str):
            return None if is_blank(v) else v.strip()
        return v

    @field_validator("email", mode="before")
    @classmethod
    def _blank_email_to_none(cls, v):
        if isinstance(v, str):
            return None if is_blank(v) else normalize_email(v)
        return v


class CustomerResponse(WireModel):
    id: str
    first_name: str
    last_name: str
    email: str
    address: Optional[Address] = None


class ProductRequest(WireModel):
    name: str
    description: str
    available_quantity: int = Field(ge=0, le=MAX_DB_INTEGER)
    price: float = Field(gt=0)

    @field_validator("name", "description")
    @classmethod
    def _not_blank(cls, v: str) -> str:
        if is_blank(v):
            raise ValueError("must not be blank")
        return v.strip()


class ProductResponse(WireModel):
    id: int
    name: str
    description: str
    available_quantity: int
    price: float


class PurchaseRequest(WireModel):
    product_id: int
    quantity: int = Field(gt=0, le=MAX_DB_INTEGER)


class PurchaseResponse(WireModel):
    product_id: int
    name: str
    description: str
    price: float
    quantity: int
