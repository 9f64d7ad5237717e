from typing import List

from fastapi import Depends, FastAPI
from sqlalchemy.orm import Session

import product_service
from config import settings
from database import ProductSessionLocal, get_product_db, init_tables, product_engine
from exceptions import register_exception_handlers
from logging_config import setup_logging
from models import Product
from schemas import ProductRequest, ProductResponse, PurchaseRequest, PurchaseResponse

setup_logging(settings.log_level, settings.log_file or None)

app = FastAPI(title="Product Service")
register_exception_handlers(app)


@app.on_event("startup")
def startup_event():
    init_tables(product_engine, Product)
    if settings.seed_demo_products:
        db = ProductSessionLocal()
        try:
            product_service.seed_demo_products(db)
        finally:
            db.close()


@app.get("/health", include_in_schema=False)
def health():
    return {"status": "ok"}


@app.post("/api/v1/products", response_model=int)
def create_product(request: ProductRequest, db: Session = Depends(get_product_db)):
    return product_service.create_product(db, request)


# Declared before /{product_id} so "purchase" is never parsed as an id.
@app.post("/api/v1/products/purchase", response_model=List[PurchaseResponse])
def purchase_products(requests: List[PurchaseRequest], db: Session = Depends(get_product_db)):
    return product_service.purchase_products(db, requests)


@app.get("/api/v1/products/{product_id}", response_model=ProductResponse)
def find_by_id(product_id: int, db: Session = Depends(get_product_db)):
    return product_service.find_by_id(db, product_id)


@app.get("/api/v1/products", response_model=List[ProductResponse])
def find_all(db: Session = Depends(get_product_db)):
    return product_service.find_all(db)

############# Application Run Command #############
# uvicorn product_app:app --reload --host 0.0.0.0 --port 8050
