from typing import List

from fastapi import Depends, FastAPI, Response, status
from fastapi.responses import PlainTextResponse
from sqlalchemy.orm import Session

import customer_service
from config import settings
from database import customer_engine, get_customer_db, init_tables
from exceptions import register_exception_handlers
from logging_config import setup_logging
from models import Customer
from schemas import CustomerRequest, CustomerResponse, CustomerUpdate

setup_logging(settings.log_level, settings.log_file or None)

app = FastAPI(title="Customer Service")
register_exception_handlers(app)


@app.on_event("startup")
def startup_event():
    init_tables(customer_engine, Customer)


@app.get("/health", include_in_schema=False)
def health():
    return {"status": "ok"}


@app.post("/api/v1/customers", response_class=PlainTextResponse)
def create_customer(request: CustomerRequest, db: Session = Depends(get_customer_db)):
    return PlainTextResponse(customer_service.create_customer(db, request))


@app.put("/api/v1/customers/{id}", status_code=status.HTTP_202_ACCEPTED)
def update_customer(id: str, request: CustomerUpdate, db: Session = Depends(get_customer_db)):
    customer_service.update_customer(db, id, request)
    return Response(status_code=status.HTTP_202_ACCEPTED)


@app.get("/api/v1/customers", response_model=List[CustomerResponse])
def find_all(db: Session = Depends(get_customer_db)):
    return customer_service.find_all_customers(db)


@app.get("/api/v1/customers/exist/{customer_id}", response_model=bool)
def exists_by_id(customer_id: str, db: Session = Depends(get_customer_db)):
    return customer_service.exists_by_id(db, customer_id)


@app.get("/api/v1/customers/{customer_id}", response_model=CustomerResponse)
def find_by_id(customer_id: str, db: Session = Depends(get_customer_db)):
    return customer_service.find_by_id(db, customer_id)


@app.delete("/api/v1/customers/{customer_id}", status_code=status.HTTP_202_ACCEPTED)
def delete_by_id(customer_id: str, db: Session = Depends(get_customer_db)):
    customer_service.delete_by_id(db, customer_id)
    return Response(status_code=status.HTTP_202_ACCEPTED)

############# Application Run Command #############
# uvicorn customer_app:app --reload --host 0.0.0.0 --port 8090
