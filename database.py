from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base

from config import settings

Base = declarative_base()


def make_engine(url: str):
    connect_args = {}
    if url.startswith("sqlite"):
        connect_args = {"check_same_thread": False, "timeout": 10}
    return create_engine(
        url,
        connect_args=connect_args,
        echo=settings.sql_echo,
        pool_pre_ping=True,
    )


# The two services never share a store; each gets its own engine.
customer_engine = make_engine(settings.customer_database_url)
CustomerSessionLocal = sessionmaker(bind=customer_engine, autoflush=False, autocommit=False)

product_engine = make_engine(settings.product_database_url)
ProductSessionLocal = sessionmaker(bind=product_engine, autoflush=False, autocommit=False)


def get_customer_db():
    db = CustomerSessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_product_db():
    db = ProductSessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_tables(engine, *tables):
    Base.metadata.create_all(bind=engine, tables=[t.__table__ for t in tables])
