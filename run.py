"""Launch one of the services with uvicorn.

Usage::

    python run.py customer
    python run.py product

Host and ports come from ``config.settings`` (``HOST``,
``CUSTOMER_SERVICE_PORT``, ``PRODUCT_SERVICE_PORT``).
"""
import argparse

import uvicorn

from config import settings

SERVICES = {
    "customer": ("customer_app:app", "customer_service_port"),
    "product": ("product_app:app", "product_service_port"),
}


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(description="Run an e-commerce registry service")
    parser.add_argument("service", choices=sorted(SERVICES))
    parser.add_argument("--reload", action="store_true", help="reload on code changes")
    args = parser.parse_args(argv)

    target, port_setting = SERVICES[args.service]
    uvicorn.run(
        target,
        host=settings.host,
        port=getattr(settings, port_setting),
        reload=args.reload,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
