import logging
import sys

from pythonjsonlogger import jsonlogger


def setup_logging(log_level: str = "INFO", service_name: str = "storefront") -> None:
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))

    if root_logger.handlers:
        root_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    formatter = jsonlogger.JsonFormatter(
        fmt="%(asctime)s %(name)s %(levelname)s %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%SZ",
        static_fields={"service": service_name},
    )
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)

    # Access lines duplicate the request logging done in the routers
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    # Failed span exports retry in the background; keep only the final error
    logging.getLogger("opentelemetry").setLevel(logging.ERROR)
