"""
Storefront entry point.
Runs the ASGI app under uvicorn on the configured host and port.
"""

import uvicorn

from storefront.config import settings


def main() -> None:
    # log_config=None keeps uvicorn on the JSON root handler
    uvicorn.run(
        "storefront.main:app",
        host=settings.host,
        port=settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
