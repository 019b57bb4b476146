#!/usr/bin/env python3
import logging
import os

import uvicorn

from bank_account_service.core.config import settings
from bank_account_service.core.logging import setup_logging


setup_logging(settings.LOG_LEVEL)
logger = logging.getLogger("run_server")


def get_ssl_params() -> dict:
    key = settings.SSL_KEYFILE
    cert = settings.SSL_CERTFILE
    if not (key and cert and os.path.exists(key) and os.path.exists(cert)):
        logger.warning("Starting over HTTP (no SSL certificates found).")
        return {}
    logger.info("Using SSL certificates for HTTPS.")
    return {"ssl_keyfile": key, "ssl_certfile": cert}


def main() -> None:
    params = get_ssl_params()
    protocol = "https" if params else "http"
    logger.info(
        f"Serving GraphQL on {protocol}://localhost:{settings.SERVER_PORT}{settings.GRAPHQL_PATH}"
    )

    uvicorn.run(
        "bank_account_service.main:app",
        host=settings.SERVER_HOST,
        port=settings.SERVER_PORT,
        reload=settings.ENVIRONMENT == "development",
        log_level=settings.LOG_LEVEL.lower(),
        **params,
    )


if __name__ == "__main__":
    main()
