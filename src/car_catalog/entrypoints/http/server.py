"""Console entry point: load the catalog, then serve it over HTTP."""

from __future__ import annotations

import logging
import sys

import uvicorn

from car_catalog.domain.errors import LoadError
from car_catalog.entrypoints.http.app import build_app
from car_catalog.infra.catalog_loader import load_catalog
from car_catalog.infra.config import catalog_data_dir, load_env_file, server_host, server_port
from car_catalog.infra.logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    load_env_file()
    setup_logging()

    # The catalog must be fully loaded before anything is served
    try:
        store = load_catalog()
    except LoadError as exc:
        logger.critical(
            "Could not load car data, shutting down",
            exc_info=exc,
            extra={"data_dir": str(catalog_data_dir())},
        )
        sys.exit(1)

    app = build_app(store)
    host, port = server_host(), server_port()

    logger.info("Server listening on http://%s:%s", host, port)
    uvicorn.run(app, host=host, port=port, log_config=None)


if __name__ == "__main__":
    main()
