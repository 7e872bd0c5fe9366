"""Run the API with ``python -m server``."""

import os

import uvicorn

from charter2pdf.config import CHARTER2PDF_LOG_LEVEL
from charter2pdf.utils.logging_config import get_logger

logger = get_logger(__name__)


def main() -> None:
    host = os.getenv("HOST", "0.0.0.0")  # noqa: S104
    port = int(os.getenv("PORT", "8000"))
    reload = os.getenv("RELOAD", "false").lower() == "true"

    logger.info("Starting charter2pdf server", extra={"host": host, "port": port, "reload": reload})

    # uvicorn configures its own access/error loggers; engine loggers keep
    # the handler installed by get_logger.
    uvicorn.run(
        "server.main:app",
        host=host,
        port=port,
        reload=reload,
        log_level=CHARTER2PDF_LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
