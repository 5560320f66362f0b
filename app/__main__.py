"""Start the bridge server."""
import logging
import sys

import uvicorn
from pydantic import ValidationError

from app.core.logging import setup_logging

logger = logging.getLogger("app")


def main() -> None:
    """Run the server, exiting before binding the port if misconfigured."""
    setup_logging()
    try:
        from app.core.config import settings
    except ValidationError as e:
        logger.error(f"Error: ULTRAVOX_API_KEY environment variable not set. ({e.error_count()} error(s))")
        sys.exit(1)

    setup_logging(settings.log_level)
    logger.info(f"Server running on port {settings.port}")
    uvicorn.run("app.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
