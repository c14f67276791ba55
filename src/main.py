#!/usr/bin/env python3
import logging

import uvicorn

from text_playground.app import create_app
from text_playground.config import Settings

# Settings gets initialized from environment variables.
settings = Settings()

handlers: list[logging.Handler] = [logging.StreamHandler()]
if settings.log_file is not None:
    handlers.append(logging.FileHandler(settings.log_file))

# Configure logging
logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=handlers,
)

logger = logging.getLogger(__name__)

app = create_app(settings)


if __name__ == "__main__":
    try:
        uvicorn.run(
            app,
            host=settings.server_host,
            port=settings.server_port,
            log_level=settings.log_level.lower(),
        )
    except KeyboardInterrupt:
        logger.info("Server stopped by user")
    except Exception as e:
        logger.error(f"Server error: {e}")
        exit(1)
