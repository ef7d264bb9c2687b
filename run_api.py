#!/usr/bin/env python3
"""Entry point for running the CV Tailor API."""

import uvicorn
from services.api.config import get_config
from shared.utils.logging import get_logger, setup_logging


def main():
    config = get_config()
    setup_logging(level="DEBUG" if config.debug else "INFO")

    logger = get_logger("run_api")
    logger.info(f"Starting CV Tailor API on http://{config.host}:{config.port}")

    uvicorn.run(
        "services.api.app:app",
        host=config.host,
        port=config.port,
        reload=config.debug,
    )


if __name__ == "__main__":
    main()
