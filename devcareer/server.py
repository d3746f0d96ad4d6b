#!/usr/bin/env python3
"""
Server entry point for the DevCareer AI tools backend.
"""
import uvicorn

from devcareer.config import logger, settings


def main():
    """Run the server."""
    logger.info(f"Starting DevCareer AI tools on {settings.HOST}:{settings.PORT}")

    uvicorn.run(
        "devcareer.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
