"""
Main entry point for the FastAPI application.

Usage:
    python -m konektz

Or with uvicorn directly:
    uvicorn konektz.fastapi_app:create_fastapi_app --factory --host 0.0.0.0 --port 5000
"""

import logging
import os
import sys

import uvicorn

from konektz.config.settings import ConfigurationError, get_config

logger = logging.getLogger("konektz")


def main() -> None:
    config = get_config()
    try:
        config.validate()
    except ConfigurationError as e:
        print(f"[ENV] {e}", file=sys.stderr)
        sys.exit(1)

    debug = config.DEBUG
    host = os.getenv("HOST", "0.0.0.0")

    print(f"Starting Konektz API in {config.APP_ENV} mode...")
    print(f"Server running on http://{host}:{config.PORT}")
    print(f"API docs available at http://{host}:{config.PORT}/docs")

    uvicorn.run(
        "konektz.fastapi_app:create_fastapi_app",
        factory=True,
        host=host,
        port=config.PORT,
        reload=debug,
        log_level="info" if debug else "warning",
    )


if __name__ == "__main__":
    main()
