"""
API server entry point.

Usage:
    python -m roman_numeral.server
    uvicorn server:app --port 8080
"""

from __future__ import annotations

import platform
from contextlib import asynccontextmanager

import uvicorn

from roman_numeral.infrastructure.http.api import create_app
from roman_numeral.utils.config import app_env, host, load_config, log_dir, log_level, port
from roman_numeral.utils.logger import get_logger, setup_http_logger, setup_logger, uvicorn_log_config

load_config()
setup_logger(level=log_level(), log_dir=log_dir())
setup_http_logger(log_dir())
log = get_logger()


@asynccontextmanager
async def _lifespan(_app):
    log.info(
        "Roman Numeral Converter API server started on port %d (environment=%s, python=%s)",
        port(),
        app_env(),
        platform.python_version(),
    )
    yield
    log.info("Shutdown signal received, shutting down gracefully")


app = create_app(lifespan=_lifespan)


def main() -> None:
    uvicorn.run(
        app,
        host=host(),
        port=port(),
        log_level=log_level().lower(),
        log_config=uvicorn_log_config(log_dir()),
    )


if __name__ == "__main__":
    main()
