#!/usr/bin/env python3
"""
Main entry point for the short link service.

Concurrency: one process holds one in-memory registry guarded by a lock, so
any number of concurrent requests share the same entries. WORKERS > 1 starts
independent processes that do NOT share entries.

Usage:
    python app.py

Environment variables:
    BASE_URL - Base URL for short links when the request carries no host
    PATH_PREFIX - Optional path prefix for short links
    HOST / PORT - Address to listen on
    WORKERS - Number of uvicorn worker processes (default 1)
    SHORT_CODE_LENGTH - Length of generated codes (default 6)
    LOG_LEVEL / LOG_FILE / LOG_JSON - Logging
"""

import signal
import sys
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from config import Config, load_config
from shortlink.registry import Registry
from shortlink.shortcode import ShortCodeGenerator
from shortlink.common.logging_config import setup_logging
from web_app import create_app


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown."""
    logger = app.state.logger

    logger.info("Short link service started")

    yield

    logger.info(f"Shutting down short link service ({app.state.registry.count()} URLs discarded)")


def build_app(config: Config, logger) -> FastAPI:
    """Wire generator, registry and web app together."""
    generator = ShortCodeGenerator(default_length=config.short_code_length)
    registry = Registry(
        short_code_generator=generator,
        logger=logger.getChild("registry"),
        max_collision_retries=config.max_collision_retries,
    )

    app = create_app(registry=registry, config=config)
    app.state.logger = logger
    app.router.lifespan_context = lifespan
    return app


def main():
    """Main entry point."""
    config = load_config()

    logger = setup_logging(
        level=config.log_level,
        log_file=config.log_file,
        json_format=config.log_json,
    )

    logger.info("URL Shortener Service")
    logger.info(f"Configuration: {config.model_dump()}")

    app = build_app(config, logger)

    uvicorn_config = uvicorn.Config(
        app,
        host=config.host,
        port=config.port,
        workers=config.workers,
        log_level=config.log_level.lower(),
        access_log=True,
    )

    server = uvicorn.Server(uvicorn_config)

    def handle_signal(signum, frame):
        logger.info(f"Received signal {signum}, initiating graceful shutdown...")
        server.should_exit = True

    signal.signal(signal.SIGINT, handle_signal)
    signal.signal(signal.SIGTERM, handle_signal)

    try:
        logger.info(f"Starting server on {config.host}:{config.port}")
        logger.info(f"Health check: {config.base_url.rstrip('/')}/api/health")
        server.run()
    except Exception as e:
        logger.error(f"Server error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
