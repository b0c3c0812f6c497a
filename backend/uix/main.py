"""FastAPI application entry point with security headers, CORS, routes and SPA fallback."""

import logging
import sys
from pathlib import Path
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from uix.config import AppConfig, StartupConfig, load_app_config, load_startup_config
from uix.errors import ConfigError
from uix.middleware import SecurityHeadersMiddleware
from uix.routers import api, assets
from uix.spa import router as spa_router
from uix.static import BundleStaticFiles

logger = logging.getLogger(__name__)

CORS_ORIGINS = ["http://localhost:8080", "http://localhost:4200"]

LISTEN_HOST = "0.0.0.0"


def configure_logging(debug: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def create_app(startup: StartupConfig, config: AppConfig) -> FastAPI:
    """Build the application.

    Route order matters: the explicit routes and the API subtree are
    registered before the catch-all, which must stay last.
    """
    app = FastAPI(
        title="Console",
        version=config.package.version,
        debug=startup.debug,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.startup = startup
    app.state.config = config
    app.state.bundle = BundleStaticFiles(
        directory=str(config.public_dir),
        exclude=[config.shell_document],
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_methods=["GET", "HEAD", "PUT", "PATCH", "POST", "DELETE"],
        allow_headers=["*"],
    )
    # Added last so it wraps everything, CORS preflights included
    app.add_middleware(SecurityHeadersMiddleware, startup=startup)

    app.include_router(assets.router)
    app.include_router(api.router)
    app.include_router(spa_router)
    return app


def run(config_path: Optional[str | Path] = None, debug: Optional[bool] = None) -> None:
    """Load configuration, build the app and serve until interrupted.

    Exits with status 1 when configuration cannot be loaded.
    """
    try:
        startup = load_startup_config()
        if debug is not None:
            startup = startup.model_copy(update={"debug": debug})
        config = load_app_config(config_path)
    except ConfigError as e:
        configure_logging()
        logger.critical(f"Failed to load configuration: {e}")
        sys.exit(1)

    configure_logging(startup.debug)
    app = create_app(startup, config)

    ssl_kwargs = {}
    if startup.https_options:
        ssl_kwargs = {
            "ssl_keyfile": startup.https_options.keyfile,
            "ssl_certfile": startup.https_options.certfile,
        }

    logger.warning(f"Console v{config.package.version} is listening on port {config.ui.port}")
    uvicorn.run(
        app,
        host=LISTEN_HOST,
        port=config.ui.port,
        log_level="debug" if startup.debug else "info",
        **ssl_kwargs,
    )
