"""Main entry point for the Which Platform? server."""

import logging
import sys

import uvicorn
from starlette.applications import Starlette

from which_platform.adapters.config import AppConfig
from which_platform.adapters.web import create_app

logger = logging.getLogger(__name__)


def configure_logging(level: int = logging.INFO) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def load_config() -> AppConfig:
    """Load configuration, exiting on an invalid TOML file."""
    config = AppConfig()
    try:
        config.load_toml_overrides()
    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Invalid configuration: {e}")
        sys.exit(1)
    return config


def serve(config: AppConfig) -> None:
    """Run the web server until interrupted."""
    if not config.tfnsw_api_key:
        logger.warning("TFNSW_API_KEY is not set; departures will fail upstream")

    logger.info(f"Which Platform? running at http://{config.host}:{config.port}")
    if config.reload:
        # Reload needs an import string
        uvicorn.run(
            "which_platform.main:create_default_app",
            factory=True,
            host=config.host,
            port=config.port,
            reload=True,
        )
        return
    uvicorn.run(create_app(config), host=config.host, port=config.port)


def create_default_app() -> Starlette:
    """App factory used by uvicorn when auto-reload is enabled."""
    configure_logging()
    return create_app(load_config())


def main() -> None:
    """Main application entry point."""
    configure_logging()
    serve(load_config())


if __name__ == "__main__":
    main()
