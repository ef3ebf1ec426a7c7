"""Zero-configuration static site server.

    uvicorn vienna.main:app

serves the static site in ``public``.
"""

from typing import Optional

from vienna.application import StaticApplication
from vienna.config import ServerConfig, Settings
from vienna.not_found import NotFound

__version__ = "1.0.0"

__all__ = ["NotFound", "ServerConfig", "StaticApplication", "create_app"]


def create_app(config: Optional[ServerConfig] = None, **options) -> StaticApplication:
    """Build a new application; without arguments, options come from the environment."""
    if config is None and not options:
        config = Settings().server_config()
    return StaticApplication(config, **options)
