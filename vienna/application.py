"""Static site application: static-file stage in front of a 404 page."""

import logging
import os
from typing import FrozenSet, Optional

from starlette.applications import Starlette
from starlette.middleware import Middleware
from starlette.routing import Mount
from starlette.types import Receive, Scope, Send

from vienna.config import ServerConfig
from vienna.not_found import NotFound
from vienna.static import StaticMiddleware

logger = logging.getLogger(__name__)

INDEX_FILE = "index.html"
NOT_FOUND_FILE = "404.html"


def list_entries(root: str) -> FrozenSet[str]:
    """Names of the files and directories directly inside ``root``."""
    try:
        with os.scandir(root) as it:
            # Hidden entries (.env, .git) are never servable
            return frozenset(entry.name for entry in it if not entry.name.startswith("."))
    except OSError:
        logger.warning(f"Static root {root!r} is not a readable directory, every request will 404")
        return frozenset()


class StaticApplication:
    """
    Serves every file under ``root``.  When a path doesn't resolve to a
    file, ``<root>/404.html`` (or a plain ``Not Found``) is returned.

        StaticApplication(root="_site", max_age=86400)
        StaticApplication()  # serves "public"

    The top-level entries of ``root`` are listed once, here; files created
    under a new top-level name afterwards need a new application.
    """

    def __init__(self, config: Optional[ServerConfig] = None, **options):
        if config is None:
            config = ServerConfig(**options)
        elif options:
            config = config.updated(**options)
        self.config = config
        root = self.config.root
        self.entries = list_entries(root)
        self.not_found = NotFound(os.path.join(root, NOT_FOUND_FILE))
        self.app = Starlette(
            routes=[Mount("/", app=self.not_found)],
            middleware=[
                Middleware(
                    StaticMiddleware,
                    directory=root,
                    urls=self.entries,
                    index=INDEX_FILE,
                    headers={"Cache-Control": self.config.cache_control},
                ),
            ],
        )
        logger.info(
            f"Serving {len(self.entries)} top-level entries from {root!r} "
            f"(max-age={self.config.max_age})"
        )

    @property
    def urls(self) -> FrozenSet[str]:
        """URL prefixes eligible for static serving."""
        return frozenset(f"/{name}" for name in self.entries)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        await self.app(scope, receive, send)
