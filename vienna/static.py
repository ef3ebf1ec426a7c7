"""Static-file stage: serves known top-level entries, passes everything else on."""

import logging
import os
import stat
from typing import Iterable, Mapping, Optional, Tuple

from starlette.responses import PlainTextResponse, Response
from starlette.staticfiles import StaticFiles
from starlette.types import ASGIApp, Receive, Scope, Send

logger = logging.getLogger(__name__)


class StaticMiddleware:
    """
    Serve files from ``directory`` for requests whose first path segment
    is one of ``urls``.  Anything else, including eligible paths that do not
    resolve to a file, is handed to the wrapped ``app``.

    Lookup, conditional requests (304) and content types are Starlette's
    ``StaticFiles``; ``headers`` are added to every file response.
    """

    def __init__(
        self,
        app: ASGIApp,
        directory: str,
        urls: Iterable[str] = (),
        index: str = "index.html",
        headers: Optional[Mapping[str, str]] = None,
    ):
        self.app = app
        self.index = index
        self.urls = frozenset(url.strip("/") for url in urls)
        self.headers = dict(headers or {})
        self.files = StaticFiles(directory=directory, check_dir=False)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        response = self.get_response(scope)
        if response is None:
            logger.debug(f"No static file for {scope['path']}, falling through")
            await self.app(scope, receive, send)
            return
        await response(scope, receive, send)

    def is_eligible(self, path: str) -> bool:
        """True if the normalized relative ``path`` starts with a known entry."""
        segment = path.split(os.sep, 1)[0]
        return segment in self.urls

    def resolve(self, path: str) -> Tuple[str, Optional[os.stat_result]]:
        """Resolve ``path`` under the directory; directories map to their index."""
        full_path, stat_result = self.files.lookup_path(path)
        if stat_result is not None and stat.S_ISDIR(stat_result.st_mode):
            full_path, stat_result = self.files.lookup_path(os.path.join(path, self.index))
        if stat_result is None or not stat.S_ISREG(stat_result.st_mode):
            return "", None
        return full_path, stat_result

    def get_response(self, scope: Scope) -> Optional[Response]:
        path = self.files.get_path(scope)
        if path == ".":
            path = self.index
        if not self.is_eligible(path):
            return None

        full_path, stat_result = self.resolve(path)
        if stat_result is None:
            return None

        if scope["method"] not in ("GET", "HEAD"):
            return PlainTextResponse(
                "Method Not Allowed",
                status_code=405,
                headers={"Allow": "GET, HEAD"},
            )

        response = self.files.file_response(full_path, stat_result, scope)
        for name, value in self.headers.items():
            response.headers[name] = value
        return response
