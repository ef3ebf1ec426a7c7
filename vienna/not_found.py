"""Terminal 404 endpoint serving an optional custom page."""

import os
from dataclasses import dataclass
from typing import Optional

from starlette.responses import Response
from starlette.types import Receive, Scope, Send

DEFAULT_CONTENT = b"Not Found"


@dataclass(frozen=True)
class NotFoundPage:
    path: Optional[str]
    content: bytes = DEFAULT_CONTENT
    loaded: bool = False


class NotFound:
    """
    Always answers ``404 Not Found``.

    Initialize it with the path to a 404 page and that page is returned.
    When the page doesn't exist (or no path is given), the body is the
    literal ``Not Found``.  The file is checked and read again on every
    call, so the page can be edited without restarting the server.

        NotFound("public/404.html")
        NotFound()  # always "Not Found"
    """

    def __init__(self, path: Optional[str] = ""):
        self.path = path or None

    def page(self) -> NotFoundPage:
        """Load the current page from disk, falling back to the default body."""
        path = self.path
        if path is None or not os.path.isfile(path) or not os.access(path, os.R_OK):
            return NotFoundPage(path=path)
        # A read failure past this point is a server fault, not a missing page
        with open(path, "rb") as f:
            content = f.read()
        return NotFoundPage(path=path, content=content, loaded=True)

    def render(self) -> Response:
        content = self.page().content
        # Explicit header keeps Starlette from appending a charset
        return Response(
            content=content,
            status_code=404,
            headers={"content-type": "text/html"},
        )

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        response = self.render()
        await response(scope, receive, send)
