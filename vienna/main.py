"""ASGI entry point: ``uvicorn vienna.main:app``."""

from vienna import create_app

app = create_app()
