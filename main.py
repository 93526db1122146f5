"""ASGI entrypoint: ``uvicorn main:app``."""

from wall_of_shame.api_factory import create_app

app = create_app()
