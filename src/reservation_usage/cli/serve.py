# src/reservation_usage/cli/serve.py
"""
Serve command: runs the HTTP API with uvicorn.
"""

import logging
from typing import Optional

import typer
from typing_extensions import Annotated

from ..api.app import main as run_api

logger = logging.getLogger(__name__)


def serve(
    host: Annotated[Optional[str], typer.Option("--host", help="Interface to bind. Default: API_HOST.")] = None,
    port: Annotated[Optional[int], typer.Option("--port", help="Port to listen on. Default: API_PORT.")] = None,
):
    """
    Start the HTTP API answering usage requests.
    """
    logger.info("Starting the API server...")
    run_api(host=host, port=port)
