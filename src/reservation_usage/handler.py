# src/reservation_usage/handler.py
"""
AWS Lambda entry point.

API Gateway proxy events (recognised by their requestContext) carry a
form-encoded slash command and get an API Gateway response back. Any other
event is treated as a direct invocation and gets the raw summary rows.
"""

import asyncio
import base64
import binascii
import logging
from typing import Any, Dict, List, Union
from urllib.parse import parse_qs

from .core.config import config
from .core.factory import get_service
from .core.responder import respond
from .core.service import ReservationUsageService
from .reporters.json_reporter import JSONReporter

logger = logging.getLogger(__name__)
logger.setLevel(config.LOG_LEVEL.upper())


def _form_body(event: Dict[str, Any]) -> Dict[str, List[str]]:
    """Parse the form-encoded body of an API Gateway event.

    A body that is not valid base64 parses as an empty form, so the request
    is rejected by the token check instead of failing the invocation.
    """
    body = event.get("body") or ""
    if event.get("isBase64Encoded"):
        try:
            raw = base64.b64decode(body, validate=True)
        except (binascii.Error, ValueError) as e:
            logger.warning(f"Ignoring request body that is not valid base64: {e}")
            return {}
        body = raw.decode("utf-8", errors="replace")
    return parse_qs(body)


async def process_event(
    event: Dict[str, Any], service: ReservationUsageService
) -> Union[Dict[str, Any], List[Dict[str, Any]]]:
    """Answer one Lambda event."""
    if "requestContext" not in event:
        rows = await service.summarize(event.get("region"))
        return JSONReporter().render(rows)

    form = _form_body(event)
    result = await respond(
        service,
        event.get("headers") or {},
        form.get("token", [None])[0],
        form.get("text", [None])[0],
        config.VERIFICATION_TOKEN,
    )
    return {"statusCode": result.status_code, "headers": result.headers, "body": result.body}


def lambda_handler(event, context):
    """Lambda handler; the service and its caches live as long as the container."""
    return asyncio.run(process_event(event or {}, get_service()))
