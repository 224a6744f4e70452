# src/reservation_usage/core/responder.py
"""
Transport-independent handling of a usage request: authenticate, summarize,
and render in the representation the client asked for. Used by both the
HTTP API and the Lambda handler.
"""

import json
import logging
from dataclasses import dataclass
from typing import Mapping, Optional

from ..reporters.negotiation import JSON_CONTENT_TYPE, TEXT_CONTENT_TYPE, negotiate, render
from .auth import verify_token
from .exceptions import AuthenticationFailure, InvalidSizeDescriptor, RegionNotConfigured, UpstreamLoadFailure
from .service import ReservationUsageService

logger = logging.getLogger(__name__)


@dataclass
class UsageResponse:
    status_code: int
    content_type: str
    body: str

    @property
    def headers(self) -> dict:
        return {"Content-Type": self.content_type}


def _error(status_code: int, message: str) -> UsageResponse:
    return UsageResponse(status_code, JSON_CONTENT_TYPE, json.dumps({"detail": message}))


async def respond(
    service: ReservationUsageService,
    headers: Optional[Mapping[str, str]],
    token: Optional[str],
    region: Optional[str],
    expected_token: Optional[str],
) -> UsageResponse:
    """Answer one usage request. Data is only loaded for authenticated requests."""
    try:
        verify_token(token, expected_token)
    except AuthenticationFailure as e:
        return UsageResponse(401, TEXT_CONTENT_TYPE, f"{e}\n")

    try:
        effective_region = service.resolve_region(region)
        rows = await service.summarize(effective_region)
    except RegionNotConfigured as e:
        return _error(400, str(e))
    except (UpstreamLoadFailure, InvalidSizeDescriptor) as e:
        logger.error("Failed to summarize reserved instance usage: %s", e)
        return _error(502, str(e))

    content_type, body = render(rows, negotiate(headers), effective_region)
    return UsageResponse(200, content_type, body)
