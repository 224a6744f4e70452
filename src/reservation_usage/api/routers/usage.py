# src/reservation_usage/api/routers/usage.py
"""
API routes answering reserved instance usage requests.

POST accepts a Slack slash-command style form body (token and text, the
latter naming the region); GET takes the region as a query parameter and the
token in the X-Verification-Token header.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Form, Header, Query, Request, Response

from reservation_usage.api.dependencies import get_usage_service, get_verification_token
from reservation_usage.core.responder import UsageResponse, respond
from reservation_usage.core.service import ReservationUsageService

logger = logging.getLogger(__name__)

router = APIRouter()


def _to_response(result: UsageResponse) -> Response:
    return Response(content=result.body, status_code=result.status_code, media_type=result.content_type)


@router.post("/usage")
async def usage_command(
    request: Request,
    token: Optional[str] = Form(None),
    text: Optional[str] = Form(None),
    service: ReservationUsageService = Depends(get_usage_service),
    expected_token: Optional[str] = Depends(get_verification_token),
):
    """Answer a form-encoded slash command; ``text`` names the region."""
    result = await respond(service, request.headers, token, text, expected_token)
    return _to_response(result)


@router.get("/usage")
async def usage(
    request: Request,
    region: Optional[str] = Query(None, description="AWS region; defaults to AWS_DEFAULT_REGION."),
    x_verification_token: Optional[str] = Header(None),
    service: ReservationUsageService = Depends(get_usage_service),
    expected_token: Optional[str] = Depends(get_verification_token),
):
    """Return the usage summary of a region."""
    result = await respond(service, request.headers, x_verification_token, region, expected_token)
    return _to_response(result)
