# src/reservation_usage/reporters/negotiation.py
"""
Chooses the response representation from the request headers and renders
the summary rows in it.
"""

import json
from enum import Enum
from typing import List, Mapping, Optional, Tuple

from ..models.capacity import FamilySummary
from .json_reporter import JSONReporter
from .slack_reporter import SlackReporter
from .text_reporter import TextReporter

JSON_CONTENT_TYPE = "application/json"
TEXT_CONTENT_TYPE = "text/plain; charset=UTF-8"


class Representation(str, Enum):
    """Supported response representations."""

    JSON = "json"
    TEXT = "text"
    SLACK = "slack"


def _header(headers: Optional[Mapping[str, str]], name: str) -> str:
    for key, value in (headers or {}).items():
        if key.lower() == name.lower():
            return value or ""
    return ""


def negotiate(headers: Optional[Mapping[str, str]]) -> Representation:
    """Pick a representation.

    Slack's user agent wins over everything, because Slack sends a broad
    Accept header. Otherwise plain text is used only when it is the first
    media type the client accepts.
    """
    if _header(headers, "User-Agent").startswith("Slackbot"):
        return Representation.SLACK
    accept = _header(headers, "Accept")
    first = accept.split(",")[0].split(";")[0].strip().lower()
    if first == "text/plain":
        return Representation.TEXT
    return Representation.JSON


def render(
    data: List[FamilySummary], representation: Representation, region: Optional[str] = None
) -> Tuple[str, str]:
    """Return (content type, body) of the rows in the given representation."""
    if representation == Representation.TEXT:
        return TEXT_CONTENT_TYPE, TextReporter().render(data, region) + "\n"
    if representation == Representation.SLACK:
        return JSON_CONTENT_TYPE, json.dumps(SlackReporter().render(data, region))
    return JSON_CONTENT_TYPE, json.dumps(JSONReporter().render(data, region))
