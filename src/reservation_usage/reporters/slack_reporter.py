# src/reservation_usage/reporters/slack_reporter.py
"""
A reporter that wraps the plain text table in a Slack slash-command response.
"""

from typing import Any, Dict, List, Optional

from ..models.capacity import FamilySummary
from .base_reporter import BaseReporter
from .text_reporter import TextReporter


class SlackReporter(BaseReporter):
    """Builds an in-channel Slack message with the table in a code block."""

    def __init__(self, text_reporter: Optional[TextReporter] = None):
        self.text_reporter = text_reporter or TextReporter()

    def render(self, data: List[FamilySummary], region: Optional[str] = None) -> Dict[str, Any]:
        table = self.text_reporter.render(data)
        where = f" in {region}" if region else ""
        explanation = (
            f"Reserved instance usage{where}, in normalized units per instance family "
            "(a small instance is 1 unit, an xlarge 8)."
        )
        return {
            "response_type": "in_channel",
            "mrkdwn": True,
            # Code fences keep Slack from collapsing the column alignment.
            "text": f"```\n{table}\n```\n",
            "attachments": [{"text": explanation}],
        }
