"""Reporters rendering summary rows for people and machines."""

from .base_reporter import BaseReporter
from .console_reporter import ConsoleReporter
from .json_reporter import JSONReporter
from .negotiation import Representation, negotiate, render
from .slack_reporter import SlackReporter
from .text_reporter import TextReporter

__all__ = [
    "BaseReporter",
    "ConsoleReporter",
    "JSONReporter",
    "Representation",
    "SlackReporter",
    "TextReporter",
    "negotiate",
    "render",
]
