# tests/reporters/test_slack_reporter.py

from reservation_usage.models.capacity import FamilySummary
from reservation_usage.reporters.slack_reporter import SlackReporter
from reservation_usage.reporters.text_reporter import TextReporter

ROWS = [FamilySummary(family="p7", on_demand=4, reserved=8, surplus=4)]


def test_message_is_posted_in_channel():
    message = SlackReporter().render(ROWS, "eu-north-9")

    assert message["response_type"] == "in_channel"
    assert message["mrkdwn"] is True


def test_table_is_wrapped_in_a_code_block():
    message = SlackReporter().render(ROWS, "eu-north-9")

    assert message["text"] == "```\n" + TextReporter().render(ROWS) + "\n```\n"


def test_explanation_names_the_region():
    message = SlackReporter().render(ROWS, "eu-north-9")

    assert len(message["attachments"]) == 1
    assert "eu-north-9" in message["attachments"][0]["text"]
    assert "eu-north-9" not in message["text"]
