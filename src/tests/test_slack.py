import pytest
from slack_sdk.errors import SlackApiError

from src.integrations.slack import SlackReporter


class FakeWebClient:
    def __init__(self, error=None):
        self.messages = []
        self.error = error

    def chat_postMessage(self, **kwargs):
        if self.error:
            raise self.error
        self.messages.append(kwargs)


def test_post_message_formats_title():
    client = FakeWebClient()
    reporter = SlackReporter(bot_token="xoxb-test", channel_id="C123", client=client)

    reporter.post_message("Service type generation", "✅ Generated: 5", level="success")

    assert client.messages == [{
        "channel": "C123",
        "text": ":white_check_mark: *Service type generation*\n✅ Generated: 5",
    }]


def test_slack_error_becomes_runtime_error():
    error = SlackApiError("failed", {"error": "channel_not_found"})
    reporter = SlackReporter(bot_token="xoxb-test", channel_id="C123", client=FakeWebClient(error))

    with pytest.raises(RuntimeError, match="channel_not_found"):
        reporter.post_message("t", "body")


def test_missing_channel_is_rejected(monkeypatch):
    monkeypatch.delenv("SLACK_DEFAULT_CHANNEL_ID", raising=False)
    with pytest.raises(RuntimeError):
        SlackReporter(bot_token="xoxb-test", client=FakeWebClient())
