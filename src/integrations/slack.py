import os
from typing import Optional

from slack_sdk import WebClient
from slack_sdk.errors import SlackApiError


class SlackReporter:
    """
    Thin Slack transport layer.

    Responsibilities:
    - Send generation summaries to Slack
    - No knowledge of how the summary was built
    """

    def __init__(
        self,
        bot_token: Optional[str] = None,
        channel_id: Optional[str] = None,
        client: Optional[WebClient] = None,
    ):
        self.bot_token = bot_token or os.getenv("SLACK_BOT_TOKEN")
        self.channel_id = channel_id or os.getenv("SLACK_DEFAULT_CHANNEL_ID")

        if not self.bot_token and client is None:
            raise RuntimeError("SLACK_BOT_TOKEN not set")

        if not self.channel_id:
            raise RuntimeError("SLACK_DEFAULT_CHANNEL_ID not set")

        self.client = client or WebClient(token=self.bot_token)

    def post_message(self, title: str, text: str, level: str = "info") -> None:
        emoji = {
            "info": ":information_source:",
            "success": ":white_check_mark:",
            "warning": ":warning:",
            "error": ":x:",
        }.get(level, ":speech_balloon:")

        try:
            self.client.chat_postMessage(
                channel=self.channel_id,
                text=f"{emoji} *{title}*\n{text}",
            )
        except SlackApiError as e:
            raise RuntimeError(
                f"Slack message failed: {e.response['error']}"
            )
