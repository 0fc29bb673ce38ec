import logging
from typing import Any

import requests

logger = logging.getLogger(__name__)

# Default timeout for Slack webhook requests (seconds)
DEFAULT_TIMEOUT = 30


class SlackClient:
    """Client for posting converted messages to a Slack incoming webhook.

    Delivery is best effort: failures are logged and reported through the
    return value, never raised.
    """

    def __init__(self, webhook_url: str, timeout: float = DEFAULT_TIMEOUT):
        """Initialize the Slack client with webhook URL"""
        self.webhook_url = webhook_url
        self.timeout = timeout

    def send_message(self, message: dict[str, Any]) -> bool:
        """Send a message payload to Slack using the webhook URL.

        Args:
            message: JSON-serializable payload (attachments or dialog).

        Returns:
            True if Slack accepted the message, False otherwise.

        Raises:
            ValueError: If the client has no webhook URL.
        """
        if not self.webhook_url:
            raise ValueError("Slack webhook URL is unset")
        try:
            response = requests.post(
                self.webhook_url, json=message, timeout=self.timeout
            )
            response.raise_for_status()
            return True
        except requests.exceptions.Timeout:
            logger.error(
                "Slack request timed out",
                extra={"timeout": self.timeout},
            )
            return False
        except requests.exceptions.RequestException as e:
            logger.error(
                "Failed to send message to Slack",
                extra={"error": str(e)},
                exc_info=True,
            )
            return False

    def send_text(self, text: str) -> bool:
        """Send a plain text message to Slack."""
        return self.send_message({"text": text})
