from __future__ import annotations

from abc import ABC, abstractmethod


class MessagingError(RuntimeError):
    """Raised when the messaging provider does not accept an outbound message."""


class Messenger(ABC):
    """Outbound SMS delivery."""

    @abstractmethod
    async def send_message(self, to: str, body: str) -> str:
        """Send `body` to `to` and return the provider's message id.

        Raises:
            MessagingError: If the provider rejects the message or cannot be reached.
        """
