"""
Core notifier interface for Gargoyle.

The host scheduler holds any channel as "a notifier" and only ever
calls it through the contract defined here.
"""

from abc import ABC, abstractmethod
from typing import Any

from gargoyle_email.errors import DeliveryError
from gargoyle_email.logging_config import get_logger

logger = get_logger(__name__)


class Notifier(ABC):
    """
    Base class for all notifiers.

    Notifiers deliver an alert through one channel.
    """

    def __init__(self, config: Any):
        """
        Initialize the notifier with configuration.

        Args:
            config: Type-specific configuration
        """
        self.config = config

    @abstractmethod
    def send(self, message: str, diagnostic: str | None = None) -> None:
        """
        Deliver a notification.

        Args:
            message: Short human-readable summary of the event
            diagnostic: Optional longer explanation of the event

        Raises:
            DeliveryError: If any stage of the delivery fails
        """
        raise NotImplementedError

    def notify(self, message: str, diagnostic: str | None = None) -> str | None:
        """
        Deliver a notification, flattening failures to a description.

        Args:
            message: Short human-readable summary of the event
            diagnostic: Optional longer explanation of the event

        Returns:
            None if the notification was delivered, otherwise a non-empty
            description of what failed
        """
        try:
            self.send(message, diagnostic)
        except DeliveryError as e:
            logger.error(
                "%s failed at %s stage: %s",
                type(self).__name__,
                e.stage.value,
                e
            )
            return str(e) or f"{e.stage.value} failed"
        return None
