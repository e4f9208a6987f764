"""
Gargoyle Email - an email notifier for the Gargoyle monitoring scheduler.

This package provides a single notification channel that delivers
alerts as plain-text email through an authenticated SMTP-over-TLS relay.
"""

from gargoyle_email.core import Notifier
from gargoyle_email.errors import (
    ConstructionError,
    DeliveryError,
    DeliveryStage,
    TransmissionError,
    TransportSetupError,
)
from gargoyle_email.mailbox import Mailbox

__version__ = "0.1.0"

__all__ = [
    "ConstructionError",
    "DeliveryError",
    "DeliveryStage",
    "Mailbox",
    "Notifier",
    "TransmissionError",
    "TransportSetupError",
]
