"""
Delivery error taxonomy for Gargoyle notifiers.

Every failed delivery is reported as a DeliveryError tagged with the
stage that failed, so callers can tell configuration problems apart
from transient network failures.
"""

from enum import Enum


class DeliveryStage(str, Enum):
    """Stage of a delivery attempt at which a failure occurred."""
    CONSTRUCTION = "construction"
    TRANSPORT_SETUP = "transport_setup"
    TRANSMISSION = "transmission"


class DeliveryError(Exception):
    """
    Base class for all delivery failures.

    Attributes:
        stage: The stage at which delivery failed
        retryable: Whether a later attempt could plausibly succeed
    """

    stage: DeliveryStage
    retryable: bool = False

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class ConstructionError(DeliveryError):
    """The outbound message could not be built from the given input."""
    stage = DeliveryStage.CONSTRUCTION


class TransportSetupError(DeliveryError):
    """The relay could not be resolved or the transport not initialized."""
    stage = DeliveryStage.TRANSPORT_SETUP


class TransmissionError(DeliveryError):
    """The relay rejected the message or the connection failed mid-send."""
    stage = DeliveryStage.TRANSMISSION
    retryable = True
