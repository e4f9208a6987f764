"""
Email notifier for Gargoyle.
"""

import ipaddress
import re
import smtplib
import socket
import ssl
from dataclasses import dataclass, field
from email.errors import MessageError
from email.message import EmailMessage
from email.utils import formatdate, make_msgid
from typing import Any

from gargoyle_email.config import EmailNotifierConfig
from gargoyle_email.core import Notifier
from gargoyle_email.errors import ConstructionError, TransmissionError, TransportSetupError
from gargoyle_email.logging_config import get_logger
from gargoyle_email.mailbox import Mailbox
from gargoyle_email.registry import register_notifier

logger = get_logger(__name__)

_HOSTNAME_LABEL = re.compile(r"^(?!-)[A-Za-z0-9-]{1,63}(?<!-)$")


@dataclass(frozen=True)
class Credentials:
    """Username and password for authenticating against the relay."""
    username: str
    password: str = field(repr=False)


@dataclass(frozen=True)
class OutboundMessage:
    """A single composed email, built fresh for every send."""
    sender: Mailbox
    recipient: Mailbox
    subject: str
    body: str
    email: EmailMessage = field(repr=False, compare=False)

    @classmethod
    def compose(
        cls,
        sender: Mailbox,
        recipient: Mailbox,
        subject: str,
        body: str
    ) -> "OutboundMessage":
        """
        Build a plain-text message.

        Raises:
            ConstructionError: If a header or the body cannot be encoded
        """
        try:
            email = EmailMessage()
            email["From"] = str(sender)
            email["To"] = str(recipient)
            email["Subject"] = subject
            email["Date"] = formatdate(localtime=True)
            email["Message-ID"] = make_msgid(domain=sender.domain)
            email.set_content(body)
        except (MessageError, TypeError, ValueError) as e:
            raise ConstructionError(f"Failed to build a message: {e}") from e

        return cls(sender, recipient, subject, body, email)


@dataclass(frozen=True)
class RelayTransport:
    """
    A TLS connection handle to one relay, bound to credentials.

    No connection is held; each delivery opens and closes its own.
    """
    host: str
    port: int
    credentials: Credentials = field(repr=False)
    context: ssl.SSLContext = field(repr=False, compare=False)

    @classmethod
    def for_relay(cls, host: str, port: int, credentials: Credentials) -> "RelayTransport":
        """
        Validate and resolve the relay and prepare a TLS context.

        Raises:
            TransportSetupError: If the relay is invalid or cannot be resolved
        """
        ascii_host = _ascii_host(host)
        if ascii_host is None:
            raise TransportSetupError(
                f"Failed to create a mailer: invalid relay hostname {host!r}"
            )

        try:
            context = ssl.create_default_context()
            socket.getaddrinfo(ascii_host, port, type=socket.SOCK_STREAM)
        except (OSError, ssl.SSLError) as e:
            raise TransportSetupError(
                f"Failed to create a mailer for relay '{host}': {e}"
            ) from e

        return cls(ascii_host, port, credentials, context)

    def deliver(self, message: OutboundMessage) -> None:
        """
        Authenticate and transmit one message.

        Raises:
            TransmissionError: If the relay rejects the login or the
                envelope, or the connection fails
        """
        try:
            with smtplib.SMTP_SSL(self.host, self.port, context=self.context) as smtp:
                smtp.login(self.credentials.username, self.credentials.password)
                smtp.send_message(message.email)
        except (smtplib.SMTPException, OSError) as e:
            raise TransmissionError(f"Failed to send email via '{self.host}': {e}") from e


def _ascii_host(host: str) -> str | None:
    """Return the relay name in ASCII (IDNA) form, or None if it is invalid."""
    if not host or host != host.strip():
        return None

    try:
        ipaddress.ip_address(host)
        return host
    except ValueError:
        pass

    try:
        ascii_host = host.encode("idna").decode("ascii")
    except UnicodeError:
        return None

    name = ascii_host[:-1] if ascii_host.endswith(".") else ascii_host
    if not name or len(name) > 253:
        return None
    if not all(_HOSTNAME_LABEL.match(label) for label in name.split(".")):
        return None
    return ascii_host


@register_notifier("email")
class EmailNotifier(Notifier):
    """
    Sends notifications via email through an SMTP relay over TLS.

    The message is used as the subject. The diagnostic, if given, is
    used as the body, otherwise the message is repeated there.

    Config:
        from: Sender mailbox, e.g. "The Gargoyle <gargoyle@example.com>"
        to: Recipient mailbox
        relay: SMTP relay hostname
        username: SMTP username
        password: SMTP password
        port: Relay port (default: 465)
    """

    def __init__(self, config: dict[str, Any] | EmailNotifierConfig):
        self.settings = EmailNotifierConfig.model_validate(config)
        super().__init__(self.settings)

    def send(self, message: str, diagnostic: str | None = None) -> None:
        """Send one email for the event."""
        settings = self.settings

        outbound = OutboundMessage.compose(
            settings.sender,
            settings.recipient,
            message,
            diagnostic if diagnostic is not None else message
        )

        credentials = Credentials(settings.username, settings.password.get_secret_value())

        transport = RelayTransport.for_relay(settings.relay, settings.port, credentials)

        logger.info(
            "Sending email notification from %s to %s via %s",
            settings.sender,
            settings.recipient,
            settings.relay
        )
        transport.deliver(outbound)


# Export for dynamic importing
__all__ = ["EmailNotifier"]
