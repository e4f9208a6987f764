"""
Pytest configuration and fixtures for Gargoyle Email tests.
"""

import socket
from collections.abc import Iterator
from typing import Any
from unittest.mock import MagicMock, patch

import pytest


@pytest.fixture
def email_config() -> dict[str, Any]:
    """Valid email notifier configuration."""
    return {
        "from": "A <a@x.com>",
        "to": "B <b@x.com>",
        "relay": "smtp.example.com",
        "username": "user",
        "password": "hunter2",
    }


@pytest.fixture
def resolver() -> Iterator[MagicMock]:
    """Patch hostname resolution so any relay name resolves to localhost."""
    with patch("socket.getaddrinfo") as mock_getaddrinfo:
        mock_getaddrinfo.return_value = [
            (socket.AF_INET, socket.SOCK_STREAM, 6, "", ("127.0.0.1", 465))
        ]
        yield mock_getaddrinfo


@pytest.fixture
def smtp(resolver: MagicMock) -> Iterator[MagicMock]:
    """
    Patch the SMTP-over-TLS client with a relay that accepts everything.

    The yielded mock is the client class.
    """
    with patch("smtplib.SMTP_SSL") as mock_smtp:
        session = MagicMock()
        mock_smtp.return_value.__enter__.return_value = session
        mock_smtp.return_value.__exit__.return_value = False
        yield mock_smtp


@pytest.fixture
def smtp_session(smtp: MagicMock) -> MagicMock:
    """The session object used inside the client's ``with`` block."""
    return smtp.return_value.__enter__.return_value
