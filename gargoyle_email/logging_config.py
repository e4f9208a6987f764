"""
Logger naming for Gargoyle Email.

Handlers and levels belong to the host; records are emitted under the
``gargoyle_email`` namespace.
"""

import logging

_ROOT = "gargoyle_email"


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for a specific module.

    Args:
        name: Module name (typically __name__)

    Returns:
        Logger instance under the package namespace
    """
    if name == _ROOT or name.startswith(f"{_ROOT}."):
        return logging.getLogger(name)

    return logging.getLogger(f"{_ROOT}.{name}")
