"""
Tests for logger naming.
"""

from gargoyle_email.logging_config import get_logger


class TestGetLogger:
    """Tests for get_logger."""

    def test_module_name_kept(self) -> None:
        """Test that package module names are used as-is."""
        assert get_logger("gargoyle_email.notifiers.email").name == "gargoyle_email.notifiers.email"

    def test_foreign_name_nested(self) -> None:
        """Test that other names are placed under the package logger."""
        assert get_logger("host").name == "gargoyle_email.host"

    def test_package_root(self) -> None:
        """Test that the package logger itself is returned unchanged."""
        assert get_logger("gargoyle_email").name == "gargoyle_email"
