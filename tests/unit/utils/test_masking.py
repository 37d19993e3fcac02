"""Test the masking utility functions."""

from unittest.mock import MagicMock

from fogbugz_client.utils.logging import log_config_param, mask_sensitive


class TestMaskSensitive:
    """Test the mask_sensitive function."""

    def test_none_value(self):
        """Test masking None value."""
        assert mask_sensitive(None) == "Not Provided"
        assert mask_sensitive("") == "Not Provided"

    def test_short_value(self):
        """Test masking short value."""
        assert mask_sensitive("abc") == "***"
        assert mask_sensitive("abcdefgh", keep_chars=4) == "********"

    def test_normal_value(self):
        """Test masking normal value."""
        assert mask_sensitive("abcdefghijkl", keep_chars=2) == "ab********kl"
        assert mask_sensitive("abcdefghijkl") == "abcd****ijkl"


class TestLogConfigParam:
    """Test the log_config_param function."""

    def test_normal_param(self):
        """Test logging normal parameter."""
        mock_logger = MagicMock()
        log_config_param(mock_logger, "URL", "https://zzz.fogbugz.com")
        mock_logger.info.assert_called_once_with("FogBugz URL: https://zzz.fogbugz.com")

    def test_missing_param(self):
        mock_logger = MagicMock()
        log_config_param(mock_logger, "username", None)
        mock_logger.info.assert_called_once_with("FogBugz username: Not Provided")

    def test_sensitive_param(self):
        """Test that sensitive values are masked."""
        mock_logger = MagicMock()
        log_config_param(mock_logger, "password", "Password1234", sensitive=True)
        mock_logger.info.assert_called_once_with("FogBugz password: Pass****1234")
