"""Tests for Config."""

from unittest.mock import patch

import pytest

from kubekey.config import Config
from kubekey.output import Verbosity


class TestConfig:
    """Test cases for Config class."""

    def test_get_default(self):
        """Test default values for unset variables."""
        with patch.dict("os.environ", {}, clear=True):
            assert Config.get("KUBEKEY_UNSET", "fallback") == "fallback"
            assert Config.get("KUBEKEY_UNSET") == ""

    def test_get_required(self):
        """Test required variables raise when unset."""
        with patch.dict("os.environ", {}, clear=True):
            with pytest.raises(ValueError, match="KUBEKEY_REQUIRED is not set"):
                Config.get("KUBEKEY_REQUIRED", required=True)

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("quiet", Verbosity.QUIET),
            ("VERBOSE", Verbosity.VERBOSE),
            ("normal", Verbosity.NORMAL),
            ("loud", Verbosity.NORMAL),
        ],
    )
    def test_verbosity(self, value, expected):
        """Test KUBEKEY_VERBOSITY parsing."""
        with patch.dict("os.environ", {"KUBEKEY_VERBOSITY": value}):
            assert Config.verbosity() == expected

    def test_verbosity_unset(self):
        """Test the default verbosity."""
        with patch.dict("os.environ", {}, clear=True):
            assert Config.verbosity() == Verbosity.NORMAL
