"""
Tests for the server command line.
"""

import pytest

from chuk_mcp_harmony.server import build_parser


class TestBuildParser:
    """Tests for command-line options."""

    def test_defaults(self) -> None:
        """stdio on port 8000, no debug."""
        args = build_parser().parse_args([])
        assert args.transport == "stdio"
        assert args.port == 8000
        assert args.debug is False
        assert args.list_tools is False

    def test_http(self) -> None:
        """http transport with a port."""
        args = build_parser().parse_args(["--transport", "http", "--port", "9001", "--debug"])
        assert args.transport == "http"
        assert args.port == 9001
        assert args.debug is True

    def test_unknown_transport(self) -> None:
        """Only stdio and http are accepted."""
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--transport", "websocket"])
