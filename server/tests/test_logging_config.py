"""Tests for logging setup and the startup banner."""
import logging
import sys

from config.logging_config import setup_logging
from main import _banner


def _stdout_handlers():
    return [
        h for h in logging.getLogger().handlers
        if isinstance(h, logging.StreamHandler) and h.stream is sys.stdout
    ]


def test_setup_twice_keeps_one_stdout_handler():
    setup_logging("INFO")
    setup_logging("DEBUG")
    assert len(_stdout_handlers()) == 1
    assert logging.getLogger().level == logging.DEBUG
    assert logging.getLogger("httpx").level == logging.WARNING


def test_banner_lines_align_for_any_address():
    banner = _banner("Sahayak Portal Server Starting", [
        "Address: http://192.168.100.200:18080",
        "LLM: gemini-3-flash-preview",
    ])
    widths = {len(line) for line in banner.splitlines()}
    assert len(widths) == 1
