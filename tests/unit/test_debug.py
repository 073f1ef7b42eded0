"""Tests for debug logging of response bodies."""

import logging

from webdav_api.debug import PREVIEW_SIZE, format_xml, log_body, logger, setup_debug_logging


def test_format_xml_indents():
    """Test that XML bodies are re-indented."""
    out = format_xml(b'<d:multistatus xmlns:d="DAV:"><d:response><d:href>/a</d:href></d:response></d:multistatus>')

    assert out.splitlines()[1] == "  <d:response>", f"unexpected layout:\n{out}"
    assert "    <d:href>/a</d:href>" in out.splitlines()


def test_format_xml_not_xml():
    """Test that non-XML bodies are returned as text."""
    assert format_xml(b"Service Unavailable") == "Service Unavailable"
    assert format_xml("<html><body>") == "<html><body>"


def test_log_body_xml_content_types(caplog):
    """Test that XML bodies are logged formatted, including +xml types."""
    caplog.set_level(logging.DEBUG, logger="webdav_api")

    log_body("Error body", b"<error><message>gone</message></error>", "application/problem+xml")

    assert "  <error>" in caplog.messages
    assert "    <message>gone</message>" in caplog.messages


def test_log_body_preview(caplog):
    """Test that long non-XML bodies are logged as a preview."""
    caplog.set_level(logging.DEBUG, logger="webdav_api")

    log_body("Error body", b"x" * (PREVIEW_SIZE + 5), "text/plain; charset=utf-8")

    assert any(m.startswith(f"  [{PREVIEW_SIZE + 5} bytes, text/plain") for m in caplog.messages)
    assert "  ... (5 more bytes)" in caplog.messages


def test_log_body_disabled(caplog):
    """Test that nothing is logged unless debug is enabled."""
    caplog.set_level(logging.INFO, logger="webdav_api")

    log_body("Multistatus", b"<multistatus/>")

    assert caplog.messages == []


def test_setup_debug_logging_once():
    """Test that repeated setup installs a single handler."""
    try:
        setup_debug_logging()
        setup_debug_logging()

        assert len(logger.handlers) == 1
        assert logger.level == logging.DEBUG
        assert logger.propagate is False
    finally:
        logger.handlers.clear()
        logger.setLevel(logging.NOTSET)
        logger.propagate = True
