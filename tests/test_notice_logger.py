"""Tests for StdlibNoticeLogger."""

import logging

from app.services.notice_logger import StdlibNoticeLogger


class TestStdlibNoticeLogger:
    def test_renders_placeholders_from_context(self, caplog):
        with caplog.at_level(logging.ERROR, logger="tests.notices"):
            StdlibNoticeLogger("tests.notices").log(
                "error", "API request failed with status code: {code}", {"code": 503}
            )
        assert caplog.records[0].getMessage() == "API request failed with status code: 503"
        assert caplog.records[0].levelno == logging.ERROR
        assert caplog.records[0].context == {"code": 503}

    def test_warning_severity(self, caplog):
        with caplog.at_level(logging.WARNING, logger="tests.notices"):
            StdlibNoticeLogger("tests.notices").log("warning", "Failed to parse date: {date}", {"date": "x"})
        assert caplog.records[0].levelno == logging.WARNING

    def test_missing_placeholder_keeps_template(self, caplog):
        with caplog.at_level(logging.INFO, logger="tests.notices"):
            StdlibNoticeLogger("tests.notices").log("info", "Value: {missing}")
        assert caplog.records[0].getMessage() == "Value: {missing}"

    def test_unknown_severity_logged_as_error(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="tests.notices"):
            StdlibNoticeLogger("tests.notices").log("critical-ish", "Something")
        assert caplog.records[0].levelno == logging.ERROR
