"""
Unit tests for the maintenance activity logger.
"""

import logging

from core.logging_config import MaintenanceLogger
from core.middleware.correlation import correlation_id_var


class TestMaintenanceLogger:

    def test_line_carries_correlation_id(self, caplog):
        token = correlation_id_var.set("req-42")
        try:
            with caplog.at_level(logging.INFO, logger="maintenance"):
                MaintenanceLogger("requests").status_updated("M-1001", "pending", "completed")
        finally:
            correlation_id_var.reset(token)

        assert caplog.records[-1].name == "maintenance.requests"
        assert caplog.records[-1].getMessage() == (
            "Status updated | ID: M-1001 | pending -> completed | Correlation: req-42"
        )

    def test_no_correlation_outside_a_request(self, caplog):
        with caplog.at_level(logging.INFO, logger="maintenance"):
            MaintenanceLogger("requests").request_created(
                "M-1011", "Clogged drain", "normal", "Unknown Property"
            )

        assert "Correlation" not in caplog.records[-1].getMessage()
