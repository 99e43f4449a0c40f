"""Tests for structured logging around statement generation."""

import io

import orjson
import pytest
from structlog.testing import capture_logs

from theater_billing.data.models import Invoice, Performance
from theater_billing.engine import StatementEngine
from theater_billing.errors import ConfigurationError, UnresolvedPlayIDError
from theater_billing.logging.config import configure_logging, get_billing_logger


class TestBillingLogging:
    """Statement engine log entries."""

    def test_statement_rendered_is_logged(self, sample_plays, sample_invoice):
        with capture_logs() as cap_logs:
            engine = StatementEngine()
            engine.statement(sample_invoice, sample_plays)

        entries = [e for e in cap_logs if e["event"] == "Statement rendered"]
        assert len(entries) == 1
        entry = entries[0]
        assert entry["log_level"] == "info"
        assert entry["subsystem"] == "billing"
        assert entry["customer"] == "BigCo"
        assert entry["performance_count"] == 3
        assert entry["total_amount"] == 173000
        assert entry["total_credits"] == 47

    def test_failure_is_logged(self, sample_plays):
        invoice = Invoice(customer="BigCo", performances=(Performance("lear", 10),))

        with capture_logs() as cap_logs:
            engine = StatementEngine()
            with pytest.raises(UnresolvedPlayIDError):
                engine.statement(invoice, sample_plays)

        entries = [e for e in cap_logs if e["event"] == "Statement generation failed"]
        assert len(entries) == 1
        assert entries[0]["log_level"] == "error"
        assert entries[0]["error"] == "unknown play: lear"

    def test_invalid_configuration_is_logged(self, tmp_path):
        with capture_logs() as cap_logs:
            with pytest.raises(ConfigurationError):
                StatementEngine(config_dir=tmp_path, overrides={"tragedy": {"base": -1}})

        entries = [e for e in cap_logs if e["event"] == "Pricing configuration validation failed"]
        assert len(entries) == 1
        assert entries[0]["errors"] == ["tragedy.base: Must be a non-negative integer (got: -1)"]

    def test_billing_logger_binds_context(self):
        with capture_logs() as cap_logs:
            get_billing_logger("test", run_id="abc").info("hello")

        assert cap_logs == [{"event": "hello", "log_level": "info", "subsystem": "billing", "run_id": "abc"}]


class TestConfigureLogging:
    """configure_logging output."""

    def test_json_entries_written_to_stream(self):
        buf = io.StringIO()
        configure_logging(level="DEBUG", format_json=True, stream=buf)
        get_billing_logger("theater_billing.test").info("Statement rendered", customer="BigCo")

        entry = orjson.loads(buf.getvalue().splitlines()[-1])
        assert entry["event"] == "Statement rendered"
        assert entry["level"] == "info"
        assert entry["logger"] == "theater_billing.test"
        assert entry["subsystem"] == "billing"
        assert entry["customer"] == "BigCo"
        assert "timestamp" in entry

    def test_level_filters_entries(self):
        buf = io.StringIO()
        configure_logging(level="WARNING", stream=buf)
        get_billing_logger("theater_billing.test").info("hidden")
        get_billing_logger("theater_billing.test").warning("shown")

        output = buf.getvalue()
        assert "hidden" not in output
        assert "shown" in output
