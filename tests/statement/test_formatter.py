"""Tests for statement text rendering"""

import pytest

from theater_billing.config.defaults import CurrencyParams
from theater_billing.data.models import Invoice, Performance, Play
from theater_billing.errors import UnknownPlayTypeError, UnresolvedPlayIDError
from theater_billing.statement.formatter import StatementFormatter, format_currency


class TestFormatCurrency:
    """Test currency display"""

    @pytest.mark.parametrize("cents, expected", [
        (0, "$0.00"),
        (5, "$0.05"),
        (65000, "$650.00"),
        (173000, "$1,730.00"),
        (123456789, "$1,234,567.89"),
    ])
    def test_us_dollar_format(self, cents, expected):
        assert format_currency(cents) == expected

    def test_negative_amount(self):
        assert format_currency(-1050) == "-$10.50"

    def test_custom_symbol(self):
        assert format_currency(1999, CurrencyParams(symbol="€")) == "€19.99"


class TestStatementFormatter:
    """Test full statement rendering"""

    def test_single_performance_statement(self):
        catalog = {"hamlet": Play(name="Hamlet", type="tragedy")}
        invoice = Invoice(customer="BigCo", performances=(Performance("hamlet", 55),))

        text = StatementFormatter().render(invoice, catalog)

        assert text == (
            "Statement for BigCo\n"
            "  Hamlet: $650.00 (55 seats)\n"
            "Amount owed is $650.00\n"
            "You earned 25 credits\n"
        )

    def test_classic_statement(self, sample_plays, sample_invoice):
        text = StatementFormatter().render(sample_invoice, sample_plays)

        assert text == (
            "Statement for BigCo\n"
            "  Hamlet: $650.00 (55 seats)\n"
            "  As You Like It: $580.00 (35 seats)\n"
            "  Othello: $500.00 (40 seats)\n"
            "Amount owed is $1,730.00\n"
            "You earned 47 credits\n"
        )

    def test_line_order_follows_invoice(self, sample_plays, sample_invoice):
        reordered = Invoice(
            customer=sample_invoice.customer,
            performances=tuple(reversed(sample_invoice.performances)),
        )
        lines = StatementFormatter().render(reordered, sample_plays).splitlines()

        assert lines[1].startswith("  Othello:")
        assert lines[3].startswith("  Hamlet:")
        assert lines[4] == "Amount owed is $1,730.00"
        assert lines[5] == "You earned 47 credits"

    def test_render_is_idempotent(self, sample_plays, sample_invoice):
        formatter = StatementFormatter()
        assert formatter.render(sample_invoice, sample_plays) == formatter.render(sample_invoice, sample_plays)

    def test_empty_invoice(self, sample_plays):
        text = StatementFormatter().render(Invoice(customer="Nobody"), sample_plays)
        assert text == "Statement for Nobody\nAmount owed is $0.00\nYou earned 0 credits\n"

    def test_unknown_type_produces_no_text(self, sample_plays, sample_invoice):
        catalog = dict(sample_plays)
        catalog["othello"] = Play(name="Othello", type="opera")

        text = None
        with pytest.raises(UnknownPlayTypeError):
            text = StatementFormatter().render(sample_invoice, catalog)
        assert text is None

    def test_unresolved_play(self, sample_plays):
        invoice = Invoice(customer="BigCo", performances=(Performance("lear", 40),))
        with pytest.raises(UnresolvedPlayIDError):
            StatementFormatter().render(invoice, sample_plays)
