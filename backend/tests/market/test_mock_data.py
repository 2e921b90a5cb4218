"""Tests for MockDataSynthesizer."""

import numpy as np
import pytest

from simplioptions.market.mock_data import REFERENCE_SYMBOLS, MockDataSynthesizer
from simplioptions.market.mock_seed import MOCK_QUOTES
from simplioptions.market.models import FundamentalKind

STATEMENT_KINDS = [
    FundamentalKind.INCOME_STATEMENT,
    FundamentalKind.BALANCE_SHEET,
    FundamentalKind.CASH_FLOW,
    FundamentalKind.EARNINGS,
]


class TestMockQuotes:
    """Unit tests for mock quote synthesis."""

    def test_curated_aapl(self):
        """Test that AAPL gets its hand-curated figures."""
        quote = MockDataSynthesizer().quote("AAPL")
        assert quote.symbol == "AAPL"
        assert quote.price == 175.25
        assert quote.change == 0.75
        assert quote.change_percent == 0.43
        assert quote.volume == 12345678

    def test_curated_quotes_are_deterministic(self):
        """Repeated calls for a curated symbol agree on every figure."""
        synth = MockDataSynthesizer()
        first, second = synth.quote("TSLA"), synth.quote("TSLA")
        assert (first.price, first.change, first.change_percent, first.volume) == (
            second.price,
            second.change,
            second.change_percent,
            second.volume,
        )

    @pytest.mark.parametrize("symbol", sorted(MOCK_QUOTES))
    def test_every_curated_symbol(self, symbol):
        """Test that each allow-listed symbol maps to its table row."""
        price, change, change_percent, volume = MOCK_QUOTES[symbol]
        quote = MockDataSynthesizer().quote(symbol)
        assert (quote.price, quote.change, quote.change_percent, quote.volume) == (
            price,
            change,
            change_percent,
            volume,
        )

    def test_mock_quote_carries_no_notice(self):
        """The synthesizer leaves tagging to the caller."""
        assert MockDataSynthesizer().quote("AAPL").mock_data_notice is None

    def test_unknown_symbol_within_bounds(self):
        """Synthesized figures respect the documented ranges."""
        synth = MockDataSynthesizer(seed=7)
        for _ in range(500):
            quote = synth.quote("ZZZZ")
            assert quote.symbol == "ZZZZ"
            assert 20.0 <= quote.price <= 320.0
            assert 100_000 <= quote.volume < 5_100_000
            # |change| <= 0.5 * 5% of price, plus rounding slack
            assert abs(quote.change) <= quote.price * 0.025 + 0.01

    def test_unknown_symbol_change_percent_consistent(self):
        """changePercent is derived from change and price."""
        quote = MockDataSynthesizer(seed=3).quote("ZZZZ")
        assert quote.change_percent == pytest.approx(quote.change / quote.price * 100, abs=0.05)

    def test_unknown_symbol_not_reproducible(self):
        """Unknown-symbol quotes are drawn fresh on every call."""
        synth = MockDataSynthesizer(seed=11)
        prices = {synth.quote("ZZZZ").price for _ in range(20)}
        assert len(prices) > 1

    def test_injected_rng_is_used(self):
        """Two synthesizers with identically seeded generators agree."""
        a = MockDataSynthesizer(rng=np.random.default_rng(42))
        b = MockDataSynthesizer(rng=np.random.default_rng(42))
        assert a.quote("ZZZZ").price == b.quote("ZZZZ").price


class TestMockFundamentals:
    """Unit tests for mock financial statements."""

    def test_reference_overview(self):
        overview = MockDataSynthesizer().fundamental("AAPL", FundamentalKind.OVERVIEW)
        assert overview["Symbol"] == "AAPL"
        assert overview["Name"] == "Apple Inc"

    def test_unknown_overview_is_templated(self):
        overview = MockDataSynthesizer().fundamental("ZZZZ", FundamentalKind.OVERVIEW)
        assert overview["Symbol"] == "ZZZZ"
        assert overview["Name"] == "ZZZZ Corporation"
        assert overview["PERatio"] == "20.0"

    @pytest.mark.parametrize("kind", STATEMENT_KINDS)
    def test_reference_statements_are_populated(self, kind):
        payload = MockDataSynthesizer().fundamental("TSLA", kind)
        assert payload["symbol"] == "TSLA"
        assert payload[kind.marker_field]

    @pytest.mark.parametrize("kind", STATEMENT_KINDS)
    def test_unknown_statements_are_empty(self, kind):
        payload = MockDataSynthesizer().fundamental("ZZZZ", kind)
        assert payload["symbol"] == "ZZZZ"
        assert payload[kind.marker_field] == []

    def test_payloads_are_independent_copies(self):
        """Mutating one mock payload must not leak into the next."""
        synth = MockDataSynthesizer()
        first = synth.fundamental("AAPL", FundamentalKind.INCOME_STATEMENT)
        first["annualReports"][0]["netIncome"] = "0"
        second = synth.fundamental("AAPL", FundamentalKind.INCOME_STATEMENT)
        assert second["annualReports"][0]["netIncome"] == "95000000000"

    def test_reference_symbols(self):
        assert REFERENCE_SYMBOLS == {"AAPL", "TSLA"}
