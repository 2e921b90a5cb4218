"""Tests for market analysis and strategy recommendations."""

import numpy as np
import pytest

from simplioptions.market.analysis import (
    ANALYSIS_RECOMMENDATIONS,
    RISK_CONSIDERATIONS,
    build_market_analysis,
    recommend_strategies,
)
from simplioptions.market.errors import InvalidRequestError
from simplioptions.market.models import Quote
from simplioptions.market.options import calculate_greeks


def _quote(price: float = 100.0, notice: str | None = None) -> Quote:
    return Quote(
        symbol="AAPL",
        price=price,
        change=0.0,
        change_percent=0.0,
        volume=1,
        mock_data_notice=notice,
    )


class TestBuildMarketAnalysis:
    def test_indicator_ranges(self):
        for seed in range(20):
            analysis = build_market_analysis(_quote(), rng=np.random.default_rng(seed))
            indicators = analysis["technicalIndicators"]
            averages = indicators["movingAverages"]
            volatility = analysis["volatility"]
            sentiment = analysis["sentiment"]

            assert 45 <= indicators["rsi"] <= 75
            assert -1 <= indicators["macd"] <= 1
            assert 98 <= averages["sma20"] <= 102
            assert 96 <= averages["sma50"] <= 104
            assert 99 <= averages["ema12"] <= 101
            assert 0.25 <= volatility["historical"] <= 0.45
            assert 0.30 <= volatility["implied"] <= 0.45
            assert 0 <= volatility["percentile"] < 100
            assert 20 <= sentiment["bullish"] < 80
            assert 10 <= sentiment["bearish"] < 50
            assert 10 <= sentiment["neutral"] < 40

    def test_support_and_resistance(self):
        analysis = build_market_analysis(_quote(), rng=np.random.default_rng(0))
        assert analysis["symbol"] == "AAPL"
        assert analysis["currentPrice"] == 100.0
        assert analysis["technicalIndicators"]["support"] == 95.0
        assert analysis["technicalIndicators"]["resistance"] == 105.0
        assert analysis["recommendations"] == list(ANALYSIS_RECOMMENDATIONS)

    def test_seeded_generator_is_reproducible(self):
        first = build_market_analysis(_quote(), rng=np.random.default_rng(7))
        second = build_market_analysis(_quote(), rng=np.random.default_rng(7))
        assert first == second

    def test_mock_notice_propagates(self):
        analysis = build_market_analysis(_quote(notice="simulated"), rng=np.random.default_rng(0))
        assert analysis["mockDataNotice"] == "simulated"

    def test_live_quote_has_no_notice(self):
        analysis = build_market_analysis(_quote(), rng=np.random.default_rng(0))
        assert "mockDataNotice" not in analysis


class TestRecommendStrategies:
    def test_bullish_playbooks(self):
        result = recommend_strategies(_quote(), direction="up", timeframe="medium", confidence=70, amount=1000)

        long_call, bull_spread, covered_call = result["strategies"]
        assert [s["id"] for s in result["strategies"]] == ["1", "2", "3"]
        assert long_call["name"] == "Long Call"
        assert long_call["description"] == "Buy a call option to profit if AAPL rises above $105.00"
        assert long_call["maxCost"] == 100.0
        assert long_call["maxProfit"] == "Unlimited"
        assert long_call["breakEven"] == 101.0
        assert long_call["probability"] == 70
        assert bull_spread["maxCost"] == 50.0
        assert bull_spread["maxProfit"] == 150.0
        assert bull_spread["breakEven"] == 100.5
        assert bull_spread["probability"] == 80
        assert covered_call["maxCost"] == 10000.0
        assert covered_call["breakEven"] == 99.2
        assert covered_call["strategyType"] == "income"

    def test_bearish_playbooks(self):
        result = recommend_strategies(_quote(), direction="down", timeframe="short", confidence=70, amount=1000)

        long_put, bear_spread, protective_put = result["strategies"]
        assert [s["name"] for s in result["strategies"]] == ["Long Put", "Bear Put Spread", "Protective Put"]
        assert long_put["description"] == "Buy a put option to profit if AAPL falls below $95.00"
        assert long_put["maxProfit"] == 10000.0
        assert long_put["breakEven"] == 99.0
        assert bear_spread["technicalDescription"] == "Long 1 AAPL put + Short 1 AAPL put (lower strike)"
        assert protective_put["maxCost"] == 10050.0
        assert protective_put["maxProfit"] == "Unlimited"
        assert protective_put["probability"] == 90
        assert result["marketAnalysis"]["marketSentiment"] == "bearish"

    @pytest.mark.parametrize("direction", ["sideways", "neutral", "flat"])
    def test_other_directions_are_neutral(self, direction):
        result = recommend_strategies(_quote(), direction=direction, timeframe="long", confidence=70, amount=1000)

        names = [s["name"] for s in result["strategies"]]
        assert names == ["Cash Secured Put", "Iron Condor", "Butterfly Spread"]
        assert result["strategies"][1]["breakEven"] == 100.0
        assert result["strategies"][2]["probability"] == 95
        assert result["marketAnalysis"]["marketSentiment"] == "neutral"

    def test_probability_capped(self):
        result = recommend_strategies(_quote(), direction="up", timeframe="medium", confidence=99, amount=1000)
        assert [s["probability"] for s in result["strategies"]] == [80, 85, 90]

    @pytest.mark.parametrize("timeframe, days", [("short", 7), ("medium", 30), ("long", 90), ("someday", 30)])
    def test_timeframe_prices_greeks(self, timeframe, days):
        result = recommend_strategies(
            _quote(), direction="up", timeframe=timeframe, confidence=70, amount=1000, volatility=0.4
        )

        assert result["marketAnalysis"]["timeToExpiry"] == days / 365
        expected = calculate_greeks(100.0, 105.0, days / 365, 0.4).to_dict()
        assert result["strategies"][0]["greeks"] == expected

    def test_default_volatility(self):
        result = recommend_strategies(_quote(), direction="up", timeframe="medium", confidence=70, amount=1000)
        assert result["marketAnalysis"]["volatility"] == 0.3
        assert result["marketAnalysis"]["riskFreeRate"] == 0.05

    def test_market_analysis_block(self):
        result = recommend_strategies(_quote(), direction="up", timeframe="medium", confidence=70, amount=1000)

        analysis = result["marketAnalysis"]
        assert analysis["currentPrice"] == 100.0
        assert analysis["marketSentiment"] == "bullish"
        assert analysis["recommendedStrategies"] == 3
        assert analysis["riskConsiderations"] == list(RISK_CONSIDERATIONS)
        assert result["timestamp"]

    def test_cheap_stock_strikes_stay_positive(self):
        """Strikes below the current price are floored instead of failing the Greeks."""
        result = recommend_strategies(
            _quote(price=3.0), direction="down", timeframe="medium", confidence=70, amount=500
        )

        for strategy in result["strategies"]:
            assert strategy["greeks"]["delta"] > 0

    @pytest.mark.parametrize("amount, volatility", [(0, None), (-100, None), (1000, -0.2)])
    def test_rejects_non_positive_inputs(self, amount, volatility):
        with pytest.raises(InvalidRequestError):
            recommend_strategies(
                _quote(), direction="up", timeframe="medium", confidence=70, amount=amount, volatility=volatility
            )

    def test_mock_notice_propagates(self):
        result = recommend_strategies(
            _quote(notice="simulated"), direction="up", timeframe="medium", confidence=70, amount=1000
        )
        assert result["mockDataNotice"] == "simulated"
