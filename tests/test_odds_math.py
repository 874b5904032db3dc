"""
Unit tests for the probability / odds / log-odds conversions.
"""
import math

import pytest

from odds_math import (
    clamp_probability,
    comparison_curve,
    log_odds_to_probability,
    logit_curve,
    odds_to_probability,
    probability_to_log_odds,
    probability_to_odds,
    readout,
    round_to_precision,
)


class TestConversions:

    def test_half_is_even_odds(self):
        assert probability_to_odds(0.5) == 1.0
        assert probability_to_log_odds(0.5) == 0.0

    def test_boundaries_saturate(self):
        assert probability_to_odds(1) == math.inf
        assert probability_to_odds(0) == 0
        assert probability_to_log_odds(1) == math.inf
        assert probability_to_log_odds(0) == -math.inf

    def test_outside_unit_interval_saturates(self):
        assert probability_to_odds(1.5) == math.inf
        assert probability_to_odds(-0.2) == 0
        assert probability_to_log_odds(-3) == -math.inf

    def test_known_values(self):
        assert probability_to_odds(0.75) == pytest.approx(3.0)
        assert probability_to_log_odds(0.6) == pytest.approx(0.4054651081)

    @pytest.mark.parametrize("p", [1e-6, 0.01, 0.123, 0.3, 0.5, 0.77, 0.99, 1 - 1e-6])
    def test_sigmoid_inverts_logit(self, p):
        assert abs(log_odds_to_probability(probability_to_log_odds(p)) - p) <= 1e-9

    def test_sigmoid_is_total_and_stable(self):
        assert log_odds_to_probability(0) == 0.5
        assert log_odds_to_probability(1000) == 1.0
        assert log_odds_to_probability(-1000) == 0.0
        assert log_odds_to_probability(math.inf) == 1.0
        assert log_odds_to_probability(-math.inf) == 0.0

    def test_odds_to_probability(self):
        assert odds_to_probability(1.0) == 0.5
        assert odds_to_probability(math.inf) == 1.0
        assert odds_to_probability(0) == 0.0
        assert odds_to_probability(probability_to_odds(0.2)) == pytest.approx(0.2)


class TestRounding:

    def test_three_digits_by_default(self):
        assert round_to_precision(0.40546) == 0.405

    def test_half_rounds_away_from_zero(self):
        assert round_to_precision(0.0005) == 0.001
        assert round_to_precision(-0.0005) == -0.001
        assert round_to_precision(2.675, 2) == 2.68

    def test_non_finite_passes_through(self):
        assert round_to_precision(math.inf) == math.inf
        assert math.isnan(round_to_precision(math.nan))


class TestClamp:

    @pytest.mark.parametrize("raw, expected", [(-1, 0.0), (0.3, 0.3), (4, 1.0), (math.nan, 0.0)])
    def test_clamp(self, raw, expected):
        assert clamp_probability(raw) == expected


class TestChartSeries:

    def test_logit_curve_is_increasing_and_symmetric(self):
        pts = logit_curve()
        ys = [y for _, y in pts]
        assert ys == sorted(ys)
        assert dict(pts)[0.5] == 0.0
        assert dict(pts)[0.1] == pytest.approx(-dict(pts)[0.9])

    def test_comparison_curve_spans_and_caps(self):
        rows = comparison_curve()
        assert rows[0][0] == 0.01
        assert rows[-1][0] == 0.99
        assert len(rows) == 50
        assert max(odds for _, _, odds in rows) == 20.0

    def test_readout_rounds(self):
        assert readout(0.6) == {"probability": 0.6, "odds": 1.5, "log_odds": 0.405}
