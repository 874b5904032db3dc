import pytest

from likelihood import BINS, classify, describe, percent


class TestClassify:

    @pytest.mark.parametrize("p, label", [
        (0.0, "very rare"),
        (0.019999, "very rare"),
        (0.02, "uncommon"),
        (0.079, "uncommon"),
        (0.08, "occasional"),
        (0.2, "somewhat likely"),
        (0.4, "about even"),
        (0.5, "about even"),
        (0.6, "likely"),
        (0.8, "very likely"),
        (0.949, "very likely"),
        (0.95, "near certain"),
        (1.0, "near certain"),
    ])
    def test_bin_edges(self, p, label):
        assert classify(p).label == label

    def test_bins_partition_unit_interval(self):
        assert BINS[0].lower == 0.0
        assert BINS[-1].upper == 1.0
        for prev, nxt in zip(BINS, BINS[1:]):
            assert prev.upper == nxt.lower

    def test_every_point_lands_in_exactly_one_bin(self):
        for i in range(1001):
            p = i / 1000
            hits = [b for b in BINS if b.lower <= p < b.upper or (b is BINS[-1] and p == 1.0)]
            assert len(hits) == 1
            assert classify(p) is hits[0]

    def test_out_of_range_is_clamped(self):
        assert classify(-0.5).label == "very rare"
        assert classify(3).label == "near certain"


class TestDescribe:

    def test_fills_rounded_percent(self):
        assert describe(0.5) == "About 50/50 (~50%). Example: A fair coin toss has p = 50%."

    def test_percent_rounds_half_up(self):
        assert percent(0.125) == 13
        assert percent(0.014) == 1

    def test_rare_example(self):
        text = describe(0.01)
        assert text.startswith("Very rare (~1%)")
