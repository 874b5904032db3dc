import pytest

from controller import (
    StudySession,
    comparison_probability,
    simulation_probability,
    slider_probability,
)


class TestInputSanitizing:

    @pytest.mark.parametrize("raw, expected", [("0.3", 0.3), ("-1", 0.0), ("2", 1.0), ("abc", 0.0)])
    def test_slider(self, raw, expected):
        assert slider_probability(raw) == expected

    @pytest.mark.parametrize("raw, expected", [("0.3", 0.3), ("-0.1", 0.01), ("abc", 0.01), ("1.2", 0.99), ("1", 1.0)])
    def test_comparison(self, raw, expected):
        assert comparison_probability(raw) == expected

    @pytest.mark.parametrize("raw, expected", [("0.3", 0.3), (None, 0.5), ("", 0.5), ("0", 0.01), ("1", 0.99)])
    def test_simulation(self, raw, expected):
        assert simulation_probability(raw) == expected


class TestStudySession:

    def test_new_questions_replaces_state(self, rng):
        st = StudySession(rng=rng)
        first = st.new_questions()
        st.record_answer(0, "0.1")
        second = st.new_questions(3)
        assert second is not first
        assert len(second) == 3
        assert st.answers == {}

    def test_record_answer_bounds(self, rng):
        st = StudySession(rng=rng)
        st.new_questions(2)
        assert st.record_answer(1, "True") is True
        assert st.record_answer(2, "x") is False
        assert st.record_answer(-1, "x") is False

    def test_check_uses_recorded_answers(self, rng):
        st = StudySession(rng=rng)
        qs = st.new_questions(5)
        for i, q in enumerate(qs):
            st.record_answer(i, str(q.expected_answer))
        result = st.check()
        assert result.correct_count == 5
        assert st.last_grade is result

    def test_check_with_explicit_answers(self, rng):
        st = StudySession(rng=rng)
        st.new_questions(5)
        result = st.check({1: "True"})
        assert result.per_question[1] is True
        assert result.correct_count == 1

    def test_simulate_sanitizes_and_stores(self, rng):
        st = StudySession(rng=rng)
        res = st.simulate("1", "50")
        assert res.probability == 0.99
        assert res.trial_count == 50
        assert st.simulation is res

    def test_logit_view(self):
        view = StudySession().logit_view("0.5")
        assert view["probability"] == 0.5
        assert view["odds"] == 1.0
        assert view["log_odds"] == 0.0
        assert view["likelihood"] == "about even"
        assert view["marker"] == {"x": 0.5, "y": 0.0}

    def test_logit_view_at_certainty_is_json_safe(self):
        view = StudySession().logit_view("1")
        assert view["odds"] == "Infinity"
        assert view["log_odds"] == "Infinity"
        assert view["likelihood"] == "near certain"

    def test_comparison_view_caps_odds_marker(self):
        view = StudySession().comparison_view("0.99")
        assert view["odds"] == 99.0
        assert view["odds_marker"] == {"x": 0.99, "y": 20.0}
        assert "log_odds" not in view
