"""
Tests for the per-call wait decision.
"""
import pytest

from tools.duration_policy import WaitDecision, decide, format_seconds


class TestDecide:

    @pytest.mark.parametrize("requested", [0.0, 0.5, 1.0, 99.9, 209.999, 210.0])
    def test_request_within_ceiling_is_final(self, requested):
        decision = decide(requested, 210.0)

        assert decision.is_final is True
        assert decision.actual_wait_seconds == requested
        assert decision.remaining_seconds == 0.0

    @pytest.mark.parametrize("requested", [210.001, 211.0, 500.0, 10_000_000.0])
    def test_request_above_ceiling_waits_ceiling_and_owes_rest(self, requested):
        decision = decide(requested, 210.0)

        assert decision.is_final is False
        assert decision.actual_wait_seconds == 210.0
        assert decision.remaining_seconds == requested - 210.0
        assert decision.remaining_seconds > 0

    @pytest.mark.parametrize("requested,ceiling", [(0, 1), (3, 1), (1, 1), (45.5, 30), (12, 600)])
    def test_actual_wait_is_min_of_request_and_ceiling(self, requested, ceiling):
        assert decide(requested, ceiling).actual_wait_seconds == min(requested, ceiling)

    def test_equal_to_ceiling_is_final_without_remainder(self):
        assert decide(210.0, 210.0) == WaitDecision(210.0, 0.0, True)

    def test_zero_request_is_final_zero_wait(self):
        assert decide(0.0, 210.0) == WaitDecision(0.0, 0.0, True)

    def test_chunked_sequence_for_500_seconds(self):
        first = decide(500.0, 210.0)
        assert first == WaitDecision(210.0, 290.0, False)

        second = decide(first.remaining_seconds, 210.0)
        assert second == WaitDecision(210.0, 80.0, False)

        third = decide(second.remaining_seconds, 210.0)
        assert third == WaitDecision(80.0, 0.0, True)

        assert first.actual_wait_seconds + second.actual_wait_seconds + third.actual_wait_seconds == 500.0

    def test_decide_is_pure(self):
        assert decide(500.0, 210.0) == decide(500.0, 210.0)
        assert decide(12.25, 5.0) == decide(12.25, 5.0)

    def test_fractional_durations_are_not_rounded(self):
        decision = decide(1.25, 1.0)

        assert decision.actual_wait_seconds == 1.0
        assert decision.remaining_seconds == pytest.approx(0.25)

    def test_negative_request_passes_through_unclamped(self):
        decision = decide(-5.0, 210.0)

        assert decision.actual_wait_seconds == -5.0
        assert decision.is_final is True


class TestFormatSeconds:

    @pytest.mark.parametrize("seconds,expected", [
        (0.0, "0"),
        (100.0, "100"),
        (290.0, "290"),
        (0.5, "0.5"),
        (1.25, "1.25"),
        (2.0004, "2"),
        (-5.0, "-5"),
        (-0.0001, "-0.0001"),
        (0.0004, "0.0004"),
        (float("inf"), "inf"),
    ])
    def test_format(self, seconds, expected):
        assert format_seconds(seconds) == expected
