# tools/duration_policy.py
from dataclasses import dataclass


@dataclass(frozen=True)
class WaitDecision:
    actual_wait_seconds: float
    remaining_seconds: float
    is_final: bool


def decide(requested: float, ceiling: float) -> WaitDecision:
    """
    Splits a requested wait against the per-call ceiling.

    A request above the ceiling only makes partial progress in this call: the
    ceiling is waited and the rest is owed to a follow-up call. Anything up to
    and including the ceiling is waited in full.

    Negative requests are not rejected here; callers validate first.
    """
    if requested > ceiling:
        return WaitDecision(
            actual_wait_seconds=ceiling,
            remaining_seconds=requested - ceiling,
            is_final=False,
        )
    return WaitDecision(actual_wait_seconds=requested, remaining_seconds=0.0, is_final=True)


def format_seconds(seconds: float) -> str:
    """Renders seconds for messages: whole numbers without decimals, otherwise up to milliseconds."""
    text = f"{seconds:.3f}".rstrip("0").rstrip(".")
    if text in ("", "0", "-0"):
        # Sub-millisecond values keep their significant digits rather than reading as zero
        return f"{seconds:.3g}" if seconds else "0"
    return text
