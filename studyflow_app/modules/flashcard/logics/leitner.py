"""
Leitner Engine - Pure box-based spaced repetition logic.

No database access - only calculations based on inputs.

A card lives in one of five boxes. A correct answer moves it up one box
(box 5 is a ceiling, not a terminal state); a wrong answer sends it back to
box 1. The next review is due ``2 ** (box - 1)`` days after the review. The
due date is informational: reviewing early is allowed.
"""
from dataclasses import dataclass
from datetime import datetime, timedelta

MIN_BOX = 1
MAX_BOX = 5


@dataclass(frozen=True)
class LeitnerState:
    box: int
    last_review_date: datetime
    next_review_date: datetime


def clamp_box(box: int) -> int:
    """Bring a stored box value back into range (unknown values start over)."""
    if box is None or box < MIN_BOX:
        return MIN_BOX
    return min(box, MAX_BOX)


def interval_days(box: int) -> int:
    """
    Days until the next review for a card in ``box``.

    Examples:
        >>> [interval_days(b) for b in range(1, 6)]
        [1, 2, 4, 8, 16]
    """
    return 2 ** (clamp_box(box) - 1)


def next_state(box: int, correct: bool, now: datetime) -> LeitnerState:
    """Compute the card state after one review at ``now``."""
    if correct:
        new_box = min(clamp_box(box) + 1, MAX_BOX)
    else:
        new_box = MIN_BOX

    return LeitnerState(
        box=new_box,
        last_review_date=now,
        next_review_date=now + timedelta(days=interval_days(new_box)),
    )
