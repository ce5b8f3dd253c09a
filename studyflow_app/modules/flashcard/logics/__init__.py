from .leitner import MAX_BOX, MIN_BOX, LeitnerState, interval_days, next_state
