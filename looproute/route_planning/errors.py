"""Mini README: Errors raised by the route planner."""

from __future__ import annotations


class LegRequestFailed(Exception):
    """A walking leg could not be obtained, so no plan was produced.

    ``leg_index`` counts from 1 (centre to A) to 4 (C back to centre) and
    ``error`` is the provider's exception exactly as it was raised.
    """

    def __init__(self, leg_index: int, error: BaseException) -> None:
        super().__init__(f"Walking leg {leg_index} failed: {error}")
        self.leg_index = leg_index
        self.error = error
