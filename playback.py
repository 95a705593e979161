"""
Cursor over a finished trace.

The engine has already run to completion; playback only moves an index
back and forth over AlgorithmResult.steps. Timers belong to the caller.
"""

from typing import Sequence

from steps import AlgorithmStep


def interval_for_speed(speed: float) -> float:
    """Seconds between automatic advances at ``speed`` steps per second."""
    if speed <= 0:
        raise ValueError(f"Playback speed must be positive, got {speed}.")
    return 1.0 / speed


class StepCursor:
    """
    Current position within a step sequence.

    next() and previous() clamp at the ends and return whether the cursor
    moved, so an auto-advance loop can stop once next() returns False.
    """

    def __init__(self, steps: Sequence[AlgorithmStep]) -> None:
        if not steps:
            raise ValueError("StepCursor needs at least one step.")
        self._steps = tuple(steps)
        self._index = 0

    @property
    def index(self) -> int:
        return self._index

    @property
    def current(self) -> AlgorithmStep:
        return self._steps[self._index]

    @property
    def at_start(self) -> bool:
        return self._index == 0

    @property
    def at_end(self) -> bool:
        return self._index == len(self._steps) - 1

    def next(self) -> bool:
        if self.at_end:
            return False
        self._index += 1
        return True

    def previous(self) -> bool:
        if self.at_start:
            return False
        self._index -= 1
        return True

    def seek(self, index: int) -> AlgorithmStep:
        if not 0 <= index < len(self._steps):
            raise IndexError(f"Step {index} out of range 0..{len(self._steps) - 1}")
        self._index = index
        return self.current

    def reset(self) -> None:
        self._index = 0

    def __len__(self) -> int:
        return len(self._steps)
