from typing import Optional, Sequence

from algorithms.steps import StepRecord


class Playback:
    """Cursor over a step trace.

    Only tracks the index and a playing flag; whoever owns the timer calls
    ``step_forward`` on each tick. Seeking to the same index twice yields
    the same step.
    """

    def __init__(self, steps: Sequence[StepRecord], index: int = 0):
        self.steps = tuple(steps)
        self.playing = False
        self.index = 0
        self.seek(index)

    def __len__(self) -> int:
        return len(self.steps)

    @property
    def current(self) -> Optional[StepRecord]:
        if not self.steps:
            return None
        return self.steps[self.index]

    @property
    def at_start(self) -> bool:
        return self.index == 0

    @property
    def at_end(self) -> bool:
        return not self.steps or self.index == len(self.steps) - 1

    def seek(self, index: int) -> Optional[StepRecord]:
        if not self.steps:
            self.index = 0
        else:
            self.index = max(0, min(index, len(self.steps) - 1))
        return self.current

    def step_forward(self) -> Optional[StepRecord]:
        step = self.seek(self.index + 1)
        if self.at_end:
            self.playing = False
        return step

    def step_back(self) -> Optional[StepRecord]:
        return self.seek(self.index - 1)

    def reset(self) -> None:
        self.playing = False
        self.seek(0)

    def play(self) -> None:
        self.playing = bool(self.steps) and not self.at_end

    def pause(self) -> None:
        self.playing = False
