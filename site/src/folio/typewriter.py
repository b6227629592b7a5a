"""Typing animation - phrase typing/deleting state machine and its schedulers.

The animation is an explicit state machine. ``advance`` is a pure transition
that renders one state and returns the next state with the delay before it.
``TypingAnimation`` drives that transition against an injected text surface
and scheduler, keeping exactly one pending step at any time.
"""

import asyncio
import enum
import heapq
import itertools
from dataclasses import dataclass
from typing import Callable, NamedTuple, Protocol


TYPING_INTERVAL_MS = 80
DELETING_INTERVAL_MS = 50
PAUSE_MS = 2000
CURSOR_MARKER = '<span class="cursor"></span>'


class Mode(enum.Enum):
    TYPING = "typing"
    DELETING = "deleting"


@dataclass(frozen=True)
class TypingState:
    phrase_index: int = 0
    cursor: int = 0
    mode: Mode = Mode.TYPING


@dataclass(frozen=True)
class TypingScript:
    """Phrases to cycle through plus the timing used between steps."""

    phrases: tuple[str, ...]
    typing_interval_ms: int = TYPING_INTERVAL_MS
    deleting_interval_ms: int = DELETING_INTERVAL_MS
    pause_ms: int = PAUSE_MS
    cursor_marker: str = CURSOR_MARKER

    def __post_init__(self):
        object.__setattr__(self, "phrases", tuple(self.phrases))
        if not self.phrases:
            raise ValueError("typing animation needs at least one phrase")

    def phrase(self, state: TypingState) -> str:
        return self.phrases[state.phrase_index]


class Step(NamedTuple):
    state: TypingState
    rendered: str
    delay_ms: int


def render(state: TypingState, script: TypingScript) -> str:
    return script.phrase(state)[: state.cursor] + script.cursor_marker


def advance(state: TypingState, script: TypingScript) -> Step:
    """Render ``state`` and compute the state that follows it.

    Typing grows the cursor one character per step. Once the phrase is fully
    shown the next step waits ``pause_ms`` and starts deleting. Deleting shrinks
    the cursor to zero, then typing resumes on the next phrase, wrapping after
    the last one.
    """
    rendered = render(state, script)
    length = len(script.phrase(state))

    if state.mode is Mode.TYPING:
        if state.cursor < length:
            return Step(TypingState(state.phrase_index, state.cursor + 1, Mode.TYPING), rendered, script.typing_interval_ms)
        if length == 0:
            return Step(_next_phrase(state, script), rendered, script.pause_ms)
        return Step(TypingState(state.phrase_index, length - 1, Mode.DELETING), rendered, script.pause_ms)

    if state.cursor > 0:
        return Step(TypingState(state.phrase_index, state.cursor - 1, Mode.DELETING), rendered, script.deleting_interval_ms)
    return Step(_next_phrase(state, script), rendered, script.typing_interval_ms)


def _next_phrase(state: TypingState, script: TypingScript) -> TypingState:
    return TypingState((state.phrase_index + 1) % len(script.phrases), 0, Mode.TYPING)


class TextSurface(Protocol):
    def write(self, markup: str) -> None: ...


class Scheduler(Protocol):
    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> None: ...


# ##################################################################
# virtual clock
# deterministic scheduler; time only moves when tick/run_for is called
class VirtualClock:
    def __init__(self):
        self.now_ms = 0
        self._queue: list[tuple[int, int, Callable[[], None]]] = []
        self._seq = itertools.count()

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> None:
        heapq.heappush(self._queue, (self.now_ms + delay_ms, next(self._seq), callback))

    @property
    def pending(self) -> int:
        return len(self._queue)

    @property
    def next_due(self) -> int | None:
        return self._queue[0][0] if self._queue else None

    def tick(self) -> bool:
        """Jump to the next due callback and run it. Returns False when idle."""
        if not self._queue:
            return False
        due, _, callback = heapq.heappop(self._queue)
        self.now_ms = due
        callback()
        return True

    def run_for(self, duration_ms: int) -> None:
        end = self.now_ms + duration_ms
        while self._queue and self._queue[0][0] <= end:
            self.tick()
        self.now_ms = end


# ##################################################################
# asyncio scheduler
# schedules steps as event loop timers
class AsyncioScheduler:
    def __init__(self, loop: asyncio.AbstractEventLoop | None = None):
        self.loop = loop or asyncio.get_running_loop()

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> None:
        self.loop.call_later(delay_ms / 1000, callback)


class TypingAnimation:
    """Cycles a surface through the phrases of a script forever.

    There is no stop: the animation lives as long as its scheduler does.
    """

    def __init__(self, surface: TextSurface, script: TypingScript, scheduler: Scheduler):
        self.surface = surface
        self.script = script
        self.scheduler = scheduler
        self._state = TypingState()

    @property
    def state(self) -> TypingState:
        """The state the next step will render."""
        return self._state

    def start(self) -> None:
        self._step()

    def _step(self) -> None:
        step = advance(self._state, self.script)
        self.surface.write(step.rendered)
        self._state = step.state
        self.scheduler.call_later(step.delay_ms, self._step)


@dataclass(frozen=True)
class Frame:
    text: str
    delay_ms: int


class FrameRecorder:
    def __init__(self):
        self.writes: list[str] = []

    def write(self, markup: str) -> None:
        self.writes.append(markup)


def record_cycle(script: TypingScript) -> list[Frame]:
    """Run one full period of the animation on a virtual clock.

    The returned frames, replayed in a loop, reproduce the animation exactly:
    the period ends once the state machine is back at its initial state.
    """
    clock = VirtualClock()
    recorder = FrameRecorder()
    animation = TypingAnimation(recorder, script, clock)
    animation.start()

    frames = []
    while True:
        frames.append(Frame(recorder.writes[-1], clock.next_due - clock.now_ms))
        if animation.state == TypingState():
            return frames
        clock.tick()
