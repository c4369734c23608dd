"""Shared state: bodies, application flags, frame timers and random helpers."""

from __future__ import annotations

import random
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable

from particlebox.vec import Vec2

# Timer durations only refresh every this many frames so readouts stay legible.
TIMER_UPDATE_FREQ = 50


@dataclass
class Body:
    """A simulated object."""

    texture: str = "circle"
    pos: Vec2 = field(default_factory=Vec2)
    vel: Vec2 = field(default_factory=Vec2)
    acc: Vec2 = field(default_factory=Vec2)
    ang_vel: float = 0.0
    rot: float = 0.0
    r: float = 0.0
    w: float = 0.0
    h: float = 0.0
    m: float = 0.0


@dataclass
class App:
    """Global application state."""

    time_ms: int = 0
    step: int = 0
    running: bool = True
    pause: bool = False
    debug: bool = True
    click: bool = False
    mouse_pos: Vec2 = field(default_factory=Vec2)
    obj_count: int = 10


class TimerKind(Enum):
    UPDATE = 0
    RENDER = 1
    FRAME = 2


@dataclass
class Timer:
    """Measures a section of a frame in milliseconds."""

    clock: Callable[[], float] = time.perf_counter
    started: float = 0.0
    ended: float = 0.0
    duration: float = 0.0

    def start(self) -> None:
        self.started = self.clock()

    def stop(self) -> None:
        self.ended = self.clock()

    def log(self, counter: int) -> float:
        """Refresh ``duration`` on every TIMER_UPDATE_FREQ'th frame and return it."""
        if counter % TIMER_UPDATE_FREQ == 0:
            self.duration = 1000.0 * (self.ended - self.started)
        return self.duration


def rng_range(low: int, high: int, rng: random.Random | None = None) -> int:
    """Random integer in the inclusive range [low, high]."""
    if high < low:
        raise ValueError(f"empty range: {low}..{high}")
    return (rng or random).randint(low, high)