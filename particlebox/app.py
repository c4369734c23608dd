"""Command-line entry point and main loop."""

from __future__ import annotations

import random
import sys
from dataclasses import dataclass
from pathlib import Path

import pygame

from particlebox.model import TIMER_UPDATE_FREQ, App, Body, Timer, TimerKind, rng_range
from particlebox.render import Renderer
from particlebox.sim import update
from particlebox.vec import Vec2

FONT_PATH = Path("assets/slkscr.ttf")
STEP_DT = 0.01
MIN_FRAME_MS = 10


@dataclass
class Options:
    obj_count: int = 10
    width: int | None = None
    height: int | None = None

    @property
    def fullscreen(self) -> bool:
        return self.width is None or self.height is None


def _atoi(text: str) -> int:
    text = text.lstrip()
    sign = 1
    if text[:1] in ("+", "-"):
        sign = -1 if text[0] == "-" else 1
        text = text[1:]
    digits = ""
    for ch in text:
        if not ch.isdigit():
            break
        digits += ch
    return sign * int(digits) if digits else 0


def parse_args(argv: list[str]) -> Options:
    """Read ``[count [width height]]``; without both sizes the window is fullscreen."""
    options = Options()
    if len(argv) > 0:
        options.obj_count = _atoi(argv[0])
    if len(argv) > 2:
        options.width = _atoi(argv[1])
        options.height = _atoi(argv[2])
    return options


def init_bodies(count: int, width: int, height: int, rng: random.Random | None = None) -> list[Body]:
    """Create ``count`` circles placed at random inside the window."""
    return [
        Body(
            texture="circle",
            w=20,
            h=20,
            pos=Vec2(rng_range(0, width, rng), rng_range(0, height, rng)),
        )
        for _ in range(max(count, 0))
    ]


def handle_key(app: App, key: int) -> bool:
    """Apply a key press to ``app``; return True when the bodies should be reset."""
    if key == pygame.K_q:
        app.running = False
    elif key == pygame.K_ESCAPE:
        app.pause = not app.pause
    elif key == pygame.K_r:
        return True
    elif key == pygame.K_g:
        app.debug = not app.debug
    elif key == pygame.K_RIGHT:
        app.step = 1
    elif key == pygame.K_LEFT:
        app.step = -1
    return False


def _handle_events(app: App, bodies: list[Body], size: tuple[int, int], rng: random.Random) -> None:
    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            app.running = False
            break
        if event.type == pygame.KEYDOWN:
            if handle_key(app, event.key):
                bodies[:] = init_bodies(app.obj_count, *size, rng)
        elif event.type == pygame.MOUSEBUTTONDOWN:
            app.click = True
        elif event.type == pygame.MOUSEBUTTONUP:
            app.click = False
        elif event.type == pygame.MOUSEMOTION:
            app.mouse_pos = Vec2(*event.pos)


def _run(app: App, bodies: list[Body], renderer: Renderer, rng: random.Random) -> None:
    size = renderer.surface.get_size()
    timers = {kind: Timer() for kind in TimerKind}
    counter = 0
    frame_time_total = 0.0
    fps = 0.0
    clock = Timer()
    clock.start()

    while app.running:
        app.step = 0
        timers[TimerKind.FRAME].start()

        clock.stop()
        dt = clock.ended - clock.started
        clock.started = clock.ended

        _handle_events(app, bodies, size, rng)

        used_dt = STEP_DT
        if not app.pause or app.step:
            app.time_ms += int(1000.0 * dt)
            if app.step == -1:
                used_dt = -used_dt
            timers[TimerKind.UPDATE].start()
            update(app, bodies, used_dt, size[1])
            timers[TimerKind.UPDATE].stop()
            timers[TimerKind.UPDATE].log(counter)
        app.step = 0

        timers[TimerKind.RENDER].start()
        renderer.render(app, bodies, fps)
        pygame.display.flip()
        timers[TimerKind.RENDER].stop()
        timers[TimerKind.RENDER].log(counter)

        timers[TimerKind.FRAME].stop()
        frame_time = timers[TimerKind.FRAME].log(0)

        if frame_time < MIN_FRAME_MS:
            pygame.time.delay(int(MIN_FRAME_MS - frame_time))

        if counter == TIMER_UPDATE_FREQ:
            counter = 0
            frame_time_total /= 100.0
            fps = 1000.0 / frame_time_total if frame_time_total > 0 else 0.0
            frame_time_total = 0.0
        frame_time_total += frame_time
        counter += 1


def main(argv: list[str] | None = None) -> int:
    options = parse_args(sys.argv[1:] if argv is None else argv)

    pygame.init()
    try:
        if options.fullscreen:
            info = pygame.display.Info()
            size = (info.current_w, info.current_h)
            flags = pygame.FULLSCREEN
        else:
            size = (options.width, options.height)
            flags = 0
        screen = pygame.display.set_mode(size, flags)

        rng = random.Random()
        app = App(obj_count=options.obj_count)
        renderer = Renderer(screen, str(FONT_PATH) if FONT_PATH.exists() else None)
        bodies = init_bodies(app.obj_count, *screen.get_size(), rng)

        print("\nrunning :)")
        _run(app, bodies, renderer, rng)
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())