"""Per-step physics update."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import islice

from particlebox.model import App, Body
from particlebox.vec import Vec2

GRAVITY = Vec2(0.0, 500.0)


def update(app: App, bodies: Iterable[Body], dt: float, window_height: float) -> None:
    """Advance the first ``app.obj_count`` bodies by ``dt`` seconds, bouncing off the floor."""
    for body in islice(bodies, app.obj_count):
        body.pos = body.pos + body.vel * dt
        body.vel = body.vel + GRAVITY * dt

        if body.pos.y + body.h > window_height:
            body.pos = Vec2(body.pos.x, window_height - body.h)
            body.vel = Vec2(body.vel.x, -body.vel.y)