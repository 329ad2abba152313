"""Small numeric helpers and the state bookkeeping shared by state machines."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TypeVar

from rpgkit.colors import STATE_INVALID

_T = TypeVar("_T", int, float)


@dataclass
class StateMachine:
    """Tracks the current, next and previous state of a state machine."""

    cur_state: int = STATE_INVALID
    next_state: int = STATE_INVALID
    last_state: int = STATE_INVALID

    def set_next_state(self, state: int) -> None:
        """Queue the state to switch to at the end of the current frame."""
        self.next_state = state

    def update_current_state(self, state: int) -> None:
        """Switch to ``state``, remembering the previous one; no-op if unchanged."""
        if self.cur_state == state:
            return
        self.last_state = self.cur_state
        self.cur_state = state


def value_sign(value: int) -> int:
    """Return -1 for a negative integer and +1 otherwise (zero included)."""
    return -1 if value < 0 else 1


def value_sign_f(value: float) -> float:
    """Return -1.0 if the sign bit of ``value`` is set (so -0.0 too), else +1.0."""
    return math.copysign(1.0, value)


def value_lower_limit(value: _T, limit: _T) -> _T:
    """Return ``value``, raised to ``limit`` if it falls below it."""
    return limit if value < limit else value


def value_clamp(value: _T, minimum: _T, maximum: _T) -> _T:
    """Return ``value`` kept within ``minimum`` and ``maximum``."""
    if value < minimum:
        return minimum
    if value > maximum:
        return maximum
    return value


def value_set_linear(value: _T, target: _T, amount: _T) -> _T:
    """Move ``value`` towards ``target`` by ``amount`` without overshooting."""
    if value < target:
        value += amount
        return target if value >= target else value
    if value > target:
        value -= amount
        return target if value <= target else value
    return value


def point_direction(x1: float, y1: float, x2: float, y2: float) -> float:
    """Direction from the first point to the second, in radians in [-pi, pi].

    Screen coordinates are assumed, so a point above has a positive direction.
    """
    return math.atan2(y1 - y2, x2 - x1)


def length_dir_x(length: float, direction: float) -> float:
    """Horizontal component of a vector of ``length`` pointing along ``direction``."""
    return math.cos(direction) * length


def length_dir_y(length: float, direction: float) -> float:
    """Vertical screen component of a vector of ``length`` along ``direction``."""
    return -(math.sin(direction) * length)