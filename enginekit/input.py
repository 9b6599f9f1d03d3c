"""Keyboard and mouse state tracked from window events, queried per frame."""

from __future__ import annotations

import numpy as np

RELEASE = 0
PRESS = 1
REPEAT = 2

MOUSE_BUTTON_LEFT = 0
MOUSE_BUTTON_RIGHT = 1
MOUSE_BUTTON_MIDDLE = 2
MOUSE_BUTTON_COUNT = 7


def _valid_button(button: int) -> bool:
    return 0 <= button < MOUSE_BUTTON_COUNT


class Input:
    """Current and previous-frame input state.

    Window events are fed in through the ``handle_*`` methods; :meth:`update`
    is called once per frame to advance the previous-frame snapshot.
    """

    def __init__(self) -> None:
        self._keys: dict[int, bool] = {}
        self._previous_keys: dict[int, bool] = {}
        self._buttons = [False] * MOUSE_BUTTON_COUNT
        self._previous_buttons = [False] * MOUSE_BUTTON_COUNT
        self._mouse_position = np.zeros(2)
        self._previous_mouse_position = np.zeros(2)
        self._mouse_delta = np.zeros(2)
        self._scroll_delta = 0.0
        self.cursor_locked = False

    def update(self) -> None:
        """Snapshot this frame's state and compute mouse movement since the last update."""
        self._previous_keys = dict(self._keys)
        self._previous_buttons = list(self._buttons)
        self._scroll_delta = 0.0
        self._mouse_delta = self._mouse_position - self._previous_mouse_position
        self._previous_mouse_position = self._mouse_position.copy()

    def handle_key(self, key: int, action: int) -> None:
        self._keys[key] = action != RELEASE

    def handle_mouse_button(self, button: int, action: int) -> None:
        if _valid_button(button):
            self._buttons[button] = action == PRESS

    def handle_cursor(self, x: float, y: float) -> None:
        self._mouse_position = np.array([x, y], dtype=float)

    def handle_scroll(self, x_offset: float, y_offset: float) -> None:
        self._scroll_delta = float(y_offset)

    def is_key_pressed(self, key: int) -> bool:
        return self._keys.get(key, False)

    def is_key_just_pressed(self, key: int) -> bool:
        return self._keys.get(key, False) and not self._previous_keys.get(key, False)

    def is_key_released(self, key: int) -> bool:
        return not self._keys.get(key, False)

    def is_mouse_button_pressed(self, button: int) -> bool:
        return _valid_button(button) and self._buttons[button]

    def is_mouse_button_just_pressed(self, button: int) -> bool:
        return (
            _valid_button(button)
            and self._buttons[button]
            and not self._previous_buttons[button]
        )

    def is_mouse_button_released(self, button: int) -> bool:
        return _valid_button(button) and not self._buttons[button]

    @property
    def mouse_position(self) -> np.ndarray:
        return self._mouse_position.copy()

    @property
    def mouse_delta(self) -> np.ndarray:
        return self._mouse_delta.copy()

    @property
    def scroll_delta(self) -> float:
        return self._scroll_delta