"""A two-option Yes/No confirmation window."""

from __future__ import annotations

from rpgkit.colors import STATE_INVALID
from rpgkit.menu import Menu


class ConfirmWindow(Menu):
    """A menu offering "Yes" and "No" side by side."""

    def on_create(self) -> bool:
        """Lay out the window and add its two options."""
        self.initialize_params(STATE_INVALID, 2, 2, 1)
        self.initialize_option_params(0, 0, 0, 10)
        self.add_option(0, 0, "Yes")
        self.add_option(0, 0, "No")
        return True

    def prepare_for_activation(self, state: int, upper_menu: Menu | None = None) -> None:
        """Activate the window, remembering the menu that opened it."""
        super().prepare_for_activation(state)
        self.upper_menu = upper_menu

    def state_process_selection(self) -> bool:
        """Accept the selection; the opening menu reads it from ``sel_option``."""
        return True