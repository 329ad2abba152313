"""Battle menus, battle HUD elements, colours, helpers and shared constants for a turn-based RPG."""

__version__ = "0.1.0"