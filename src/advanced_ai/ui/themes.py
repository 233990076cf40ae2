"""Theme definitions for the TUI.

This module hides the color palettes behind the dark/light toggle.
To add a theme, define it here and register it in the app.
"""

from textual.theme import Theme

ADVANCED_DARK = Theme(
    name="advanced-dark",
    primary="#4a4a6a",      # User bubbles and buttons
    secondary="#7a7aa8",    # AI accent
    accent="#b0b0b0",       # System notices
    foreground="#e0e0e0",
    background="#1a1a2e",
    surface="#2a2a3a",      # AI bubbles, inputs
    panel="#3a3a4a",        # System bubbles, settings dialog
    success="#8fd19e",
    warning="#f0c674",
    error="#e57373",
    dark=True,
    variables={
        "border": "#555555",
        "border-blurred": "#3a3a4a",
        "input-cursor-background": "#e0e0e0",
        "input-cursor-foreground": "#1a1a2e",
        "text-muted": "#b0b0b0",
        "footer-background": "#1a1a2e",
        "footer-key-foreground": "#e0e0e0",
        "scrollbar": "#3a3a4a",
        "scrollbar-background": "#1a1a2e",
    },
)

ADVANCED_LIGHT = Theme(
    name="advanced-light",
    primary="#4a4a6a",
    secondary="#5c5c8a",
    accent="#555555",
    foreground="#333333",
    background="#f4f4f4",
    surface="#ffffff",
    panel="#e4e4ea",
    success="#2e7d32",
    warning="#b26a00",
    error="#c62828",
    dark=False,
    variables={
        "border": "#bbbbbb",
        "border-blurred": "#dddddd",
        "text-muted": "#666666",
        "footer-background": "#f4f4f4",
        "scrollbar": "#d0d0d8",
        "scrollbar-background": "#f4f4f4",
    },
)

THEMES = (ADVANCED_DARK, ADVANCED_LIGHT)
