"""Theme definitions for the TUI.

This module hides the design decisions about:
- Color palettes and visual appearance
- Theme variables (borders, scrollbars, etc.)

To add a new theme, define it here and register in the app.
"""

from textual.theme import Theme

# Dark theme built around Groq's orange accent
EMBER = Theme(
    name="ember",
    primary="#f55036",      # Orange - user bubbles, focus
    secondary="#8fb8de",    # Steel blue - assistant accent
    accent="#ffd166",       # Amber - highlights
    foreground="#e6e1dc",
    background="#121212",
    success="#7bc47f",
    warning="#f4a259",
    error="#e5484d",
    surface="#1c1b1a",
    panel="#171615",
    dark=True,
    variables={
        "border": "#3a3633",
        "border-blurred": "#2a2725",
        "scrollbar": "#2a2725",
        "scrollbar-hover": "#3a3633",
        "scrollbar-active": "#f55036",
        "footer-key-foreground": "#ffd166",
        "text-muted": "#8a837d",
        "input-selection-background": "#f55036 30%",
    },
)
