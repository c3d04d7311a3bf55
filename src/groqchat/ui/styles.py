"""CSS styles for the TUI.

Hides layout and styling decisions from the application logic.
Uses Textual CSS features: nesting, pseudo-classes, variables.

Layout: conversation on top, optional log panel beside it, input bar at
the bottom. User bubbles sit on the right, assistant bubbles on the left.
"""

APP_CSS = """
Screen {
    layout: grid;
    grid-size: 2 2;
    grid-columns: 3fr 2fr;
    grid-rows: 1fr auto;
    background: $background;
}

/* ============================================
   Chat History Panel
   ============================================ */
#chat-history {
    column-span: 2;
    height: 100%;
    background: $panel;
    border: round $primary 60%;
    border-title-color: $primary;
    border-title-style: bold;
    border-subtitle-color: $text-muted;
    border-subtitle-align: right;
    padding: 0 1;
    scrollbar-gutter: stable;

    &:focus-within {
        border: round $primary;
    }
}

Screen.-with-log #chat-history {
    column-span: 1;
}

/* ============================================
   Log Panel
   ============================================ */
#debug-panel {
    height: 100%;
    background: $surface;
    border: round $warning 50%;
    border-title-color: $warning;
    border-subtitle-color: $text-muted;
    padding: 0 1;
}

/* ============================================
   Bottom Bar - Loading + Input
   ============================================ */
#bottom-bar {
    column-span: 2;
    height: auto;
    padding: 0 1;
    background: $panel;
    border-top: solid $border;
}

#loading {
    height: 1;
    padding: 0 1;
    color: $text-muted;
    text-style: italic;
}

ChatInputBar {
    height: 5;
    border: round $primary 60%;
    background: $panel;

    &:focus-within {
        border: round $primary;
    }
}

#chat-input {
    width: 1fr;
    height: 100%;
    border: none;
    padding: 0 1;
    background: transparent;
}

#send-btn, #clear-btn {
    height: 100%;
    margin: 0 0 0 1;
    min-width: 8;
    text-style: bold;
}

#send-btn {
    width: 10;
}

#clear-btn {
    width: 17;
}

/* ============================================
   Chat Messages
   ============================================ */
.chat-message {
    width: 100%;
    height: auto;
    margin: 0 0 1 0;
}

.align-right {
    align-horizontal: right;
}

.align-left {
    align-horizontal: left;
}

.bubble {
    width: auto;
    max-width: 70%;
    height: auto;
    padding: 0 1;
}

.user-message .bubble {
    background: $primary 25%;
    border-right: tall $primary;
}

.assistant-message .bubble {
    background: $surface;
    border-left: tall $secondary;
}

.message-text {
    width: auto;
    height: auto;
    color: $foreground;
}

/* ============================================
   Code Blocks
   ============================================ */
.code-block {
    width: auto;
    height: auto;
    margin: 1 0;
    background: #0b0b12;
    border: round $border;
}

.code-body {
    width: auto;
    height: auto;
    padding: 0 1;
}

.copy-btn {
    width: auto;
    min-width: 6;
    height: 1;
    border: none;
    padding: 0 1;
    background: $surface-lighten-1;
    color: $text-muted;

    &:hover {
        background: $primary 40%;
        color: $foreground;
    }
}

.code-block .copy-btn {
    dock: top;
}

.message-copy {
    margin: 0 1;
}
"""
