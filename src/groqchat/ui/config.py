"""UI configuration constants.

Labels, timings and formats shared by the TUI and console views.
"""

# Copy buttons
COPY_LABEL = "Copy"
COPIED_LABEL = "Copied!"
COPY_CONFIRM_SECONDS = 2.0  # "Copied!" reverts to "Copy" after this

# Shown while a completion request is outstanding
LOADING_TEXT = "Loading..."

# Log panel
LOG_TIMESTAMP_FORMAT = "%H:%M:%S"
LOG_LEVEL_WIDTH = 7

# Code highlighting (any Pygments style name)
SYNTAX_THEME = "monokai"
