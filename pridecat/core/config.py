#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: pridecat/core/config.py

# ==========================================
# Terminal Color Space Constants
# ==========================================

# 256-color palette layout (Source: ECMA-48 / xterm 256-color extension)
#     0-  7: standard colors
#     8- 15: high intensity colors
#    16-231: 6 x 6 x 6 cube, 16 + 36*r + 6*g + b (0 <= r, g, b <= 5)
#   232-255: grayscale from black to white in 24 steps
CUBE_OFFSET = 16                   # First index of the color cube
CUBE_LEVELS = 6                    # Buckets per channel
CUBE_R_WEIGHT = 36                 # Index stride of the red axis
CUBE_G_WEIGHT = 6                  # Index stride of the green axis
CUBE_MAX_INDEX = 231               # Last index of the color cube
CHANNEL_RANGE = 256                # Number of values an 8-bit channel can take
RGB_MAX = 255                      # 8-bit color depth limit
MAX_DEC = 16777215                 # Max integer value for 24-bit hex (0xFFFFFF)

# ==========================================
# Readability Adjustment
# ==========================================

ADJUST_NONE = "none"
ADJUST_LIGHTEN = "lighten"
ADJUST_DARKEN = "darken"
ADJUST_MODES = (ADJUST_NONE, ADJUST_LIGHTEN, ADJUST_DARKEN)

ADJUST_SCALE_NUM = 3               # Channels are scaled to 3/4 ...
ADJUST_SCALE_DEN = 4               # ... of their original value
LIGHTEN_OFFSET = 64                # Floor raised by lighten (64 + 255*3/4 == 255)

# ==========================================
# Escape Sequences
# ==========================================

FG_TRUECOLOR = "\033[38;2;{r};{g};{b}m"
BG_TRUECOLOR = "\033[48;2;{r};{g};{b}m"
FG_INDEXED = "\033[38;5;{index}m"
BG_INDEXED = "\033[48;5;{index}m"
FG_RESET = "\033[39m"
BG_RESET = "\033[49m"

# Substrings of COLORTERM announcing 24-bit support
TRUECOLOR_MARKERS = ("truecolor", "24bit")

# ==========================================
# Line Rendering
# ==========================================

DEFAULT_FLAG = "lgbt"              # Pushed when no flag was selected
NUMBER_WIDTH = 6                   # Right-justified line number field
NUMBER_SEPARATOR = "  "            # Between the line number and the text
END_MARKER = "$"                   # Printed by --show-ends
STDIN_NAME = "-"                   # Source name standing for standard input
END_OF_OPTIONS = "--"

# ==========================================
# Process Lifecycle
# ==========================================

EXIT_SUCCESS = 0
EXIT_FAILURE = 1
RESET_SIGNALS = ("SIGINT", "SIGTERM")

# ==========================================
# CLI UI
# ==========================================

LIST_FORMATS = ("text", "json", "prettyjson")

MSG_BOLD_COLORS = {
    "error": "\033[1;31m",
    "info": "\033[1;36m",
}

MSG_COLORS = {
    "error": "\033[0;31m",
    "info": "\033[0;36m",
}

BOLD_WHITE = "\033[1;37m"
RESET = "\033[0m"
