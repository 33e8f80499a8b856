# src/dropfour/config.py

from __future__ import annotations

# Fixed 7x6 grid
ROWS = 6
COLS = 7
CONNECT_N = 4

# Score of a completed line; dominates any sum of the small per-line values
MAX_GAME_SCORE = 100_000

# Search depth accepted from the player
MIN_DEPTH = 2
MAX_DEPTH = 25
DEFAULT_DEPTH = 10

# UI toggles
USE_COLOR = True
CLEAR_SCREEN = True

# “AI thinking” effect
AI_THINKING_SPINNER = True
AI_THINK_DELAY_SEC = 1.5  # pause before the AI move is dropped

# Self-play traces
RESULTS_DIR = "data/results"
