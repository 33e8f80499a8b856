from __future__ import annotations
import sys
import time
from typing import TextIO

from dropfour.config import AI_THINKING_SPINNER, AI_THINK_DELAY_SEC

FRAMES = "|/-\\"


def ai_thinking(
    label: str = "AI is thinking",
    delay_sec: float = AI_THINK_DELAY_SEC,
    spinner: bool = AI_THINKING_SPINNER,
    out: TextIO = sys.stdout,
) -> None:
    """Hold the AI's move back for `delay_sec`, spinning if enabled."""
    if delay_sec <= 0:
        return

    if not spinner:
        time.sleep(delay_sec)
        return

    deadline = time.monotonic() + delay_sec
    i = 0
    while time.monotonic() < deadline:
        out.write(f"\r{label}... {FRAMES[i % len(FRAMES)]}")
        out.flush()
        time.sleep(0.08)
        i += 1
    out.write("\r" + (" " * (len(label) + 10)) + "\r")
    out.flush()
