"""Spinner shown on stderr while a request is in flight."""

from __future__ import annotations

import threading
import time
from collections.abc import Generator
from contextlib import contextmanager

from rich.live import Live
from rich.text import Text

from blockchain_cli.ui.console import err_console

LOADING_FRAMES = ["⠋", "⠙", "⠹", "⠸", "⠼", "⠴", "⠦", "⠧", "⠇", "⠏"]
GRADIENT_COLORS = ["#F7931A", "#FFA94D", "#FFB347", "#4D9DE0", "#9D4EDD", "#7B2CBF"]


@contextmanager
def create_spinner(message: str) -> Generator[None, None, None]:
    """Context manager for showing a transient spinner during an operation.

    Animates only when stderr is a terminal; nothing is left behind once
    the block exits, successful or not.
    """
    if not err_console.is_terminal:
        yield
        return

    start_time = time.time()
    frame_idx = 0

    with Live(console=err_console, refresh_per_second=12, transient=True) as live:
        def update_display():
            nonlocal frame_idx
            frame = LOADING_FRAMES[frame_idx % len(LOADING_FRAMES)]
            color = GRADIENT_COLORS[frame_idx % len(GRADIENT_COLORS)]
            elapsed = time.time() - start_time

            text = Text()
            text.append(f"  {frame} ", style=color)
            text.append(message, style="#e8e8e8")
            text.append(f" ({elapsed:.1f}s)", style="#555555")
            live.update(text)
            frame_idx += 1

        stop_event = threading.Event()

        def animate():
            while not stop_event.is_set():
                update_display()
                time.sleep(0.08)

        thread = threading.Thread(target=animate, daemon=True)
        thread.start()

        try:
            yield
        finally:
            stop_event.set()
            thread.join(timeout=0.5)
