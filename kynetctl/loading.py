"""Frame sequencing for the "connecting" waiting animation."""

from __future__ import annotations

from collections.abc import Callable

FRAME_INTERVAL_MS = 60
TOTAL_MS = 40 * 1000
FRAME_COUNT = 12
FRAME_TEMPLATE = ":/res/s/conning-b/{}.png"


class LoadingAnimation:
    """Cycles through the animation frames and reports when waiting ran out.

    The owner drives it: call :meth:`step` every ``FRAME_INTERVAL_MS``
    milliseconds while :attr:`running` is true. Once the animation has run
    for ``TOTAL_MS``, ``on_timeout`` is called on every further step.
    """

    interval_ms = FRAME_INTERVAL_MS

    def __init__(self, on_timeout: Callable[[], None]):
        self._on_timeout = on_timeout
        self._page: int | None = None
        self.elapsed_ms = 0
        self.running = False

    def start(self) -> None:
        """Restart from the first frame and show the animation."""
        self._page = 1
        self.elapsed_ms = 0
        self.running = True

    def stop(self) -> None:
        """Stop and hide the animation."""
        self.running = False

    def frame_path(self) -> str:
        """Resource path of the frame shown on the next step."""
        if self._page is None:
            raise RuntimeError("animation has not been started")
        return FRAME_TEMPLATE.format(self._page)

    def step(self) -> str:
        """Advance one frame and return the path of the frame displayed."""
        shown = self.frame_path()
        self._page = self._page + 1 if self._page < FRAME_COUNT else 1
        self.elapsed_ms += FRAME_INTERVAL_MS
        if self.elapsed_ms >= TOTAL_MS:
            self._on_timeout()
        return shown