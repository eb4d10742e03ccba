from __future__ import annotations

import logging
import time
from typing import Optional

__all__ = ["Timer"]


class Timer:
    """Context manager that logs how long a block took.

    ``elapsed`` is set on exit, whether or not the block raised.
    """

    def __init__(self, label: str) -> None:
        self.label = label
        self.start: Optional[float] = None
        self.elapsed: Optional[float] = None

    def __enter__(self) -> "Timer":
        self.start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.elapsed = time.perf_counter() - (self.start or 0)
        logging.info("[Timer] %s: %.3f sec", self.label, self.elapsed)
