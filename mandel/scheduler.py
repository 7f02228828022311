"""Row-parallel work distribution that assembles a single RGBA canvas."""

from __future__ import annotations

import os
import queue
import threading
from typing import Callable, Optional, Sequence

import numpy as np

from .errors import ConfigurationError

Pixel = Sequence[int]
RowSampler = Callable[[int], Sequence[Pixel]]
ProgressCallback = Callable[[int, int], None]

_STOP = None


def default_workers() -> int:
    """Number of worker threads used when the caller does not choose one."""

    return max(os.cpu_count() or 1, 1)


def render_rows(
    x_res: int,
    y_res: int,
    sample_row: RowSampler,
    *,
    workers: Optional[int] = None,
    progress: Optional[ProgressCallback] = None,
) -> np.ndarray:
    """Compute every row with a pool of threads and return the assembled canvas.

    Rows are fed top to bottom through a shared queue. Workers push
    ``(row, col, color)`` results onto a second queue, which a single
    aggregator thread drains into the canvas. The call returns once every
    row has been handed out, every worker has finished and the aggregator
    has written every pixel.
    """

    pool_size = default_workers() if workers is None else int(workers)
    if pool_size < 1:
        raise ConfigurationError(f"Worker count must be 1 or higher: found {workers}")
    pool_size = min(pool_size, max(y_res, 1))

    canvas = np.zeros((y_res, x_res, 4), dtype=np.uint8)
    rows: queue.Queue = queue.Queue(maxsize=pool_size)
    pixels: queue.Queue = queue.Queue(maxsize=max(x_res, 1))
    failures: list[Exception] = []

    def worker() -> None:
        while True:
            row = rows.get()
            if row is _STOP:
                return
            if failures:
                continue
            try:
                colors = sample_row(row)
            except Exception as exc:  # re-raised in the caller below
                failures.append(exc)
                continue
            for col, color in enumerate(colors):
                pixels.put((row, col, color))

    def aggregate() -> None:
        while True:
            item = pixels.get()
            if item is _STOP:
                return
            if failures:
                continue
            row, col, color = item
            try:
                canvas[row, col] = color
            except Exception as exc:  # keep draining so workers never block on put
                failures.append(exc)

    threads = [
        threading.Thread(target=worker, name=f"mandel-row-{i}", daemon=True)
        for i in range(pool_size)
    ]
    aggregator = threading.Thread(target=aggregate, name="mandel-aggregator", daemon=True)
    for thread in threads:
        thread.start()
    aggregator.start()

    try:
        for row in range(y_res):
            if progress is not None:
                progress(row, y_res)
            rows.put(row)
    finally:
        for _ in threads:
            rows.put(_STOP)
        for thread in threads:
            thread.join()
        pixels.put(_STOP)
        aggregator.join()

    if progress is not None:
        progress(y_res, y_res)
    if failures:
        raise failures[0]
    return canvas
