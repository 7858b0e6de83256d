"""Span helper recording model-call timings on an interview session."""
from __future__ import annotations

import time
from contextlib import contextmanager
from typing import Iterator


@contextmanager
def span(session, name: str) -> Iterator[None]:
    """Append ``{span, cursor, ms, outcome}`` to ``session.events`` once the block exits."""

    start = time.perf_counter()
    event = {"span": name, "cursor": session.cursor, "outcome": "ok"}
    try:
        yield
    except BaseException:
        event["outcome"] = "error"
        raise
    finally:
        event["ms"] = int((time.perf_counter() - start) * 1000)
        session.events.append(event)


__all__ = ["span"]
