"""Readable-text heuristics for uploaded PDF bytes."""

from __future__ import annotations

import re

from ...common.utils import collapse_whitespace

# Letters, digits, whitespace and common punctuation
_READABLE_CHARS = r"[A-Za-z0-9\s.,!?;:'\"()-]"


def extract_readable_text(
    data: bytes,
    *,
    prefix_bytes: int = 50_000,
    min_run_chars: int = 20,
    max_runs: int = 100,
) -> str:
    """Pull human-readable runs out of raw document bytes.

    The first ``prefix_bytes`` are decoded as UTF-8 (invalid sequences
    replaced), runs of at least ``min_run_chars`` readable characters are
    collected, and the first ``max_runs`` of them are joined with spaces and
    whitespace-collapsed.

    Args:
        data: Raw file contents.
        prefix_bytes: How many leading bytes to inspect.
        min_run_chars: Minimum length of a readable run.
        max_runs: Maximum number of runs to keep.

    Returns:
        Extracted text, possibly empty.
    """
    decoded = data[:prefix_bytes].decode("utf-8", errors="replace")
    pattern = re.compile(f"{_READABLE_CHARS}{{{min_run_chars},}}")
    runs = pattern.findall(decoded)
    if not runs:
        return ""
    return collapse_whitespace(" ".join(runs[:max_runs]))
