from __future__ import annotations

"""Utilities for working with JSONL batch files."""

import json
from pathlib import Path
from typing import Any, Iterable, Iterator


def iter_jsonl(path: Path) -> Iterator[Any]:
    with path.open("r", encoding="utf-8") as handle:
        for line in handle:
            line = line.strip()
            if line:
                yield json.loads(line)


def write_jsonl(path: Path, rows: Iterable[Any]) -> int:
    """Write *rows* as JSON lines and return how many were written.

    Rows go to a sibling temporary file that replaces *path* only once every
    row has been written, so a failure part way leaves *path* untouched.
    """

    path.parent.mkdir(parents=True, exist_ok=True)
    staging = path.with_name(path.name + ".tmp")
    count = 0
    try:
        with staging.open("w", encoding="utf-8") as handle:
            for row in rows:
                handle.write(json.dumps(row, ensure_ascii=False) + "\n")
                count += 1
    except BaseException:
        staging.unlink(missing_ok=True)
        raise
    staging.replace(path)
    return count
