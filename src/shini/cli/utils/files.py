from __future__ import annotations

from pathlib import Path


def write_file(path: Path, content: str, *, force: bool) -> bool:
    """Write `content` to `path`, creating parent dirs. Returns False if skipped."""
    if path.exists() and not force:
        return False
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return True
