"""In-memory editing of a KEY=VALUE environment file."""

from __future__ import annotations

import re
from pathlib import Path

_LINE_RE = re.compile(r"[^\r\n]*(?:\r\n|\r|\n)|[^\r\n]+\Z")


class EnvFile:
    """Ordered lines of an env file, edited in memory and written back once.

    Lines keep their original endings so untouched lines round-trip
    byte-for-byte.
    """

    def __init__(self, path: str | Path, lines: list[str] | None = None):
        self.path = Path(path)
        self.lines: list[str] = list(lines or [])
        self.changed = False

    @classmethod
    def load(cls, path: str | Path) -> "EnvFile":
        path = Path(path)
        with path.open("r", encoding="utf-8", errors="surrogateescape", newline="") as f:
            return cls(path, _LINE_RE.findall(f.read()))

    def text(self) -> str:
        return "".join(self.lines)

    def get(self, key: str) -> str | None:
        pattern = _key_pattern(key)
        for line in self.lines:
            m = pattern.match(line)
            if m:
                return m.group(1)
        return None

    def set(self, key: str, value: str) -> bool:
        """Replace the first ``KEY=`` line. Returns False (and changes nothing) if there is none."""
        pattern = _key_pattern(key)
        for idx, line in enumerate(self.lines):
            m = pattern.match(line)
            if not m:
                continue
            self.lines[idx] = f"{key}={value}{m.group(2) or ''}"
            self.changed = True
            return True
        return False

    def flush(self) -> bool:
        if not self.changed:
            return False
        with self.path.open("w", encoding="utf-8", errors="surrogateescape", newline="") as f:
            f.write(self.text())
        self.changed = False
        return True


def _key_pattern(key: str) -> re.Pattern[str]:
    return re.compile(rf"^{re.escape(key)}=([^\r\n]*)(\r?\n|\r)?$")
