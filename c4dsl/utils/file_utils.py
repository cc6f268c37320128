"""File utilities."""
from __future__ import annotations

from pathlib import Path


def ensure_dir(path: str | Path) -> Path:
    """Ensure directory exists and return Path."""
    p = Path(path)
    p.mkdir(parents=True, exist_ok=True)
    return p


def _looks_binary(path: Path) -> bool:
    with open(path, "rb") as fh:
        chunk = fh.read(512)
    return b"\x00" in chunk


def read_text_file(path: str | Path) -> str:
    """Read a workspace document as UTF-8.

    - Missing files raise FileNotFoundError.
    - Files that look binary, or are not valid UTF-8, raise ValueError.
    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Missing file: {path}")
    if _looks_binary(p):
        raise ValueError(f"Binary file: {p.name}")
    try:
        return p.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise ValueError(f"Unable to read text file: {p.name}") from exc


def write_text_file(path: str | Path, text: str) -> Path:
    p = Path(path)
    ensure_dir(p.parent)
    p.write_text(text, encoding="utf-8")
    return p
