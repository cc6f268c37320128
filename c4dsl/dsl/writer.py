"""Indentation-aware text accumulator for DSL output."""
from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, List


class UnbalancedBlockError(RuntimeError):
    pass


class DslWriter:
    """Collects DSL lines at the current nesting depth.

    Blocks are only opened through :meth:`block`, which closes them when the
    ``with`` body exits, so every ``{`` written here has its ``}``.
    """

    def __init__(self, indent_width: int = 4) -> None:
        self._unit = " " * indent_width
        self._lines: List[str] = []
        self._depth = 0

    def line(self, text: str) -> None:
        self._lines.append(f"{self._unit * self._depth}{text}")

    def blank(self) -> None:
        self._lines.append("")

    def empty_block(self, header: str) -> None:
        self.line(f"{header} {{}}")

    @contextmanager
    def block(self, header: str) -> Iterator["DslWriter"]:
        self.line(f"{header} {{")
        self._depth += 1
        try:
            yield self
        finally:
            self._depth -= 1
        self.line("}")

    def getvalue(self) -> str:
        if self._depth:
            raise UnbalancedBlockError(f"{self._depth} block(s) still open")
        return "\n".join(self._lines)
