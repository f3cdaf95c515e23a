from __future__ import annotations

from typing import Any

import numpy as np

from .runtime import runtime

_EDGE_ITEMS: int | None = None


def configure(*, edge_items: int | None = None) -> None:
    """Override the number of edge rows/cols shown; `None` defers to the environment."""
    global _EDGE_ITEMS
    _EDGE_ITEMS = None if edge_items is None else int(edge_items)


def _edge_items() -> int:
    if _EDGE_ITEMS is not None:
        return _EDGE_ITEMS
    return runtime.edge_items()


def _edge_indices(length: int) -> tuple[list[int], list[int], bool]:
    edge = _edge_items()
    if length <= edge * 2:
        return list(range(length)), [], False
    head = list(range(edge))
    tail = list(range(length - edge, length))
    return head, tail, True


def _format_value(value: Any) -> str:
    if isinstance(value, np.generic):
        value = value.item()
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return f"{value:g}"
    return str(value)


def _format_matrix_row(
    data: np.ndarray,
    row_index: int,
    col_head: list[int],
    col_tail: list[int],
    truncated: bool,
) -> str:
    entries = [_format_value(data[row_index, col]) for col in col_head]
    if truncated:
        entries.append("...")
    entries.extend(_format_value(data[row_index, col]) for col in col_tail)
    return " ".join(entries)


def format_matrix(data: np.ndarray, header: str) -> str:
    if data.ndim != 2:
        return f"{header}\n{data!r}"

    rows, cols = data.shape
    if rows == 0 or cols == 0:
        return header + "\n[]"

    row_head, row_tail, rows_truncated = _edge_indices(rows)
    col_head, col_tail, cols_truncated = _edge_indices(cols)

    lines = [header, "["]
    for row_index in row_head:
        row_repr = _format_matrix_row(data, row_index, col_head, col_tail, cols_truncated)
        lines.append(f" [{row_repr}]")
    if rows_truncated:
        lines.append(" ...")
    for row_index in row_tail:
        row_repr = _format_matrix_row(data, row_index, col_head, col_tail, cols_truncated)
        lines.append(f" [{row_repr}]")
    lines.append("]")
    return "\n".join(lines)


def holder_str(self: Any) -> str:
    info = [f"shape={tuple(self.shape)}"]
    info.append(f"cached={'yes' if self.has_cached_inverse else 'no'}")
    if self.generation:
        info.append(f"generation={self.generation}")
    header = f"{self.__class__.__name__}({', '.join(info)})"
    return format_matrix(self.get_matrix(), header)


class HolderFormattingMixin:
    def __str__(self) -> str:
        return holder_str(self)

    def __repr__(self) -> str:
        shape = getattr(self, "shape", None)
        cached = getattr(self, "has_cached_inverse", False)
        return f"<{self.__class__.__name__} shape={shape} cached={cached}>"
