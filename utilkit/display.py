from __future__ import annotations
import dataclasses
import sys
from typing import Any, Iterable, List, Optional, TextIO

_STYLES = {
    "bold": "\033[1m",
    "yellow": "\033[33m",
    "blue": "\033[34m",
    "light_black": "\033[90m",
    "light_cyan": "\033[96m",
}
_RESET = "\033[0m"


def _styled(text: str, style: Optional[str], color: bool) -> str:
    if not color or style is None:
        return text
    return f"{_STYLES[style]}{text}{_RESET}"


def field_count(elem: Any) -> int:
    """Number of named fields on ``elem``'s type; plain values such as ints have none."""
    if dataclasses.is_dataclass(elem):
        return len(dataclasses.fields(elem))
    fields = getattr(type(elem), "_fields", None)
    if isinstance(fields, tuple):
        return len(fields)
    slots = getattr(type(elem), "__slots__", None)
    if slots is not None:
        return 1 if isinstance(slots, str) else len(tuple(slots))
    d = getattr(elem, "__dict__", None)
    return len(d) if isinstance(d, dict) else 0


def show_element(elem: Any, indent: str, color: bool = False) -> str:
    n = field_count(elem)
    return "".join([
        _styled(indent, "light_black", color),
        _styled(type(elem).__name__, None, color),
        _styled(":", "blue", color),
        _styled(f" with {n}", "light_cyan", color),
        _styled(" parameter" if n == 1 else " parameters", "light_black", color),
        "\n",
    ])


def render(elements: Iterable[Any], color: bool = False, title: str = "LongTuple") -> str:
    parts: List[str] = [_styled(title, "bold", color), _styled(":", "yellow", color), "\n"]
    for k, elem in enumerate(elements, start=1):
        indent = f"  {k}  ↓ " if k < 10 else f"  {k} ↓ "
        parts.append(show_element(elem, indent, color))
    return "".join(parts)


def show(elements: Iterable[Any], file: Optional[TextIO] = None, color: bool = False, title: str = "LongTuple") -> None:
    out = file if file is not None else sys.stdout
    out.write(render(elements, color=color, title=title))
