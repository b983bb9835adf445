"""Tab-indented JSON writing into a bounded text buffer."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Callable, Iterable, Optional

_TABS = "\t" * 32
_INT_MIN = -2147483648
_C_SPACE = frozenset(" \t\n\v\f\r")


class BufferOverflowError(Exception):
    """Raised when written text no longer fits in a buffer."""


class CompressionError(ValueError):
    """Raised when text cannot be compressed because of a misplaced backslash."""


class JsonBuffer:
    """Text buffer holding at most ``capacity - 1`` bytes of UTF-8 text.

    One byte is kept back for the terminator, so a write that would fill the
    buffer completely is an overflow.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("insufficient buffer capacity")
        self.capacity = capacity
        self._parts: list[str] = []
        self._used = 0

    def write(self, text: str) -> None:
        """Append text; on overflow keep what fits and raise BufferOverflowError."""
        if self._used >= self.capacity:
            raise BufferOverflowError("buffer already overflowed")
        encoded = text.encode("utf-8")
        room = self.capacity - 1 - self._used
        self._used += len(encoded)
        if len(encoded) > room:
            self._parts.append(encoded[:room].decode("utf-8", errors="ignore"))
            raise BufferOverflowError(
                f"{self._used} bytes do not fit in a buffer of {self.capacity}"
            )
        self._parts.append(text)

    def getvalue(self) -> str:
        """Return the formatted text written so far."""
        return "".join(self._parts)

    def compressed(self) -> str:
        """Return the text with all whitespace outside strings removed."""
        return compress(self.getvalue())


class _State(Enum):
    CHAR = auto()
    QUOTE = auto()
    ESC = auto()


def compress(text: str) -> str:
    """Strip whitespace outside of quoted strings."""
    out: list[str] = []
    state = _State.CHAR
    for pos, ch in enumerate(text):
        if state is _State.CHAR:
            if ch == '"':
                out.append(ch)
                state = _State.QUOTE
            elif ch == "\\":
                raise CompressionError(f"escape character outside a string at {pos}")
            elif ch not in _C_SPACE:
                out.append(ch)
        elif state is _State.QUOTE:
            out.append(ch)
            if ch == '"':
                state = _State.CHAR
            elif ch == "\\":
                state = _State.ESC
        else:
            if ch not in '"\\':
                raise CompressionError(f"unsupported escape sequence at {pos}")
            out.append(ch)
            state = _State.QUOTE
    return "".join(out)


@dataclass(frozen=True)
class HandlerData:
    """Static description of one piece of output."""

    otag: Optional[str] = None
    name: Optional[str] = None
    fmt: Optional[str] = None
    ctag: Optional[str] = None
    level: int = 0


def _indent(level: int) -> str:
    # A negative precision prints the whole tab run.
    return _TABS if level < 0 else _TABS[:level]


def _require_entry(spec: HandlerData) -> None:
    if not spec.name:
        raise ValueError("entry needs a non-empty name")
    if not spec.ctag:
        raise ValueError("entry needs a non-empty closing tag")


def handle_otag(buffer: JsonBuffer, spec: HandlerData, data: Any = None) -> None:
    """Write indentation followed by the opening tag."""
    buffer.write(_indent(spec.level))
    buffer.write(spec.otag or "")


def handle_ctag(buffer: JsonBuffer, spec: HandlerData, data: Any = None) -> None:
    """Write indentation followed by the closing tag."""
    buffer.write(_indent(spec.level))
    buffer.write(spec.ctag or "")


def handle_entry_text(buffer: JsonBuffer, spec: HandlerData, data: Any = None) -> None:
    """Write a ``"name": "value"`` entry."""
    _require_entry(spec)
    buffer.write(_indent(spec.level))
    buffer.write(spec.otag or "")
    buffer.write(f'"{spec.name}": "')
    buffer.write((spec.fmt or "%s") % (data if data is not None else "",))
    buffer.write(f'"{spec.ctag}')


def handle_entry_number(buffer: JsonBuffer, spec: HandlerData, data: Any = None) -> None:
    """Write a ``"name": number`` entry; a missing number is written as INT_MIN."""
    _require_entry(spec)
    buffer.write(_indent(spec.level))
    buffer.write(spec.otag or "")
    buffer.write(f'"{spec.name}": ')
    buffer.write((spec.fmt or "%d") % (data if data is not None else _INT_MIN,))
    buffer.write(spec.ctag or "")


Handler = Callable[[JsonBuffer, HandlerData, Any], None]


@dataclass(frozen=True)
class WriterEntry:
    """A handler paired with its description and data.

    ``data`` is either the value itself or a zero-argument callable that
    produces it when the entry runs.
    """

    handler: Optional[Handler]
    spec: HandlerData = field(default_factory=HandlerData)
    data: Any = None

    def run(self, buffer: JsonBuffer) -> None:
        if self.handler is None:
            return
        value = self.data() if callable(self.data) else self.data
        self.handler(buffer, self.spec, value)


def write_all(buffer: JsonBuffer, entries: Iterable[WriterEntry]) -> str:
    """Run every entry against the buffer and return its text."""
    for entry in entries:
        entry.run(buffer)
    return buffer.getvalue()