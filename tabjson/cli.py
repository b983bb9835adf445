"""Example program that writes a fixed JSON document."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Optional, Sequence

from tabjson.writer import (
    BufferOverflowError,
    CompressionError,
    HandlerData,
    JsonBuffer,
    WriterEntry,
    handle_ctag,
    handle_entry_number,
    handle_entry_text,
    handle_otag,
    write_all,
)

_BUFFER_CAPACITY = 1024
_RUNS = 3
_ENTRY4_TEXT = r'entry4 with \"\" \"\" quotes and \\ \\ \\ \\ backslashes'


@dataclass
class ExampleValues:
    """Values read by the example writers when they run."""

    entry1: str = ""
    entry2: str = ""
    entry3: str = ""
    entry4: str = ""
    edgelock_state: int = 0
    bootcounter: int = 0


def build_writers(values: ExampleValues) -> list[WriterEntry]:
    """Return the example's writer table, bound to ``values``."""
    return [
        WriterEntry(handle_otag, HandlerData(otag="{\n")),
        WriterEntry(
            handle_entry_text,
            HandlerData(otag="", name="entry1", fmt="%s", ctag=",\n", level=1),
            lambda: values.entry1,
        ),
        WriterEntry(
            handle_entry_text,
            HandlerData(otag="", name="entry2", ctag=",\n", level=1),
            lambda: values.entry2,
        ),
        WriterEntry(
            handle_entry_text,
            HandlerData(otag="", name="entry3", ctag=",\n", level=1),
            lambda: values.entry3,
        ),
        WriterEntry(
            handle_entry_text,
            HandlerData(otag="", name="entry4", ctag=",\n", level=1),
            lambda: values.entry4,
        ),
        WriterEntry(handle_otag, HandlerData(otag='"entry5": {\n', level=1)),
        WriterEntry(
            handle_entry_number,
            HandlerData(otag="", name="entry6", fmt="%d", ctag=",\n", level=2),
            lambda: values.edgelock_state,
        ),
        WriterEntry(
            handle_entry_number,
            HandlerData(otag="", name="entry7", ctag="\n", level=2),
            lambda: values.bootcounter,
        ),
        WriterEntry(handle_ctag, HandlerData(ctag="}\n", level=1)),
        WriterEntry(handle_ctag, HandlerData(ctag="}")),
    ]


def run_example(buffer: JsonBuffer) -> tuple[str, str]:
    """Fill ``buffer`` with the example document; return pretty and compressed text."""
    values = ExampleValues()
    writers = build_writers(values)
    values.entry1 = "entry1_text"
    values.entry2 = "entry2_text"
    values.entry3 = "entry3 text with spaces"
    values.entry4 = _ENTRY4_TEXT
    values.edgelock_state = 42
    values.bootcounter = 314
    pretty = write_all(buffer, writers)
    return pretty, buffer.compressed()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the example document, pretty and compressed, once per buffer run."""
    for _ in range(_RUNS):
        try:
            pretty, compact = run_example(JsonBuffer(_BUFFER_CAPACITY))
        except (BufferOverflowError, CompressionError) as err:
            print(err, file=sys.stderr)
            return 1
        print(pretty)
        print(compact)
    return 0


if __name__ == "__main__":
    sys.exit(main())