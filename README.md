# tabjson

`tabjson` builds JSON text from a table of writer entries. Each entry
(`WriterEntry`) pairs a handler with a `HandlerData` description of what to
print: the opening tag (`otag`), the entry name (`name`), a printf-style format
(`fmt`), the closing tag (`ctag`) and the indentation level in tabs (`level`,
up to 32 tabs).

The handlers in `tabjson.writer` are:

- `handle_otag` – indentation, then the opening tag.
- `handle_ctag` – indentation, then the closing tag.
- `handle_entry_text` – a `"name": "value"` entry; the format defaults to `%s`
  and a missing value is written as an empty string.
- `handle_entry_number` – a `"name": number` entry; the format defaults to
  `%d` and a missing value is written as `-2147483648`.

Both entry handlers raise `ValueError` when `name` or `ctag` is empty. An entry
whose handler is `None` writes nothing. An entry's `data` may be the value
itself or a zero-argument callable that is called when the entry runs.

Output goes into a `JsonBuffer` of fixed capacity, counted in UTF-8 bytes with
one byte held back, so at most `capacity - 1` bytes of text fit. A write that
does not fit keeps the part that does and raises `BufferOverflowError`; any
later write raises it again. A capacity below 1 raises `ValueError`.

## Installation

```
pip install .
```

## Usage

```python
from tabjson.writer import (
    HandlerData,
    JsonBuffer,
    WriterEntry,
    handle_ctag,
    handle_entry_number,
    handle_entry_text,
    handle_otag,
    write_all,
)

entries = [
    WriterEntry(handle_otag, HandlerData(otag="{\n")),
    WriterEntry(handle_entry_text,
                HandlerData(otag="", name="name", ctag=",\n", level=1),
                "example"),
    WriterEntry(handle_entry_number,
                HandlerData(otag="", name="count", ctag="\n", level=1),
                42),
    WriterEntry(handle_ctag, HandlerData(ctag="}")),
]

buffer = JsonBuffer(1024)
write_all(buffer, entries)

print(buffer.getvalue())
# {
# 	"name": "example",
# 	"count": 42
# }

print(buffer.compressed())
# {"name":"example","count":42}
```

`write_all(buffer, entries)` runs each entry and returns the buffer's text.
`compress(text)` removes every whitespace character outside string literals
from any string; `JsonBuffer.compressed()` applies it to the buffer's text. It
raises `CompressionError` when a backslash turns up outside a string literal,
or when an escape inside a string is anything other than `\"` or `\\`.

The handlers do no escaping of their own: text values are written as given.

## Command line

```
tabjson
```

writes the built-in example document three times, each time into a fresh
1024-byte buffer, printing it first pretty-printed and then compressed. If a
buffer overflows or the text cannot be compressed, the error goes to standard
error and the exit status is 1.

The document's table comes from `build_writers(values)` in `tabjson.cli`,
whose entries read their values from an `ExampleValues` instance when they
run; `run_example(buffer)` fills the values, writes the document into the
given `JsonBuffer` and returns the pretty and compressed text.

## Running the tests

```
pip install .[test]
pytest
```