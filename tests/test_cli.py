import json

import pytest

from tabjson.cli import ExampleValues, build_writers, main, run_example
from tabjson.writer import BufferOverflowError, JsonBuffer, write_all

EXPECTED_PRETTY = (
    "{\n"
    '\t"entry1": "entry1_text",\n'
    '\t"entry2": "entry2_text",\n'
    '\t"entry3": "entry3 text with spaces",\n'
    '\t"entry4": "entry4 with \\"\\" \\"\\" quotes and \\\\ \\\\ \\\\ \\\\ backslashes",\n'
    '\t"entry5": {\n'
    '\t\t"entry6": 42,\n'
    '\t\t"entry7": 314\n'
    "\t}\n"
    "}"
)

EXPECTED_COMPACT = (
    '{"entry1":"entry1_text","entry2":"entry2_text",'
    '"entry3":"entry3 text with spaces",'
    '"entry4":"entry4 with \\"\\" \\"\\" quotes and \\\\ \\\\ \\\\ \\\\ backslashes",'
    '"entry5":{"entry6":42,"entry7":314}}'
)


def test_run_example_pretty_output():
    pretty, _ = run_example(JsonBuffer(1024))
    assert pretty == EXPECTED_PRETTY


def test_run_example_compressed_output():
    _, compact = run_example(JsonBuffer(1024))
    assert compact == EXPECTED_COMPACT


def test_example_is_valid_json():
    pretty, compact = run_example(JsonBuffer(1024))
    data = json.loads(pretty)
    assert data == json.loads(compact)
    assert data["entry5"] == {"entry6": 42, "entry7": 314}
    assert data["entry4"].count('"') == 4


def test_build_writers_reads_values_at_run_time():
    values = ExampleValues()
    writers = build_writers(values)
    values.entry1 = "one"
    values.bootcounter = 9
    data = json.loads(write_all(JsonBuffer(1024), writers))
    assert data["entry1"] == "one"
    assert data["entry5"]["entry7"] == 9
    assert data["entry2"] == ""


def test_build_writers_has_ten_entries():
    assert len(build_writers(ExampleValues())) == 10


def test_run_example_overflows_small_buffer():
    with pytest.raises(BufferOverflowError):
        run_example(JsonBuffer(64))


def test_main_prints_three_runs(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    expected = (EXPECTED_PRETTY + "\n" + EXPECTED_COMPACT + "\n") * 3
    assert out == expected