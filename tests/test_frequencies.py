import logging

import pytest

from binarysearchtree import HuffmanTree, load_frequencies, parse_frequencies


def test_parse_valid_records():
    lines = ["a 5\n", "b\t9\n", "c   12\n"]
    assert parse_frequencies(lines) == {"a": 5, "b": 9, "c": 12}


def test_malformed_records_are_skipped(caplog):
    lines = ["a 5", "", "   ", "b x", "c 1 2", "d", "e -4", "f 45"]
    with caplog.at_level(logging.WARNING):
        frequencies = parse_frequencies(lines)
    assert frequencies == {"a": 5, "f": 45}
    malformed = [r for r in caplog.records if "malformed_record" in r.getMessage()]
    assert len(malformed) == 4


def test_first_character_of_token_is_used():
    assert parse_frequencies(["kapiolani 3"]) == {"k": 3}


def test_duplicate_character_keeps_last(caplog):
    with caplog.at_level(logging.WARNING):
        assert parse_frequencies(["a 1", "a 7"]) == {"a": 7}
    assert "duplicate" in caplog.text


def test_load_and_build(tmp_path):
    path = tmp_path / "frequencies.txt"
    path.write_text("k 4\na 7\np 2\ni 6\no 3\nl 1\nn 2\n", encoding="utf-8")
    tree = HuffmanTree(load_frequencies(path))
    tree.generate_codes()
    assert tree.decode(tree.encode("kapiolani")) == "kapiolani"


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_frequencies(tmp_path / "missing.txt")
