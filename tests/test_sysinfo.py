import os
from pathlib import Path

import pytest

from fishcore.sysinfo import (
    engine_info,
    engine_version_info,
    get_binary_directory,
    get_working_directory,
    is_whitespace,
    read_file_to_string,
    remove_whitespace,
    str_to_size_t,
)

SEP = "\\" if os.name == "nt" else "/"


def test_version_info():
    assert engine_version_info() == "Stockfish 17.1"


def test_engine_info_plain_and_uci():
    assert engine_info() == "Stockfish 17.1 by the Stockfish developers (see AUTHORS file)"
    uci = engine_info(True)
    assert uci.splitlines() == [
        "Stockfish 17.1",
        "id author the Stockfish developers (see AUTHORS file)",
    ]


def test_remove_whitespace():
    assert remove_whitespace(" a\tb\nc \r\x0bd\x0c") == "abcd"


def test_remove_whitespace_result_has_no_whitespace():
    result = remove_whitespace("  x y  z ")
    assert not any(c.isspace() for c in result)
    assert result == "xyz"


@pytest.mark.parametrize("text,expected", [("", True), (" \t\n", True), (" a ", False)])
def test_is_whitespace(text, expected):
    assert is_whitespace(text) is expected


def test_str_to_size_t_plain_and_prefixed():
    assert str_to_size_t("42") == 42
    assert str_to_size_t("  17abc") == 17
    assert str_to_size_t("+8") == 8


def test_str_to_size_t_negative_wraps():
    assert str_to_size_t("-1") == (1 << 64) - 1


def test_str_to_size_t_errors():
    with pytest.raises(ValueError):
        str_to_size_t("abc")
    with pytest.raises(ValueError):
        str_to_size_t("")
    with pytest.raises(OverflowError):
        str_to_size_t("1" + "0" * 25)


def test_read_file_round_trip(tmp_path):
    data = bytes(range(256))
    path = tmp_path / "blob.bin"
    path.write_bytes(data)
    assert read_file_to_string(str(path)) == data


def test_read_missing_file(tmp_path):
    assert read_file_to_string(str(tmp_path / "missing")) is None


def test_working_directory(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    result = get_working_directory()
    assert isinstance(result, str)
    assert Path(result).resolve() == tmp_path.resolve()


def test_binary_directory_absolute():
    assert get_binary_directory("/opt/engines/fish") == "/opt/engines/"


def test_binary_directory_bare_name(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert get_binary_directory("fish") == get_working_directory() + SEP


def test_binary_directory_dot_prefix(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    argv0 = "." + SEP + "sub" + SEP + "fish"
    assert get_binary_directory(argv0) == get_working_directory() + SEP + "sub" + SEP


def test_binary_directory_parent_is_kept():
    assert get_binary_directory("../bin/fish") == "../bin/"