"""Tests for the public entry points: loads, load, load_path."""

import io

import pytest
from loguru import logger

from toml_core import load, load_path, loads
from toml_core.errors import DuplicateKeyError, TomlError, TomlParseError
from toml_core.parser import decode_input


# ---------------------------------------------------------------------------
# Input decoding
# ---------------------------------------------------------------------------

def test_loads_str():
    assert loads("a = 1").get_int("a") == 1

def test_loads_bytes():
    assert loads(b'name = "x"').get_string("name") == "x"

def test_loads_utf8_bom_bytes():
    assert loads(b"\xef\xbb\xbfa = 1").to_dict() == {"a": 1}

def test_loads_bom_in_text():
    assert loads("\ufeffa = 1").to_dict() == {"a": 1}

def test_loads_utf16_bytes():
    assert loads('s = "café"'.encode("utf-16")).get_string("s") == "café"

def test_decode_non_ascii_utf8():
    assert decode_input('s = "ü"'.encode("utf-8")) == 's = "ü"'

def test_invalid_utf8():
    with pytest.raises(TomlParseError, match="not valid utf-8"):
        loads(b'a = "\xff"')


# ---------------------------------------------------------------------------
# Streams and files
# ---------------------------------------------------------------------------

def test_load_text_stream():
    assert load(io.StringIO("[g]\nk = true\n")).get_bool("g.k") is True

def test_load_binary_stream():
    assert load(io.BytesIO(b"[g]\nk = 2.5\n")).get_float("g.k") == 2.5

def test_load_path(tmp_path):
    path = tmp_path / "conf.toml"
    path.write_bytes(b'[server]\nhost = "localhost"\n')
    assert load_path(path).get_string("server.host") == "localhost"

def test_load_path_str(tmp_path):
    path = tmp_path / "conf.toml"
    path.write_text("x = 1\n", encoding="utf-8")
    assert load_path(str(path)).get_int("x") == 1

def test_load_path_explicit_encoding(tmp_path):
    path = tmp_path / "conf.toml"
    path.write_text('s = "été"\n', encoding="latin-1")
    assert load_path(path, encoding="latin-1").get_string("s") == "été"

def test_load_path_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_path(tmp_path / "nope.toml")


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------

def test_grammar_error_is_toml_error():
    with pytest.raises(TomlError):
        loads("a = ")

def test_unexpected_character_message():
    with pytest.raises(TomlParseError, match="unexpected"):
        loads("a = 1 b")

def test_structure_error_from_loads():
    with pytest.raises(DuplicateKeyError):
        loads("a = 1\na = 2")


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

@pytest.fixture
def captured_logs():
    messages = []
    logger.enable("toml_core")
    handler_id = logger.add(messages.append, level="DEBUG", format="{message}")
    yield messages
    logger.remove(handler_id)
    logger.disable("toml_core")

def test_logging_silent_by_default():
    messages = []
    handler_id = logger.add(messages.append, level="DEBUG", format="{message}")
    try:
        loads("a = 1")
    finally:
        logger.remove(handler_id)
    assert messages == []

def test_logging_when_enabled(captured_logs):
    loads("a = 1")
    text = "".join(captured_logs)
    assert "parsing 5 characters" in text
    assert "1 root values" in text
    assert "built tree with 1 values" in text

def test_logging_failure(captured_logs):
    with pytest.raises(DuplicateKeyError):
        loads("a = 1\na = 2")
    assert "parse failed: DuplicateKeyError" in "".join(captured_logs)
