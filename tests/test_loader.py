"""Tests for loading documents from files, streams and strings."""

from __future__ import annotations

import io
import logging

import pytest

from pathconfig import (
    ConfigDecodeError,
    ConfigLoadError,
    ConfigReadError,
    JsonNumber,
    PathConfig,
)


class TestLoadFile:
    """Tests for PathConfig.load()."""

    def test_valid_file(self, server_config: PathConfig) -> None:
        assert server_config.get_int("server.port") == 8080

    def test_missing_file_raises_read_error(self, tmp_path) -> None:
        missing = tmp_path / "nope.json"
        with pytest.raises(ConfigReadError) as exc_info:
            PathConfig.load(missing)
        err = exc_info.value
        assert err.source == str(missing)
        assert isinstance(err.cause, FileNotFoundError)
        assert isinstance(err.__cause__, FileNotFoundError)

    def test_directory_raises_read_error(self, tmp_path) -> None:
        with pytest.raises(ConfigReadError):
            PathConfig.load(tmp_path)

    def test_malformed_json_raises_decode_error(self, write_json) -> None:
        path = write_json('{"server": {"port": 8080,}}')
        with pytest.raises(ConfigDecodeError) as exc_info:
            PathConfig.load(path)
        assert exc_info.value.line == 1
        assert exc_info.value.column is not None

    def test_decode_error_is_load_error(self, write_json) -> None:
        path = write_json("not json")
        with pytest.raises(ConfigLoadError):
            PathConfig.load(path)

    @pytest.mark.parametrize(
        "content,type_name",
        [("[1, 2]", "array"), ('"text"', "string"), ("3", "number"), ("null", "null"), ("true", "boolean")],
    )
    def test_non_object_root_raises(self, write_json, content: str, type_name: str) -> None:
        path = write_json(content)
        with pytest.raises(ConfigDecodeError, match=type_name):
            PathConfig.load(path)

    @pytest.mark.parametrize(
        "content",
        [
            '{"a": NaN}',
            '{"a": Infinity}',
            '{"a": -Infinity}',
            '{"a": 1} // comment',
            '{"a": 1} {"b": 2}',
            "",
        ],
    )
    def test_non_strict_json_rejected(self, write_json, content: str) -> None:
        path = write_json(content)
        with pytest.raises(ConfigDecodeError):
            PathConfig.load(path)

    def test_invalid_encoding(self, tmp_path) -> None:
        path = tmp_path / "latin.json"
        path.write_bytes('{"name": "café"}'.encode("latin-1"))
        with pytest.raises(ConfigDecodeError):
            PathConfig.load(path)
        assert PathConfig.load(path, encoding="latin-1").get_string("name") == "café"

    def test_unknown_encoding(self, server_json) -> None:
        with pytest.raises(ConfigReadError):
            PathConfig.load(server_json, encoding="no-such-codec")

    def test_numbers_keep_literal(self, write_json) -> None:
        path = write_json('{"big": 12345678901234567890, "f": 1.10}')
        config = PathConfig.load(path)
        assert isinstance(config.get("big"), JsonNumber)
        assert config.get("big").literal == "12345678901234567890"
        assert config.get("f").literal == "1.10"

    def test_logs_successful_load(self, server_json, caplog) -> None:
        with caplog.at_level(logging.DEBUG, logger="pathconfig.loader"):
            PathConfig.load(server_json)
        assert any(str(server_json) in r.getMessage() for r in caplog.records)


class TestLoadFromStream:
    """Tests for PathConfig.load_from_stream()."""

    def test_binary_stream(self) -> None:
        config = PathConfig.load_from_stream(io.BytesIO(b'{"a": {"b": "c"}}'))
        assert config.get_string("a.b") == "c"

    def test_text_stream(self) -> None:
        config = PathConfig.load_from_stream(io.StringIO('{"a": [1, 2, 3]}'))
        assert len(config.get_array("a")) == 3

    def test_open_file_stream(self, server_json) -> None:
        with open(server_json, "rb") as f:
            config = PathConfig.load_from_stream(f)
        assert config.get_bool("server.tls") is True

    def test_decodes_once(self) -> None:
        """The stream is read a single time."""

        class CountingStream(io.BytesIO):
            reads = 0

            def read(self, *args):
                type(self).reads += 1
                return super().read(*args)

        stream = CountingStream(b'{"a": 1}')
        PathConfig.load_from_stream(stream)
        assert CountingStream.reads == 1

    def test_malformed_stream(self) -> None:
        with pytest.raises(ConfigDecodeError) as exc_info:
            PathConfig.load_from_stream(io.StringIO("{"))
        assert exc_info.value.source == "<stream>"

    def test_failing_stream_raises_read_error(self) -> None:
        class BrokenStream:
            name = "broken"

            def read(self):
                raise OSError("device not ready")

        with pytest.raises(ConfigReadError, match="device not ready") as exc_info:
            PathConfig.load_from_stream(BrokenStream())
        assert exc_info.value.source == "broken"

    def test_non_text_read_result(self) -> None:
        class OddStream:
            def read(self):
                return 42

        with pytest.raises(ConfigReadError):
            PathConfig.load_from_stream(OddStream())


class TestFromString:
    def test_str_and_bytes(self) -> None:
        assert PathConfig.from_string('{"a": true}').get_bool("a") is True
        assert PathConfig.from_string(b'{"a": true}').get_bool("a") is True

    def test_malformed(self) -> None:
        with pytest.raises(ConfigDecodeError) as exc_info:
            PathConfig.from_string('{"a": }')
        assert exc_info.value.source == "<string>"
