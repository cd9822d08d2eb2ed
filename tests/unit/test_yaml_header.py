"""Unit tests for the YAML header recognizer."""

from datetime import datetime, timezone

import pytest

from filesender.adapters.recognizer.yaml_header import YamlHeaderRecognizer, parse_created
from filesender.domain.models import RawFile


@pytest.fixture
def recognizer() -> YamlHeaderRecognizer:
    return YamlHeaderRecognizer()


def make_file(content: bytes, name: str = "report.txt") -> RawFile:
    return RawFile(name=name, content=content)


class TestRecognize:
    """Tests for YamlHeaderRecognizer.recognize."""

    def test_recognizes_header(self, recognizer: YamlHeaderRecognizer) -> None:
        file = make_file(b'---\nformat: "4.0"\ncreated: 2026-03-01T09:30:00\n---\nbody text')

        doc = recognizer.recognize(file)

        assert doc is not None
        assert doc.name == "report.txt"
        assert doc.format == "4.0"
        assert doc.created == datetime(2026, 3, 1, 9, 30)
        assert doc.content == b"body text"

    @pytest.mark.parametrize("raw_format", ["3.1", "4.0", "3.10", "4.00", "04.0", "4"])
    def test_unquoted_format_kept_verbatim(
        self, recognizer: YamlHeaderRecognizer, raw_format: str
    ) -> None:
        header = f"---\nformat: {raw_format}\ncreated: 2026-03-01\n---\n".encode()
        doc = recognizer.recognize(make_file(header))
        assert doc is not None
        assert doc.format == raw_format

    def test_non_scalar_format_not_recognized(self, recognizer: YamlHeaderRecognizer) -> None:
        file = make_file(b"---\nformat: [4.0]\ncreated: 2026-03-01\n---\n")
        assert recognizer.recognize(file) is None

    def test_unknown_format_passes_through(self, recognizer: YamlHeaderRecognizer) -> None:
        doc = recognizer.recognize(make_file(b'---\nformat: "###"\ncreated: 2026-03-01\n---\n'))
        assert doc is not None
        assert doc.format == "###"

    def test_date_only_is_midnight(self, recognizer: YamlHeaderRecognizer) -> None:
        doc = recognizer.recognize(make_file(b'---\nformat: "4.0"\ncreated: 2026-03-01\n---\n'))
        assert doc is not None
        assert doc.created == datetime(2026, 3, 1)
        assert doc.content == b""

    def test_crlf_line_endings(self, recognizer: YamlHeaderRecognizer) -> None:
        file = make_file(b'---\r\nformat: "4.0"\r\ncreated: 2026-03-01\r\n---\r\nbody')
        doc = recognizer.recognize(file)
        assert doc is not None
        assert doc.content == b"body"

    def test_binary_body_preserved(self, recognizer: YamlHeaderRecognizer) -> None:
        body = b"\x00\xff\x10binary"
        file = make_file(b'---\nformat: "4.0"\ncreated: 2026-03-01\n---\n' + body)
        doc = recognizer.recognize(file)
        assert doc is not None
        assert doc.content == body

    def test_name_from_header(self, recognizer: YamlHeaderRecognizer) -> None:
        file = make_file(b'---\nname: Q1 report\nformat: "4.0"\ncreated: 2026-03-01\n---\n')
        doc = recognizer.recognize(file)
        assert doc is not None
        assert doc.name == "Q1 report"

    @pytest.mark.parametrize(
        "content",
        [
            b"",
            b"no header here",
            b'format: "4.0"\ncreated: 2026-03-01\n',
            b'---\nformat: "4.0"\ncreated: 2026-03-01\n',
            b"---\ncreated: 2026-03-01\n---\nbody",
            b'---\nformat: "4.0"\n---\nbody',
            b'---\nformat: "4.0"\ncreated: yesterday\n---\n',
            b"---\n- a list\n- not a mapping\n---\n",
            b"---\nformat: [unclosed\n---\n",
            b"---\nformat: \xff\xfe\ncreated: 2026-03-01\n---\n",
        ],
    )
    def test_not_recognized(self, recognizer: YamlHeaderRecognizer, content: bytes) -> None:
        assert recognizer.recognize(make_file(content)) is None


class TestParseCreated:
    """Tests for parse_created."""

    def test_iso_string(self) -> None:
        assert parse_created("2026-03-01 09:30") == datetime(2026, 3, 1, 9, 30)

    def test_aware_converted_to_naive_local(self) -> None:
        aware = datetime(2026, 3, 1, 9, 30, tzinfo=timezone.utc)
        result = parse_created(aware)
        assert result is not None
        assert result.tzinfo is None
        assert result == aware.astimezone().replace(tzinfo=None)

    @pytest.mark.parametrize("value", [None, 42, "not a date", ["2026-03-01"]])
    def test_invalid(self, value: object) -> None:
        assert parse_created(value) is None
