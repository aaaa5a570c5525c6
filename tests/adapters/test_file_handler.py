from __future__ import annotations

import codecs
from pathlib import Path

import pytest

from seg_output.adapters.factory import create_from_file
from seg_output.domain.errors import OutputUnavailableError, UnknownCharsetError
from seg_output.domain.tagged_word import TaggedWord


def _write_line(handler, words: list[TaggedWord], seg_only: bool = False) -> None:  # noqa: ANN001
    handler.handle_line_start()
    handler.handle_line_segment(words, seg_only)
    handler.handle_line_end()


def test_default_charset_round_trips_multibyte_text(tmp_path: Path) -> None:
    # Absent charset name writes UTF-8.
    path = tmp_path / "out.txt"
    handler = create_from_file(str(path))
    assert handler is not None
    handler.on_program_start()
    _write_line(handler, [TaggedWord("北京", "ns"), TaggedWord("欢迎", "v"), TaggedWord("你", "r")])
    handler.on_program_end()
    assert path.read_bytes().decode("utf-8") == "北京/ns 欢迎/v 你/r\n"


def test_null_charset_name_means_utf8(tmp_path: Path) -> None:
    path = tmp_path / "out.txt"
    handler = create_from_file(path, None)
    assert handler is not None
    _write_line(handler, [TaggedWord("清华", "nz")], True)
    handler.close()
    assert path.read_text(encoding="utf-8") == "清华\n"


def test_explicit_charset_name(tmp_path: Path) -> None:
    path = tmp_path / "out.txt"
    handler = create_from_file(path, "GBK")
    assert handler is not None
    _write_line(handler, [TaggedWord("北京", "ns")])
    handler.close()
    assert path.read_bytes() == "北京/ns\n".encode("gbk")


def test_typed_charset_wins_over_name(tmp_path: Path) -> None:
    path = tmp_path / "out.txt"
    handler = create_from_file(path, "no-such-charset", charset=codecs.lookup("utf-16-le"))
    assert handler is not None
    _write_line(handler, [TaggedWord("北京", "ns")])
    handler.close()
    assert path.read_bytes() == "北京/ns\n".encode("utf-16-le")


def test_unknown_charset_creates_no_file(tmp_path: Path) -> None:
    path = tmp_path / "out.txt"
    with pytest.raises(UnknownCharsetError):
        create_from_file(path, "no-such-charset")
    assert not path.exists()


def test_null_path_returns_no_handler() -> None:
    # None is the "no output requested" signal, not an error.
    handler = create_from_file(None)
    assert handler is None
    if handler is not None:
        handler.on_program_end()


def test_existing_file_is_truncated(tmp_path: Path) -> None:
    path = tmp_path / "out.txt"
    path.write_text("stale content\n", encoding="utf-8")
    handler = create_from_file(path)
    assert handler is not None
    _write_line(handler, [TaggedWord("新", "a")])
    handler.close()
    assert path.read_text(encoding="utf-8") == "新/a\n"


def test_missing_directory_is_resource_unavailable(tmp_path: Path) -> None:
    with pytest.raises(OutputUnavailableError):
        create_from_file(tmp_path / "missing" / "out.txt")


def test_lines_reach_disk_before_termination(tmp_path: Path) -> None:
    # The file writer is line-buffered.
    path = tmp_path / "out.txt"
    handler = create_from_file(path)
    assert handler is not None
    _write_line(handler, [TaggedWord("北京", "ns")])
    assert path.read_text(encoding="utf-8") == "北京/ns\n"
    handler.close()


def test_terminator_is_not_translated(tmp_path: Path) -> None:
    # Same bytes on every platform, so file output diffs cleanly against buffer output.
    path = tmp_path / "out.txt"
    handler = create_from_file(path)
    assert handler is not None
    _write_line(handler, [TaggedWord("a", "n")])
    handler.close()
    assert path.read_bytes() == b"a/n\n"


def test_file_is_closed_on_program_end(tmp_path: Path) -> None:
    path = tmp_path / "out.txt"
    handler = create_from_file(path)
    assert handler is not None
    handler.on_program_start()
    handler.on_program_end()
    assert path.read_text(encoding="utf-8") == ""


def test_typed_non_text_charset_creates_no_file(tmp_path: Path) -> None:
    # A bytes-to-bytes codec is rejected before the file is opened.
    path = tmp_path / "out.txt"
    with pytest.raises(UnknownCharsetError):
        create_from_file(path, charset=codecs.lookup("base64"))
    assert not path.exists()
