from __future__ import annotations

import codecs
from pathlib import Path

import pytest
from pydantic import ValidationError

from seg_output.config.loader import ConfigError, load_output_config
from seg_output.config.models import LineFormatConfig, OutputConfig
from seg_output.domain.line_format import DEFAULT_LINE_FORMAT


def _write(tmp_path: Path, lines: list[str]) -> Path:
    path = tmp_path / "config.yml"
    path.write_text("\n".join(lines), encoding="utf-8")
    return path


def test_load_output_config_happy_path(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        [
            "version: 1",
            "output:",
            "  kind: file",
            "  path: out.txt",
            "  encoding: gbk",
            "  format:",
            "    delimiter: _",
        ],
    )
    cfg = load_output_config(path)
    assert cfg.kind == "file"
    assert cfg.path == "out.txt"
    assert cfg.charset_name == "gbk"
    assert cfg.format.delimiter == "_"
    assert cfg.format.terminator == "\n"


def test_empty_output_section_uses_defaults(tmp_path: Path) -> None:
    cfg = load_output_config(_write(tmp_path, ["output:"]))
    assert cfg.kind == "stdout"
    assert cfg.path is None
    assert cfg.charset_name is None
    assert cfg.format.to_line_format() == DEFAULT_LINE_FORMAT


def test_root_must_be_mapping(tmp_path: Path) -> None:
    with pytest.raises(ConfigError):
        load_output_config(_write(tmp_path, ["- output"]))


def test_unknown_top_level_key_fails(tmp_path: Path) -> None:
    with pytest.raises(ConfigError) as info:
        load_output_config(_write(tmp_path, ["output:", "  kind: string", "extra: 1"]))
    assert "extra" in str(info.value)


def test_missing_output_section_fails(tmp_path: Path) -> None:
    with pytest.raises(ConfigError):
        load_output_config(_write(tmp_path, ["version: 1"]))


def test_unknown_output_key_fails(tmp_path: Path) -> None:
    with pytest.raises(ConfigError):
        load_output_config(_write(tmp_path, ["output:", "  colour: red"]))


def test_empty_delimiter_is_rejected() -> None:
    with pytest.raises(ValidationError):
        LineFormatConfig(delimiter="")


def test_typed_charset_is_accepted() -> None:
    cfg = OutputConfig(kind="file", path="out.txt", charset=codecs.lookup("utf-16"))
    assert cfg.charset is not None
    assert cfg.charset.name == "utf-16"
