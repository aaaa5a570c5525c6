from __future__ import annotations

import codecs
from codecs import CodecInfo

from seg_output.domain.errors import UnknownCharsetError

DEFAULT_CHARSET = codecs.lookup("utf-8")


def resolve_charset(charset: CodecInfo | None = None, charset_name: str | None = None) -> CodecInfo:
    # Precedence: typed charset > charset name > UTF-8. Only selection happens here, never detection.
    if charset is not None:
        _require_text_encoding(charset.name)
        return charset
    if charset_name is None:
        return DEFAULT_CHARSET
    try:
        info = codecs.lookup(charset_name)
    except LookupError as exc:
        raise UnknownCharsetError(charset_name) from exc
    _require_text_encoding(info.name, charset_name)
    return info


def charset_label(charset: CodecInfo) -> str:
    # Canonical codec name, usable as the ``encoding`` argument of open().
    return charset.name


def _require_text_encoding(codec_name: str, requested: str | None = None) -> None:
    # Bytes-to-bytes codecs (base64, zlib...) are registered but cannot back a text sink.
    try:
        "".encode(codec_name)
    except LookupError as exc:
        raise UnknownCharsetError(requested or codec_name) from exc
