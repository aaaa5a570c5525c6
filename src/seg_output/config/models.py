from __future__ import annotations

from codecs import CodecInfo
from typing import Literal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator

from seg_output.domain.line_format import LINE_TERMINATOR, TAG_DELIMITER, TOKEN_SEPARATOR, LineFormat

# Config models map the YAML `output` section to typed structures.


class LineFormatConfig(BaseModel):
    # Rendering constants; defaults match every built-in sink.
    model_config = ConfigDict(extra="forbid", frozen=True)
    delimiter: str = Field(default=TAG_DELIMITER, min_length=1)
    terminator: str = Field(default=LINE_TERMINATOR, min_length=1)
    separator: str = TOKEN_SEPARATOR

    def to_line_format(self) -> LineFormat:
        return LineFormat(delimiter=self.delimiter, terminator=self.terminator, separator=self.separator)


class LogConfig(BaseModel):
    # Where handler lifecycle events go; omitted means no event logging.
    model_config = ConfigDict(extra="forbid")
    kind: Literal["stderr", "jsonl"] = "stderr"
    path: str | None = None

    @model_validator(mode="after")
    def _require_path(self) -> LogConfig:
        # A jsonl sink without a path would have nowhere to append.
        if self.kind == "jsonl" and not self.path:
            raise ValueError("output.log.path is required when kind is 'jsonl'")
        return self


class OutputConfig(BaseModel):
    # One structure replaces the overloaded constructors: path, charset name and typed charset are
    # all optional; precedence is charset > charset_name > UTF-8.
    model_config = ConfigDict(extra="forbid", arbitrary_types_allowed=True)
    kind: str = "stdout"
    # A missing path on the file kind means "no output requested", not an error.
    path: str | None = None
    charset_name: str | None = Field(default=None, validation_alias=AliasChoices("charset_name", "encoding"))
    charset: CodecInfo | None = None
    format: LineFormatConfig = Field(default_factory=LineFormatConfig)
    log: LogConfig | None = None
