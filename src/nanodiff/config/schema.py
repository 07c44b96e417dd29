"""Configuration schema — dataclasses for every config section."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

SourceModeName = Literal["streaming", "eager"]
OutputFormat = Literal["unified", "terminal", "json"]

OUTPUT_FORMATS = ("unified", "terminal", "json")


@dataclass
class DiffConfig:
    mode: SourceModeName = "streaming"
    full_context: bool = False  # emit aligned lines before the first difference too
    encoding: str = "utf-8"
    missing_as_empty: bool = False


@dataclass
class OutputConfig:
    format: OutputFormat = "unified"
    show_context: bool = True
    show_header: bool = False
    show_summary: bool = False


@dataclass
class ExitConfig:
    on_diff: int = 1  # exit status when the documents differ


@dataclass
class NanodiffConfig:
    version: str = "1.0"
    diff: DiffConfig = field(default_factory=DiffConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    exit: ExitConfig = field(default_factory=ExitConfig)
