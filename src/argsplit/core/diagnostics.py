"""Formatted error, information and debug messages."""

from __future__ import annotations

import inspect
import os
import sys
from typing import TYPE_CHECKING, TextIO

from argsplit.core import style as style_module
from argsplit.core.style import Style

if TYPE_CHECKING:
    from argsplit.config.schema import Config

ERROR_SYMBOL = "✖"
INFO_SYMBOL = "●"


class Diagnostics:
    """Writes styled diagnostics to an error stream.

    With no explicit style the process-wide style is read at print time, so a
    toggle after construction still takes effect. The same goes for the
    stream, which defaults to the current sys.stderr.
    """

    def __init__(
        self,
        style: Style | None = None,
        stream: TextIO | None = None,
        error_symbol: str = ERROR_SYMBOL,
        info_symbol: str = INFO_SYMBOL,
    ) -> None:
        self._style = style
        self._stream = stream
        self.error_symbol = error_symbol
        self.info_symbol = info_symbol

    @classmethod
    def from_config(
        cls,
        config: Config,
        style: Style | None = None,
        stream: TextIO | None = None,
    ) -> Diagnostics:
        return cls(
            style=style,
            stream=stream,
            error_symbol=config.symbols.error,
            info_symbol=config.symbols.info,
        )

    @property
    def style(self) -> Style:
        return self._style if self._style is not None else style_module.STYLE

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stderr

    def format_error(self, title: str, message: str) -> str:
        s = self.style
        return f"{s.fore_red}{self.error_symbol}{s.reset}{s.bold} {title}{s.reset}: {message}"

    def format_info(self, title: str, message: str) -> str:
        s = self.style
        return f"{s.fore_brblue}{self.info_symbol}{s.reset}{s.bold} {title}{s.reset}: {message}"

    def format_debug(self, message: str, location: str) -> str:
        s = self.style
        return f"{s.dim}{location}:{s.reset}{s.bold}Debug{s.reset}: {message}"

    def error(self, title: str, message: str) -> None:
        self._write(self.format_error(title, message))

    def info(self, title: str, message: str) -> None:
        self._write(self.format_info(title, message))

    def debug(self, message: str) -> None:
        """Write a debug message prefixed with the caller's file:line."""
        frame = inspect.currentframe()
        caller = frame.f_back if frame is not None else None
        if caller is not None:
            location = f"{os.path.basename(caller.f_code.co_filename)}:{caller.f_lineno}"
        else:
            location = "<unknown>"
        del frame, caller
        self._write(self.format_debug(message, location))

    def _write(self, line: str) -> None:
        self.stream.write(line + "\n")
