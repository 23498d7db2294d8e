"""Console output channels.

Mirrors the split of a JavaScript-style console: `error` and `warn` write to
stderr, `info`, `log` and `debug` write to stdout. Streams are resolved when
written to, so redirected `sys.stdout`/`sys.stderr` are honoured.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import TextIO

from .format import format_message


@dataclass(slots=True)
class Console:
    """Formatting writer with one method per output channel."""
    
    stdout: TextIO | None = None
    stderr: TextIO | None = None
    
    def _write(self, stream: TextIO, template: str, args: tuple[object, ...]) -> None:
        print(format_message(template, *args), file=stream)
    
    def error(self, template: str, *args: object) -> None: self._write(self.stderr or sys.stderr, template, args)
    def warn(self, template: str, *args: object) -> None: self._write(self.stderr or sys.stderr, template, args)
    def info(self, template: str, *args: object) -> None: self._write(self.stdout or sys.stdout, template, args)
    def log(self, template: str, *args: object) -> None: self._write(self.stdout or sys.stdout, template, args)
    def debug(self, template: str, *args: object) -> None: self._write(self.stdout or sys.stdout, template, args)
