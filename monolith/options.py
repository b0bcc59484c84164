"""Run options, the program's error type and diagnostic message output."""

from __future__ import annotations

import enum
import os
import sys
from dataclasses import dataclass, field

from monolith.cookies import Cookie

_ANSI_COLOR_RED = "\x1b[31m"
_ANSI_COLOR_RESET = "\x1b[0m"
_ENV_VAR_NO_COLOR = "NO_COLOR"
_ENV_VAR_TERM = "TERM"


class MonolithError(Exception):
    """Raised when a monolithic document cannot be created."""

    def __init__(self, details: str) -> None:
        super().__init__(details)
        self.details = details

    def __str__(self) -> str:
        return self.details


class OutputFormat(enum.Enum):
    """Format of the produced document."""

    HTML = "html"


@dataclass
class Options:
    """Settings that control how a document and its assets are processed."""

    base_url: str | None = None
    blacklist_domains: bool = False
    cookies: list[Cookie] = field(default_factory=list)
    domains: list[str] | None = None
    encoding: str | None = None
    ignore_errors: bool = False
    insecure: bool = False
    isolate: bool = False
    no_audio: bool = False
    no_css: bool = False
    no_fonts: bool = False
    no_frames: bool = False
    no_images: bool = False
    no_js: bool = False
    no_metadata: bool = False
    no_video: bool = False
    output_format: OutputFormat = OutputFormat.HTML
    silent: bool = False
    timeout: int = 0
    unwrap_noscript: bool = False
    user_agent: str | None = None


def read_stdin() -> bytes:
    """Read all of standard input as bytes; return whatever was read on error."""
    stream = getattr(sys.stdin, "buffer", sys.stdin)
    chunks: list[bytes] = []
    try:
        while True:
            chunk = stream.read(65536)
            if not chunk:
                break
            chunks.append(chunk.encode() if isinstance(chunk, str) else bytes(chunk))
    except (OSError, ValueError):
        pass
    return b"".join(chunks)


def _stderr_is_tty() -> bool:
    try:
        return sys.stderr.isatty()
    except (AttributeError, ValueError, OSError):
        return False


def _write_stderr(text: str) -> None:
    try:
        sys.stderr.write(text)
        sys.stderr.flush()
    except (OSError, ValueError):
        pass


def print_error_message(text: str, options: Options) -> None:
    """Write an error line to stderr, in red when the terminal allows it."""
    if options.silent:
        return

    no_color = _ENV_VAR_NO_COLOR in os.environ or not _stderr_is_tty()
    if os.environ.get(_ENV_VAR_TERM) == "dumb":
        no_color = True

    if no_color:
        _write_stderr(f"{text}\n")
    else:
        _write_stderr(f"{_ANSI_COLOR_RED}{text}{_ANSI_COLOR_RESET}\n")


def print_info_message(text: str, options: Options) -> None:
    """Write an informational line to stderr unless output is silenced."""
    if options.silent:
        return
    _write_stderr(f"{text}\n")