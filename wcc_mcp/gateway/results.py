"""Tool invocation request/result envelopes and download persistence."""

from __future__ import annotations

import contextlib
import os
import tempfile
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import IO, Any


def _default_file_mode() -> int:
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


# mkstemp creates 0600 files; downloads follow the process umask like a plain open()
_DOWNLOAD_FILE_MODE = _default_file_mode()


@dataclass(frozen=True)
class ToolInvocation:
    """One incoming ``tools/call``: consumed synchronously, never stored."""

    tool_name: str
    arguments: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class ContentBlock:
    text: str
    kind: str = "text"

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.kind, "text": self.text}


@dataclass(frozen=True)
class ToolResult:
    """``Success`` when ``is_error`` is False, ``Failure`` otherwise."""

    content: tuple[ContentBlock, ...]
    is_error: bool = False

    @classmethod
    def success(cls, text: str) -> "ToolResult":
        return cls(content=(ContentBlock(text=text),))

    @classmethod
    def failure(cls, text: str) -> "ToolResult":
        return cls(content=(ContentBlock(text=text),), is_error=True)

    @property
    def text(self) -> str:
        return "\n".join(block.text for block in self.content)

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"content": [block.to_dict() for block in self.content]}
        if self.is_error:
            payload["isError"] = True
        return payload


@dataclass(frozen=True)
class FileDownload:
    """Binary tool output: ``write`` streams the remote body into a sink.

    The dispatcher owns the target file; handlers never touch the filesystem.
    """

    output_path: str
    write: Callable[[IO[bytes]], int] = field(repr=False)
    label: str = "Document"

    @property
    def confirmation(self) -> str:
        return f"{self.label} downloaded successfully to: {self.output_path}"


def save_download(download: FileDownload) -> int:
    """Write a download to ``output_path``, creating parent directories.

    Bytes land in a temporary sibling file that replaces the target only once the
    transfer completed, so a failed download leaves no partial file behind.
    """
    target = Path(download.output_path).expanduser()
    target.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(prefix=f".{target.name}.", suffix=".part", dir=target.parent)
    try:
        with os.fdopen(fd, "wb") as sink:
            written = download.write(sink)
        os.chmod(tmp_name, _DOWNLOAD_FILE_MODE)
        os.replace(tmp_name, target)
    except BaseException:
        with contextlib.suppress(OSError):
            os.unlink(tmp_name)
        raise
    return written
