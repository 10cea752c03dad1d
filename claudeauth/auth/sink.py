"""Host sink: secret masking and step outputs of the surrounding CI system."""

from __future__ import annotations

import os
import sys
import uuid
from pathlib import Path
from typing import Protocol, TextIO

from loguru import logger


class HostSink(Protocol):
    """Where refreshed tokens are handed to the CI system."""

    def register_secret(self, value: str) -> None: ...

    def set_output(self, key: str, value: str) -> None: ...


def _escape_data(value: str) -> str:
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def _escape_property(value: str) -> str:
    return _escape_data(value).replace(":", "%3A").replace(",", "%2C")


class GitHubActionsSink:
    """GitHub Actions workflow commands, written the way @actions/core writes them."""

    def __init__(self, stream: TextIO | None = None, output_path: str | Path | None = None):
        self._stream = stream
        self._output_path = output_path

    @property
    def stream(self) -> TextIO:
        return self._stream or sys.stdout

    @property
    def output_path(self) -> Path | None:
        path = self._output_path or os.environ.get("GITHUB_OUTPUT")
        return Path(path) if path else None

    def _issue_command(self, command: str, message: str, **properties: str) -> None:
        props = ",".join(f"{k}={_escape_property(v)}" for k, v in properties.items())
        head = f"::{command} {props}" if props else f"::{command}"
        self.stream.write(f"{head}::{_escape_data(message)}{os.linesep}")
        self.stream.flush()

    def register_secret(self, value: str) -> None:
        self._issue_command("add-mask", value)

    def set_output(self, key: str, value: str) -> None:
        path = self.output_path
        if path is None:
            logger.warning("GITHUB_OUTPUT is not set, falling back to the set-output command")
            self.stream.write(os.linesep)
            self._issue_command("set-output", value, name=key)
            return

        delimiter = f"ghadelimiter_{uuid.uuid4()}"
        if delimiter in key:
            raise ValueError(f"Unexpected input: name should not contain the delimiter {delimiter}")
        if delimiter in value:
            raise ValueError(f"Unexpected input: value should not contain the delimiter {delimiter}")
        with open(path, "a", encoding="utf-8") as fp:
            fp.write(f"{key}<<{delimiter}{os.linesep}{value}{os.linesep}{delimiter}{os.linesep}")
