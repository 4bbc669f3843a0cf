"""Errors raised by the preview and analysis operations."""

from __future__ import annotations


class PreviewerError(Exception):
    """Base class for every failure surfaced to a tool caller."""


class NotFoundError(PreviewerError, FileNotFoundError):
    def __init__(self, file_path: str):
        super().__init__(f"File not found: {file_path}")
        self.file_path = file_path


class ReadError(PreviewerError, OSError):
    def __init__(self, file_path: str, reason: str):
        super().__init__(f"Failed to read {file_path}: {reason}")
        self.file_path = file_path


class EngineLaunchError(PreviewerError):
    pass


class NavigationError(PreviewerError):
    pass


class NavigationTimeoutError(NavigationError):
    def __init__(self, url: str, timeout_ms: int):
        super().__init__(f"Navigation to {url} timed out after {timeout_ms} ms")
        self.url = url
        self.timeout_ms = timeout_ms


class StyleResourceError(PreviewerError):
    def __init__(self, css_path: str, reason: str):
        super().__init__(f"Stylesheet unavailable: {css_path} ({reason})")
        self.css_path = css_path


class UnknownOperationError(PreviewerError):
    def __init__(self, name: str):
        super().__init__(f"Unknown tool: {name}")
        self.name = name


class MissingArgumentError(PreviewerError):
    def __init__(self, argument: str):
        super().__init__(f"Missing required argument: {argument}")
        self.argument = argument


class InvalidArgumentError(PreviewerError, ValueError):
    def __init__(self, argument: str, value, reason: str = "must be a positive integer"):
        super().__init__(f"Invalid argument {argument}={value!r}: {reason}")
        self.argument = argument
        self.value = value


class CaptureError(PreviewerError):
    pass
