"""
Operations
---------
Maps tool names and argument dictionaries onto the preview and analysis
workflows and formats their results as the text handed back to the caller.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Awaitable, Callable, Dict, Mapping

from previewer.analyze import AnalysisResult, analyze_content
from previewer.errors import InvalidArgumentError, MissingArgumentError, UnknownOperationError
from previewer.preview import (
    DEFAULT_HEIGHT,
    DEFAULT_WIDTH,
    FilePreviewer,
    InfoCallback,
    PreviewResult,
    check_dimension,
)

logger = logging.getLogger("FileOperations")

PREVIEW_FILE = "preview_file"
ANALYZE_CONTENT = "analyze_content"

REQUIRED_ARGUMENTS: Dict[str, tuple] = {
    PREVIEW_FILE: ("filePath",),
    ANALYZE_CONTENT: ("filePath",),
}


def format_preview(result: PreviewResult) -> str:
    return f"Screenshot saved to: {result.screenshot_path}\n\nHTML Content:\n{result.content}"


def format_analysis(result: AnalysisResult) -> str:
    return json.dumps(result.to_dict(), indent=2)


def require_arguments(name: str, arguments: Mapping[str, Any]) -> None:
    for argument in REQUIRED_ARGUMENTS[name]:
        if arguments.get(argument) in (None, ""):
            raise MissingArgumentError(argument)


def dimension_argument(arguments: Mapping[str, Any], name: str, default: int) -> int:
    """
    Read a viewport size from tool arguments. Integral numbers and digit
    strings are accepted; anything else, or a value below 1, is rejected.
    """
    value = arguments.get(name)
    if value is None:
        return default
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    elif isinstance(value, str):
        try:
            value = int(value.strip())
        except ValueError as e:
            raise InvalidArgumentError(name, arguments[name]) from e
    check_dimension(name, value)
    return value


class FileOperations:
    """
    Dispatches ``preview_file`` and ``analyze_content`` calls.

    Parameters:
        previewer: Previewer bound to the process-wide browser session
    """

    def __init__(self, previewer: FilePreviewer):
        self.previewer = previewer
        self._handlers: Dict[str, Callable[..., Awaitable[str]]] = {
            PREVIEW_FILE: self._preview_file,
            ANALYZE_CONTENT: self._analyze_content,
        }

    @property
    def names(self) -> list:
        return list(self._handlers)

    async def call(
        self,
        name: str,
        arguments: Mapping[str, Any] | None,
        info_callback: InfoCallback | None = None,
    ) -> str:
        """
        Run the operation ``name`` and return its text payload.

        Parameters:
            info_callback: Receives progress messages for this call

        Raises:
            UnknownOperationError: ``name`` is not a known operation
            MissingArgumentError: a required argument is absent or empty
            InvalidArgumentError: an optional argument has an unusable value
            PreviewerError: whatever the operation itself raises
        """
        handler = self._handlers.get(name)
        if handler is None:
            raise UnknownOperationError(name)
        arguments = arguments or {}
        require_arguments(name, arguments)
        logger.info("Calling %s with %s", name, dict(arguments))
        return await handler(arguments, info_callback)

    async def _preview_file(self, arguments: Mapping[str, Any], info_callback: InfoCallback | None) -> str:
        result = await self.previewer.preview(
            arguments["filePath"],
            width=dimension_argument(arguments, "width", DEFAULT_WIDTH),
            height=dimension_argument(arguments, "height", DEFAULT_HEIGHT),
            info_callback=info_callback,
        )
        return format_preview(result)

    async def _analyze_content(self, arguments: Mapping[str, Any], info_callback: InfoCallback | None) -> str:
        return format_analysis(analyze_content(arguments["filePath"]))
