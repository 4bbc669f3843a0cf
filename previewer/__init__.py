"""
previewer
---------
Render local HTML files in a headless browser and scan their markup.
"""

from previewer.errors import (
    CaptureError,
    EngineLaunchError,
    InvalidArgumentError,
    MissingArgumentError,
    NavigationError,
    NavigationTimeoutError,
    NotFoundError,
    PreviewerError,
    ReadError,
    StyleResourceError,
    UnknownOperationError,
)

__all__ = [
    "CaptureError",
    "EngineLaunchError",
    "InvalidArgumentError",
    "MissingArgumentError",
    "NavigationError",
    "NavigationTimeoutError",
    "NotFoundError",
    "PreviewerError",
    "ReadError",
    "StyleResourceError",
    "UnknownOperationError",
]
