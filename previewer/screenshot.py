"""Preview one local HTML file from the command line, without the MCP server.

Usage: python -m previewer.screenshot <local HTML path> [width height]
"""

import asyncio
import sys
from pathlib import Path
from typing import List, Optional

import config
from previewer.browser_session import BrowserSession
from previewer.errors import PreviewerError
from previewer.preview import DEFAULT_HEIGHT, DEFAULT_WIDTH, FilePreviewer

USAGE = "Usage: python -m previewer.screenshot <local HTML path> [width height]"


def parse_argv(argv: List[str]) -> Optional[tuple]:
    if len(argv) not in (1, 3):
        return None
    if len(argv) == 1:
        return argv[0], DEFAULT_WIDTH, DEFAULT_HEIGHT
    try:
        return argv[0], int(argv[1]), int(argv[2])
    except ValueError:
        return None


async def capture(file_path: str, width: int, height: int) -> str:
    session = BrowserSession(headless=config.HEADLESS)
    previewer = FilePreviewer(
        session,
        screenshots_dir=config.SCREENSHOTS_DIR,
        navigation_timeout_ms=config.NAVIGATION_TIMEOUT_MS,
        image_timeout_ms=config.IMAGE_TIMEOUT_MS,
        settle_ms=config.SETTLE_MS,
    )
    try:
        result = await previewer.preview(file_path, width, height)
    finally:
        await session.release()
    return result.screenshot_path


def main(argv: Optional[List[str]] = None) -> None:
    parsed = parse_argv(sys.argv[1:] if argv is None else argv)
    if parsed is None:
        print(USAGE, file=sys.stderr)
        sys.exit(1)

    file_path, width, height = parsed
    file_path = str(Path(file_path).expanduser())
    try:
        screenshot_path = asyncio.run(capture(file_path, width, height))
    except PreviewerError as e:
        print(f"❌ {e}", file=sys.stderr)
        sys.exit(1)

    print(screenshot_path)


if __name__ == "__main__":
    main()
