# server.py  --  FastMCP server entry point
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator
from typing import Any
from mcp.server.fastmcp import FastMCP, Context
from mcp.server.fastmcp.exceptions import ToolError
import sys
import config
from previewer.browser_session import BrowserSession
from previewer.errors import PreviewerError
from previewer.operations import FileOperations, PREVIEW_FILE, ANALYZE_CONTENT
from previewer.preview import FilePreviewer, DEFAULT_WIDTH, DEFAULT_HEIGHT

def debug(msg: str):
    # keep stdout free for the stdio JSON-RPC stream
    print(msg, file=sys.stderr)

debug("== FilePreview server starting ==")

# one browser per process, launched on the first preview
SESSION = BrowserSession(headless=config.HEADLESS)

OPERATIONS = FileOperations(
    FilePreviewer(
        SESSION,
        screenshots_dir=config.SCREENSHOTS_DIR,
        navigation_timeout_ms=config.NAVIGATION_TIMEOUT_MS,
        image_timeout_ms=config.IMAGE_TIMEOUT_MS,
        settle_ms=config.SETTLE_MS,
    )
)

@asynccontextmanager
async def lifespan(app: FastMCP) -> AsyncIterator[dict]:
    debug(">> lifespan: ready, browser will launch on first preview")
    try:
        yield {}
    finally:
        debug(">> lifespan: cleaning up resources")
        await SESSION.release()
        debug(">> Browser quit")

mcp = FastMCP(
    "FilePreview",
    lifespan=lifespan,
    dependencies=[
        # List dependencies here, uv/pip will install automatically
        "playwright",
        "python-dotenv",
    ],
)


async def _invoke(name: str, arguments: dict[str, Any], ctx: Context) -> str:
    try:
        return await OPERATIONS.call(name, arguments, info_callback=ctx.info)
    except PreviewerError as e:
        debug(f"!!!! {name} failed: {e}")
        await ctx.error(f"❌ {e}")
        raise ToolError(str(e)) from e

# -----------------------------------
# Tool 1: Preview local HTML file
# -----------------------------------
@mcp.tool()
async def preview_file(
    filePath: str,
    width: int = DEFAULT_WIDTH,
    height: int = DEFAULT_HEIGHT,
    *,
    ctx: Context
) -> str:
    """
    Preview local HTML file and capture screenshot.
    The page is rendered at width x height with the shared ../style.css and the
    page's own .css injected, then captured full-page into the screenshots directory.

    Args:
        filePath: Path to local HTML file
        width: Viewport width
        height: Viewport height

    Returns:
        The saved screenshot path followed by the rendered HTML
    """
    debug(f"--> preview_file called with: {filePath} ({width}x{height})")
    await ctx.info(f"📸 Previewing {filePath}")
    text = await _invoke(
        PREVIEW_FILE,
        {"filePath": filePath, "width": width, "height": height},
        ctx,
    )
    await ctx.info("✅ Preview done")
    return text

# -----------------------------------
# Tool 2: Analyze HTML structure
# -----------------------------------
@mcp.tool()
async def analyze_content(
    filePath: str,
    *,
    ctx: Context
) -> str:
    """
    Analyze HTML content structure.
    Counts headings, paragraphs, images and links with a lexical scan of the raw
    markup; the numbers are an approximation, not a parsed-DOM count.

    Args:
        filePath: Path to local HTML file

    Returns:
        JSON object with headings, paragraphs, images and links counts
    """
    debug(f"--> analyze_content called with: {filePath}")
    await ctx.info(f"🔍 Analyzing {filePath}")
    return await _invoke(ANALYZE_CONTENT, {"filePath": filePath}, ctx)

if __name__ == "__main__":
    debug("== entering mcp.run() ==")
    mcp.run()
    debug("== mcp.run() has exited ==")
