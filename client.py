from mcp import ClientSession, StdioServerParameters
from mcp.client.stdio import stdio_client
import asyncio
import sys
from pathlib import Path

# Create server parameters for stdio connection
server_params = StdioServerParameters(
    command="uv",  # Executable
    args=[
        "run",
        "--with", "mcp",
        "--with", "python-dotenv",
        "--with", "playwright",
        "mcp", "run", "server.py"
    ],  # Optional command line arguments
    env=None,  # Optional environment variables
)


def text_of(result) -> str:
    """Join the text blocks of a tool result."""
    return "\n".join(block.text for block in result.content if getattr(block, "type", None) == "text")


async def run(file_path: str):
    async with stdio_client(server_params) as (read, write):
        async with ClientSession(read, write) as session:
            # Initialize the connection
            await session.initialize()

            print("Connection initialized")

            tools = await session.list_tools()
            print("Available tools:")
            for tool in tools.tools:
                print(f" - {tool.name}: {tool.description.splitlines()[0] if tool.description else ''}")

            # Example 1: structure counts
            try:
                analysis = await session.call_tool(
                    "analyze_content",
                    arguments={"filePath": file_path}
                )
                print(f"Analysis result{' (error)' if analysis.isError else ''}:\n{text_of(analysis)}")
            except Exception as e:
                print(f"analyze_content call failed: {e}")

            # Example 2: screenshot
            try:
                preview = await session.call_tool(
                    "preview_file",
                    arguments={"filePath": file_path, "width": 1280, "height": 800}
                )
                # the rendered HTML can be long, only show the first line
                first_line = (text_of(preview).splitlines() or [""])[0]
                print(f"Preview result{' (error)' if preview.isError else ''}: {first_line}")
            except Exception as e:
                print(f"preview_file call failed: {e}")


if __name__ == "__main__":
    if len(sys.argv) != 2:
        print("Usage: python client.py <local HTML path>")
        sys.exit(1)
    asyncio.run(run(str(Path(sys.argv[1]).expanduser().resolve())))
