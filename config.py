# config.py
import logging
import os
from pathlib import Path
from dotenv import load_dotenv


load_dotenv()


def _env_bool(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() not in ("0", "false", "no", "off")


# a relative path resolves against the working directory at startup
SCREENSHOTS_DIR = Path(
    os.environ.get("FILE_PREVIEW_SCREENSHOTS_DIR", "screenshots")
).expanduser().resolve()

NAVIGATION_TIMEOUT_MS = int(os.environ.get("FILE_PREVIEW_NAVIGATION_TIMEOUT_MS", 30_000))
IMAGE_TIMEOUT_MS = int(os.environ.get("FILE_PREVIEW_IMAGE_TIMEOUT_MS", 10_000))
SETTLE_MS = int(os.environ.get("FILE_PREVIEW_SETTLE_MS", 1_000))

HEADLESS = _env_bool("FILE_PREVIEW_HEADLESS", True)

LOG_LEVEL = os.environ.get("FILE_PREVIEW_LOG_LEVEL", "INFO").upper()

# stdout carries the JSON-RPC stream, so logs go to stderr
logging.basicConfig(
    level=getattr(logging, LOG_LEVEL, logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
)
