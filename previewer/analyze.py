"""
Lexical markup scan of an HTML file.

The counts come from regular expressions over the raw text, not from a parsed
document. Tags split across lines, nested elements and lookalike tag names
(``<pre>`` matches the paragraph pattern, ``<abbr>`` the link pattern) all
skew the numbers, so treat the result as an approximation.
"""

import logging
import re
from dataclasses import asdict, dataclass
from typing import Dict

from previewer.errors import ReadError
from previewer.preview import resolve_input

logger = logging.getLogger("ContentAnalyzer")

HEADING_PATTERN = re.compile(r"<h[1-6][^>]*>.*?</h[1-6]>")
PARAGRAPH_PATTERN = re.compile(r"<p[^>]*>.*?</p>")
IMAGE_PATTERN = re.compile(r"<img[^>]*>")
LINK_PATTERN = re.compile(r"<a[^>]*>.*?</a>")


@dataclass
class AnalysisResult:
    headings: int
    paragraphs: int
    images: int
    links: int

    def to_dict(self) -> Dict[str, int]:
        return asdict(self)


def count_structure(content: str) -> AnalysisResult:
    return AnalysisResult(
        headings=len(HEADING_PATTERN.findall(content)),
        paragraphs=len(PARAGRAPH_PATTERN.findall(content)),
        images=len(IMAGE_PATTERN.findall(content)),
        links=len(LINK_PATTERN.findall(content)),
    )


def analyze_content(file_path: str) -> AnalysisResult:
    """
    Count headings, paragraphs, images and links in ``file_path``.

    Raises:
        NotFoundError: the path does not name an existing file
        ReadError: the file could not be read as UTF-8 text
    """
    path = resolve_input(file_path)
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ReadError(file_path, str(e)) from e

    result = count_structure(content)
    logger.debug("Analyzed %s: %s", path, result)
    return result
