"""YAML front-matter parsing.

Splits a markdown document into its metadata preamble and body.
"""

import re
from dataclasses import dataclass
from typing import Any

import yaml
from loguru import logger


@dataclass
class FrontmatterResult:
    """Result from parsing YAML frontmatter.

    Attributes:
        data: Parsed YAML data as dictionary (empty if no frontmatter).
        content: Document content after frontmatter is removed.
        has_frontmatter: Whether frontmatter was found.
    """

    data: dict[str, Any]
    content: str
    has_frontmatter: bool


# Matches a leading ---\n<yaml>\n--- block; the yaml part may be empty.
_FRONTMATTER_PATTERN = re.compile(
    r"\A---[ \t]*\r?\n(?P<yaml>.*?)^---[ \t]*(?:\r?\n|\Z)",
    re.DOTALL | re.MULTILINE,
)


def parse_frontmatter(text: str) -> FrontmatterResult:
    """Parse YAML frontmatter from markdown text.

    Documents without a preamble, or whose preamble is not valid YAML,
    come back with empty data and the full text as content.

    Example:
        >>> result = parse_frontmatter('''---
        ... id: doc-007
        ... title: Onboarding
        ... ---
        ... # Welcome
        ... ''')
        >>> result.data
        {'id': 'doc-007', 'title': 'Onboarding'}
        >>> result.content
        '# Welcome\\n'
    """
    source = text[1:] if text.startswith("\ufeff") else text
    match = _FRONTMATTER_PATTERN.match(source)
    if not match:
        return FrontmatterResult(data={}, content=text, has_frontmatter=False)

    try:
        data = yaml.safe_load(match.group("yaml"))
    except yaml.YAMLError as e:
        logger.warning(f"Invalid YAML frontmatter, treating as body: {e}")
        return FrontmatterResult(data={}, content=text, has_frontmatter=False)

    if not isinstance(data, dict):
        # Empty, scalar or list preambles carry no named fields
        data = {}

    return FrontmatterResult(data=data, content=source[match.end() :], has_frontmatter=True)
