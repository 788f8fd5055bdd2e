import datetime
import re
from typing import Iterable, List, Optional

from app.schemas.post import Post

TOML_DELIMITER = "+++"
YAML_DELIMITER = "---"

_BRACKETED_TITLE = re.compile(r"title\s*=\s*([\"'])(.*?)\1")
_COLON_TITLE = re.compile(r"title:(.*)")


def format_date(value: datetime.date) -> str:
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


def clean_tags(tags: Iterable[str]) -> List[str]:
    """Drop the empty placeholders a form leaves behind."""
    return [tag for tag in tags if tag]


def encode(post: Post) -> str:
    """
    Render a post as a Zola document with `+++` front matter.
    Values are written verbatim: a double quote inside a value breaks the header.
    """
    lines = [
        TOML_DELIMITER,
        f'title = "{post.title}"',
        f"date = {format_date(post.date)}",
        f'authors = ["{post.author}"]',
    ]

    tags = clean_tags(post.tags)
    if tags:
        joined = '", "'.join(tags)
        lines.append("[taxonomies]")
        lines.append(f'tags = ["{joined}"]')

    lines += ["", TOML_DELIMITER, "", post.body]
    return "\n".join(lines) + "\n"


def detect_delimiter(document: str) -> str:
    stripped = document.strip()
    first_line = stripped.splitlines()[0].strip() if stripped else ""
    if first_line == TOML_DELIMITER:
        return TOML_DELIMITER
    return YAML_DELIMITER


def _delimiter_positions(lines: List[str], delimiter: str) -> List[int]:
    return [i for i, line in enumerate(lines) if line.strip() == delimiter]


def strip_front_matter(document: str) -> str:
    """
    Return the document body with its front matter block removed.
    Without an opening and closing delimiter the document is left as is.
    """
    delimiter = detect_delimiter(document)
    lines = document.splitlines()
    if len(_delimiter_positions(lines, delimiter)) < 2:
        return document.strip()

    kept = []
    inside = False
    closed = False

    for line in lines:
        if not closed and line.strip() == delimiter:
            if inside:
                closed = True
            inside = not inside
            continue
        if not inside:
            kept.append(line)

    return "\n".join(kept).strip()


def _header_lines(document: str) -> List[str]:
    lines = document.splitlines()
    positions = _delimiter_positions(lines, detect_delimiter(document))
    if len(positions) < 2:
        return []
    return lines[positions[0] + 1 : positions[1]]


def extract_title(document: str) -> Optional[str]:
    """
    Find the title in either front matter dialect.

    Only the first header line mentioning "title" is inspected; if neither
    pattern matches there the title is reported missing.
    """
    candidate = next((line for line in _header_lines(document) if "title" in line), None)
    if candidate is None:
        return None

    bracketed = _BRACKETED_TITLE.search(candidate)
    if bracketed:
        return bracketed.group(2).strip()

    colon = _COLON_TITLE.search(candidate)
    if colon:
        return colon.group(1).strip().replace('"', "").replace("'", "")

    return None
