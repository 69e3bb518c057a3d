"""Front matter handling for Markdown and HTML documents."""

import re

# Opening and closing delimiter lines must consist solely of "---"
_FRONT_MATTER_RE = re.compile(r"\A---[ \t]*\r?\n(?:.*?\r?\n)?---[ \t]*(?:\r?\n|\Z)", re.DOTALL)


def strip_front_matter(content: str) -> str:
    """Remove leading front matter and trim the remaining content.

    Leading whitespace is ignored when looking for the opening delimiter.
    Content without a closing delimiter is treated as having no front matter.
    Stacked blocks (a second block directly after the first) are removed too,
    so stripping an already stripped document changes nothing.
    """
    body = content.strip()
    while True:
        match = _FRONT_MATTER_RE.match(body)
        if not match:
            return body
        body = body[match.end() :].strip()
