"""Path filtering: exclusion substrings, include/exclude globs, document detection."""

import re
from collections.abc import Callable, Iterable
from functools import lru_cache

DOCUMENT_EXTENSIONS = (".md", ".mdx", ".html")


def default_is_document_file(name: str) -> bool:
    """Check if a file is a supported document type (Markdown or HTML)."""
    return name.lower().endswith(DOCUMENT_EXTENSIONS)


@lru_cache(maxsize=256)
def glob_to_regex(pattern: str) -> re.Pattern[str]:
    """Compile a glob pattern for matching posix relative paths.

    ``*`` and ``?`` stay within one path segment, ``**`` crosses segments and
    a ``**/`` prefix also matches files at the top level. ``{a,b}`` matches
    either alternative. Wildcards never match a leading dot in a segment, so
    dotfiles and dot-directories are only matched by patterns that name the
    dot explicitly.
    """
    return re.compile(_translate(pattern) + r"\Z")


def _translate(pattern: str, segment_start: bool = True) -> str:
    parts: list[str] = []
    i = 0
    n = len(pattern)

    while i < n:
        char = pattern[i]
        at_start = segment_start if i == 0 else pattern[i - 1] == "/"
        no_dot = r"(?!\.)" if at_start else ""

        if char == "*":
            stars = i
            while i < n and pattern[i] == "*":
                i += 1
            # "**" is only a globstar when it is a whole segment
            if i - stars >= 2 and at_start and (i == n or pattern[i] == "/"):
                if i < n:
                    # "**/" matches zero or more whole directories
                    parts.append(r"(?:(?!\.)[^/]*/)*")
                    i += 1
                else:
                    parts.append(r"(?!\.)[^/]*(?:/(?!\.)[^/]*)*")
            else:
                parts.append(no_dot + "[^/]*")
            continue
        elif char == "?":
            parts.append(no_dot + "[^/]")
        elif char == "[":
            end = pattern.find("]", i + 1)
            if end == -1:
                parts.append(re.escape(char))
            else:
                body = pattern[i + 1 : end]
                if body.startswith("!"):
                    body = "^" + body[1:]
                parts.append(no_dot + f"[{body.replace(chr(92), chr(92) * 2)}]")
                i = end
        elif char == "{":
            alternatives, end = _split_braces(pattern, i)
            if alternatives is None:
                parts.append(re.escape(char))
            else:
                translated = (_translate(alt, at_start) for alt in alternatives)
                parts.append("(?:" + "|".join(translated) + ")")
                i = end
        else:
            parts.append(re.escape(char))
        i += 1

    return "".join(parts)


def _split_braces(pattern: str, start: int) -> tuple[list[str] | None, int]:
    """Split the brace group opening at start into its alternatives.

    Returns the alternatives and the index of the closing brace, or
    ``(None, start)`` when the group is unclosed or has no comma, in which
    case the brace is literal.
    """
    depth = 0
    alternatives: list[str] = []
    current = start + 1
    i = start

    while i < len(pattern):
        char = pattern[i]
        if char == "[":
            end = pattern.find("]", i + 1)
            if end != -1:
                i = end
        elif char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                alternatives.append(pattern[current:i])
                if len(alternatives) < 2:
                    return None, start
                return alternatives, i
        elif char == "," and depth == 1:
            alternatives.append(pattern[current:i])
            current = i + 1
        i += 1

    return None, start


class PathMatcher:
    """Decides whether a discovered path takes part in a run."""

    def __init__(
        self,
        exclude_patterns: Iterable[str] = (),
        include_globs: Iterable[str] = (),
        exclude_globs: Iterable[str] = (),
        is_document_file: Callable[[str], bool] | None = None,
    ) -> None:
        self.exclude_patterns = tuple(p.lower() for p in exclude_patterns)
        self.include_globs = tuple(include_globs)
        self.exclude_globs = tuple(exclude_globs)
        self._is_document_file = is_document_file or default_is_document_file

    def is_excluded(self, name: str, relative_path: str) -> bool:
        """Check if a file or directory name/path contains an excluded substring."""
        lower_name = name.lower()
        lower_path = relative_path.lower()

        return any(
            pattern in lower_name or pattern in lower_path for pattern in self.exclude_patterns
        )

    def matches_globs(self, relative_path: str) -> bool:
        """Check a posix relative path against the include and exclude globs."""
        # With include globs, the file must match at least one
        if self.include_globs and not any(
            glob_to_regex(p).match(relative_path) for p in self.include_globs
        ):
            return False

        # With exclude globs, the file must match none
        if self.exclude_globs and any(
            glob_to_regex(p).match(relative_path) for p in self.exclude_globs
        ):
            return False

        return True

    def is_document_file(self, name: str) -> bool:
        return self._is_document_file(name)
