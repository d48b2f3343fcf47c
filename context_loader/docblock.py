"""Docblock scanner.

Turns the documentation text of one method into the ordered list of tag
occurrences found in it. Two text styles are understood:

- Python docstrings, as read from ``function.__doc__``::

      \"\"\"Creates a new widget.

      @when I create a widget
      \"\"\"

- ``/** ... */`` doc comments, for reflectors that read comment text from
  elsewhere::

      /**
       * Creates a new widget.
       *
       * @when I create a widget
       */

A tag line starts with ``@`` and one of the recognised tag names (any case).
Lines indented at least 4 columns deeper than the docblock body continue the
content of the tag above them. The first free-text line without an ``@`` is
the description; it attaches to every tag below it, never to tags above it.
"""

import re
from typing import NamedTuple, Optional

from .annotations import ANNOTATION_KINDS

TAG_PATTERN = re.compile(
    r"^\s*@(" + "|".join(ANNOTATION_KINDS) + r")\b\s*(.*)$",
    re.IGNORECASE,
)
CONTINUATION_PATTERN = re.compile(r"^\s{4,}")

_COMMENT_OPEN = re.compile(r"^\s*/\*\*")
_COMMENT_MARKER = re.compile(r"^\s*\*(?!/)")
_COMMENT_CLOSE = re.compile(r"\s*\*/\s*$")


class TagOccurrence(NamedTuple):
    """A tag line (plus its continuation lines) found in a docblock."""

    name: str
    content: str
    description: Optional[str] = None


def _is_comment_block(text: str) -> bool:
    return bool(_COMMENT_OPEN.match(text.lstrip("\n")))


def _normalize_comment(lines: list[str]) -> list[str]:
    normalized = []
    for line in lines:
        line = _COMMENT_CLOSE.sub("", line)
        if _COMMENT_OPEN.match(line):
            line = _COMMENT_OPEN.sub("", line).strip()
        else:
            line = _COMMENT_MARKER.sub("", line)
        normalized.append(line.rstrip())
    return normalized


def _normalize_docstring(lines: list[str]) -> list[str]:
    lines = [line.expandtabs() for line in lines]
    body = lines[1:]

    indents = [len(line) - len(line.lstrip()) for line in body if line.strip()]
    # The line holding the closing quotes sits at the body indentation.
    if body and not body[-1].strip():
        indents.append(len(body[-1]))
    margin = min(indents) if indents else 0

    normalized = [lines[0].strip()]
    normalized.extend(line[margin:].rstrip() for line in body)
    return normalized


def normalize_lines(text: Optional[str]) -> list[str]:
    """Strip comment delimiters and body indentation from a docblock.

    Returns plain lines in which indentation relative to the docblock body is
    preserved, so continuation lines can still be told apart.
    """
    if not text:
        return []

    lines = text.splitlines()
    if _is_comment_block(text):
        return _normalize_comment(lines)
    return _normalize_docstring(lines)


def scan_docblock(text: Optional[str]) -> list[TagOccurrence]:
    """Find every recognised tag in a docblock, top to bottom.

    Args:
        text: Raw docstring or doc comment text; ``None`` for no docs.

    Returns:
        One ``TagOccurrence`` per tag line, each carrying the description
        captured before it (or ``None``).
    """
    lines = normalize_lines(text)
    occurrences = []
    description = None

    i = 0
    while i < len(lines):
        line = lines[i]
        match = TAG_PATTERN.match(line)

        if match:
            fragments = [match.group(2)]
            while i + 1 < len(lines) and CONTINUATION_PATTERN.match(lines[i + 1]):
                fragments.append(lines[i + 1].strip())
                i += 1

            occurrences.append(
                TagOccurrence(
                    name=match.group(1).lower(),
                    content=" ".join(fragments).strip(),
                    description=description,
                )
            )
        elif description is None and line.strip() and "@" not in line:
            description = line.strip()

        i += 1

    return occurrences
