"""Line reading, line classification and string escaping for PO text."""

from __future__ import annotations

import re

RE_COMMENT = re.compile(r"^#")
RE_EXTRACTED_COMMENTS = re.compile(r"^#\.")
RE_REFERENCE_COMMENTS = re.compile(r"^#:")
RE_FLAGS_COMMENTS = re.compile(r"^#,")
RE_PREV_MSG_CONTEXT_COMMENTS = re.compile(r"^#\|\s+msgctxt")
RE_PREV_MSG_ID_COMMENTS = re.compile(r"^#\|\s+msgid")
RE_STRING_LINE_COMMENTS = re.compile(r'^#\|\s+".*"\s*\Z')

RE_MSG_CONTEXT = re.compile(r'^msgctxt\s+".*"\s*\Z')
RE_MSG_ID = re.compile(r'^msgid\s+".*"\s*\Z')
RE_MSG_ID_PLURAL = re.compile(r'^msgid_plural\s+".*"\s*\Z')
RE_MSG_STR = re.compile(r'^msgstr\s*".*"\s*\Z')
RE_MSG_STR_PLURAL = re.compile(r'^msgstr\s*(\[\d+\])\s*".*"\s*\Z')
RE_STRING_LINE = re.compile(r'^\s*".*"\s*\Z')
RE_BLANK_LINE = re.compile(r"^\s*\Z")

_VALID_LINE_PATTERNS = (
    RE_COMMENT,
    RE_BLANK_LINE,
    RE_MSG_CONTEXT,
    RE_MSG_ID,
    RE_MSG_ID_PLURAL,
    RE_MSG_STR,
    RE_MSG_STR_PLURAL,
    RE_STRING_LINE,
)


class LineReader:
    """A cursor over the lines of a PO document.

    Reading past the last line raises :class:`EOFError`.
    """

    def __init__(self, data: str) -> None:
        self.lines: list[str] = data.replace("\r", "").split("\n")
        self.pos = 0

    def skip_blank_line(self) -> None:
        """Advance past blank lines; raise EOFError if none remain."""
        while self.pos < len(self.lines) and not self.lines[self.pos].strip():
            self.pos += 1
        if self.pos >= len(self.lines):
            raise EOFError("end of PO data")

    def current_line(self) -> str:
        """Return the line under the cursor without advancing."""
        if self.pos >= len(self.lines):
            raise EOFError("end of PO data")
        return self.lines[self.pos]

    def read_line(self) -> str:
        """Return the line under the cursor and advance."""
        line = self.current_line()
        self.pos += 1
        return line

    def unread_line(self) -> None:
        """Step the cursor back by one line."""
        if self.pos >= 0:
            self.pos -= 1


def is_invalid_line(line: str) -> bool:
    """Tell whether ``line`` is not a recognised PO line."""
    return not any(pattern.search(line) for pattern in _VALID_LINE_PATTERNS)


_DECODE_ESCAPES = {"r": "\r", "n": "\n", "t": "\t", "\\": "\\"}
_ENCODE_ESCAPES = {"\\": "\\\\", '"': '\\"', "\r": "\\r", "\n": "\\n", "\t": "\\t"}


def _decode_line(line: str) -> str:
    left = line.find('"')
    right = line.rfind('"')
    if left < 0 or right < 0 or left == right:
        return ""
    body = line[left + 1 : right]
    out: list[str] = []
    chars = iter(body)
    for ch in chars:
        if ch != "\\":
            out.append(ch)
            continue
        nxt = next(chars, None)
        if nxt is None:
            break
        # Unknown escapes drop the backslash and keep the character.
        out.append(_DECODE_ESCAPES.get(nxt, nxt))
    return "".join(out)


def decode_po_string(text: str) -> str:
    """Join the quoted parts of each line of ``text``, unescaping them.

    Lines without a quoted part contribute nothing.
    """
    return "".join(_decode_line(line) for line in text.split("\n"))


def _escape(text: str) -> str:
    return "".join(_ENCODE_ESCAPES.get(ch, ch) for ch in text)


def encode_po_string(text: str) -> str:
    """Encode ``text`` as quoted PO string lines, one per source line."""
    lines = text.split("\n")
    last = len(lines) - 1
    parts: list[str] = []
    for i, line in enumerate(lines):
        if not line:
            if i != last:
                parts.append('"\\n"\n')
            continue
        ending = '\\n"\n' if i < last else '"\n'
        parts.append('"' + _escape(line) + ending)
    return "".join(parts)


def encode_comment_po_string(text: str) -> str:
    """Encode ``text`` as quoted lines for a ``#|`` previous-value comment."""
    lines = text.split("\n")
    last = len(lines) - 1
    parts: list[str] = ['""\n'] if len(lines) > 1 else []
    for i, line in enumerate(lines):
        ending = '\\n"\n' if i < last else '"'
        parts.append('#| "' + _escape(line) + ending)
    return "".join(parts)