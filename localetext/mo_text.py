"""String escaping for the PO-style text that MO files are printed as."""

from __future__ import annotations

_DECODE_ESCAPES = {"n": "\n", "t": "\t", "\\": "\\"}
_ENCODE_ESCAPES = {"\\": "\\\\", '"': '\\"', "\n": "\\n", "\t": "\\t"}


def _decode_line(line: str) -> str:
    left = line.find('"')
    right = line.rfind('"')
    if left < 0 or right < 0 or left == right:
        return ""
    out: list[str] = []
    chars = iter(line[left + 1 : right])
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
    """Encode ``text`` as quoted PO lines, each ending in an escaped newline."""
    lines = text.split("\n")
    last = len(lines) - 1
    parts: list[str] = []
    for i, line in enumerate(lines):
        if not line:
            if i != last:
                parts.append('"\\n"\n')
            continue
        parts.append('"' + _escape(line) + '\\n"\n')
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