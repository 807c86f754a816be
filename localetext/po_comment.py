"""Comments that precede a PO entry."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterator, Pattern

from localetext.po_text import (
    RE_PREV_MSG_CONTEXT_COMMENTS,
    RE_PREV_MSG_ID_COMMENTS,
    RE_STRING_LINE_COMMENTS,
    LineReader,
    decode_po_string,
    encode_comment_po_string,
)

_INTEGER = re.compile(r"[+-]?\d+")
_TRANSLATOR_STOP = (".", ",", ":", "|")


@dataclass
class Comment:
    """The comment block of one PO entry."""

    start_line: int = 0
    translator_comment: str = ""
    extracted_comment: str = ""
    reference_file: list[str] = field(default_factory=list)
    reference_line: list[int] = field(default_factory=list)
    flags: list[str] = field(default_factory=list)
    prev_msg_context: str = ""
    prev_msg_id: str = ""

    def is_fuzzy(self) -> bool:
        """Tell whether the ``fuzzy`` flag is set."""
        return "fuzzy" in self.flags

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Comment):
            return NotImplemented
        if self.start_line != 0 or other.start_line != 0:
            return self.start_line < other.start_line
        if len(self.reference_file) != len(other.reference_file):
            return len(self.reference_file) < len(other.reference_file)
        pairs = zip(self.reference_file, self.reference_line, other.reference_file, other.reference_line)
        for file_a, line_a, file_b, line_b in pairs:
            if file_a != file_b:
                return file_a < file_b
            if line_a != line_b:
                return line_a < line_b
        return False

    def __str__(self) -> str:
        parts: list[str] = []
        if self.translator_comment:
            parts.extend(f"# {line}\n" for line in self.translator_comment.split("\n"))
        if self.extracted_comment:
            parts.extend(f"#. {line}\n" for line in self.extracted_comment.split("\n"))
        if self.reference_file and len(self.reference_file) == len(self.reference_line):
            refs = "".join(f" {name}:{line}" for name, line in zip(self.reference_file, self.reference_line))
            parts.append(f"#:{refs}\n")
        if self.flags:
            parts.append("#, " + ", ".join(self.flags) + "\n")
        if self.prev_msg_context:
            parts.append(f"#| msgctxt {encode_comment_po_string(self.prev_msg_context)}\n")
        if self.prev_msg_id:
            parts.append(f"#| msgid {encode_comment_po_string(self.prev_msg_id)}\n")
        return "".join(parts)


def _read_string(reader: LineReader, continuation: Pattern[str]) -> str:
    """Read a quoted value and the continuation lines that follow it."""
    text = decode_po_string(reader.read_line())
    while True:
        try:
            line = reader.read_line()
        except EOFError:
            break
        if not continuation.search(line):
            reader.unread_line()
            break
        text += decode_po_string(line)
    return text


def _prefixed_lines(reader: LineReader, prefix: str) -> Iterator[str]:
    """Yield the remainder of consecutive lines that start with ``prefix``."""
    while True:
        line = reader.read_line()
        if not line.startswith(prefix):
            reader.unread_line()
            return
        yield line[len(prefix):]


def _to_int(text: str) -> int:
    return int(text) if _INTEGER.fullmatch(text) else 0


def _read_translator(reader: LineReader, comment: Comment) -> None:
    while True:
        line = reader.read_line()
        if not line.startswith("#") or line[1:2] in _TRANSLATOR_STOP and len(line) >= 2:
            reader.unread_line()
            return
        if comment.translator_comment:
            comment.translator_comment += "\n"
        comment.translator_comment += line[1:].strip()


def _read_extracted(reader: LineReader, comment: Comment) -> None:
    for rest in _prefixed_lines(reader, "#."):
        if comment.extracted_comment:
            comment.extracted_comment += "\n"
        comment.extracted_comment += rest.strip()


def _read_references(reader: LineReader, comment: Comment) -> None:
    for rest in _prefixed_lines(reader, "#:"):
        for token in rest.strip().split(" "):
            idx = token.find(":")
            if idx <= 0:
                continue
            comment.reference_file.append(token[:idx].strip())
            comment.reference_line.append(_to_int(token[idx + 1:].strip()))


def _read_flags(reader: LineReader, comment: Comment) -> None:
    for rest in _prefixed_lines(reader, "#,"):
        comment.flags.extend(flag.strip() for flag in rest.strip().split(","))


def _read_previous(reader: LineReader, comment: Comment) -> None:
    if RE_PREV_MSG_CONTEXT_COMMENTS.search(reader.current_line()):
        comment.prev_msg_context = _read_string(reader, RE_STRING_LINE_COMMENTS)
    if RE_PREV_MSG_ID_COMMENTS.search(reader.current_line()):
        comment.prev_msg_id = _read_string(reader, RE_STRING_LINE_COMMENTS)


def read_comment(reader: LineReader) -> Comment:
    """Read the comment lines at the reader's position.

    Raises EOFError if the reader holds nothing but blank lines.
    """
    comment = Comment()
    reader.skip_blank_line()
    start = reader.pos
    comment.start_line = start + 1
    try:
        while True:
            if not reader.current_line().startswith("#"):
                return comment
            before = reader.pos
            _read_translator(reader, comment)
            _read_extracted(reader, comment)
            _read_references(reader, comment)
            _read_flags(reader, comment)
            _read_previous(reader, comment)
            if reader.pos == before:
                # An unrecognised "#|" line: skip it rather than stall.
                reader.pos += 1
    except EOFError:
        if reader.pos != start:
            return comment
        raise