"""Entries of a PO file."""

from __future__ import annotations

from dataclasses import dataclass, field

from localetext.po_comment import Comment, _read_string, read_comment
from localetext.po_text import (
    RE_BLANK_LINE,
    RE_COMMENT,
    RE_MSG_CONTEXT,
    RE_MSG_ID,
    RE_MSG_ID_PLURAL,
    RE_MSG_STR,
    RE_MSG_STR_PLURAL,
    RE_STRING_LINE,
    LineReader,
    encode_po_string,
    is_invalid_line,
)

_EMPTY = '""\n'


@dataclass
class Message:
    """One PO entry: an original string and its translation."""

    comment: Comment = field(default_factory=Comment)
    msg_context: str = ""
    msg_id: str = ""
    msg_id_plural: str = ""
    msg_str: str = ""
    msg_str_plural: list[str] = field(default_factory=list)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Message):
            return NotImplemented
        if self.comment < other.comment:
            return True
        for mine, theirs in (
            (self.msg_context, other.msg_context),
            (self.msg_id, other.msg_id),
            (self.msg_id_plural, other.msg_id_plural),
        ):
            if mine != theirs:
                return mine < theirs
        return False

    def __str__(self) -> str:
        parts = [str(self.comment)]
        if self.msg_context:
            parts.append(f"msgctxt {encode_po_string(self.msg_context)}")
        parts.append(f"msgid {encode_po_string(self.msg_id)}")
        if self.msg_id_plural:
            parts.append(f"msgid_plural {encode_po_string(self.msg_id_plural)}")
        if not self.msg_str_plural:
            parts.append(f"msgstr {encode_po_string(self.msg_str) if self.msg_str else _EMPTY}")
        else:
            for i, text in enumerate(self.msg_str_plural):
                parts.append(f"msgstr[{i}] {encode_po_string(text) if text else _EMPTY}")
        return "".join(parts)


def _read_msg_str(reader: LineReader, msg: Message) -> None:
    line = reader.current_line()
    if RE_MSG_STR_PLURAL.search(line):
        index = int(line[line.find("[") + 1 : line.rfind("]")])
        text = _read_string(reader, RE_STRING_LINE)
        if index + 1 > len(msg.msg_str_plural):
            msg.msg_str_plural.extend([""] * (index + 1 - len(msg.msg_str_plural)))
        msg.msg_str_plural[index] = text
    elif RE_MSG_STR.search(line):
        msg.msg_str = _read_string(reader, RE_STRING_LINE)


def read_entry(reader: LineReader) -> Message:
    """Read one entry at the reader's position.

    Raises EOFError when no entry is left and ValueError on a malformed line.
    """
    reader.skip_blank_line()
    start = reader.pos
    msg = Message()
    try:
        msg.comment = read_comment(reader)
        while True:
            line = reader.current_line()
            if is_invalid_line(line):
                raise ValueError(f"gettext: line {reader.pos}, invalid line")
            if RE_COMMENT.search(line) or RE_BLANK_LINE.search(line):
                return msg
            before = reader.pos
            for pattern, attr in (
                (RE_MSG_CONTEXT, "msg_context"),
                (RE_MSG_ID, "msg_id"),
                (RE_MSG_ID_PLURAL, "msg_id_plural"),
            ):
                if pattern.search(reader.current_line()):
                    setattr(msg, attr, _read_string(reader, RE_STRING_LINE))
            _read_msg_str(reader, msg)
            if reader.pos == before:
                raise ValueError(f"gettext: line {reader.pos}, unexpected line")
    except EOFError:
        if reader.pos != start:
            return msg
        raise