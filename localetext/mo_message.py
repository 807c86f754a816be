"""Entries of an MO file."""

from __future__ import annotations

from dataclasses import dataclass, field

from localetext.mo_text import encode_po_string

EOT_SEPARATOR = "\x04"  # between msgctxt and msgid
NUL_SEPARATOR = "\x00"  # between msgid and msgid_plural, and between plural forms


@dataclass
class Message:
    """One MO entry: an original string and its translation."""

    msg_context: str = ""
    msg_id: str = ""
    msg_id_plural: str = ""
    msg_str: str = ""
    msg_str_plural: list[str] = field(default_factory=list)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Message):
            return NotImplemented
        for mine, theirs in (
            (self.msg_context, other.msg_context),
            (self.msg_id, other.msg_id),
            (self.msg_id_plural, other.msg_id_plural),
        ):
            if mine != theirs:
                return mine < theirs
        return False

    def __str__(self) -> str:
        parts = [f"msgid {encode_po_string(self.msg_id)}"]
        if self.msg_id_plural:
            parts.append(f"msgid_plural {encode_po_string(self.msg_id_plural)}")
        if self.msg_str:
            parts.append(f"msgstr {encode_po_string(self.msg_str)}")
        parts.extend(
            f"msgstr[{i}] {encode_po_string(text)}" for i, text in enumerate(self.msg_str_plural)
        )
        return "".join(parts)