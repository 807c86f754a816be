"""Reading and writing GNU MO files.

An MO file starts with a 28-byte header: magic number, format revision
(major and minor), number of strings N, offset O of the original-string
table, offset T of the translation table, hash table size and offset.
Each table holds N (length, offset) pairs pointing at the string data.
"""

from __future__ import annotations

import os
import struct
from dataclasses import dataclass, field

from localetext.mo_header import Header
from localetext.mo_message import EOT_SEPARATOR, NUL_SEPARATOR, Message

MO_HEADER_SIZE = 28
MO_MAGIC_LITTLE_ENDIAN = 0x950412DE
MO_MAGIC_BIG_ENDIAN = 0xDE120495

_ENCODING = "utf-8"
_ERRORS = "surrogateescape"


class MoFormatError(ValueError):
    """Raised when MO data cannot be parsed."""


@dataclass
class MoFile:
    """An MO file: its header fields, metadata and entries."""

    magic_number: int = 0
    major_version: int = 0
    minor_version: int = 0
    msg_id_count: int = 0
    msg_id_offset: int = 0
    msg_str_offset: int = 0
    hash_size: int = 0
    hash_offset: int = 0
    mime_header: Header = field(default_factory=Header)
    messages: list[Message] = field(default_factory=list)

    def data(self) -> bytes:
        """Return the file in little-endian MO format."""
        entries = [self.mime_header.to_message()]
        entries.extend(
            msg
            for msg in self.messages
            if msg.msg_id and (msg.msg_str or msg.msg_str_plural)
        )
        entries.sort()

        body = bytearray()
        id_table: list[tuple[int, int]] = []
        str_table: list[tuple[int, int]] = []
        for msg in entries:
            for text, table in ((_encode_msg_id(msg), id_table), (_encode_msg_str(msg), str_table)):
                raw = text.encode(_ENCODING, _ERRORS)
                table.append((len(raw), len(body) + MO_HEADER_SIZE))
                body += raw

        id_offset = len(body) + MO_HEADER_SIZE
        for pair in id_table:
            body += struct.pack("<II", *pair)
        str_offset = len(body) + MO_HEADER_SIZE
        for pair in str_table:
            body += struct.pack("<II", *pair)

        header = struct.pack(
            "<IHHIIIII",
            MO_MAGIC_LITTLE_ENDIAN,
            0,
            0,
            len(entries),
            id_offset,
            str_offset,
            0,
            0,
        )
        return header + bytes(body)

    def save(self, path: str | os.PathLike[str]) -> None:
        """Write the file in MO format to ``path``."""
        with open(path, "wb") as fh:
            fh.write(self.data())

    def __str__(self) -> str:
        parts = [
            f"# version: {self.major_version}.{self.minor_version}\n",
            f"{self.mime_header}\n",
            "\n",
        ]
        parts.extend(
            f'msgid "{index}"\nmsgstr "{msg.msg_str}"\n\n'
            for index, msg in enumerate(self.messages)
        )
        return "".join(parts)


def _encode_msg_id(msg: Message) -> str:
    text = msg.msg_id
    if msg.msg_context:
        text = msg.msg_context + EOT_SEPARATOR + text
    if msg.msg_id_plural:
        text += NUL_SEPARATOR + msg.msg_id_plural
    return text


def _encode_msg_str(msg: Message) -> str:
    if msg.msg_id_plural:
        return NUL_SEPARATOR.join(msg.msg_str_plural)
    return msg.msg_str


def _unpack(fmt: str, data: bytes, offset: int) -> tuple[int, ...]:
    try:
        return struct.unpack_from(fmt, data, offset)
    except struct.error as exc:
        raise MoFormatError("gettext: unexpected EOF") from exc


def _slice(data: bytes, start: int, length: int) -> str:
    if start < 0:
        raise MoFormatError("gettext: negative position")
    if length < 0:
        raise MoFormatError("gettext: negative string length")
    if start >= len(data):
        raise MoFormatError("gettext: EOF")
    return data[start : start + length].ljust(length, b"\0").decode(_ENCODING, _ERRORS)


def _parse_message(msg_id: str, msg_str: str) -> Message:
    msg = Message(msg_id=msg_id, msg_str=msg_str)
    context, sep, rest = msg.msg_id.partition(EOT_SEPARATOR)
    if sep:
        msg.msg_context, msg.msg_id = context, rest
    single, sep, plural = msg.msg_id.partition(NUL_SEPARATOR)
    if sep:
        msg.msg_id, msg.msg_id_plural = single, plural
        msg.msg_str_plural = msg.msg_str.split(NUL_SEPARATOR)
        msg.msg_str = ""
    return msg


def load(data: bytes) -> MoFile:
    """Parse MO data in either byte order; raise MoFormatError if malformed."""
    (magic,) = _unpack("<I", data, 0)
    if magic == MO_MAGIC_LITTLE_ENDIAN:
        order = "<"
    elif magic == MO_MAGIC_BIG_ENDIAN:
        order = ">"
    else:
        raise MoFormatError("gettext: invalid magic number")

    major, minor, count, id_offset, str_offset, hash_size, hash_offset = _unpack(
        order + "HHIIIII", data, 4
    )
    if major not in (0, 1) or minor not in (0, 1):
        raise MoFormatError("gettext: invalid version number")

    id_table = [_unpack(order + "II", data, id_offset + 8 * i) for i in range(count)]
    str_table = [_unpack(order + "ii", data, str_offset + 8 * i) for i in range(count)]

    mo = MoFile(
        magic_number=magic,
        major_version=major,
        minor_version=minor,
        msg_id_count=count,
        msg_id_offset=id_offset,
        msg_str_offset=str_offset,
        hash_size=hash_size,
        hash_offset=hash_offset,
    )
    for (id_len, id_start), (str_len, str_start) in zip(id_table, str_table):
        msg_id = _slice(data, id_start, id_len)
        msg_str = _slice(data, str_start, str_len)
        if not msg_id:
            mo.mime_header.update_from(Message(msg_str=msg_str))
        else:
            mo.messages.append(_parse_message(msg_id, msg_str))
    return mo


def load_file(path: str | os.PathLike[str]) -> MoFile:
    """Read and parse the MO file at ``path``."""
    with open(path, "rb") as fh:
        return load(fh.read())