"""Reading and writing GNU PO files."""

from __future__ import annotations

import os
import unicodedata
from dataclasses import dataclass, field

from localetext.po_header import Header
from localetext.po_message import Message, read_entry
from localetext.po_text import LineReader


def _loose_key(text: str) -> str:
    """A collation key that ignores case, width and accents."""
    decomposed = unicodedata.normalize("NFKD", text)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch)).casefold()


@dataclass
class PoFile:
    """A PO file: its header and its entries."""

    mime_header: Header = field(default_factory=Header)
    messages: list[Message] = field(default_factory=list)

    def data(self) -> bytes:
        """Return the file in PO format, entries sorted by msgid then context."""
        ordered = sorted(
            self.messages,
            key=lambda m: (_loose_key(m.msg_id), _loose_key(m.msg_context)),
        )
        parts = [f"{self.mime_header}\n"]
        parts.extend(f"{msg}\n" for msg in ordered)
        return "".join(parts).encode("utf-8")

    def save(self, path: str | os.PathLike[str]) -> None:
        """Write the file in PO format to ``path``."""
        with open(path, "wb") as fh:
            fh.write(self.data())

    def __str__(self) -> str:
        return self.data().decode("utf-8")


def load(data: bytes | str) -> PoFile:
    """Parse PO data; raise ValueError on a malformed line."""
    text = data.decode("utf-8", errors="replace") if isinstance(data, bytes) else data
    reader = LineReader(text)
    po = PoFile()
    while True:
        try:
            msg = read_entry(reader)
        except EOFError:
            return po
        if not msg.msg_id:
            po.mime_header.update_from(msg)
            continue
        po.messages.append(msg)


def load_file(path: str | os.PathLike[str]) -> PoFile:
    """Read and parse the PO file at ``path``."""
    with open(path, "rb") as fh:
        return load(fh.read())