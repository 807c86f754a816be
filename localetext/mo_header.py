"""The header entry of an MO file."""

from __future__ import annotations

from dataclasses import dataclass, field

from localetext.mo_message import Message

_FIELD_KEYS = {
    "PROJECT-ID-VERSION": "project_id_version",
    "REPORT-MSGID-BUGS-TO": "report_msgid_bugs_to",
    "POT-CREATION-DATE": "pot_creation_date",
    "PO-REVISION-DATE": "po_revision_date",
    "LAST-TRANSLATOR": "last_translator",
    "LANGUAGE-TEAM": "language_team",
    "LANGUAGE": "language",
    "MIME-VERSION": "mime_version",
    "CONTENT-TYPE": "content_type",
    "CONTENT-TRANSFER-ENCODING": "content_transfer_encoding",
    "PLURAL-FORMS": "plural_forms",
    "X-GENERATOR": "x_generator",
}


def _line(key: str, value: str) -> str:
    return f'"{key}: {value}\\n"\n'


@dataclass
class Header:
    """Metadata held in the entry with an empty msgid."""

    project_id_version: str = ""
    report_msgid_bugs_to: str = ""
    pot_creation_date: str = ""
    po_revision_date: str = ""
    last_translator: str = ""
    language_team: str = ""
    language: str = ""
    mime_version: str = ""
    content_type: str = ""
    content_transfer_encoding: str = ""
    plural_forms: str = ""
    x_generator: str = ""
    unknown_fields: dict[str, str] = field(default_factory=dict)

    def update_from(self, msg: Message) -> None:
        """Take fields from a header entry.

        Entries with a msgid or without a msgstr are ignored.
        """
        if msg.msg_id or not msg.msg_str:
            return
        for line in msg.msg_str.split("\n"):
            key, sep, value = line.partition(":")
            if not sep:
                continue
            key, value = key.strip(), value.strip()
            attr = _FIELD_KEYS.get(key.upper())
            if attr is None:
                self.unknown_fields[key] = value
            else:
                setattr(self, attr, value)

    def to_message(self) -> Message:
        """Return the header as an entry with an empty msgid."""
        return Message(msg_str=str(self))

    def __str__(self) -> str:
        parts = [
            'msgid ""\n',
            'msgstr ""\n',
            _line("Project-Id-Version", self.project_id_version),
            _line("Report-Msgid-Bugs-To", self.report_msgid_bugs_to),
            _line("POT-Creation-Date", self.pot_creation_date),
            _line("PO-Revision-Date", self.po_revision_date),
            _line("Last-Translator", self.last_translator),
            _line("Language-Team", self.language_team),
            _line("Language", self.language),
        ]
        if self.mime_version:
            parts.append(_line("MIME-Version", self.mime_version))
        parts.append(_line("Content-Type", self.content_type))
        parts.append(_line("Content-Transfer-Encoding", self.content_transfer_encoding))
        if self.x_generator:
            parts.append(_line("X-Generator", self.x_generator))
        parts.extend(_line(key, value) for key, value in self.unknown_fields.items())
        return "".join(parts)