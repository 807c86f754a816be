"""Message lookup over a loaded PO, MO or JSON catalog."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from typing import Any

from localetext import mo_file, po_file
from localetext.mo_message import EOT_SEPARATOR, Message
from localetext.plural import PluralFormula, formula

_JSON_STRING_FIELDS = ("msgctxt", "msgid", "msgid_plural")


def _make_key(msgctxt: str, msgid: str) -> str:
    return msgctxt + EOT_SEPARATOR + msgid if msgctxt else msgid


def _json_string(value: Any, key: str) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"gettext: json field {key!r} is not a string")
    return value


def _json_messages(value: Any) -> list[dict[str, Any]]:
    """Validate a JSON message list and fill in missing fields.

    Every entry gets ``msgctxt``, ``msgid``, ``msgid_plural`` and ``msgstr``.
    """
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValueError("gettext: json messages must be a list")
    entries: list[dict[str, Any]] = []
    for item in value:
        if item is None:
            item = {}
        if not isinstance(item, dict):
            raise ValueError("gettext: json message must be an object")
        entry: dict[str, Any] = {key: _json_string(item.get(key), key) for key in _JSON_STRING_FIELDS}
        msgstr = item.get("msgstr")
        if msgstr is None:
            msgstr = []
        if not isinstance(msgstr, list):
            raise ValueError("gettext: json field 'msgstr' must be a list")
        entry["msgstr"] = [_json_string(text, "msgstr") for text in msgstr]
        entries.append(entry)
    return entries


@dataclass
class Translator:
    """Translations keyed by context and msgid, with a plural rule."""

    message_map: dict[str, Message] = field(default_factory=dict)
    plural_formula: PluralFormula = field(default_factory=lambda: formula("??"))

    def add(self, msg: Message) -> None:
        """Register ``msg`` under its context and msgid."""
        self.message_map[_make_key(msg.msg_context, msg.msg_id)] = msg

    def pgettext(self, msgctxt: str, msgid: str) -> str:
        """Return the translation of ``msgid`` in ``msgctxt``, or ``msgid``."""
        msg = self.message_map.get(_make_key(msgctxt, msgid))
        if msg is not None and msg.msg_str:
            return msg.msg_str
        return msgid

    def npgettext(self, msgctxt: str, msgid: str, msgid_plural: str, n: int) -> str:
        """Return the plural form of the translation chosen for ``n``."""
        index = self.plural_formula(n)
        forms = self._plural_forms(msgctxt, msgid)
        if forms:
            index = min(index, len(forms) - 1)
            if index >= 0 and forms[index]:
                return forms[index]
        if msgid_plural and index > 0:
            return msgid_plural
        return msgid

    def _plural_forms(self, msgctxt: str, msgid: str) -> list[str]:
        msg = self.message_map.get(_make_key(msgctxt, msgid))
        if msg is None:
            return []
        if msg.msg_id_plural:
            return msg.msg_str_plural
        return [msg.msg_str] if msg.msg_str else []


NIL_TRANSLATOR = Translator()


def _language_formula(language: str) -> PluralFormula:
    return formula(language or "??")


def from_mo(name: str | os.PathLike[str], data: bytes | None) -> Translator:
    """Build a translator from MO data, or from the file ``name`` if data is empty."""
    mo = mo_file.load(data) if data else mo_file.load_file(name)
    tr = Translator(plural_formula=_language_formula(mo.mime_header.language))
    for msg in mo.messages:
        tr.add(msg)
    return tr


def from_po(name: str | os.PathLike[str], data: bytes | str | None) -> Translator:
    """Build a translator from PO data, or from the file ``name`` if data is empty."""
    po = po_file.load(data) if data else po_file.load_file(name)
    tr = Translator(plural_formula=_language_formula(po.mime_header.language))
    for msg in po.messages:
        tr.add(
            Message(
                msg_context=msg.msg_context,
                msg_id=msg.msg_id,
                msg_id_plural=msg.msg_id_plural,
                msg_str=msg.msg_str,
                msg_str_plural=list(msg.msg_str_plural),
            )
        )
    return tr


def from_json(lang: str, name: str, data: bytes | str) -> Translator:
    """Build a translator from a JSON list of messages for language ``lang``."""
    entries = _json_messages(json.loads(data))
    tr = Translator(plural_formula=formula(lang))
    for entry in entries:
        forms = entry["msgstr"]
        tr.add(
            Message(
                msg_context=entry["msgctxt"],
                msg_id=entry["msgid"],
                msg_id_plural=entry["msgid_plural"],
                msg_str=forms[0] if forms else "",
                msg_str_plural=list(forms),
            )
        )
    return tr