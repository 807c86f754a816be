"""A catalog of translations for one domain and one language."""

from __future__ import annotations

import os
import threading
from typing import Any

from localetext.fs import FileSystem, new_fs
from localetext.translator import NIL_TRANSLATOR, Translator, from_json, from_mo, from_po


def simplified_language(lang: str) -> str:
    """Reduce a locale name such as ``en_US.UTF-8`` or ``el_GR@euro`` to its language part."""
    for sep in (":", "@", "."):
        lang = lang.split(sep, 1)[0]
    return lang.strip()


def default_language() -> str:
    """Return the language from ``$LC_MESSAGES`` or ``$LANG``, else ``"default"``."""
    for var in ("LC_MESSAGES", "LANG"):
        value = os.environ.get(var, "")
        if value:
            return simplified_language(value)
    return "default"


DEFAULT_LANGUAGE = default_language()


class Locale:
    """Translations of one domain in one language, read from a file system.

    Catalogs are looked up as ``<lang>/LC_MESSAGES/<domain>.po``, then
    ``.mo``, then ``.json``; resources as ``<lang>/LC_RESOURCE/<domain>/<name>``.
    """

    def __init__(self, domain: str = "", path: str = "", data: Any = None) -> None:
        self._lock = threading.Lock()
        self.fs: FileSystem = new_fs(path, data)
        self._lang = DEFAULT_LANGUAGE
        self._domain = domain or "default"
        self._translators: dict[tuple[str, str], Translator] = {}
        self._current: Translator = NIL_TRANSLATOR
        self._sync()

    @property
    def language(self) -> str:
        """The current language."""
        with self._lock:
            return self._lang

    @property
    def domain(self) -> str:
        """The current message domain."""
        with self._lock:
            return self._domain

    def set_language(self, lang: str) -> Locale:
        """Switch to ``lang``; an empty string means the default language."""
        with self._lock:
            lang = lang or DEFAULT_LANGUAGE
            if lang != self._lang:
                self._lang = lang
                self._sync()
        return self

    def set_domain(self, domain: str) -> Locale:
        """Switch to ``domain``; an empty string changes nothing."""
        with self._lock:
            if domain and domain != self._domain:
                self._domain = domain
                self._sync()
        return self

    def _load_translator(self) -> Translator:
        domain, lang = self._domain, self._lang
        builders = (
            (".po", lambda name, data: from_po(name, data)),
            (".mo", lambda name, data: from_mo(name, data)),
            (".json", lambda name, data: from_json(lang, name, data)),
        )
        for ext, build in builders:
            try:
                data = self.fs.load_messages_file(domain, lang, ext)
                return build(f"{domain}_{lang}{ext}", data)
            except (OSError, ValueError):
                continue
        return NIL_TRANSLATOR

    def _sync(self) -> None:
        translator = self._load_translator()
        self._translators = {(self._domain, self._lang): translator}
        self._current = translator

    def gettext(self, msgid: str) -> str:
        """Translate ``msgid`` in the current domain."""
        with self._lock:
            return self._current.pgettext("", msgid)

    def pgettext(self, msgctxt: str, msgid: str) -> str:
        """Translate ``msgid`` in context ``msgctxt``."""
        with self._lock:
            return self._current.pgettext(msgctxt, msgid)

    def ngettext(self, msgid: str, msgid_plural: str, n: int) -> str:
        """Translate the plural form of ``msgid`` chosen for ``n``."""
        with self._lock:
            return self._current.npgettext("", msgid, msgid_plural, n)

    def pngettext(self, msgctxt: str, msgid: str, msgid_plural: str, n: int) -> str:
        """Translate the plural form chosen for ``n`` in context ``msgctxt``."""
        with self._lock:
            return self._current.npgettext(msgctxt, msgid, msgid_plural, n)

    def dgettext(self, domain: str, msgid: str) -> str:
        """Like :meth:`gettext`, looking the message up in ``domain``."""
        with self._lock:
            return self._lookup(domain, "", msgid, "", 0)

    def dpgettext(self, domain: str, msgctxt: str, msgid: str) -> str:
        """Like :meth:`pgettext`, looking the message up in ``domain``."""
        with self._lock:
            return self._lookup(domain, msgctxt, msgid, "", 0)

    def dngettext(self, domain: str, msgid: str, msgid_plural: str, n: int) -> str:
        """Like :meth:`ngettext`, looking the message up in ``domain``."""
        with self._lock:
            return self._lookup(domain, "", msgid, msgid_plural, n)

    def dpngettext(self, domain: str, msgctxt: str, msgid: str, msgid_plural: str, n: int) -> str:
        """Like :meth:`pngettext`, looking the message up in ``domain``."""
        with self._lock:
            return self._lookup(domain, msgctxt, msgid, msgid_plural, n)

    def _lookup(self, domain: str, msgctxt: str, msgid: str, msgid_plural: str, n: int) -> str:
        translator = self._translators.get((domain, self._lang))
        if translator is None:
            return msgid
        return translator.npgettext(msgctxt, msgid, msgid_plural, n)

    def getdata(self, name: str) -> bytes | None:
        """Return the resource ``name`` of the current domain, or None."""
        return self._getdata(self.domain, name)

    def dgetdata(self, domain: str, name: str) -> bytes | None:
        """Return the resource ``name`` of ``domain``, or None."""
        return self._getdata(domain, name)

    def _getdata(self, domain: str, name: str) -> bytes | None:
        lang = self.language
        candidates = [lang] if lang == "default" else [lang, "default"]
        for candidate in candidates:
            try:
                return self.fs.load_resource_file(domain, candidate, name)
            except OSError:
                continue
        return None