"""Process-wide translation functions that use one bound catalog.

Typical use::

    set_language("zh_CN")
    bind_locale(new("hello", "locale"))      # a directory
    bind_locale(new("hello", "locale.zip"))  # a zip file
    print(gettext("Hello, world!"))
    print(getdata("poems.txt").decode())
"""

from __future__ import annotations

from typing import Any

from localetext.catalog import DEFAULT_LANGUAGE, Locale


class _Binding:
    """The catalog the module-level functions use."""

    def __init__(self) -> None:
        self.lang = DEFAULT_LANGUAGE
        self.catalog = Locale("", "")


_binding = _Binding()


def new(domain: str, path: str, data: Any = None) -> Locale:
    """Create a catalog for ``domain`` from ``path`` or in-memory ``data``."""
    return Locale(domain, path, data)


def bind_locale(g: Locale | None) -> None:
    """Make ``g`` the process-wide catalog; None binds an empty one.

    The bound catalog is switched to the process's default language.
    """
    catalog = g if g is not None else Locale("", "")
    _binding.catalog = catalog
    catalog.set_language(_binding.lang)


def set_language(lang: str) -> str:
    """Set the language (empty means the default) and return the current one."""
    catalog = _binding.catalog
    catalog.set_language(lang)
    return catalog.language


def set_domain(domain: str) -> str:
    """Set the domain (empty changes nothing) and return the current one."""
    catalog = _binding.catalog
    catalog.set_domain(domain)
    return catalog.domain


def gettext(msgid: str) -> str:
    """Translate ``msgid``."""
    return _binding.catalog.gettext(msgid)


def getdata(name: str) -> bytes | None:
    """Return the translated resource ``name``, or None."""
    return _binding.catalog.getdata(name)


def ngettext(msgid: str, msgid_plural: str, n: int) -> str:
    """Translate the plural form of ``msgid`` chosen for ``n``."""
    return _binding.catalog.ngettext(msgid, msgid_plural, n)


def pgettext(msgctxt: str, msgid: str) -> str:
    """Translate ``msgid`` in context ``msgctxt``."""
    return _binding.catalog.pgettext(msgctxt, msgid)


def pngettext(msgctxt: str, msgid: str, msgid_plural: str, n: int) -> str:
    """Translate the plural form chosen for ``n`` in context ``msgctxt``."""
    return _binding.catalog.pngettext(msgctxt, msgid, msgid_plural, n)


def dgettext(domain: str, msgid: str) -> str:
    """Like :func:`gettext`, looking the message up in ``domain``."""
    return _binding.catalog.dgettext(domain, msgid)


def dngettext(domain: str, msgid: str, msgid_plural: str, n: int) -> str:
    """Like :func:`ngettext`, looking the message up in ``domain``."""
    return _binding.catalog.dngettext(domain, msgid, msgid_plural, n)


def dpgettext(domain: str, msgctxt: str, msgid: str) -> str:
    """Like :func:`pgettext`, looking the message up in ``domain``."""
    return _binding.catalog.dpgettext(domain, msgctxt, msgid)


def dpngettext(domain: str, msgctxt: str, msgid: str, msgid_plural: str, n: int) -> str:
    """Like :func:`pngettext`, looking the message up in ``domain``."""
    return _binding.catalog.dpngettext(domain, msgctxt, msgid, msgid_plural, n)


def dgetdata(domain: str, name: str) -> bytes | None:
    """Like :func:`getdata`, looking the resource up in ``domain``."""
    return _binding.catalog.dgetdata(domain, name)