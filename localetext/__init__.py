"""Gettext-style message catalogs: PO/MO files, plural rules and locale resources."""

__version__ = "0.1.0"
__all__ = [
    "api",
    "catalog",
    "fs",
    "mo_file",
    "mo_header",
    "mo_message",
    "mo_text",
    "plural",
    "po_comment",
    "po_file",
    "po_header",
    "po_message",
    "po_text",
    "translator",
]