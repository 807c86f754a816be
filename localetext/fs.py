"""Sources of catalog and resource files: directories, zip archives, JSON."""

from __future__ import annotations

import io
import json
import os
import zipfile
from abc import ABC, abstractmethod
from typing import Any

from localetext.translator import _json_messages

_MARKERS = ("LC_MESSAGES", "LC_RESOURCE")


class FileSystem(ABC):
    """Where a catalog looks up its messages and resources."""

    @abstractmethod
    def locale_list(self) -> list[str]:
        """Return the sorted names of the locales available."""

    @abstractmethod
    def load_messages_file(self, domain: str, lang: str, ext: str) -> bytes:
        """Return the messages file of ``domain`` for ``lang``; raise if absent."""

    @abstractmethod
    def load_resource_file(self, domain: str, lang: str, name: str) -> bytes:
        """Return the resource ``name`` of ``domain`` for ``lang``; raise if absent."""

    @abstractmethod
    def __str__(self) -> str:
        ...


class NilFS(FileSystem):
    """A file system that holds nothing."""

    def __init__(self, name: str) -> None:
        self.name = name

    def locale_list(self) -> list[str]:
        return []

    def load_messages_file(self, domain: str, lang: str, ext: str) -> bytes:
        raise FileNotFoundError("not found")

    def load_resource_file(self, domain: str, lang: str, name: str) -> bytes:
        raise FileNotFoundError("not found")

    def __str__(self) -> str:
        return f"gettext.nilfs({self.name})"


def _json_locale(value: Any) -> tuple[dict[str, list[dict[str, Any]]], dict[str, dict[str, str]]]:
    if value is None:
        value = {}
    if not isinstance(value, dict):
        raise ValueError("gettext: json locale must be an object")
    raw_messages = value.get("LC_MESSAGES") or {}
    raw_resources = value.get("LC_RESOURCE") or {}
    if not isinstance(raw_messages, dict) or not isinstance(raw_resources, dict):
        raise ValueError("gettext: json LC_MESSAGES and LC_RESOURCE must be objects")
    messages = {name: _json_messages(entries) for name, entries in raw_messages.items()}
    resources: dict[str, dict[str, str]] = {}
    for domain, files in raw_resources.items():
        files = files or {}
        if not isinstance(files, dict):
            raise ValueError("gettext: json resources must be an object")
        resources[domain] = {}
        for name, text in files.items():
            if text is not None and not isinstance(text, str):
                raise ValueError("gettext: json resource must be a string")
            resources[domain][name] = text or ""
    return messages, resources


class JsonFS(FileSystem):
    """Messages and resources held in one JSON document keyed by locale."""

    def __init__(self, data: bytes | str, name: str) -> None:
        doc = json.loads(data)
        if doc is None:
            doc = {}
        if not isinstance(doc, dict):
            raise ValueError("gettext: json document must be an object")
        self.name = name
        self._locales = {lang: _json_locale(value) for lang, value in doc.items()}

    def locale_list(self) -> list[str]:
        return sorted(self._locales)

    def load_messages_file(self, domain: str, lang: str, ext: str) -> bytes:
        try:
            entries = self._locales[lang][0][domain + ext]
        except KeyError:
            raise FileNotFoundError("not found") from None
        return json.dumps(entries, ensure_ascii=False).encode("utf-8")

    def load_resource_file(self, domain: str, lang: str, name: str) -> bytes:
        try:
            files = self._locales[lang][1][domain]
        except KeyError:
            raise FileNotFoundError("not found") from None
        return files.get(name, "").encode("utf-8")

    def __str__(self) -> str:
        return f"gettext.nilfs({self.name})"


class OsFS(FileSystem):
    """A locale directory on disk."""

    def __init__(self, root: str) -> None:
        self.root = root

    def locale_list(self) -> list[str]:
        try:
            with os.scandir(self.root) as entries:
                return sorted({entry.name for entry in entries if entry.is_dir()})
        except OSError:
            return []

    def load_messages_file(self, domain: str, lang: str, ext: str) -> bytes:
        with open(f"{self.root}/{lang}/LC_MESSAGES/{domain}{ext}", "rb") as fh:
            return fh.read()

    def load_resource_file(self, domain: str, lang: str, name: str) -> bytes:
        with open(f"{self.root}/{lang}/LC_RESOURCE/{domain}/{name}", "rb") as fh:
            return fh.read()

    def __str__(self) -> str:
        return f"gettext.localfs({self.root})"


def _after_last_separator(text: str) -> str:
    cut = max(text.rfind("/"), text.rfind("\\"))
    return text[cut + 1:] if cut != -1 else text


class ZipFS(FileSystem):
    """A locale directory packed in a zip archive."""

    def __init__(self, archive: zipfile.ZipFile, name: str) -> None:
        self.archive = archive
        self.name = name
        self.root = self._find_root()

    def _zip_name(self) -> str:
        name = _after_last_separator(self.name)
        return name[: -len(".zip")] if name.endswith(".zip") else name

    def _find_root(self) -> str:
        some_path = ""
        for entry in self.archive.namelist():
            if any(marker in entry for marker in _MARKERS):
                some_path = entry
        if not some_path:
            return self._zip_name()
        parts = some_path.split("/")
        for i, part in enumerate(parts):
            if part in _MARKERS and i >= 2:
                return "/".join(parts[: i - 1])
        return self._zip_name()

    def locale_list(self) -> list[str]:
        locales: set[str] = set()
        for entry in self.archive.namelist():
            for marker in _MARKERS:
                idx = entry.find(marker)
                if idx == -1:
                    continue
                lang = _after_last_separator(entry[:idx].rstrip("\\/"))
                if lang:
                    locales.add(lang)
                break
        return sorted(locales)

    def _read(self, path: str) -> bytes:
        if path not in self.archive.namelist():
            raise FileNotFoundError("not found")
        return self.archive.read(path)

    def load_messages_file(self, domain: str, lang: str, ext: str) -> bytes:
        return self._read(f"{self.root}/{lang}/LC_MESSAGES/{domain}{ext}")

    def load_resource_file(self, domain: str, lang: str, name: str) -> bytes:
        return self._read(f"{self.root}/{lang}/LC_RESOURCE/{domain}/{name}")

    def __str__(self) -> str:
        return f"gettext.zipfs({self.name})"


def _open_zip(data: bytes) -> zipfile.ZipFile | None:
    try:
        return zipfile.ZipFile(io.BytesIO(data))
    except (zipfile.BadZipFile, OSError, ValueError):
        return None


def nil_fs(name: str) -> FileSystem:
    """Return a file system that holds nothing."""
    return NilFS(name)


def zip_fs(archive: zipfile.ZipFile, name: str) -> FileSystem:
    """Return a file system over an open zip archive."""
    return ZipFS(archive, name)


def os_fs(root: str) -> FileSystem:
    """Return a file system for ``root``: a directory, a .zip or a .json file."""
    if os.path.isfile(root):
        lowered = root.lower()
        if lowered.endswith(".zip"):
            try:
                with open(root, "rb") as fh:
                    archive = _open_zip(fh.read())
            except OSError:
                archive = None
            if archive is not None:
                return ZipFS(archive, root)
        if lowered.endswith(".json"):
            try:
                with open(root, "rb") as fh:
                    return JsonFS(fh.read(), root)
            except (OSError, ValueError):
                pass
    return OsFS(root)


def new_fs(name: str, data: Any) -> FileSystem:
    """Choose a file system from ``name`` and optional in-memory ``data``.

    ``data`` may be zip or JSON content as bytes or str, or a FileSystem.
    Without data the file system is read from ``name`` on disk.
    """
    if data is None:
        return os_fs(name) if name else NilFS(name)
    if isinstance(data, FileSystem):
        return data
    if isinstance(data, (bytes, bytearray, str)):
        raw = data.encode("utf-8") if isinstance(data, str) else bytes(data)
        if not raw:
            return os_fs(name)
        archive = _open_zip(raw)
        if archive is not None:
            return ZipFS(archive, name)
        try:
            return JsonFS(raw, name)
        except ValueError:
            pass
    return NilFS(name)