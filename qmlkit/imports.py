"""Resolving the targets of QML ``import`` statements to files on disk."""

from __future__ import annotations

import os
import stat
from dataclasses import dataclass

from qmlkit.modules import lookup_module_qmldir

_STRING_QUOTES = "\"'`"


@dataclass(frozen=True)
class ImportTarget:
    """Where an import leads, with a short description for the editor."""

    path: str
    tooltip: str


def file_exists(path: str | os.PathLike[str]) -> bool:
    """True if ``path`` exists and is not a directory."""
    try:
        info = os.stat(path)
    except (OSError, ValueError):
        return False
    return not stat.S_ISDIR(info.st_mode)


def _resolve_path_import(text: str, doc_dir: str) -> ImportTarget | None:
    rel = text.strip(_STRING_QUOTES)
    if not rel:
        return None
    target = rel
    if not os.path.isabs(target) and doc_dir:
        target = os.path.join(doc_dir, rel)
    target = os.path.normpath(target)
    try:
        info = os.stat(target)
    except (OSError, ValueError):
        return None
    if stat.S_ISDIR(info.st_mode):
        qmldir = os.path.join(target, "qmldir")
        if file_exists(qmldir):
            return ImportTarget(qmldir, "Open qmldir for " + rel)
        return ImportTarget(target, "Open directory " + rel)
    return ImportTarget(target, "Open " + rel)


def _resolve_module_import(text: str) -> ImportTarget | None:
    name = text
    while name:
        qmldir = lookup_module_qmldir(name)
        if qmldir:
            return ImportTarget(qmldir, "Open qmldir for " + name)
        head, dot, _ = name.rpartition(".")
        if not dot:
            break
        name = head
    return None


def resolve_import_target(source_type: str, text: str, doc_dir: str) -> ImportTarget | None:
    """Resolve the source of an import to a filesystem path, or ``None``.

    ``source_type`` is ``"string"`` for quoted path imports, which resolve
    relative to ``doc_dir`` and prefer a ``qmldir`` inside a target directory.
    Anything else is a module id; a dotted id falls back to shorter prefixes
    until a recorded module matches.
    """
    if source_type == "string":
        return _resolve_path_import(text, doc_dir)
    return _resolve_module_import(text)