"""Discovery of installed QML modules and their qmldir files."""

from __future__ import annotations

import os
import threading
from collections.abc import Iterator, Mapping
from dataclasses import dataclass

from qmlkit.qmldir import parse_qmldir_file

_SYSTEM_IMPORT_DIRS = (
    "/usr/lib/qt6/qml",
    "/usr/lib/qt/qml",
    "/usr/lib64/qt6/qml",
    "/usr/lib64/qt/qml",
    "/usr/local/lib/qt6/qml",
)
_IMPORT_PATH_VARIABLES = ("QML_IMPORT_PATH", "QML2_IMPORT_PATH")


@dataclass(frozen=True)
class DiscoveredModule:
    """A module found on disk whose qmldir names an existing type-info file."""

    module_name: str
    qmltypes_path: str
    qmldir_path: str


_module_dirs_lock = threading.Lock()
_module_qmldirs: dict[str, str] = {}


def record_module_qmldir(name: str, path: str) -> None:
    """Remember the qmldir path for ``name``; the first path recorded wins."""
    if not name or not path:
        return
    with _module_dirs_lock:
        _module_qmldirs.setdefault(name, path)


def lookup_module_qmldir(name: str) -> str:
    """The qmldir path recorded for module ``name``, or ``""``."""
    with _module_dirs_lock:
        return _module_qmldirs.get(name, "")


def _is_dir(path: str) -> bool:
    try:
        return os.path.isdir(path)
    except (OSError, ValueError):
        return False


def append_unique(paths: list[str], p: str) -> list[str]:
    """Return ``paths`` with ``p`` appended if it is a new, existing directory."""
    p = os.path.normpath(p)
    if p in paths:
        return paths
    if _is_dir(p):
        return [*paths, p]
    return paths


def qml_import_paths(environ: Mapping[str, str] | None = None) -> list[str]:
    """Directories to scan for QML modules.

    System Qt 6 and Qt 5 locations come first, then the entries of
    ``QML_IMPORT_PATH`` and ``QML2_IMPORT_PATH``.
    """
    env = os.environ if environ is None else environ
    candidates: list[str] = list(_SYSTEM_IMPORT_DIRS)
    for variable in _IMPORT_PATH_VARIABLES:
        value = env.get(variable, "")
        if value:
            candidates.extend(value.split(os.pathsep))

    paths: list[str] = []
    for candidate in candidates:
        if not candidate:
            continue
        paths = append_unique(paths, candidate)
    return paths


def _walk_files(root: str) -> Iterator[str]:
    """Yield file paths beneath ``root`` in lexical order, ignoring errors."""
    try:
        with os.scandir(root) as iterator:
            entries = sorted(iterator, key=lambda entry: entry.name)
    except OSError:
        return
    for entry in entries:
        try:
            is_dir = entry.is_dir(follow_symlinks=False)
        except OSError:
            continue
        if is_dir:
            yield from _walk_files(entry.path)
        else:
            yield entry.path


def discover_modules(root: str) -> list[DiscoveredModule]:
    """Find every qmldir under ``root`` that references an existing type-info file.

    Each module found is also recorded for :func:`lookup_module_qmldir`.
    """
    modules: list[DiscoveredModule] = []
    for path in _walk_files(root):
        if os.path.basename(path) != "qmldir":
            continue
        try:
            qmldir = parse_qmldir_file(path)
        except OSError:
            continue
        if not qmldir.type_info:
            continue
        types_path = os.path.join(qmldir.dir, qmldir.type_info)
        if not os.path.exists(types_path):
            continue
        modules.append(
            DiscoveredModule(
                module_name=qmldir.name,
                qmltypes_path=types_path,
                qmldir_path=path,
            )
        )
        record_module_qmldir(qmldir.name, path)
    return modules