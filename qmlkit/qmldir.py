"""Parsing of ``qmldir`` module description files."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class QMLDirModule:
    """The parts of a qmldir file that matter for type discovery."""

    name: str = ""
    type_info: str = ""
    depends: list[str] = field(default_factory=list)
    imports: list[str] = field(default_factory=list)
    dir: str = ""


def parse_qmldir(content: str) -> QMLDirModule:
    """Parse the text of a qmldir file."""
    module = QMLDirModule()
    for raw in content.split("\n"):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        fields = line.split()
        if len(fields) < 2:
            continue
        keyword, value = fields[0], fields[1]
        if keyword == "module":
            module.name = value
        elif keyword == "typeinfo":
            module.type_info = value
        elif keyword == "depends":
            module.depends.append(value)
        elif keyword == "import":
            module.imports.append(value)
    return module


def parse_qmldir_file(path: str | os.PathLike[str]) -> QMLDirModule:
    """Read and parse a qmldir file; raises ``OSError`` if it cannot be read."""
    file_path = Path(path)
    module = parse_qmldir(file_path.read_text(encoding="utf-8", errors="replace"))
    module.dir = str(file_path.parent)
    return module