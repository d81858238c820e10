"""Reading ``.qmlls.ini`` project configuration files."""

from __future__ import annotations

import os
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

INI_NAME = ".qmlls.ini"


@dataclass
class QMLLSConfig:
    """Settings from the ``[General]`` section of a ``.qmlls.ini`` file."""

    build_dir: str = ""
    import_paths: list[str] = field(default_factory=list)


def parse_qmlls_ini(path: str | os.PathLike[str]) -> QMLLSConfig:
    """Parse a ``.qmlls.ini`` file; raises ``OSError`` if it cannot be read."""
    config = QMLLSConfig()
    with open(path, encoding="utf-8", errors="replace") as handle:
        for raw in handle:
            line = raw.strip()
            if not line or line.startswith("#") or line.startswith("["):
                continue
            key, sep, value = line.partition("=")
            if not sep:
                continue
            key = key.strip()
            value = value.strip().strip('"')
            if key == "buildDir":
                config.build_dir = value
            elif key == "importPaths":
                config.import_paths.extend(
                    part.strip() for part in value.split(":") if part.strip()
                )
    return config


def find_and_parse_qmlls_ini(roots: Iterable[str | os.PathLike[str]]) -> QMLLSConfig | None:
    """Return the config from the first root holding a ``.qmlls.ini``, or ``None``."""
    for root in roots:
        try:
            return parse_qmlls_ini(Path(root) / INI_NAME)
        except OSError:
            continue
    return None