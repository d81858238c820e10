"""Text- and file-level building blocks for QML editor tooling."""

__version__ = "0.1.0"

__all__ = [
    "bindings",
    "completion_context",
    "errors",
    "formatting",
    "imports",
    "modules",
    "positions",
    "qmldir",
    "qmlls_ini",
    "scanner",
]