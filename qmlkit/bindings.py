"""Small text helpers for bindings, colour values and parameter labels."""

from __future__ import annotations

COLOR_KEYWORDS = frozenset(
    {
        "red",
        "green",
        "blue",
        "white",
        "black",
        "yellow",
        "cyan",
        "magenta",
        "gray",
        "grey",
        "transparent",
    }
)


def extract_id_from_binding(binding_text: str) -> str:
    """The id name in a binding such as ``id: root``, or ``""`` for other bindings."""
    key, sep, value = binding_text.partition(":")
    if not sep or key.strip() != "id":
        return ""
    return value.strip()


def is_color_keyword(s: str) -> bool:
    """True if ``s`` is one of the recognised lower-case colour names."""
    return s in COLOR_KEYWORDS


def is_quoted_string(s: str) -> bool:
    """True if ``s`` is wrapped in double quotes."""
    return len(s) >= 2 and s[0] == '"' and s[-1] == '"'


def param_name(label: str) -> str:
    """The bare name from a parameter label: ``"x: real"`` gives ``"x"``."""
    name = label.partition(":")[0].strip()
    if name.startswith("..."):
        name = name[3:]
    return name