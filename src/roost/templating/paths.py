"""Pure helpers for template paths and variable merging."""

from collections.abc import Mapping
from typing import Any


def normalize_slashes(path: str, leading: bool = True) -> str:
    """Normalize the separators around *path*. No filesystem access.

    Backslashes count as separators and a leading ``./`` is dropped.

    - leading mode (file names, base URLs): exactly one leading ``/``
      and no trailing one. ``""`` and ``"/"`` both become ``""``.
    - trailing mode (directory segments): no leading ``/`` and exactly
      one trailing one.

    ::

        normalize_slashes("index/index.html")   -> "/index/index.html"
        normalize_slashes("/root/")             -> "/root"
        normalize_slashes("/static", False)     -> "static/"
    """
    path = path.replace("\\", "/")
    while path.startswith("./"):
        path = path[2:]
    path = path.strip("/")
    if leading:
        return f"/{path}" if path else ""
    return f"{path}/"


def _as_list(value: Any) -> list[Any]:
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


def deep_merge(existing: Mapping[str, Any], incoming: Mapping[str, Any]) -> dict[str, Any]:
    """Merge *incoming* into a copy of *existing*, recursively.

    New keys are inserted. When a key exists on both sides, two mappings
    merge recursively; anything else is gathered into one list with the
    existing values first::

        deep_merge({"tags": ["a"]}, {"tags": ["b"]})  -> {"tags": ["a", "b"]}
        deep_merge({"title": "x"}, {"title": "y"})    -> {"title": ["x", "y"]}
        deep_merge({"m": {"a": 1}}, {"m": {"b": 2}})  -> {"m": {"a": 1, "b": 2}}
    """
    merged = dict(existing)
    for key, value in incoming.items():
        if key not in merged:
            merged[key] = value
        elif isinstance(merged[key], Mapping) and isinstance(value, Mapping):
            merged[key] = deep_merge(merged[key], value)
        else:
            merged[key] = [*_as_list(merged[key]), *_as_list(value)]
    return merged
