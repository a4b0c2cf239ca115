"""
Generic nested-mapping helpers.

The parser builds color trees with ``set_nested`` and ``deep_merge``; the
generators share ``walk_leaves`` and ``render_nested`` so each target only
supplies its leaf and scope formatting.
"""

from __future__ import annotations

import json
from collections.abc import Callable, Iterator, Mapping
from typing import Any


def walk_leaves(tree: Mapping[str, Any], path: tuple[str, ...] = ()) -> Iterator[tuple[tuple[str, ...], Any]]:
    """Depth-first ``(key_path, leaf)`` pairs; any non-mapping value is a leaf."""
    for key, value in tree.items():
        key_path = (*path, key)
        if isinstance(value, Mapping):
            yield from walk_leaves(value, key_path)
        else:
            yield key_path, value


def map_leaves(tree: Mapping[str, Any], fn: Callable[[Any], Any]) -> dict[str, Any]:
    """Copy ``tree`` with ``fn`` applied to every leaf."""
    return {
        key: map_leaves(value, fn) if isinstance(value, Mapping) else fn(value)
        for key, value in tree.items()
    }


def set_nested(tree: dict[str, Any], keys: list[str], value: Any) -> None:
    """Set ``value`` at ``keys``, replacing any leaf that sits on the way."""
    current = tree
    for key in keys[:-1]:
        if not isinstance(current.get(key), dict):
            current[key] = {}
        current = current[key]
    current[keys[-1]] = value


def deep_merge(target: dict[str, Any], source: Mapping[str, Any]) -> dict[str, Any]:
    """
    Merge ``source`` into ``target`` in place and return ``target``.

    Branches are merged recursively; a leaf in ``source`` replaces whatever
    ``target`` holds at that key, and a branch replaces a leaf.
    """
    for key, value in source.items():
        if isinstance(value, Mapping):
            if not isinstance(target.get(key), dict):
                target[key] = {}
            deep_merge(target[key], value)
        else:
            target[key] = value
    return target


def render_nested(
    tree: Mapping[str, Any],
    *,
    leaf: Callable[[str, Any, bool], str],
    open_scope: Callable[[str], str],
    close_scope: Callable[[bool], str],
    indent: str = "  ",
    depth: int = 0,
) -> list[str]:
    """
    Emit a nested literal line by line.

    Args:
        tree: Mapping to render.
        leaf: ``(key, value, is_last) -> text`` for a leaf entry.
        open_scope: ``(key) -> text`` opening a nested scope.
        close_scope: ``(is_last) -> text`` closing a nested scope.
        indent: Indentation unit.
        depth: Starting depth; lines are prefixed with ``indent * depth``.

    Returns:
        Rendered lines without trailing newlines.
    """
    lines: list[str] = []
    prefix = indent * depth
    items = list(tree.items())
    for index, (key, value) in enumerate(items):
        is_last = index == len(items) - 1
        if isinstance(value, Mapping):
            lines.append(prefix + open_scope(key))
            lines.extend(
                render_nested(
                    value,
                    leaf=leaf,
                    open_scope=open_scope,
                    close_scope=close_scope,
                    indent=indent,
                    depth=depth + 1,
                )
            )
            lines.append(prefix + close_scope(is_last))
        else:
            lines.append(prefix + leaf(key, value, is_last))
    return lines


def to_literal(value: Any, base_indent: str = "", indent: int = 2) -> str:
    """
    Serialize ``value`` as a JSON literal for embedding in generated code.

    Continuation lines are prefixed with ``base_indent`` so the literal lines
    up with the property it is assigned to.
    """
    text = json.dumps(value, indent=indent, ensure_ascii=False)
    return text.replace("\n", "\n" + base_indent)
