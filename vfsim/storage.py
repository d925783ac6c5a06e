"""Saving and loading a file system as a line-oriented text image."""

from __future__ import annotations

from typing import Iterator, TextIO

from vfsim.filesystem import FileSystem, Node, NodeType, VfsError

_END = "#"


def _write_node(stream: TextIO, node: Node) -> None:
    stream.write(
        f"{node.name} {int(node.type)} {node.owner} {node.permissions:o} "
        f"{node.modified} {len(node.children)}\n"
    )
    if node.type is NodeType.FILE:
        stream.write(f"{node.content or ''}\n")
    elif node.type is NodeType.SYMLINK:
        stream.write(f"{node.target.name if node.target else ''}\n")
    for child in node.children:
        _write_node(stream, child)
    stream.write(f"{_END}\n")


def dump(fs: FileSystem, stream: TextIO) -> None:
    """Write the whole tree of ``fs`` to a text stream."""
    _write_node(stream, fs.root)


def _read_node(
    header: str,
    lines: Iterator[str],
    parent: Node | None,
    pending: list[tuple[Node, str]],
) -> Node:
    fields = header.split()
    if len(fields) != 6:
        raise VfsError("Failed to load file system.")
    name, type_code, owner, perm, modified, _count = fields
    try:
        node_type = NodeType(int(type_code))
        stamp = int(modified)
        node = Node(
            name,
            node_type,
            owner=owner,
            permissions=int(perm, 8),
            created=stamp,
            modified=stamp,
            parent=parent,
        )
    except ValueError as exc:
        raise VfsError("Failed to load file system.") from exc

    if node_type is NodeType.FILE:
        node.content = next(lines, "")
    elif node_type is NodeType.SYMLINK:
        pending.append((node, next(lines, "")))

    for line in lines:
        if line == _END:
            return node
        if not line.strip():
            continue
        node.children.append(_read_node(line, lines, node, pending))
    raise VfsError("Failed to load file system.")


def parse(stream: TextIO) -> FileSystem:
    """Read a tree written by :func:`dump` and return a new file system."""
    lines = (line.rstrip("\r\n") for line in stream)
    header = next((line for line in lines if line.strip()), None)
    if header is None:
        raise VfsError("Failed to load file system.")
    pending: list[tuple[Node, str]] = []
    root = _read_node(header, lines, None, pending)
    for link, target_name in pending:
        siblings = link.parent.children if link.parent else []
        link.target = next((s for s in siblings if s.name == target_name), None)
    return FileSystem(root)


def save(fs: FileSystem, filename: str) -> None:
    """Write ``fs`` to a file."""
    try:
        with open(filename, "w", encoding="utf-8") as stream:
            dump(fs, stream)
    except OSError as exc:
        raise VfsError("Failed to save file system.") from exc


def load(filename: str) -> FileSystem:
    """Read a file system from a file."""
    try:
        with open(filename, encoding="utf-8") as stream:
            return parse(stream)
    except OSError as exc:
        raise VfsError("Failed to load file system.") from exc