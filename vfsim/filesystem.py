"""In-memory tree of files, directories and symbolic links."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Iterator

MAX_NAME_LEN = 64
MAX_CHILDREN = 128
BLOCK_SIZE = 1024
TOTAL_DISK_KB = 1024.0


class NodeType(IntEnum):
    """Kind of a node; the values are the ones used in saved images."""

    FILE = 0
    DIR = 1
    SYMLINK = 2


class VfsError(Exception):
    """Raised when a file-system operation cannot be carried out."""


def _now() -> int:
    return int(time.time())


@dataclass(eq=False)
class Node:
    """A single entry in the tree."""

    name: str
    type: NodeType
    owner: str = "user"
    permissions: int = 0o644
    created: int = field(default_factory=_now)
    modified: int | None = None
    parent: Node | None = field(default=None, repr=False)
    children: list[Node] = field(default_factory=list, repr=False)
    content: str | None = None
    target: Node | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        if self.modified is None:
            self.modified = self.created

    def path(self) -> str:
        """Join the names of this node and its ancestors, each after a slash."""
        names = []
        node: Node | None = self
        while node is not None:
            names.append(node.name)
            node = node.parent
        return "".join(f"/{name}" for name in reversed(names))

    def _clone(self) -> Node:
        copy = Node(self.name, self.type, owner=self.owner, permissions=self.permissions)
        if self.type is NodeType.FILE:
            copy.content = self.content
        else:
            for child in self.children:
                child_copy = child._clone()
                child_copy.parent = copy
                copy.children.append(child_copy)
        return copy


def format_permissions(perm: int) -> str:
    """Render permission bits in the nine-character rwx form."""
    return "".join(
        letter if perm & (0o400 >> shift) else "-"
        for shift, letter in enumerate("rwxrwxrwx")
    )


def calculate_size(node: Node) -> int:
    """Simulated size in bytes: one block per node, directories add their children."""
    if node.type is NodeType.DIR:
        return BLOCK_SIZE + sum(calculate_size(child) for child in node.children)
    return BLOCK_SIZE


class FileSystem:
    """A rooted tree with a current working directory."""

    def __init__(self, root: Node | None = None) -> None:
        if root is None:
            root = Node("/", NodeType.DIR, owner="root", permissions=0o755)
        self.root = root
        self.current = root

    def _find(self, name: str) -> Node | None:
        return next((child for child in self.current.children if child.name == name), None)

    def _require(self, name: str, message: str) -> Node:
        node = self._find(name)
        if node is None:
            raise VfsError(f"{message}: {name}")
        return node

    def _check_room(self) -> None:
        if len(self.current.children) >= MAX_CHILDREN:
            raise VfsError("Directory full!")

    def _attach(self, node: Node) -> Node:
        node.parent = self.current
        self.current.children.append(node)
        return node

    def mkdir(self, name: str) -> Node:
        """Create a directory in the current directory."""
        self._check_room()
        return self._attach(Node(name, NodeType.DIR, permissions=0o755))

    def touch(self, name: str) -> Node:
        """Create an empty file in the current directory."""
        self._check_room()
        return self._attach(Node(name, NodeType.FILE, permissions=0o644, content=""))

    def ls(self) -> list[str]:
        """Long-format listing of the current directory."""
        lines = []
        for node in self.current.children:
            kind = {NodeType.DIR: "d", NodeType.SYMLINK: "l"}.get(node.type, "-")
            shown = node
            if (
                node.type is NodeType.SYMLINK
                and node.target is not None
                and node.target.type is NodeType.DIR
            ):
                shown = node.target
            stamp = time.strftime("%b %d %H:%M", time.localtime(shown.modified))
            line = f"{kind}{format_permissions(shown.permissions)} {shown.owner} {stamp} {node.name}"
            if node.type is NodeType.SYMLINK:
                line += f" -> {node.target.name if node.target else '(null)'}"
            lines.append(line)
        return lines

    def cd(self, name: str) -> None:
        """Change the current directory, following symbolic links."""
        if name == ".":
            return
        if name == "..":
            if self.current.parent is not None:
                self.current = self.current.parent
            return
        actual = name[2:] if name.startswith("./") else name
        child = self._find(actual)
        if child is None:
            raise VfsError(f"Directory not found: {name}")
        if child.type is NodeType.SYMLINK:
            if child.target is None or child.target.type is not NodeType.DIR:
                raise VfsError("Symlink is not a directory.")
            self.current = child.target
        elif child.type is NodeType.DIR:
            self.current = child
        else:
            raise VfsError(f"{actual} is not a directory.")

    def pwd(self) -> str:
        """Path of the current directory."""
        return self.current.path()

    def rmdir(self, name: str) -> None:
        """Remove an empty directory."""
        node = next(
            (c for c in self.current.children if c.type is NodeType.DIR and c.name == name),
            None,
        )
        if node is None:
            raise VfsError(f"Directory not found: {name}")
        if node.children:
            raise VfsError(f"Directory not empty: {name}")
        self.current.children.remove(node)

    def rm(self, name: str) -> None:
        """Remove an entry and everything below it."""
        node = self._require(name, "File or directory not found")
        self.current.children.remove(node)

    def cp(self, src_name: str, dest_name: str) -> Node:
        """Copy an entry, recursively, under a new name."""
        source = self._require(src_name, "Source not found")
        self._check_room()
        copy = source._clone()
        copy.name = dest_name
        return self._attach(copy)

    def mv(self, src_name: str, dest_name: str) -> None:
        """Rename an entry."""
        self._require(src_name, "Source not found").name = dest_name

    def chmod(self, name: str, mode: int) -> None:
        """Set the permission bits of an entry."""
        node = self._require(name, "File or directory not found")
        node.permissions = mode
        node.modified = _now()

    def chown(self, name: str, owner: str) -> None:
        """Set the owner of an entry."""
        node = self._require(name, "File or directory not found")
        node.owner = owner
        node.modified = _now()

    def find(self, name: str) -> list[str]:
        """Paths, relative to the current directory, of entries with this name."""
        return list(self._search(self.current, name, ""))

    def _search(self, node: Node, name: str, prefix: str) -> Iterator[str]:
        path = f"{prefix}/{node.name}"
        if node.name == name:
            yield path
        if node.type is NodeType.DIR:
            for child in node.children:
                yield from self._search(child, name, path)

    def ln(self, target_name: str, link_name: str) -> Node:
        """Create a symbolic link to a sibling entry."""
        target = self._require(target_name, "Target not found")
        self._check_room()
        link = Node(link_name, NodeType.SYMLINK, permissions=0o777, target=target)
        return self._attach(link)

    def df(self) -> tuple[float, float]:
        """Used and free space of the whole disk, in kilobytes."""
        used = calculate_size(self.root) / 1024.0
        return used, TOTAL_DISK_KB - used

    def du(self, name: str) -> float:
        """Size of an entry in kilobytes."""
        return calculate_size(self._require(name, "File or directory not found")) / 1024.0