# vfsim

vfsim is a small file system that lives only in memory. It has directories, empty
files, symbolic links, owners, permission bits and simulated block usage. It comes
with an interactive shell, and the whole tree can be saved to a text file and
loaded back.

## Installation

```
pip install .
```

For the tests:

```
pip install .[test]
pytest
```

## The shell

```
vfsim
```

The shell reads commands from standard input, one per line, and shows a `> `
prompt before each. It stops at `exit` or at the end of input. Errors are printed
and the shell carries on. A command given too few arguments prints
`Missing argument for NAME`; an unknown command prints `Unknown command: NAME`.
Extra words after a command's arguments are ignored.

| Command | Effect |
|---|---|
| `mkdir NAME` | create a directory in the current directory |
| `touch NAME` | create an empty file |
| `ls` | list entries with type, permissions, owner and modification time |
| `cd NAME` | enter a directory (`..`, `.` and `./NAME` work; links to directories are followed) |
| `pwd` | print the current path |
| `rmdir NAME` | remove an empty directory |
| `rm NAME` | remove any entry, including its contents |
| `cp SRC DEST` | copy an entry, with its contents, under a new name |
| `mv SRC DEST` | rename an entry |
| `chmod NAME MODE` | set permissions from an octal mode, such as `700` |
| `chown NAME OWNER` | change the owner |
| `find NAME` | list paths of entries with that name, from the current directory down |
| `ln TARGET LINK` | create a symbolic link to an entry |
| `df` | show used and free space on the 1 MB simulated disk |
| `du NAME` | show the size of an entry |
| `save FILE` | write the tree to a text file |
| `load FILE` | replace the tree with one read from a text file |

Each entry takes one 1 KB block. A directory's size is its own block plus the sizes
of everything inside it. A directory holds at most 128 entries; `mkdir`, `touch`,
`cp` and `ln` report `Directory full!` beyond that.

Paths are built by putting a slash before every name, the root's own name `/`
included, so the root prints as `//` and a directory `docs` under it as `///docs`.
`find` builds its paths the same way, starting from the current directory.

Example session:

```
> mkdir docs
> cd docs
> touch notes
> ls
-rw-r--r-- user Jan 01 12:00 notes
> pwd
///docs
> cd ..
> du docs
Size of docs: 2.00 KB
> save tree.vfs
File system saved to tree.vfs
```

## Using it from Python

```python
from vfsim.filesystem import FileSystem, VfsError, format_permissions
from vfsim import storage

fs = FileSystem()
fs.mkdir("projects")
fs.cd("projects")
fs.touch("plan.txt")
fs.chmod("plan.txt", 0o600)
print(fs.pwd())                    # ///projects
print(format_permissions(0o600))   # rw-------
print(fs.ls())                     # list of listing lines

try:
    fs.cd("missing")
except VfsError as err:
    print(err)                     # Directory not found: missing

storage.save(fs, "tree.vfs")
restored = storage.load("tree.vfs")
```

`FileSystem` methods raise `VfsError` where an operation cannot be done. `ls` and
`find` return lists of strings, `df` returns `(used, free)` in kilobytes and `du`
returns a size in kilobytes. `calculate_size(node)` gives a node's simulated size
in bytes, and `Node.path()` its path.

`storage.dump` and `storage.parse` do the same work as `save` and `load` on open
text streams. Symbolic links are stored by the name of their target and, on
loading, are joined again to the sibling entry of that name.

The `Shell` class in `vfsim.shell` runs the commands above: `Shell.execute` takes
one line and returns `False` for `exit`, and `Shell.run` takes an iterable of lines.
Both write to the stream given as `out`, or to standard output.

## What it does not do

- Files are always empty: there is no command or method to write data into a file
  or to read it back.
- Commands work only on entries of the current directory; names containing slashes
  are not resolved as paths, apart from `./NAME` in `cd`.
- `mv` renames in place; it does not move entries between directories.
- Nothing is stored on disk except through `save`, and nothing is checked against
  permission bits or owners.