"""Interactive command shell over an in-memory file system."""

from __future__ import annotations

import argparse
import sys
from typing import Callable, Iterable, TextIO

from vfsim import storage
from vfsim.filesystem import FileSystem, VfsError

PROMPT = "> "


class Shell:
    """Reads commands one line at a time and runs them against a file system."""

    def __init__(self, fs: FileSystem | None = None, out: TextIO | None = None) -> None:
        self.fs = fs if fs is not None else FileSystem()
        self._out = out
        self._commands: dict[str, tuple[int, Callable[..., None]]] = {
            "mkdir": (1, self._mkdir),
            "touch": (1, self._touch),
            "ls": (0, self._ls),
            "cd": (1, self._cd),
            "pwd": (0, self._pwd),
            "rmdir": (1, self._rmdir),
            "rm": (1, self._rm),
            "cp": (2, self._cp),
            "mv": (2, self._mv),
            "chmod": (2, self._chmod),
            "chown": (2, self._chown),
            "find": (1, self._find),
            "ln": (2, self._ln),
            "df": (0, self._df),
            "du": (1, self._du),
            "save": (1, self._save),
            "load": (1, self._load),
        }

    @property
    def out(self) -> TextIO:
        return self._out if self._out is not None else sys.stdout

    def _say(self, text: str) -> None:
        print(text, file=self.out)

    def execute(self, line: str) -> bool:
        """Run one command line; return False when the shell should stop."""
        words = line.split()
        if not words:
            return True
        name, args = words[0], words[1:]
        if name == "exit":
            return False
        entry = self._commands.get(name)
        if entry is None:
            self._say(f"Unknown command: {name}")
            return True
        arity, handler = entry
        if len(args) < arity:
            self._say(f"Missing argument for {name}")
            return True
        try:
            handler(*args[:arity])
        except VfsError as exc:
            self._say(str(exc))
        return True

    def run(self, lines: Iterable[str]) -> None:
        """Prompt for and run each line until input ends or ``exit`` is given."""
        for line in lines:
            self.out.write(PROMPT)
            self.out.flush()
            if not self.execute(line):
                return
        self.out.write(PROMPT)
        self.out.flush()

    def _mkdir(self, name: str) -> None:
        self.fs.mkdir(name)

    def _touch(self, name: str) -> None:
        self.fs.touch(name)

    def _ls(self) -> None:
        for entry in self.fs.ls():
            self._say(entry)

    def _cd(self, name: str) -> None:
        self.fs.cd(name)

    def _pwd(self) -> None:
        self._say(self.fs.pwd())

    def _rmdir(self, name: str) -> None:
        self.fs.rmdir(name)

    def _rm(self, name: str) -> None:
        self.fs.rm(name)

    def _cp(self, src: str, dest: str) -> None:
        self.fs.cp(src, dest)

    def _mv(self, src: str, dest: str) -> None:
        self.fs.mv(src, dest)

    def _chmod(self, name: str, mode: str) -> None:
        try:
            bits = int(mode, 8)
        except ValueError:
            self._say(f"Invalid mode: {mode}")
            return
        self.fs.chmod(name, bits)

    def _chown(self, name: str, owner: str) -> None:
        self.fs.chown(name, owner)

    def _find(self, name: str) -> None:
        for path in self.fs.find(name):
            self._say(f"Found: {path}")

    def _ln(self, target: str, link: str) -> None:
        self.fs.ln(target, link)

    def _df(self) -> None:
        used, free = self.fs.df()
        self._say("Total disk: 1MB")
        self._say(f"Used: {used:.2f} KB")
        self._say(f"Free: {free:.2f} KB")

    def _du(self, name: str) -> None:
        self._say(f"Size of {name}: {self.fs.du(name):.2f} KB")

    def _save(self, filename: str) -> None:
        storage.save(self.fs, filename)
        self._say(f"File system saved to {filename}")

    def _load(self, filename: str) -> None:
        self.fs = storage.load(filename)
        self._say(f"File system loaded from {filename}")


def main(argv: list[str] | None = None) -> int:
    """Start an interactive shell on standard input."""
    parser = argparse.ArgumentParser(
        prog="vfsim", description="Shell over an in-memory virtual file system."
    )
    parser.parse_args(argv if argv is not None else [])
    Shell().run(sys.stdin)
    return 0