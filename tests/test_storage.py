import io

import pytest

from vfsim.filesystem import FileSystem, NodeType, VfsError
from vfsim.storage import dump, load, parse, save


def _sample():
    fs = FileSystem()
    fs.mkdir("docs")
    fs.cd("docs")
    fs.touch("notes")
    fs.chmod("notes", 0o600)
    fs.ln("notes", "n")
    fs.cd("..")
    fs.touch("top")
    fs.chown("top", "alice")
    return fs


def _shape(node):
    return (
        node.name,
        node.type,
        node.owner,
        node.permissions,
        node.modified,
        node.content,
        node.target.name if node.target else None,
        [_shape(c) for c in node.children],
    )


def test_dump_root_only():
    fs = FileSystem()
    out = io.StringIO()
    dump(fs, out)
    lines = out.getvalue().splitlines()
    assert lines == [f"/ {int(NodeType.DIR)} root 755 {fs.root.modified} 0", "#"]


def test_round_trip_preserves_tree():
    fs = _sample()
    out = io.StringIO()
    dump(fs, out)
    loaded = parse(io.StringIO(out.getvalue()))
    assert _shape(loaded.root) == _shape(fs.root)
    assert loaded.current is loaded.root


def test_round_trip_resolves_symlink_to_sibling():
    out = io.StringIO()
    dump(_sample(), out)
    loaded = parse(io.StringIO(out.getvalue()))
    docs = loaded.root.children[0]
    link = docs.children[1]
    assert link.type is NodeType.SYMLINK
    assert link.target is docs.children[0]
    assert link.parent is docs


def test_dangling_symlink_round_trip():
    fs = FileSystem()
    fs.touch("f")
    fs.ln("f", "l")
    fs.cp("l", "l2")
    out = io.StringIO()
    dump(fs, out)
    loaded = parse(io.StringIO(out.getvalue()))
    assert [c.name for c in loaded.root.children] == ["f", "l", "l2"]
    assert loaded.root.children[2].target is None
    assert loaded.root.children[1].target is loaded.root.children[0]


def test_save_and_load_file(tmp_path):
    fs = _sample()
    target = tmp_path / "image.txt"
    save(fs, str(target))
    loaded = load(str(target))
    assert _shape(loaded.root) == _shape(fs.root)


def test_load_missing_file(tmp_path):
    with pytest.raises(VfsError, match="Failed to load file system."):
        load(str(tmp_path / "absent.txt"))


def test_save_to_bad_path(tmp_path):
    with pytest.raises(VfsError, match="Failed to save file system."):
        save(FileSystem(), str(tmp_path / "no" / "such" / "dir.txt"))


def test_parse_rejects_garbage():
    with pytest.raises(VfsError):
        parse(io.StringIO("not a header\n#\n"))
    with pytest.raises(VfsError):
        parse(io.StringIO(""))


def test_parse_rejects_truncated_image():
    fs = _sample()
    out = io.StringIO()
    dump(fs, out)
    truncated = "\n".join(out.getvalue().splitlines()[:-1]) + "\n"
    with pytest.raises(VfsError):
        parse(io.StringIO(truncated))