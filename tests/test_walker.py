import logging
import os
import sys

import pytest

from unicode_census import walker
from unicode_census.walker import FileEntry, TraversalError, iter_files, partition_key_for


@pytest.mark.parametrize(
    "name, expected",
    [
        ("notes.txt", "txt"),
        ("README.MD", "MD"),
        ("archive.tar.gz", "gz"),
        ("Makefile", ""),
        (".bashrc", ""),
        ("..hidden", "hidden"),
        ("trailing.", ""),
        ("dir/sub/code.rs", "rs"),
    ],
)
def test_partition_key_for(name, expected):
    assert partition_key_for(name) == expected


def _make_tree(root):
    (root / "b").mkdir()
    (root / "a").mkdir()
    (root / "a" / "inner").mkdir()
    (root / "z.txt").write_text("z", encoding="utf-8")
    (root / "a" / "one.md").write_text("1", encoding="utf-8")
    (root / "a" / "inner" / "deep").write_text("d", encoding="utf-8")
    (root / "b" / "two.txt").write_text("2", encoding="utf-8")


def test_iter_files_is_recursive_and_sorted(tmp_path):
    _make_tree(tmp_path)

    entries = list(iter_files(tmp_path))

    assert [entry.path.relative_to(tmp_path).as_posix() for entry in entries] == [
        "a/inner/deep",
        "a/one.md",
        "b/two.txt",
        "z.txt",
    ]
    assert [entry.partition_key for entry in entries] == ["", "md", "txt", "txt"]


def test_iter_files_skips_directory_symlinks(tmp_path):
    _make_tree(tmp_path)
    os.symlink(tmp_path / "a", tmp_path / "link_dir")
    os.symlink(tmp_path / "z.txt", tmp_path / "link.txt")

    names = [entry.path.name for entry in iter_files(tmp_path)]

    assert names.count("one.md") == 1
    assert "link.txt" in names


def test_iter_files_accepts_a_single_file(tmp_path):
    source = tmp_path / "only.txt"
    source.write_text("x", encoding="utf-8")

    assert list(iter_files(source)) == [FileEntry(source, "txt")]


def test_iter_files_missing_root_is_fatal(tmp_path):
    with pytest.raises(TraversalError) as excinfo:
        list(iter_files(tmp_path / "missing"))
    assert excinfo.value.path == tmp_path / "missing"


def _deny(monkeypatch, blocked):
    real_scandir = os.scandir

    def fake_scandir(path):
        if os.fspath(path) == os.fspath(blocked):
            raise PermissionError(13, "Permission denied", os.fspath(path))
        return real_scandir(path)

    monkeypatch.setattr(walker.os, "scandir", fake_scandir)


def test_unreadable_directory_aborts_by_default(tmp_path, monkeypatch):
    _make_tree(tmp_path)
    _deny(monkeypatch, tmp_path / "b")

    with pytest.raises(TraversalError) as excinfo:
        list(iter_files(tmp_path))
    assert "Permission denied" in str(excinfo.value)


def test_unreadable_directory_can_be_skipped(tmp_path, monkeypatch, caplog):
    _make_tree(tmp_path)
    _deny(monkeypatch, tmp_path / "b")

    with caplog.at_level(logging.WARNING, logger="unicode_census.walker"):
        entries = list(iter_files(tmp_path, skip_errors=True))

    names = [entry.path.name for entry in entries]
    assert names == ["deep", "one.md", "z.txt"]
    assert "Skipping unreadable entry" in caplog.text


def test_iter_files_handles_trees_deeper_than_the_recursion_limit(tmp_path):
    depth = sys.getrecursionlimit() + 50
    current = tmp_path
    for _ in range(depth):
        current = current / "d"
        current.mkdir()
    leaf = current / "f.txt"
    leaf.write_text("deep", encoding="utf-8")
    (tmp_path / "top.txt").write_text("top", encoding="utf-8")

    entries = list(iter_files(tmp_path))

    assert [entry.path for entry in entries] == [leaf, tmp_path / "top.txt"]
    assert len(entries[0].path.relative_to(tmp_path).parts) == depth + 1
