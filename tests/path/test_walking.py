"""
Summary: Validate lazy listing, depth-first traversal and handle release.
Why: Iteration must enumerate each entry once and never leak directory handles.
"""

from __future__ import annotations

from contextlib import aclosing
from unittest.mock import MagicMock

import pytest
from pytest_mock import MockerFixture

from teapath import DirEntry, EntryKind, Path, UnexpectedOSError
from teapath.path import walking


def _build_tree(root: Path) -> tuple[set[Path], set[Path]]:
    """Create 4 files and 3 directories below ``root``."""

    directories = {
        root.join("a").mkdir(),
        root.join("a", "b").mkdir(),
        root.join("c").mkdir(),
    }
    files = {
        root.join("top.txt").touch(),
        root.join("a", "one.txt").touch(),
        root.join("a", "b", "two.txt").touch(),
        root.join("c", "three.txt").touch(),
    }
    return files, directories


def test_ls_lists_direct_children_with_kinds(root: Path) -> None:
    files, _ = _build_tree(root)
    _ = root.join("top.txt").symlink(to=root.join("link"))

    entries = {entry.path: entry.kind for entry in root.ls()}

    assert entries == {
        root.join("top.txt"): EntryKind.FILE,
        root.join("a"): EntryKind.DIRECTORY,
        root.join("c"): EntryKind.DIRECTORY,
        root.join("link"): EntryKind.SYMLINK,
    }
    assert root.join("top.txt") in files


def test_ls_rereads_current_state(root: Path) -> None:
    _ = root.join("first").touch()
    assert [entry.path.basename() for entry in root.ls()] == ["first"]

    _ = root.join("second").touch()
    assert sorted(entry.path.basename() for entry in root.ls()) == ["first", "second"]


def test_walk_yields_every_entry_exactly_once(root: Path) -> None:
    files, directories = _build_tree(root)

    entries = list(root.walk())
    paths = [entry.path for entry in entries]

    assert len(entries) == len(files) + len(directories)
    assert set(paths) == files | directories
    assert root not in paths
    assert {entry.path for entry in entries if entry.is_directory()} == directories
    assert {entry.path for entry in entries if entry.is_file()} == files


def test_walk_yields_siblings_before_descending(root: Path) -> None:
    _ = _build_tree(root)

    paths = [entry.path for entry in root.walk()]

    for top_level in (root.join("top.txt"), root.join("a"), root.join("c")):
        assert paths.index(top_level) < paths.index(root.join("a", "one.txt"))
        assert paths.index(top_level) < paths.index(root.join("c", "three.txt"))


def test_walk_terminates_on_symlink_cycles(root: Path) -> None:
    inner = root.join("a").mkdir()
    _ = root.symlink(to=inner.join("loop"))

    paths = [entry.path for entry in root.walk()]

    assert paths.count(inner.join("loop")) == 1
    assert inner.join("loop", "a") not in paths


def test_walk_expands_symlinked_directories(root: Path) -> None:
    real = root.join("real").mkdir()
    _ = real.join("inside.txt").touch()
    _ = real.symlink(to=root.join("alias"))
    outside = root.join("outside").mkdir()
    _ = outside.join("elsewhere.txt").touch()
    _ = outside.symlink(to=real.join("to-outside"))

    paths = {entry.path for entry in root.join("real").walk()}

    assert real.join("to-outside", "elsewhere.txt") in paths


def test_walk_expands_real_directory_beside_its_aliases(root: Path) -> None:
    real = root.join("real").mkdir()
    _ = real.join("inside.txt").touch()
    for alias in ("a0", "zz", "m1", "b2", "q3"):
        _ = real.symlink(to=root.join(alias))

    paths = [entry.path for entry in root.walk()]

    assert real.join("inside.txt") in paths
    assert paths.count(real) == 1


@pytest.mark.asyncio
async def test_awalk_expands_real_directory_beside_its_aliases(root: Path) -> None:
    real = root.join("real").mkdir()
    _ = real.join("inside.txt").touch()
    for alias in ("a0", "zz", "m1", "b2", "q3"):
        _ = real.symlink(to=root.join(alias))

    paths = [entry.path async for entry in root.awalk()]

    assert real.join("inside.txt") in paths


def test_ls_on_missing_directory_raises(root: Path) -> None:
    with pytest.raises(UnexpectedOSError):
        _ = list(root.join("missing").ls())


def test_abandoned_ls_releases_handle(root: Path, mocker: MockerFixture) -> None:
    _ = _build_tree(root)
    close_spy = mocker.spy(walking._Scanner, "close")

    iterator = root.ls()
    first = next(iterator)
    assert isinstance(first, DirEntry)
    iterator.close()

    assert close_spy.call_count == 1


def test_walk_releases_handle_when_scan_fails(root: Path, mocker: MockerFixture) -> None:
    _ = _build_tree(root)
    close_spy = mocker.spy(walking._Scanner, "close")
    failing = MagicMock(side_effect=UnexpectedOSError("boom"))
    _ = mocker.patch.object(walking._Scanner, "next_entry", failing)

    with pytest.raises(UnexpectedOSError):
        _ = list(root.walk())

    assert close_spy.call_count == 1


@pytest.mark.asyncio
async def test_als_matches_ls(root: Path) -> None:
    _ = _build_tree(root)

    async_entries = [entry async for entry in root.als()]

    assert set(async_entries) == set(root.ls())


@pytest.mark.asyncio
async def test_awalk_matches_walk(root: Path) -> None:
    files, directories = _build_tree(root)

    paths = [entry.path async for entry in root.awalk()]

    assert len(paths) == len(files) + len(directories)
    assert set(paths) == files | directories


@pytest.mark.asyncio
async def test_abandoned_als_releases_handle(root: Path, mocker: MockerFixture) -> None:
    _ = _build_tree(root)
    close_spy = mocker.spy(walking._Scanner, "close")

    async with aclosing(root.als()) as entries:
        async for _ in entries:
            break

    assert close_spy.call_count == 1
