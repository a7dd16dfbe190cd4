import os
from pathlib import Path

import pytest

from suitemap.core.utils.paths import canonical_key, canonicalize, expand_path, is_root, split_parent


def test_canonicalize_anchors_relative_paths_at_base(tmp_path):
    root = tmp_path.resolve()
    (root / "a" / "b").mkdir(parents=True)

    assert canonicalize("a/b", base=root) == root / "a" / "b"
    assert canonicalize("a/b/..", base=root) == root / "a"


def test_canonicalize_follows_symlinks(tmp_path):
    root = tmp_path.resolve()
    (root / "real").mkdir()
    (root / "link").symlink_to(root / "real", target_is_directory=True)

    assert canonicalize(root / "link") == root / "real"


def test_canonicalize_missing_path_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        canonicalize(tmp_path / "missing")


def test_canonical_key_tolerates_missing_paths(tmp_path):
    root = tmp_path.resolve()
    (root / "present").mkdir()

    assert canonical_key(root / "present") == str(root / "present")
    assert canonical_key(f"{root}/x/../missing.yaml") == str(root / "missing.yaml")


def test_split_parent_and_is_root():
    anchor = Path(os.path.abspath(os.sep))

    assert split_parent(anchor / "a" / "b") == (anchor / "a", "b")
    assert is_root(anchor)
    assert not is_root(anchor / "a")


def test_expand_path(monkeypatch, tmp_path):
    monkeypatch.setenv("SUITEMAP_TEST_OUT", str(tmp_path / "out"))

    assert expand_path("$SUITEMAP_TEST_OUT/unit", relative_to=Path("/ignored")) == tmp_path / "out" / "unit"
    assert expand_path("../build", relative_to=tmp_path / "src") == tmp_path / "build"
