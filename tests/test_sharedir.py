# sharegen — generate build files from distribution sharedir templates
# Copyright (C) 2024-2026 Dr Horst Herb
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU Affero General Public License for more details.
#
# You should have received a copy of the GNU Affero General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.

"""Tests for sharegen.sharedir."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from sharegen.sharedir import (
    ResourceNotFoundError,
    dist_dir,
    dist_file,
    normalize_name,
    register_share_dir,
    unregister_share_dir,
)
from sharegen.sharedir.locator import _OVERRIDES, _top_level_packages


@pytest.fixture(autouse=True)
def _clean_overrides():
    yield
    _OVERRIDES.clear()


def _fake_dist(tmp_path: Path, packages: list[str], name: str = "Foo-Bar") -> MagicMock:
    dist = MagicMock()
    dist.read_text.return_value = "\n".join(packages) + "\n"
    dist.locate_file.side_effect = lambda p: tmp_path / p
    dist.metadata = {"Name": name}
    return dist


class TestNormalizeName:
    def test_separators_and_case(self):
        assert normalize_name("Foo_Bar.baz") == "foo-bar-baz"
        assert normalize_name("foo--bar") == "foo-bar"


class TestOverrides:
    def test_registered_dir_is_used(self, tmp_path):
        register_share_dir("Foo-Bar", tmp_path)
        assert dist_dir("Foo-Bar") == tmp_path

    def test_lookup_is_name_normalized(self, tmp_path):
        register_share_dir("Foo-Bar", tmp_path)
        assert dist_dir("foo_bar") == tmp_path

    def test_unregister(self, tmp_path):
        register_share_dir("Foo-Bar", tmp_path)
        unregister_share_dir("foo-bar")
        assert "foo-bar" not in _OVERRIDES

    def test_registered_dir_must_exist(self, tmp_path):
        register_share_dir("Foo-Bar", tmp_path / "missing")
        with pytest.raises(ResourceNotFoundError, match="does not exist"):
            dist_dir("Foo-Bar")


class TestDistFile:
    def test_existing_file(self, tmp_path):
        (tmp_path / "examples").mkdir()
        (tmp_path / "examples" / "data.txt").write_text("x")
        register_share_dir("Foo-Bar", tmp_path)
        assert dist_file("Foo-Bar", "examples/data.txt") == tmp_path / "examples" / "data.txt"

    def test_missing_file(self, tmp_path):
        register_share_dir("Foo-Bar", tmp_path)
        with pytest.raises(ResourceNotFoundError, match="nope.txt"):
            dist_file("Foo-Bar", "nope.txt")

    def test_directory_is_not_a_file(self, tmp_path):
        (tmp_path / "sub").mkdir()
        register_share_dir("Foo-Bar", tmp_path)
        with pytest.raises(ResourceNotFoundError):
            dist_file("Foo-Bar", "sub")

    def test_absolute_path_outside_share_dir(self, tmp_path):
        share = tmp_path / "share"
        share.mkdir()
        outside = tmp_path / "outside.txt"
        outside.write_text("secret")
        register_share_dir("Foo-Bar", share)
        with pytest.raises(ResourceNotFoundError, match="outside the sharedir"):
            dist_file("Foo-Bar", str(outside))

    def test_parent_path_outside_share_dir(self, tmp_path):
        share = tmp_path / "share"
        share.mkdir()
        (tmp_path / "outside.txt").write_text("secret")
        register_share_dir("Foo-Bar", share)
        with pytest.raises(ResourceNotFoundError, match="outside the sharedir"):
            dist_file("Foo-Bar", "../outside.txt")

    def test_parent_path_staying_inside(self, tmp_path):
        (tmp_path / "sub").mkdir()
        (tmp_path / "data.txt").write_text("x")
        register_share_dir("Foo-Bar", tmp_path)
        assert dist_file("Foo-Bar", "sub/../data.txt").read_text() == "x"

    def test_error_is_file_not_found(self):
        assert issubclass(ResourceNotFoundError, FileNotFoundError)


class TestInstalledDistributions:
    def test_unknown_distribution(self):
        with pytest.raises(ResourceNotFoundError, match="not installed"):
            dist_dir("surely-not-an-installed-distribution-xyz")

    def test_package_share_dir(self, tmp_path):
        (tmp_path / "foo_bar" / "share").mkdir(parents=True)
        dist = _fake_dist(tmp_path, ["foo_bar"])
        with patch("sharegen.sharedir.locator.metadata.distribution", return_value=dist):
            assert dist_dir("Foo-Bar") == tmp_path / "foo_bar" / "share"

    def test_data_files_share_dir(self, tmp_path):
        prefix = tmp_path / "prefix"
        (prefix / "share" / "Foo-Bar").mkdir(parents=True)
        dist = _fake_dist(tmp_path, ["foo_bar"])
        with (
            patch("sharegen.sharedir.locator.metadata.distribution", return_value=dist),
            patch("sharegen.sharedir.locator.sysconfig.get_path", return_value=str(prefix)),
        ):
            assert dist_dir("foo-bar") == prefix / "share" / "Foo-Bar"

    def test_installed_without_share_dir(self, tmp_path):
        dist = _fake_dist(tmp_path, ["foo_bar"])
        with (
            patch("sharegen.sharedir.locator.metadata.distribution", return_value=dist),
            patch("sharegen.sharedir.locator.sysconfig.get_path", return_value=str(tmp_path)),
        ):
            with pytest.raises(ResourceNotFoundError, match="No sharedir"):
                dist_dir("Foo-Bar")

    def test_override_wins_over_installed(self, tmp_path):
        (tmp_path / "foo_bar" / "share").mkdir(parents=True)
        override = tmp_path / "dev"
        override.mkdir()
        register_share_dir("Foo-Bar", override)
        dist = _fake_dist(tmp_path, ["foo_bar"])
        with patch("sharegen.sharedir.locator.metadata.distribution", return_value=dist):
            assert dist_dir("Foo-Bar") == override


class TestTopLevelPackages:
    def test_from_top_level_txt(self, tmp_path):
        dist = _fake_dist(tmp_path, ["alpha", "beta"])
        assert _top_level_packages(dist) == ["alpha", "beta"]

    def test_from_record_files(self):
        dist = MagicMock()
        dist.read_text.return_value = None
        dist.files = [
            Path("alpha/__init__.py"),
            Path("alpha/share/t.txt"),
            Path("alpha-1.0.dist-info/METADATA"),
            Path("single_module.py"),
        ]
        assert _top_level_packages(dist) == ["alpha"]
