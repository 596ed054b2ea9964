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

"""Locate files in a distribution's shared-resource directory.

Resolution order for ``dist_dir("My-Bundle")``:

1. a directory registered with :func:`register_share_dir` (development
   checkouts, tests)
2. ``<package>/share`` inside one of the distribution's top-level packages
3. ``<data prefix>/share/<dist-name>`` for distributions that install their
   shared files as data files

Lookup goes through :mod:`importlib.metadata`, so the distribution's code is
never imported.
"""

from __future__ import annotations

import logging
import re
import sysconfig
from importlib import metadata
from pathlib import Path

logger = logging.getLogger(__name__)

SHARE_DIR_NAME = "share"

# normalized distribution name -> directory
_OVERRIDES: dict[str, Path] = {}


class ResourceNotFoundError(FileNotFoundError):
    """A distribution, its sharedir, or a file within it cannot be found."""


def normalize_name(name: str) -> str:
    """Normalize a distribution name the way package indexes compare them."""
    return re.sub(r"[-_.]+", "-", name).lower()


def register_share_dir(dist_name: str, path: str | Path) -> None:
    """Use *path* as the sharedir of *dist_name*, ahead of installed data."""
    _OVERRIDES[normalize_name(dist_name)] = Path(path).expanduser()


def unregister_share_dir(dist_name: str) -> None:
    """Drop a directory registered with :func:`register_share_dir`."""
    _OVERRIDES.pop(normalize_name(dist_name), None)


def _top_level_packages(dist: metadata.Distribution) -> list[str]:
    """Return the top-level import names shipped by *dist*."""
    text = dist.read_text("top_level.txt")
    if text:
        return [line.strip() for line in text.splitlines() if line.strip()]

    names: list[str] = []
    for entry in dist.files or []:
        parts = entry.parts
        if len(parts) > 1 and not parts[0].endswith((".dist-info", ".egg-info", ".data")):
            if parts[0] not in names and parts[0] != "..":
                names.append(parts[0])
    return names


def _installed_share_dirs(dist_name: str) -> list[Path]:
    try:
        dist = metadata.distribution(dist_name)
    except metadata.PackageNotFoundError:
        raise ResourceNotFoundError(
            f"Distribution {dist_name!r} is not installed"
        ) from None

    candidates = [
        Path(dist.locate_file(package)) / SHARE_DIR_NAME
        for package in _top_level_packages(dist)
    ]
    data_root = Path(sysconfig.get_path("data")) / SHARE_DIR_NAME
    canonical = dist.metadata["Name"] or dist_name
    candidates.append(data_root / canonical)
    if normalize_name(canonical) != canonical:
        candidates.append(data_root / normalize_name(canonical))
    return candidates


def dist_dir(dist_name: str) -> Path:
    """Return the sharedir of *dist_name*.

    Raises :class:`ResourceNotFoundError` if the distribution is not
    installed or ships no sharedir.
    """
    override = _OVERRIDES.get(normalize_name(dist_name))
    if override is not None:
        if not override.is_dir():
            raise ResourceNotFoundError(
                f"Registered sharedir for {dist_name!r} does not exist: {override}"
            )
        return override

    candidates = _installed_share_dirs(dist_name)
    for candidate in candidates:
        if candidate.is_dir():
            logger.debug("Resolved sharedir for %s: %s", dist_name, candidate)
            return candidate

    raise ResourceNotFoundError(
        f"No sharedir found for distribution {dist_name!r} "
        f"(looked in {', '.join(str(c) for c in candidates)})"
    )


def dist_file(dist_name: str, filename: str) -> Path:
    """Return the path of *filename* inside the sharedir of *dist_name*.

    Raises :class:`ResourceNotFoundError` if the file does not exist or
    lies outside the sharedir.
    """
    root = dist_dir(dist_name)
    path = root / filename
    if not path.resolve().is_relative_to(root.resolve()):
        raise ResourceNotFoundError(
            f"File {filename!r} is outside the sharedir of {dist_name!r} ({root})"
        )
    if not path.is_file():
        raise ResourceNotFoundError(
            f"File {filename!r} not found in sharedir of {dist_name!r} ({path})"
        )
    return path
