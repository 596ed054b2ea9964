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

"""Ordered registry of the files in a build."""

from __future__ import annotations

from collections.abc import Iterator

from sharegen.files.models import BuildArtifact


class FileRegistry:
    """Holds every :class:`BuildArtifact` of a build, in insertion order.

    Names are unique; adding a second file under an existing name raises
    :class:`ValueError`.
    """

    def __init__(self) -> None:
        self._files: dict[str, BuildArtifact] = {}

    def add(self, artifact: BuildArtifact) -> None:
        existing = self._files.get(artifact.name)
        if existing is not None:
            raise ValueError(
                f"Duplicate file {artifact.name!r}: added by {artifact.added_by!r}, "
                f"already added by {existing.added_by!r}"
            )
        self._files[artifact.name] = artifact

    def get(self, name: str) -> BuildArtifact | None:
        return self._files.get(name)

    def names(self) -> list[str]:
        return list(self._files)

    def __iter__(self) -> Iterator[BuildArtifact]:
        # snapshot, so munging may not disturb iteration
        return iter(list(self._files.values()))

    def __len__(self) -> int:
        return len(self._files)

    def __contains__(self, name: object) -> bool:
        return name in self._files
