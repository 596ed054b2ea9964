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

"""Base classes for build plugins.

A plugin is constructed by the host with its options and a reference to the
running build, then called once per phase:

- :class:`FileGatherer` plugins add files during the gather phase
- :class:`FileMunger` plugins rewrite registered files during the munge phase

Usage::

    class Banner(FileMunger):
        def munge_file(self, artifact):
            artifact.content = "# generated\\n" + artifact.content
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from sharegen.files import BuildArtifact
    from sharegen.session import BuildSession


class Plugin:
    """Common plugin state.

    Args:
        session: The build the plugin belongs to.
        options: Host-supplied options for this instance.
        name: Instance name used in log lines and config dumps.
    """

    def __init__(
        self,
        session: BuildSession,
        options: Mapping[str, Any] | None = None,
        *,
        name: str | None = None,
    ) -> None:
        self.session = session
        self.options = dict(options or {})
        self.plugin_name = name or type(self).__name__
        self.log = logging.getLogger(f"{type(self).__module__}.{self.plugin_name}")

    def dump_config(self) -> dict[str, Any]:
        """Return resolved settings for audit capture by the host."""
        return {}

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.plugin_name!r}>"


class FileGatherer(Plugin, ABC):
    @abstractmethod
    def gather_files(self) -> Any:
        """Add this plugin's files to ``self.session.files``."""

    def add_file(self, artifact: BuildArtifact) -> None:
        artifact.added_by = artifact.added_by or repr(self)
        self.session.files.add(artifact)
        self.log.debug("Added file %s", artifact.name)


class FileMunger(Plugin, ABC):
    @abstractmethod
    def munge_file(self, artifact: BuildArtifact) -> None:
        """Rewrite *artifact* in place."""

    def munge_files(self) -> None:
        for artifact in self.session.files:
            self.munge_file(artifact)
