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

"""A minimal build host.

:class:`BuildSession` holds the distribution's identity, the plugin list and
the file registry, and runs the phases strictly in order:

1. gather: every :class:`FileGatherer` adds its files
2. munge: every :class:`FileMunger` sees every registered file

Each phase runs once.  Running a phase again, or munging before gathering,
raises :class:`RuntimeError`, so no file is ever rendered twice.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from enum import Enum
from pathlib import Path
from typing import Any

from sharegen.files import FileRegistry
from sharegen.plugins.base import FileGatherer, FileMunger, Plugin

logger = logging.getLogger(__name__)


class BuildPhase(Enum):
    CONFIGURED = "configured"
    GATHERED = "gathered"
    MUNGED = "munged"


class BuildSession:
    """The distribution being built.

    Templates see this object as ``dist``.

    Args:
        name: Distribution name.
        version: Distribution version.
        root: Project root directory, if any.
        manages_encoding: Whether files holding text are encoded by the
            host on write.  Plugins read this at construction time.
    """

    def __init__(
        self,
        name: str,
        version: str | None = None,
        *,
        root: str | Path | None = None,
        manages_encoding: bool = True,
    ) -> None:
        self.name = name
        self.version = version
        self.root = Path(root) if root is not None else None
        self.manages_encoding = manages_encoding
        self.files = FileRegistry()
        self.plugins: list[Plugin] = []
        self.phase = BuildPhase.CONFIGURED

    def add_plugin(
        self,
        plugin_class: type[Plugin],
        options: Mapping[str, Any] | None = None,
        *,
        name: str | None = None,
        **kwargs: Any,
    ) -> Plugin:
        """Construct *plugin_class* for this build and append it."""
        self._require(BuildPhase.CONFIGURED, "add plugins")
        plugin = plugin_class(self, options, name=name, **kwargs)
        self.plugins.append(plugin)
        return plugin

    def plugins_with(self, role: type) -> list[Plugin]:
        return [p for p in self.plugins if isinstance(p, role)]

    # --- phases -------------------------------------------------------------

    def gather_files(self) -> None:
        self._require(BuildPhase.CONFIGURED, "gather files")
        for plugin in self.plugins_with(FileGatherer):
            plugin.gather_files()
        self.phase = BuildPhase.GATHERED
        logger.debug("Gathered %d files for %s", len(self.files), self.name)

    def munge_files(self) -> None:
        self._require(BuildPhase.GATHERED, "munge files")
        for plugin in self.plugins_with(FileMunger):
            plugin.munge_files()
        self.phase = BuildPhase.MUNGED

    def build(self) -> FileRegistry:
        """Run both phases and return the finished registry."""
        self.gather_files()
        self.munge_files()
        logger.info("Built %s %s: %d files", self.name, self.version or "", len(self.files))
        return self.files

    def write_to(self, directory: str | Path) -> list[Path]:
        """Write every built file below *directory*; return the paths."""
        self._require(BuildPhase.MUNGED, "write files")
        directory = Path(directory)
        written = []
        for artifact in self.files:
            path = directory / artifact.name
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(artifact.encoded_content())
            written.append(path)
        logger.info("Wrote %d files to %s", len(written), directory)
        return written

    def dump_config(self) -> list[dict[str, Any]]:
        """Return every plugin's resolved configuration."""
        return [
            {
                "class": f"{type(p).__module__}.{type(p).__qualname__}",
                "name": p.plugin_name,
                "config": p.dump_config(),
            }
            for p in self.plugins
        ]

    @classmethod
    def from_pyproject(cls, path: str | Path, **kwargs: Any) -> BuildSession:
        """Build a session from a ``pyproject.toml``.

        See :func:`sharegen.session.config.load_pyproject`.
        """
        from sharegen.session.config import load_pyproject

        return load_pyproject(path, session_class=cls, **kwargs)

    def _require(self, phase: BuildPhase, action: str) -> None:
        if self.phase is not phase:
            raise RuntimeError(
                f"Cannot {action} for {self.name!r}: build is {self.phase.value}, "
                f"expected {phase.value}"
            )

    def __repr__(self) -> str:
        return f"<BuildSession {self.name!r} {self.version!r}>"
