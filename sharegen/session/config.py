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

"""Read a build configuration from ``pyproject.toml``.

::

    [project]
    name = "Foo-Bar"
    version = "1.0"

    [tool.sharegen]
    manages_encoding = true

    [[tool.sharegen.generate]]
    "-dist" = "My-Bundle"
    "-destination_filename" = "README.txt"
    year = "2026"

Every ``[[tool.sharegen.generate]]`` table becomes one
:class:`~sharegen.plugins.GenerateFileFromShareDir`, in file order.
"""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import TYPE_CHECKING, Any

from sharegen.plugins.errors import ConfigurationError
from sharegen.plugins.generate_file import GenerateFileFromShareDir

if TYPE_CHECKING:
    from sharegen.session.build import BuildSession

logger = logging.getLogger(__name__)

TOOL_KEY = "sharegen"


def read_pyproject(path: str | Path) -> dict[str, Any]:
    """Parse a TOML file, raising :class:`ConfigurationError` if malformed."""
    path = Path(path)
    try:
        with path.open("rb") as fh:
            return tomllib.load(fh)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigurationError(f"Invalid TOML in {path}: {exc}") from exc


def load_pyproject(
    path: str | Path,
    *,
    session_class: type[BuildSession] | None = None,
    plugin_class: type[GenerateFileFromShareDir] = GenerateFileFromShareDir,
) -> BuildSession:
    """Create a session and its generate-file plugins from *path*."""
    if session_class is None:
        from sharegen.session.build import BuildSession

        session_class = BuildSession

    path = Path(path)
    data = read_pyproject(path)
    project = data.get("project", {})
    if not isinstance(project, dict):
        raise ConfigurationError(f"{path}: [project] must be a table")
    tools = data.get("tool", {})
    if not isinstance(tools, dict):
        raise ConfigurationError(f"{path}: [tool] must be a table")
    tool = tools.get(TOOL_KEY, {})
    if not isinstance(tool, dict):
        raise ConfigurationError(f"{path}: [tool.{TOOL_KEY}] must be a table")

    name = project.get("name")
    if not name:
        raise ConfigurationError(f"{path}: [project] has no name")

    manages_encoding = tool.get("manages_encoding", True)
    if not isinstance(manages_encoding, bool):
        raise ConfigurationError(
            f"{path}: tool.{TOOL_KEY}.manages_encoding must be true or false"
        )

    session = session_class(
        name,
        project.get("version"),
        root=path.parent,
        manages_encoding=manages_encoding,
    )

    sections = tool.get("generate", [])
    if not isinstance(sections, list):
        raise ConfigurationError(f"{path}: tool.{TOOL_KEY}.generate must be an array of tables")
    for index, options in enumerate(sections):
        if not isinstance(options, dict):
            raise ConfigurationError(f"{path}: tool.{TOOL_KEY}.generate[{index}] is not a table")
        session.add_plugin(plugin_class, options, name=f"generate[{index}]")

    logger.debug("Loaded %d plugins from %s", len(session.plugins), path)
    return session
