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

"""Build plugins.

Usage::

    from sharegen.plugins import GenerateFileFromShareDir
    from sharegen.session import BuildSession

    session = BuildSession("Foo-Bar", "1.0")
    session.add_plugin(GenerateFileFromShareDir, {
        "-dist": "My-Bundle",
        "-destination_filename": "README.txt",
    })
    session.build()
"""

from sharegen.plugins.base import FileGatherer, FileMunger, Plugin
from sharegen.plugins.config import GenerationSpec, normalize_options
from sharegen.plugins.errors import (
    ConfigurationError,
    DecodeError,
    EncodeError,
    PluginError,
)
from sharegen.plugins.generate_file import GenerateFileFromShareDir, owning_distribution

__all__ = [
    "ConfigurationError",
    "DecodeError",
    "EncodeError",
    "FileGatherer",
    "FileMunger",
    "GenerateFileFromShareDir",
    "GenerationSpec",
    "Plugin",
    "PluginError",
    "normalize_options",
    "owning_distribution",
]
