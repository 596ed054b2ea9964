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

"""In-memory build files."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class BuildArtifact:
    """A file in the distribution being built, held in memory.

    Attributes:
        name: Path of the file relative to the build root.
        content: Decoded text, or bytes once a plugin has encoded it.
        encoding: Codec for turning text content into bytes on write.
        added_by: Who created the file, for diagnostics.
    """

    name: str
    content: str | bytes
    encoding: str = "UTF-8"
    added_by: str = ""

    def encoded_content(self) -> bytes:
        """Return the content as bytes, encoding text strictly if needed."""
        if isinstance(self.content, bytes):
            return self.content
        return self.content.encode(self.encoding, errors="strict")
