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

"""Generate a build file from a template in a distribution's sharedir.

Host configuration, e.g. in ``pyproject.toml``::

    [[tool.sharegen.generate]]
    "-dist" = "My-Bundle"
    "-source_filename" = "my_data_template.txt"
    "-destination_filename" = "examples/my_data.txt"
    key1 = "value to pass to template"
    key2 = "another value to pass to template"

During the gather phase the template is read from ``My-Bundle``'s sharedir
and added to the build unrendered.  During the munge phase it is rendered
with Jinja2; every option without a leading dash is a template variable, and
``dist`` (the build session) and ``plugin`` (this instance) are always
available and cannot be overridden by options.

``-dist`` defaults to the distribution shipping the plugin class, so a bundle
can subclass :class:`GenerateFileFromShareDir` and keep its templates in its
own sharedir.
"""

from __future__ import annotations

from collections.abc import Mapping
from importlib import metadata
from typing import TYPE_CHECKING, Any

from sharegen import sharedir
from sharegen.files import BuildArtifact
from sharegen.plugins.base import FileGatherer, FileMunger
from sharegen.plugins.config import GenerationSpec
from sharegen.plugins.errors import DecodeError, EncodeError
from sharegen.templates import TemplateEngine

if TYPE_CHECKING:
    from sharegen.session import BuildSession


def owning_distribution(cls: type) -> str:
    """Return the name of the distribution that ships *cls*."""
    top_level = cls.__module__.partition(".")[0]
    dists = metadata.packages_distributions().get(top_level)
    if dists:
        return dists[0]
    return top_level.replace("_", "-")


class GenerateFileFromShareDir(FileGatherer, FileMunger):
    """Create one file in the build from a sharedir template.

    Args:
        session: The running build; exposed to templates as ``dist``.
        options: Host options (see module docstring).
        name: Instance name.
        host_manages_encoding: Leave rendered content as text and let the
            host encode it on write.  Defaults to the session's
            ``manages_encoding``.
        template_engine: Engine for rendering; a default one if omitted.

    Raises :class:`~sharegen.plugins.errors.ConfigurationError` if the
    options are incomplete or invalid.
    """

    def __init__(
        self,
        session: BuildSession,
        options: Mapping[str, Any] | None = None,
        *,
        name: str | None = None,
        host_manages_encoding: bool | None = None,
        template_engine: TemplateEngine | None = None,
    ) -> None:
        super().__init__(session, options, name=name)
        self.spec = GenerationSpec.from_options(
            options or {}, default_distribution=owning_distribution(type(self)),
        )
        if host_manages_encoding is None:
            host_manages_encoding = session.manages_encoding
        self.host_manages_encoding = host_manages_encoding
        self.templates = template_engine or TemplateEngine()

    # --- settings -----------------------------------------------------------

    @property
    def dist(self) -> str:
        return self.spec.source_distribution

    @property
    def filename(self) -> str:
        return self.spec.destination_filename

    @property
    def source_filename(self) -> str:
        return self.spec.source_filename

    @property
    def encoding(self) -> str:
        return self.spec.encoding

    def dump_config(self) -> dict[str, Any]:
        return {
            "dist": self.dist,
            "encoding": self.encoding,
            "source_filename": self.source_filename,
            "destination_filename": self.filename,
            **self.spec.extra_variables,
        }

    # --- gather phase -------------------------------------------------------

    def gather_files(self) -> BuildArtifact:
        path = sharedir.dist_file(self.dist, self.source_filename)

        raw = path.read_bytes()
        try:
            content = raw.decode(self.encoding, errors="strict")
        except UnicodeDecodeError as exc:
            raise DecodeError(
                f"Cannot decode {path} from {self.dist!r} as {self.encoding}: {exc}"
            ) from exc

        artifact = BuildArtifact(
            name=self.filename,
            content=content,
            encoding=self.encoding,
        )
        self.add_file(artifact)
        return artifact

    # --- munge phase --------------------------------------------------------

    def template_variables(self) -> dict[str, Any]:
        variables: dict[str, Any] = dict(self.spec.extra_variables)  # must be first
        variables["dist"] = self.session
        variables["plugin"] = self
        return variables

    def munge_file(self, artifact: BuildArtifact) -> None:
        if artifact.name != self.filename:
            return
        self.log.debug("updating contents of %s in memory", artifact.name)

        content = self.templates.fill_in_string(
            artifact.content,
            self.template_variables(),
            name=artifact.name,
        )

        if not self.host_manages_encoding:
            try:
                content = content.encode(self.encoding, errors="strict")
            except UnicodeEncodeError as exc:
                raise EncodeError(
                    f"Cannot encode rendered {artifact.name} as {self.encoding}: {exc}"
                ) from exc

        artifact.content = content
