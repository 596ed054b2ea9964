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

"""Configuration intake for the generate-file plugin.

Options arrive as a flat mapping from the host.  Keys with a leading dash
belong to the plugin; every other key is handed to the template as a
variable::

    {
        "-dist": "My-Bundle",
        "-source_filename": "templates/README.txt",
        "-destination_filename": "README.txt",
        "-encoding": "UTF-8",
        "year": "2026",
    }

:func:`normalize_options` rewrites deprecated keys before validation, so
:class:`GenerationSpec` only ever sees canonical names.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from sharegen.plugins.errors import ConfigurationError

DEFAULT_ENCODING = "UTF-8"

DIST_KEY = "-dist"
DESTINATION_KEY = "-destination_filename"
SOURCE_KEY = "-source_filename"
ENCODING_KEY = "-encoding"

RECOGNIZED_KEYS = frozenset({DIST_KEY, DESTINATION_KEY, SOURCE_KEY, ENCODING_KEY})

# deprecated key -> canonical key
LEGACY_ALIASES = {
    "-filename": DESTINATION_KEY,
}


def normalize_options(options: Mapping[str, Any]) -> dict[str, Any]:
    """Return a copy of *options* with legacy aliases mapped to canonical keys.

    An alias replaces the canonical key when both are present.
    """
    normalized = dict(options)
    for legacy, canonical in LEGACY_ALIASES.items():
        if legacy in normalized:
            normalized[canonical] = normalized.pop(legacy)
    return normalized


@dataclass(frozen=True)
class GenerationSpec:
    """Resolved, immutable settings for one plugin instance.

    Attributes:
        source_distribution: Distribution whose sharedir holds the template.
        destination_filename: Path of the generated file in the build.
        source_filename: Path of the template inside the sharedir.
        encoding: Codec used to decode the template and encode the result.
        extra_variables: Unrecognized options, passed to the template as-is.
    """

    source_distribution: str
    destination_filename: str
    source_filename: str
    encoding: str = DEFAULT_ENCODING
    extra_variables: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # read-only view so the frozen instance cannot be changed through it
        object.__setattr__(
            self, "extra_variables", MappingProxyType(dict(self.extra_variables)),
        )

    @classmethod
    def from_options(
        cls,
        options: Mapping[str, Any],
        *,
        default_distribution: str,
    ) -> GenerationSpec:
        """Validate host options and build a spec.

        Raises :class:`ConfigurationError` if ``-destination_filename`` is
        missing, the encoding is not a known text codec, or any option value
        is not a string.
        """
        opts = normalize_options(options)

        for key in sorted(RECOGNIZED_KEYS & opts.keys()):
            if not isinstance(opts[key], str):
                raise ConfigurationError(
                    f"Option {key!r} must be a string, got {type(opts[key]).__name__}"
                )

        destination = opts.get(DESTINATION_KEY)
        if not destination:
            raise ConfigurationError(
                f"Missing required option {DESTINATION_KEY!r} "
                f"(or its alias {'-filename'!r})"
            )

        encoding = opts.get(ENCODING_KEY) or DEFAULT_ENCODING
        try:
            # text codecs only; bytes-to-bytes codecs such as base64 fail here
            "".encode(encoding)
        except LookupError:
            raise ConfigurationError(f"Unknown text encoding {encoding!r}") from None

        extras = {k: v for k, v in opts.items() if k not in RECOGNIZED_KEYS}
        for key, value in extras.items():
            if not isinstance(value, str):
                raise ConfigurationError(
                    f"Template variable {key!r} must be a string, "
                    f"got {type(value).__name__}"
                )

        return cls(
            source_distribution=opts.get(DIST_KEY) or default_distribution,
            destination_filename=destination,
            source_filename=opts.get(SOURCE_KEY) or destination,
            encoding=encoding,
            extra_variables=extras,
        )
