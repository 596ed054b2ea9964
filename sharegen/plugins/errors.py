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

"""Errors raised by sharegen plugins.

Nothing here is recovered inside the plugin: every error aborts the build
step that raised it.  Template syntax errors are not wrapped, they surface
as :class:`jinja2.TemplateSyntaxError`.  A missing sharedir or template
file raises :class:`sharegen.sharedir.ResourceNotFoundError`.
"""

from __future__ import annotations


class PluginError(Exception):
    """Base class for plugin failures."""


class ConfigurationError(PluginError, ValueError):
    """Invalid or incomplete plugin configuration."""


class DecodeError(PluginError):
    """Template bytes are not valid in the configured encoding."""


class EncodeError(PluginError):
    """Rendered text cannot be represented in the configured encoding."""
