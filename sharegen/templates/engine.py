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

"""Jinja2 rendering of in-memory file content.

Build files are rendered from the text already held in memory, not from a
template directory, so there is no loader.  Passing the file name as
``name`` makes Jinja2 report it in syntax errors and tracebacks.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from jinja2 import Environment

logger = logging.getLogger(__name__)


class TemplateEngine:
    """Render template strings with Jinja2.

    Args:
        **options: Extra :class:`jinja2.Environment` options, e.g.
            ``undefined=jinja2.StrictUndefined``.
    """

    def __init__(self, **options: Any) -> None:
        options.setdefault("keep_trailing_newline", True)
        options.setdefault("autoescape", False)  # generated files are not HTML
        self._env = Environment(**options)

    @property
    def environment(self) -> Environment:
        return self._env

    def fill_in_string(
        self,
        source: str,
        variables: Mapping[str, Any],
        *,
        name: str | None = None,
    ) -> str:
        """Render *source* against *variables*.

        Raises :class:`jinja2.TemplateSyntaxError` on malformed templates.
        """
        code = self._env.compile(source, name=name, filename=name)
        template = self._env.template_class.from_code(
            self._env, code, self._env.make_globals(None),
        )
        logger.debug("Rendering %s with %d variables", name or "<string>", len(variables))
        return template.render(dict(variables))
