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

"""Shared-resource directory lookup for installed distributions.

Usage::

    from sharegen.sharedir import dist_file

    path = dist_file("My-Bundle", "templates/README.txt")
"""

from sharegen.sharedir.locator import (
    ResourceNotFoundError,
    dist_dir,
    dist_file,
    normalize_name,
    register_share_dir,
    unregister_share_dir,
)

__all__ = [
    "ResourceNotFoundError",
    "dist_dir",
    "dist_file",
    "normalize_name",
    "register_share_dir",
    "unregister_share_dir",
]
