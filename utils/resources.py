"""
Bundled resource access for the Lumania plugin utilities.

The host plugin ships default configuration files and SQL scripts alongside its
code. ResourceBundle gives read access to that bundle and can materialize a
bundled file into the plugin's data folder. A missing resource is not an error;
it is reported as ResourceOutcome.RESOURCE_ABSENT or as None.
"""

from __future__ import annotations

import os
import shutil
from enum import Enum

__all__ = ["ResourceBundle", "ResourceOutcome"]


class ResourceOutcome(Enum):
    """Result of materializing a bundled resource into a target directory."""

    WRITTEN = "written"
    ALREADY_PRESENT = "already_present"
    RESOURCE_ABSENT = "resource_absent"
    WRITE_FAILED = "write_failed"


class ResourceBundle:
    """
    Read-only view of a directory of bundled resources.

    Resource names are relative paths using '/' separators, e.g. 'config.yml'
    or 'sql/setup.sql'. Names that would resolve outside the bundle root are
    rejected.
    """

    def __init__(self, root: str):
        self.root = os.path.abspath(root)

    def __repr__(self) -> str:
        return f"ResourceBundle(root={self.root!r})"

    def _resolve(self, name: str) -> str:
        path = os.path.abspath(os.path.join(self.root, *name.split("/")))
        if os.path.commonpath([self.root, path]) != self.root:
            raise ValueError(f"Resource name escapes bundle root: {name}")
        return path

    def has_resource(self, name: str) -> bool:
        """Return True if *name* exists as a file in the bundle."""
        return os.path.isfile(self._resolve(name))

    def get_resource(self, name: str) -> str | None:
        """
        Read a bundled text resource.

        Args:
            name (str): Resource name relative to the bundle root

        Returns:
            str | None: UTF-8 decoded content, or None if the resource is absent

        Raises:
            OSError: If the resource exists but cannot be read
        """
        path = self._resolve(name)
        if not os.path.isfile(path):
            return None
        with open(path, "r", encoding="utf-8") as f:
            return f.read()

    def save_resource(
        self, name: str, target_dir: str, replace: bool = False
    ) -> ResourceOutcome:
        """
        Copy a bundled resource into *target_dir*, keeping its relative name.

        Args:
            name (str): Resource name relative to the bundle root
            target_dir (str): Directory to materialize the resource into
            replace (bool): Overwrite an existing file at the destination

        Returns:
            ResourceOutcome: What happened

        Raises:
            OSError: If the copy fails
        """
        source = self._resolve(name)
        if not os.path.isfile(source):
            return ResourceOutcome.RESOURCE_ABSENT

        destination = os.path.join(target_dir, *name.split("/"))
        if os.path.exists(destination) and not replace:
            return ResourceOutcome.ALREADY_PRESENT

        os.makedirs(os.path.dirname(destination) or ".", exist_ok=True)
        shutil.copyfile(source, destination)
        return ResourceOutcome.WRITTEN
