"""
YAML-backed config store for plugin configuration files.

This module provides ConfigStore, which binds one YAML document in the plugin's
data folder to an in-memory Document and exposes typed, path-based accessors.

Key behaviour:
- A missing file is materialized from the bundled default of the same name
- Load failures are logged and yield an empty document (unless strict=True)
- save() writes the document and reloads it from disk
- Typed getters return sentinel values (None/0/0.0/False) for missing paths
- Location and ItemStack values are stored under fixed sub-path layouts

Example Usage:
    resources = ResourceBundle(config.RESOURCE_DIR)
    store = ConfigStore(config.DATA_FOLDER, "locations", resources, logger)

    store.set_location("Spawn", spawn, overwrite=False)
    spawn = store.get_location("Spawn")

    prefix = store.get_formatted("Messages.Prefix")
"""

from __future__ import annotations

import logging
import os
from typing import Any, Optional, TYPE_CHECKING

import yaml

from config.settings import config
from lumania.exceptions import StoreLoadError
from lumania.serialization import item_codec, location_codec
from lumania.serialization.text import translate_alternate_color_codes
from lumania.storage.document import Document
from lumania.storage.value_kinds import ValueKind, coerce, sentinel
from utils.resources import ResourceBundle, ResourceOutcome

if TYPE_CHECKING:
    from lumania.serialization.models import ItemStack, Location

__all__ = ["ConfigStore"]


def normalize_resource_name(resource: str, extension: str | None = None) -> str:
    """Return *resource* with the store extension appended exactly once."""
    extension = extension or config.CONFIG_EXTENSION
    return resource.replace(extension, "") + extension


class ConfigStore:
    """
    Hierarchical YAML config store bound to a single backing file.

    A ConfigStore is not thread-safe. Each instance should have a single owner,
    normally the host's main thread.
    """

    def __init__(
        self,
        base_directory: str,
        resource_name: str,
        resources: ResourceBundle,
        logger: Optional[logging.Logger] = None,
        strict: bool = False,
    ):
        """
        Open the store, creating the backing file from the bundled default if needed.

        Args:
            base_directory (str): Host data folder holding the backing file
            resource_name (str): Name of the config, with or without extension
            resources (ResourceBundle): Bundle providing default files
            logger (Optional[logging.Logger]): Logger for failure reporting.
                                             If None, uses the module logger.
            strict (bool): Raise StoreLoadError instead of starting empty when
                           the backing file cannot be created or loaded

        Raises:
            StoreLoadError: Only when strict=True and creating or loading fails
        """
        self.logger = logger or logging.getLogger(__name__)
        self.name = normalize_resource_name(resource_name)
        self.path = os.path.join(base_directory, self.name)
        self.default_outcome = ResourceOutcome.ALREADY_PRESENT

        if not os.path.exists(self.path):
            try:
                os.makedirs(os.path.dirname(self.path) or ".", exist_ok=True)
                self.default_outcome = resources.save_resource(
                    self.name, base_directory
                )
            except OSError as e:
                if strict:
                    raise StoreLoadError(
                        f"Cannot create default {self.path}: {e}"
                    ) from e
                self.logger.error(
                    f"[!] FAILED TO CREATE A CONFIG FILE {self.path}: {e}"
                )
                self.default_outcome = ResourceOutcome.WRITE_FAILED
            if self.default_outcome is ResourceOutcome.RESOURCE_ABSENT:
                self.logger.debug(f"No bundled default for {self.name}")

        try:
            self.document = self._read_document()
        except StoreLoadError as e:
            if strict:
                raise
            self.logger.error(f"[!] FAILED TO LOAD A CONFIG FILE {self.path}: {e}")
            self.document = Document()

    def __repr__(self) -> str:
        return f"ConfigStore(path={self.path!r})"

    # ===============
    # FILE LIFECYCLE
    # ===============

    def _read_document(self) -> Document:
        """
        Read and parse the backing file.

        A backing file that does not exist yields an empty document.

        Raises:
            StoreLoadError: If the file cannot be read or parsed
        """
        if not os.path.exists(self.path):
            return Document()
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                return Document.from_yaml(f.read())
        except StoreLoadError:
            raise
        except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
            raise StoreLoadError(f"Cannot load {self.path}: {e}") from e

    def save(self) -> bool:
        """
        Write the current document to the backing file, then reload it.

        Returns:
            bool: True if the document was written, False if writing failed
        """
        try:
            text = self.document.to_yaml()
            with open(self.path, "w", encoding="utf-8") as f:
                f.write(text)
        except (OSError, yaml.YAMLError) as e:
            self.logger.error(f"[!] FAILED TO SAVE A CONFIG FILE {self.path}: {e}")
            return False
        return self.reload()

    def reload(self) -> bool:
        """
        Re-read the backing file, replacing the in-memory document.

        Returns:
            bool: True on success, False if the previous document was kept
        """
        try:
            self.document = self._read_document()
        except StoreLoadError as e:
            self.logger.error(f"[!] FAILED TO RELOAD A CONFIG FILE {self.path}: {e}")
            return False
        return True

    # ==================
    # GENERIC ACCESSORS
    # ==================

    def contains(self, path: str) -> bool:
        return self.document.contains(path)

    def set(self, path: str, value: Any) -> None:
        """Set *value* at *path* in memory. Call save() to persist."""
        self.document.set(path, value)

    def get_keys(self, path: str = "", deep: bool = False) -> list[str]:
        return self.document.keys(path, deep)

    def get(self, path: str, kind: ValueKind) -> Any:
        """Return the value at *path* coerced to *kind*, or the kind's sentinel."""
        if not self.document.contains(path):
            return sentinel(kind)
        return coerce(kind, self.document.get(path))

    # ==============
    # TYPED GETTERS
    # ==============

    def get_string(self, path: str) -> Optional[str]:
        return self.get(path, ValueKind.STRING)

    def get_formatted(self, path: str) -> Optional[str]:
        """
        Get a string with alternate color codes translated to native markup.

        Args:
            path (str): The path to the wanted config entry

        Returns:
            Optional[str]: The formatted string, or None if the path is missing
        """
        value = self.get_string(path)
        if value is None:
            return None
        return translate_alternate_color_codes(config.COLOR_CODE_CHAR, value)

    def get_string_list(self, path: str) -> Optional[list[str]]:
        return self.get(path, ValueKind.STRING_LIST)

    def get_int(self, path: str) -> int:
        return self.get(path, ValueKind.INTEGER)

    def get_double(self, path: str) -> float:
        return self.get(path, ValueKind.DOUBLE)

    def get_long(self, path: str) -> int:
        return self.get(path, ValueKind.LONG)

    def get_boolean(self, path: str) -> bool:
        return self.get(path, ValueKind.BOOLEAN)

    # =============
    # VALUE CODECS
    # =============

    def set_location(self, path: str, location: Location, overwrite: bool = True) -> None:
        """
        Save a Location under *path*, then save the store.

        Args:
            path (str): The path where to save the Location
            location (Location): The Location to save
            overwrite (bool): When False, nothing is written if *path* already
                              holds any content. The store is saved either way.
        """
        if overwrite or not self.contains(path):
            location_codec.write_location(self, path, location)
        self.save()

    def get_location(self, path: str) -> Location:
        """Read a Location from *path*. The world name is not resolved."""
        return location_codec.read_location(self, path)

    def set_item(self, path: str, item: ItemStack) -> None:
        """Save an ItemStack under *path*, then save the store."""
        item_codec.write_item(self, path, item)
        self.save()

    def get_item(self, path: str) -> ItemStack:
        """
        Read an ItemStack from *path*.

        Raises:
            UnknownIdentifierError: If the stored material or an item flag is unknown
        """
        return item_codec.read_item(self, path)
