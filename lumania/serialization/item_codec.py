"""
ItemStack codec.

Layout under a prefix P:
    P.Name       display name (plain text)
    P.Material   Material identifier
    P.Amount     stack size
    P.ItemFlags  list of ItemFlag identifiers, only when the item has flags
    P.Lore       list of lore lines, only when the item has plain-text lore

Only plain-text components survive a write. A non-text display name is written
as an empty string and non-text lore lines are dropped.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from config.settings import config
from lumania.serialization.models import (
    ItemFlag,
    ItemStack,
    Material,
    TextComponent,
    resolve_identifier,
)
from lumania.serialization.text import translate_alternate_color_codes

if TYPE_CHECKING:
    from lumania.storage.config_store import ConfigStore

__all__ = ["write_item", "read_item"]


def _plain_name(item: ItemStack) -> str:
    if isinstance(item.display_name, TextComponent):
        return item.display_name.content
    return ""


def write_item(store: ConfigStore, path: str, item: ItemStack) -> None:
    """
    Write *item* under *path* without saving.

    Empty flag sets and lore lists remove their entries instead of writing
    empty collections.
    """
    flags = sorted(flag.value for flag in item.flags)
    lore = [
        line.content for line in item.lore or [] if isinstance(line, TextComponent)
    ]

    store.set(f"{path}.Name", _plain_name(item))
    store.set(f"{path}.Material", item.material.value)
    store.set(f"{path}.Amount", item.amount)
    store.set(f"{path}.ItemFlags", flags or None)
    store.set(f"{path}.Lore", lore or None)


def read_item(store: ConfigStore, path: str) -> ItemStack:
    """
    Build an ItemStack from the entries under *path*.

    Args:
        store (ConfigStore): Store to read from
        path (str): Prefix the item was written under

    Returns:
        ItemStack: The stored item

    Raises:
        UnknownIdentifierError: If the material is missing or unknown, or a
                                stored flag names no ItemFlag
    """
    material = resolve_identifier(
        Material, store.get_string(f"{path}.Material"), kind="Material"
    )
    item = ItemStack(material=material)

    # Stacks hold at least one item; zero or negative amounts keep the default
    amount = store.get_int(f"{path}.Amount")
    if amount > 0:
        item.amount = amount

    name = store.get_formatted(f"{path}.Name")
    if name is not None:
        item.display_name = TextComponent(content=name)

    flags = store.get_string_list(f"{path}.ItemFlags")
    if flags is not None:
        item.flags = {
            resolve_identifier(ItemFlag, flag, kind="ItemFlag") for flag in flags
        }

    lines = store.get_string_list(f"{path}.Lore")
    if lines is not None:
        lore = [
            TextComponent(
                content=translate_alternate_color_codes(config.COLOR_CODE_CHAR, line)
            )
            for line in lines
        ]
        if lore:
            item.lore = lore

    return item
