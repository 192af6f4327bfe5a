"""Pydantic models for values stored in plugin config files."""

from __future__ import annotations

import struct
from enum import Enum
from typing import Annotated, Literal, Type, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from lumania.exceptions import UnknownIdentifierError

__all__ = [
    "Material",
    "ItemFlag",
    "TextComponent",
    "TranslatableComponent",
    "Component",
    "Location",
    "ItemStack",
    "resolve_identifier",
]

E = TypeVar("E", bound=Enum)


class Material(str, Enum):
    """Item and block types. Values are the identifiers written to config files."""

    AIR = "AIR"
    STONE = "STONE"
    GRASS_BLOCK = "GRASS_BLOCK"
    DIRT = "DIRT"
    COBBLESTONE = "COBBLESTONE"
    OAK_PLANKS = "OAK_PLANKS"
    OAK_LOG = "OAK_LOG"
    SAND = "SAND"
    GLASS = "GLASS"
    CHEST = "CHEST"
    CRAFTING_TABLE = "CRAFTING_TABLE"
    FURNACE = "FURNACE"
    TORCH = "TORCH"
    COAL = "COAL"
    IRON_INGOT = "IRON_INGOT"
    GOLD_INGOT = "GOLD_INGOT"
    DIAMOND = "DIAMOND"
    EMERALD = "EMERALD"
    NETHERITE_INGOT = "NETHERITE_INGOT"
    STICK = "STICK"
    BOOK = "BOOK"
    WRITABLE_BOOK = "WRITABLE_BOOK"
    PAPER = "PAPER"
    NAME_TAG = "NAME_TAG"
    COMPASS = "COMPASS"
    CLOCK = "CLOCK"
    MAP = "MAP"
    ENDER_PEARL = "ENDER_PEARL"
    NETHER_STAR = "NETHER_STAR"
    BARRIER = "BARRIER"
    PLAYER_HEAD = "PLAYER_HEAD"
    BLACK_STAINED_GLASS_PANE = "BLACK_STAINED_GLASS_PANE"
    GRAY_STAINED_GLASS_PANE = "GRAY_STAINED_GLASS_PANE"
    LIME_DYE = "LIME_DYE"
    RED_DYE = "RED_DYE"
    BREAD = "BREAD"
    APPLE = "APPLE"
    GOLDEN_APPLE = "GOLDEN_APPLE"
    COOKED_BEEF = "COOKED_BEEF"
    WOODEN_SWORD = "WOODEN_SWORD"
    STONE_SWORD = "STONE_SWORD"
    IRON_SWORD = "IRON_SWORD"
    DIAMOND_SWORD = "DIAMOND_SWORD"
    NETHERITE_SWORD = "NETHERITE_SWORD"
    DIAMOND_PICKAXE = "DIAMOND_PICKAXE"
    DIAMOND_AXE = "DIAMOND_AXE"
    BOW = "BOW"
    ARROW = "ARROW"
    SHIELD = "SHIELD"
    DIAMOND_HELMET = "DIAMOND_HELMET"
    DIAMOND_CHESTPLATE = "DIAMOND_CHESTPLATE"
    DIAMOND_LEGGINGS = "DIAMOND_LEGGINGS"
    DIAMOND_BOOTS = "DIAMOND_BOOTS"
    ELYTRA = "ELYTRA"
    FIREWORK_ROCKET = "FIREWORK_ROCKET"
    TOTEM_OF_UNDYING = "TOTEM_OF_UNDYING"


class ItemFlag(str, Enum):
    """Flags hiding parts of an item's tooltip."""

    HIDE_ENCHANTS = "HIDE_ENCHANTS"
    HIDE_ATTRIBUTES = "HIDE_ATTRIBUTES"
    HIDE_UNBREAKABLE = "HIDE_UNBREAKABLE"
    HIDE_DESTROYS = "HIDE_DESTROYS"
    HIDE_PLACED_ON = "HIDE_PLACED_ON"
    HIDE_ADDITIONAL_TOOLTIP = "HIDE_ADDITIONAL_TOOLTIP"
    HIDE_DYE = "HIDE_DYE"
    HIDE_ARMOR_TRIM = "HIDE_ARMOR_TRIM"
    HIDE_STORED_ENCHANTS = "HIDE_STORED_ENCHANTS"


def resolve_identifier(enum_cls: Type[E], value, kind: str | None = None) -> E:
    """
    Look up the member of *enum_cls* named *value*.

    Args:
        enum_cls: Enum to resolve against
        value: Stored identifier (may be None when the entry is missing)
        kind (str, optional): Name reported in the error. Defaults to the enum name

    Returns:
        The matching enum member

    Raises:
        UnknownIdentifierError: If *value* is missing or names no member
    """
    if not isinstance(value, str) or value not in enum_cls.__members__:
        raise UnknownIdentifierError(kind or enum_cls.__name__, value)
    return enum_cls[value]


class TextComponent(BaseModel):
    """Plain text display component."""

    type: Literal["text"] = "text"
    content: str


class TranslatableComponent(BaseModel):
    """Display component rendered client-side from a translation key."""

    type: Literal["translatable"] = "translatable"
    key: str


Component = Annotated[
    Union[TextComponent, TranslatableComponent], Field(discriminator="type")
]


def _to_single_precision(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


class Location(BaseModel):
    """
    A position and orientation in a named world.

    The world is kept as its identifier. Resolving it to a loaded world is up
    to the caller, and the identifier may be None.
    """

    world: str | None = Field(default=None, description="World identifier")
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    yaw: float = Field(default=0.0, description="Rotation around the y axis, degrees")
    pitch: float = Field(default=0.0, description="Head tilt, degrees")

    @field_validator("yaw", "pitch")
    @classmethod
    def narrow_angle(cls, v: float) -> float:
        """Store angles at single precision, as the game client does."""
        return _to_single_precision(v)


class ItemStack(BaseModel):
    """Description of an inventory item."""

    model_config = ConfigDict(validate_assignment=True)

    material: Material
    amount: int = Field(default=1, ge=1)
    display_name: Component | None = None
    flags: set[ItemFlag] = Field(default_factory=set)
    lore: list[Component] | None = None
