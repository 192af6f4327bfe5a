"""
Location codec.

Layout under a prefix P:
    P.World  world identifier
    P.X, P.Y, P.Z  coordinates
    P.Yaw, P.Pitch  orientation
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from lumania.serialization.models import Location

if TYPE_CHECKING:
    from lumania.storage.config_store import ConfigStore

__all__ = ["write_location", "read_location"]


def write_location(store: ConfigStore, path: str, location: Location) -> None:
    """Write the six Location leaves under *path* without saving."""
    store.set(f"{path}.World", location.world)
    store.set(f"{path}.X", location.x)
    store.set(f"{path}.Y", location.y)
    store.set(f"{path}.Z", location.z)
    store.set(f"{path}.Yaw", location.yaw)
    store.set(f"{path}.Pitch", location.pitch)


def read_location(store: ConfigStore, path: str) -> Location:
    """Build a Location from the leaves under *path*. Missing leaves read as zero."""
    return Location(
        world=store.get_string(f"{path}.World"),
        x=store.get_double(f"{path}.X"),
        y=store.get_double(f"{path}.Y"),
        z=store.get_double(f"{path}.Z"),
        yaw=store.get_double(f"{path}.Yaw"),
        pitch=store.get_double(f"{path}.Pitch"),
    )
