"""Transport type bitmask values and vehicle icon tables."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from enum import IntFlag, StrEnum


class TransportType(IntFlag):
    """ResRobot ``products`` bit per transport category."""

    EXPRESS_TRAIN = 2
    REGIONAL_TRAIN = 4
    EXPRESS_BUS = 8
    COMMUTER_TRAIN = 16
    SUBWAY = 32
    TRAM = 64
    BUS = 128
    FERRY = 256

    @property
    def config_name(self) -> str:
        """Name used in configuration files, e.g. ``"express-train"``."""
        return (self.name or "").lower().replace("_", "-")

    @classmethod
    def from_config_name(cls, name: str) -> TransportType:
        """Look up a transport type by its configuration name.

        Raises:
            ValueError: If the name is not a known transport type.
        """
        try:
            return cls[name.strip().upper().replace("-", "_")]
        except KeyError:
            raise ValueError(f"Unknown transport type: {name!r}") from None

    @classmethod
    def config_names(cls) -> list[str]:
        """All configuration names, in bit order."""
        return [member.config_name for member in cls]


# Every category enabled; the API treats this the same as no filter at all.
ALL_TRANSPORT_TYPES_MASK = sum(member.value for member in TransportType)


def products_mask(transport_types: Iterable[str]) -> int:
    """OR together the bits of the named transport types.

    Unknown names contribute nothing, duplicates count once.
    """
    mask = 0
    for name in transport_types:
        try:
            mask |= TransportType.from_config_name(name)
        except ValueError:
            continue
    return int(mask)


class VehicleCategory(StrEnum):
    """First character of a ResRobot transport category code."""

    BUS = "B"
    SUBWAY = "S"
    METRO = "U"
    TRAIN = "J"
    FERRY = "F"


class VehicleIcon(StrEnum):
    """Font Awesome icon classes shown next to a departure."""

    BUS = "fa fa-bus"
    SUBWAY = "fa fa-subway"
    TRAIN = "fa fa-train"
    SHIP = "fa fa-ship"


CATEGORY_ICONS: dict[VehicleCategory, VehicleIcon] = {
    VehicleCategory.BUS: VehicleIcon.BUS,
    VehicleCategory.SUBWAY: VehicleIcon.SUBWAY,
    VehicleCategory.METRO: VehicleIcon.SUBWAY,
    VehicleCategory.TRAIN: VehicleIcon.TRAIN,
    VehicleCategory.FERRY: VehicleIcon.SHIP,
}

DEFAULT_ICON_TABLE: dict[str, str] = {
    category.value: icon.value for category, icon in CATEGORY_ICONS.items()
}


def icon_for_type_code(type_code: str, icon_table: Mapping[str, str] | None = None) -> str | None:
    """Map a transport category code to an icon by its first character only.

    Returns None for empty codes and unmapped first characters.
    """
    if not type_code:
        return None
    table = DEFAULT_ICON_TABLE if icon_table is None else icon_table
    return table.get(type_code[:1])
