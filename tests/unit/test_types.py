import pytest

from room_canvas.assets import TILE_ASSET_PATHS
from room_canvas.types import (
    Resource,
    Structure,
    Terrain,
    resource_from_name,
    structure_from_name,
    terrain_from_mask,
    terrain_from_name,
)


@pytest.mark.parametrize(
    "name, expected",
    [
        ("source", Resource.SOURCE),
        ("H", Resource.HYDROGEN),
        ("O", Resource.OXYGEN),
        ("K", Resource.KEANIUM),
        ("L", Resource.LEMERGIUM),
        ("U", Resource.UTRIUM),
        ("Z", Resource.ZYNTHIUM),
        ("X", Resource.CATALYST),
        ("utrium", Resource.UTRIUM),
        ("energy", Resource.UNKNOWN),
        ("", Resource.UNKNOWN),
    ],
)
def test_resource_from_name_is_total(name: str, expected: Resource) -> None:
    assert resource_from_name(name) is expected


@pytest.mark.parametrize(
    "name, expected",
    [
        ("constructedWall", Structure.CONSTRUCTED_WALL),
        ("powerSpawn", Structure.POWER_SPAWN),
        ("tower", Structure.TOWER),
        ("road", Structure.ROAD),
        ("power_spawn", Structure.POWER_SPAWN),
        ("invaderCore", Structure.UNKNOWN),
        ("keeperLair", Structure.UNKNOWN),
    ],
)
def test_structure_from_name_is_total(name: str, expected: Structure) -> None:
    assert structure_from_name(name) is expected


@pytest.mark.parametrize(
    "mask, expected",
    [
        (0, Terrain.PLAIN),
        (1, Terrain.WALL),
        (2, Terrain.SWAMP),
        (3, Terrain.WALL),
    ],
)
def test_terrain_from_mask(mask: int, expected: Terrain) -> None:
    assert terrain_from_mask(mask) is expected


def test_terrain_from_name() -> None:
    assert terrain_from_name("swamp") is Terrain.SWAMP
    assert terrain_from_name("lava") is Terrain.PLAIN


def test_unknown_variants_are_distinct_keys() -> None:
    assert Resource.UNKNOWN != Structure.UNKNOWN
    assert TILE_ASSET_PATHS[Resource.UNKNOWN] != TILE_ASSET_PATHS[Structure.UNKNOWN]


def test_every_kind_has_an_asset() -> None:
    kinds = [*Terrain, *Resource, *Structure]
    assert len(TILE_ASSET_PATHS) == len(kinds)
    for kind in kinds:
        assert kind in TILE_ASSET_PATHS
