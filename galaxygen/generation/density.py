"""Galaxy-shape modulation of star formation probability."""
from __future__ import annotations

import math
from typing import Tuple

from galaxygen.engine.config import GalaxyType

MIN_DENSITY_FACTOR = 0.1


def _max_distance(sector_size: Tuple[int, int, int], parsecs_per_sector: int) -> float:
    half_x = sector_size[0] * parsecs_per_sector // 2
    half_y = sector_size[1] * parsecs_per_sector // 2
    half_z = sector_size[2] * parsecs_per_sector // 2
    return math.sqrt(half_x * half_x + half_y * half_y + half_z * half_z)


def galaxy_density(
    base_density: float,
    relative_sector: Tuple[int, int, int],
    cell: Tuple[int, int, int],
    galaxy_type: GalaxyType,
    sector_size: Tuple[int, int, int],
    parsecs_per_sector: int,
) -> float:
    """Star placement probability for one cell.

    ``relative_sector`` is the sector coordinate relative to the galactic
    centre and ``cell`` the parsec offset inside it. Every non-uniform shape
    keeps at least 10% of the base density.
    """

    if galaxy_type is GalaxyType.UNIFORM:
        return base_density

    gx = relative_sector[0] * parsecs_per_sector + cell[0]
    gy = relative_sector[1] * parsecs_per_sector + cell[1]
    gz = relative_sector[2] * parsecs_per_sector + cell[2]
    planar = math.hypot(gx, gy)
    distance = math.sqrt(gx * gx + gy * gy + gz * gz)
    max_distance = _max_distance(sector_size, parsecs_per_sector)
    normalized = distance / max_distance if max_distance > 0.0 else 0.0

    if galaxy_type is GalaxyType.SPIRAL:
        arm = math.sin(math.atan2(gy, gx) * 4.0 + planar * 0.1)
        spiral = 1.0 + 0.5 * max(arm, 0.0) - 0.5 * normalized
        disc_height = sector_size[2] * parsecs_per_sector / 4.0
        height = 1.0 - 0.8 * abs(gz) / disc_height
        return base_density * max(MIN_DENSITY_FACTOR, spiral * height)
    if galaxy_type is GalaxyType.ELLIPTICAL:
        return base_density * max(MIN_DENSITY_FACTOR, 1.0 - 0.9 * normalized)
    if galaxy_type is GalaxyType.IRREGULAR:
        noise = math.sin(gx * 0.1) * math.cos(gy * 0.11) * math.sin(gz * 0.13)
        return base_density * max(MIN_DENSITY_FACTOR, 1.0 + 0.8 * noise - 0.6 * normalized)
    return base_density


__all__ = ["galaxy_density", "MIN_DENSITY_FACTOR"]
