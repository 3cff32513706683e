"""Deterministic sector generation on the galactic grid."""
from __future__ import annotations

import time
from typing import Optional, Tuple

from pygame.math import Vector3

from galaxygen.engine.config import GenerationConfig
from galaxygen.engine.logger import GenerationLogger
from galaxygen.engine.registry import EntityRegistry
from galaxygen.engine.roll import Roll, hash_seed
from galaxygen.generation.density import galaxy_density
from galaxygen.generation.star_generator import StarGenerator
from galaxygen.generation.system_generator import SystemGenerator
from galaxygen.math.astro import LIGHT_YEARS_PER_PARSEC
from galaxygen.world.sector import GalaxyCoordinate, Sector, cell_grid, sector_id_for
from galaxygen.world.system import StarSystem

POSITION_JITTER = 0.5


class SectorGenerator:
    """Builds sectors from a validated ``GenerationConfig``.

    Each sector draws from its own stream seeded by the run seed and the
    sector coordinate, so sectors can be generated in any order.
    """

    def __init__(
        self,
        config: Optional[GenerationConfig] = None,
        logger: Optional[GenerationLogger] = None,
        registry: Optional[EntityRegistry] = None,
    ) -> None:
        self.config = (config or GenerationConfig()).validate()
        self.logger = logger or GenerationLogger.quiet()
        self.registry = registry
        self._log = self.logger.channel("sector")
        if not self.config.galaxy_type_recognised:
            self._log.warning(
                "Unknown galaxy type %r, falling back to uniform", self.config.galaxy_type
            )
        self.galaxy_type = self.config.resolved_galaxy_type
        if self.config.random_seed is None:
            self.resolved_seed = time.time_ns() & 0xFFFFFFFF
            self._log.info("No random seed configured, using %d", self.resolved_seed)
        else:
            self.resolved_seed = self.config.random_seed

    def sector_roll(self, x: int, y: int, z: int) -> Roll:
        return Roll(hash_seed(self.resolved_seed, x, y, z))

    def generate(self, x: int, y: int, z: int) -> Sector:
        start_time = time.perf_counter()
        config = self.config
        pps = config.parsecs_per_sector
        coordinate = GalaxyCoordinate(x, y, z)
        relative = coordinate.relative_to_center(config.galactic_offset)
        center = (
            relative.x * pps + pps / 2.0,
            relative.y * pps + pps / 2.0,
            relative.z * pps + pps / 2.0,
        )
        sector = Sector(sector_id_for(center), coordinate, self.resolved_seed)
        roll = self.sector_roll(x, y, z)
        systems = SystemGenerator(
            roll,
            self.logger,
            star_generator=StarGenerator(roll, config.spectral_distribution, self.logger),
        )

        anomalies = 0
        for cell in cell_grid(pps):
            density = galaxy_density(
                config.star_density,
                relative.as_tuple(),
                cell,
                self.galaxy_type,
                config.sector_size,
                pps,
            )
            if roll.uniform(0.0, 1.0) < density:
                system = StarSystem(
                    f"{sector.id}-{cell[0]:02d}{cell[1]:02d}{cell[2]:02d}",
                    sector.id,
                    self._system_position(roll, coordinate, cell),
                )
                systems.generate(system)
                sector.add_system(system)
            elif roll.uniform(0.0, 1.0) < config.anomaly_chance:
                # Anomalies are rolled but not placed yet.
                anomalies += 1

        sector.rebuild_distance_map()
        if self.registry is not None:
            self.registry.register_sector_tree(sector)
        elapsed_ms = (time.perf_counter() - start_time) * 1000.0
        self._log.info(
            "Sector %s at %s: %d systems, %d anomalies (%.1f ms)",
            sector.id,
            coordinate.as_tuple(),
            len(sector.systems),
            anomalies,
            elapsed_ms,
        )
        return sector

    def _system_position(self, roll: Roll, coordinate: GalaxyCoordinate, cell: Tuple[int, int, int]) -> Vector3:
        """Cell position in light years with sub-parsec jitter."""

        pps = self.config.parsecs_per_sector
        origin = (coordinate.x * pps, coordinate.y * pps, coordinate.z * pps)
        return Vector3(
            *(
                (origin[axis] + cell[axis]) * LIGHT_YEARS_PER_PARSEC
                + roll.uniform(-POSITION_JITTER, POSITION_JITTER) * LIGHT_YEARS_PER_PARSEC
                for axis in range(3)
            )
        )


__all__ = ["SectorGenerator"]
