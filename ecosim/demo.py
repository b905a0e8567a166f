"""A demonstration backend with randomly wandering animals and random grass."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass

from .model import COORD_MAX, COORD_MIN, Backend, DataItem, SpeciesType

log = logging.getLogger(__name__)

# (species, how many, velocity bound in tenths of a unit per frame)
_POPULATION = (
    (SpeciesType.HERBIVORE, 10, 50),
    (SpeciesType.CARNIVORE, 5, 30),
    (SpeciesType.OMNIVORE, 7, 40),
)
_SPAWN_BOUND = 80
_GRASS_MIN, _GRASS_MAX = 30, 50


def _clamp(value: float) -> float:
    return max(COORD_MIN, min(value, COORD_MAX))


@dataclass
class Animal:
    """A moving animal with position and velocity."""

    x: float
    y: float
    vx: float
    vy: float
    type: SpeciesType

    def step(self) -> None:
        """Move by one frame, bouncing off the edges of the field."""
        self.x += self.vx
        self.y += self.vy
        if not COORD_MIN <= self.x <= COORD_MAX:
            self.vx = -self.vx
            self.x = _clamp(self.x)
        if not COORD_MIN <= self.y <= COORD_MAX:
            self.vy = -self.vy
            self.y = _clamp(self.y)

    def to_item(self) -> DataItem:
        return DataItem(self.x, self.y, self.type)


class DemoBackend(Backend):
    """Backend producing random grass and animals that drift and bounce."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self.frame_count = 0
        self.animals: list[Animal] = [
            self._spawn(species, speed)
            for species, count, speed in _POPULATION
            for _ in range(count)
        ]
        log.debug("demo backend initialised with %d animals", len(self.animals))

    def _spawn(self, species: SpeciesType, speed: int) -> Animal:
        rng = self._rng
        return Animal(
            x=float(rng.randrange(-_SPAWN_BOUND, _SPAWN_BOUND)),
            y=float(rng.randrange(-_SPAWN_BOUND, _SPAWN_BOUND)),
            vx=rng.randrange(-speed, speed) / 10.0,
            vy=rng.randrange(-speed, speed) / 10.0,
            type=species,
        )

    def next_frame(self) -> list[DataItem]:
        self.frame_count += 1
        for animal in self.animals:
            animal.step()

        rng = self._rng
        low, high = int(COORD_MIN), int(COORD_MAX)
        frame = [
            DataItem(float(rng.randrange(low, high)), float(rng.randrange(low, high)), SpeciesType.GRASS)
            for _ in range(rng.randrange(_GRASS_MIN, _GRASS_MAX))
        ]
        frame.extend(animal.to_item() for animal in self.animals)
        log.debug("frame %d: %d items", self.frame_count, len(frame))
        return frame