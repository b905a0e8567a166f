"""Data exchanged between a simulation backend and the view."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum

COORD_MIN = -100.0
COORD_MAX = 100.0


class SpeciesType(Enum):
    """Kind of organism in the ecosystem."""

    GRASS = "grass"
    HERBIVORE = "herbivore"
    CARNIVORE = "carnivore"
    OMNIVORE = "omnivore"


@dataclass(frozen=True)
class DataItem:
    """One organism in a frame: its position in [-100, 100] and its species."""

    x: float = 0.0
    y: float = 0.0
    type: SpeciesType = SpeciesType.GRASS


class Backend(ABC):
    """Source of simulation frames.

    The view asks for a frame once a second. Each frame is a full snapshot of
    the current state, not an incremental update.
    """

    @abstractmethod
    def next_frame(self) -> list[DataItem]:
        """Return every organism of the next frame."""