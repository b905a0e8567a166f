import random

import pytest

from ecosim.demo import DemoBackend
from ecosim.model import DataItem, SpeciesType
from ecosim.view import color_for_type, count_species, format_elapsed, to_screen_coords


def test_count_species_empty():
    assert count_species([]) == {species: 0 for species in SpeciesType}


def test_count_species_mixed():
    items = [
        DataItem(0, 0, SpeciesType.GRASS),
        DataItem(1, 1, SpeciesType.GRASS),
        DataItem(2, 2, SpeciesType.CARNIVORE),
        DataItem(3, 3, SpeciesType.OMNIVORE),
    ]
    counts = count_species(items)
    assert counts[SpeciesType.GRASS] == 2
    assert counts[SpeciesType.HERBIVORE] == 0
    assert counts[SpeciesType.CARNIVORE] == 1
    assert counts[SpeciesType.OMNIVORE] == 1


def test_count_species_of_demo_frame():
    frame = DemoBackend(random.Random(3)).next_frame()
    counts = count_species(frame)
    assert sum(counts.values()) == len(frame)
    assert counts[SpeciesType.HERBIVORE] == 10
    assert counts[SpeciesType.CARNIVORE] == 5
    assert counts[SpeciesType.OMNIVORE] == 7


def test_count_species_accepts_generator():
    counts = count_species(DataItem(0, 0, SpeciesType.HERBIVORE) for _ in range(4))
    assert counts[SpeciesType.HERBIVORE] == 4


@pytest.mark.parametrize(
    "species, rgb",
    [
        (SpeciesType.GRASS, (34, 139, 34)),
        (SpeciesType.HERBIVORE, (135, 206, 250)),
        (SpeciesType.CARNIVORE, (220, 20, 60)),
        (SpeciesType.OMNIVORE, (255, 165, 0)),
    ],
)
def test_colors(species, rgb):
    assert color_for_type(species) == rgb


def test_colors_are_distinct():
    assert len({color_for_type(s) for s in SpeciesType}) == len(SpeciesType)


@pytest.mark.parametrize("width, height", [(1000, 700), (200, 200), (640, 480)])
def test_screen_corners_and_centre(width, height):
    assert to_screen_coords(-100, 100, width, height) == (0, 0)
    assert to_screen_coords(100, -100, width, height) == (width, height)
    assert to_screen_coords(0, 0, width, height) == (width / 2, height / 2)


def test_screen_y_grows_downwards():
    _, top = to_screen_coords(0, 50, 1000, 700)
    _, bottom = to_screen_coords(0, -50, 1000, 700)
    assert top < bottom


def test_format_elapsed_zero():
    assert format_elapsed(0) == "00:00:00"


def test_format_elapsed_pinned():
    assert format_elapsed(3661000) == "01:01:01"


@pytest.mark.parametrize("hours, minutes, seconds", [(0, 0, 59), (0, 59, 0), (23, 30, 15), (120, 5, 9)])
def test_format_elapsed_round_trip(hours, minutes, seconds):
    ms = hours * 3600000 + minutes * 60000 + seconds * 1000 + 999
    text = format_elapsed(ms)
    assert tuple(int(part) for part in text.split(":")) == (hours, minutes, seconds)
    assert all(len(part) >= 2 for part in text.split(":"))