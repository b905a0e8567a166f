"""Window showing the ecosystem frames delivered by a backend."""

from __future__ import annotations

import argparse
import time
from collections import Counter
from collections.abc import Iterable

from .model import COORD_MAX, DataItem, SpeciesType

UPDATE_INTERVAL_MS = 1000
ANIMAL_RADIUS = 8
WINDOW_TITLE = "生态模拟系统"

_COLORS = {
    SpeciesType.GRASS: (34, 139, 34),
    SpeciesType.HERBIVORE: (135, 206, 250),
    SpeciesType.CARNIVORE: (220, 20, 60),
    SpeciesType.OMNIVORE: (255, 165, 0),
}

_SPECIES_LABELS = (
    (SpeciesType.GRASS, "草: "),
    (SpeciesType.HERBIVORE, "食草: "),
    (SpeciesType.CARNIVORE, "食肉: "),
    (SpeciesType.OMNIVORE, "杂食: "),
)


def count_species(items: Iterable[DataItem]) -> dict[SpeciesType, int]:
    """Count the items of each species; every species appears in the result."""
    counts = Counter(item.type for item in items)
    return {species: counts[species] for species in SpeciesType}


def color_for_type(species: SpeciesType) -> tuple[int, int, int]:
    """RGB colour used to draw a species."""
    return _COLORS.get(species, (0, 0, 0))


def to_screen_coords(x: float, y: float, width: float, height: float) -> tuple[float, float]:
    """Map field coordinates in [-100, 100] to screen pixels (y grows downwards)."""
    span = 2 * COORD_MAX
    return (x + COORD_MAX) / span * width, (COORD_MAX - y) / span * height


def format_elapsed(milliseconds: int) -> str:
    """Format a duration as HH:MM:SS; hours are not wrapped."""
    total_seconds = int(milliseconds) // 1000
    hours, rest = divmod(total_seconds, 3600)
    minutes, seconds = divmod(rest, 60)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}"


def _hex(rgb: tuple[int, int, int]) -> str:
    return "#{:02x}{:02x}{:02x}".format(*rgb)


class EcosystemView:
    """Canvas that polls a backend once a second and draws its frames."""

    def __init__(self, master, backend) -> None:
        # Imported here so the pure helpers above work without a Tk installation.
        import tkinter as tk

        self.backend = backend
        self.items: list[DataItem] = []
        self.counts = count_species(())
        self._started = time.monotonic()
        self.canvas = tk.Canvas(master, highlightthickness=0)
        self.canvas.pack(fill=tk.BOTH, expand=True)
        self.canvas.bind("<Configure>", lambda _event: self.redraw())
        self.canvas.after(UPDATE_INTERVAL_MS, self._tick)

    def _tick(self) -> None:
        self.update_frame()
        self.canvas.after(UPDATE_INTERVAL_MS, self._tick)

    def elapsed_ms(self) -> int:
        return int((time.monotonic() - self._started) * 1000)

    def update_frame(self) -> None:
        """Fetch a new frame from the backend, recount it and redraw."""
        if self.backend is None:
            return
        self.items = list(self.backend.next_frame())
        self.counts = count_species(self.items)
        self.redraw()

    def redraw(self) -> None:
        """Draw the background, the animals and the information panel."""
        canvas = self.canvas
        width = canvas.winfo_width()
        height = canvas.winfo_height()
        canvas.delete("all")

        canvas.create_rectangle(
            0, 0, width, height, fill=_hex(color_for_type(SpeciesType.GRASS)), outline=""
        )

        # Grass is shown as the background, not drawn individually.
        for item in self.items:
            if item.type is SpeciesType.GRASS:
                continue
            sx, sy = to_screen_coords(item.x, item.y, width, height)
            canvas.create_oval(
                sx - ANIMAL_RADIUS, sy - ANIMAL_RADIUS, sx + ANIMAL_RADIUS, sy + ANIMAL_RADIUS,
                fill=_hex(color_for_type(item.type)), outline="white", width=2,
            )

        canvas.create_rectangle(10, 10, 260, 130, fill="black", outline="", stipple="gray75")

        font = ("Arial", 12, "bold")
        line_height = 20
        text_y = 30

        def text(x: int, y: int, value: str) -> None:
            canvas.create_text(x, y, text=value, anchor="sw", fill="white", font=font)

        text(20, text_y, "运行时间: " + format_elapsed(self.elapsed_ms()))
        text_y += line_height
        text(20, text_y, f"总数量: {len(self.items)}")
        for species, label in _SPECIES_LABELS:
            text_y += line_height
            text(20, text_y, label)
            canvas.create_rectangle(
                90, text_y - 12, 105, text_y + 3,
                fill=_hex(color_for_type(species)), outline="",
            )
            text(110, text_y, str(self.counts[species]))


def main(argv=None) -> int:
    """Open the ecosystem window driven by the demonstration backend."""
    import tkinter as tk

    from .demo import DemoBackend

    parser = argparse.ArgumentParser(prog="ecosim", description="Ecosystem simulation viewer.")
    parser.parse_args(argv)

    root = tk.Tk()
    root.title(WINDOW_TITLE)
    root.geometry("1000x700")
    EcosystemView(root, DemoBackend())
    root.mainloop()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())