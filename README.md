# ecosim

A small Tk window that shows an ecosystem simulation as it runs. Once a
second the view asks a backend for a fresh snapshot of every creature in the
world, then draws the animals on a green field and shows a panel with the
running time, the total number of items and a count per species.

Coordinates live in the square `[-100, 100] × [-100, 100]`, with `+y` pointing
up. Four species are known (`SpeciesType.GRASS`, `HERBIVORE`, `CARNIVORE`,
`OMNIVORE`). Grass is counted but not drawn; the field itself stands in for
it.

The window needs Python's `tkinter`. Nothing outside the standard library is
required.

## Running the demo

```
pip install .
ecosim
```

This opens a 1000×700 window driven by `DemoBackend` from `ecosim.demo`. The
command takes no options.

The demo backend starts ten herbivores, five carnivores and seven omnivores at
random whole-number positions in `[-80, 80)`, each with a random constant
velocity. Every frame each `Animal` takes one `step()`: it moves by its
velocity and, if it leaves the field, is clamped back to the edge with that
velocity component reversed. Every frame also scatters a fresh patch of 30 to
49 grass items at random whole-number positions. Pass a `random.Random` to
make it repeatable:

```python
import random
from ecosim.demo import DemoBackend

backend = DemoBackend(random.Random(1))
frame = backend.next_frame()
print(backend.frame_count, len(frame))
```

## Writing your own backend

A backend is any object with a `next_frame()` method. The method returns the
complete current state as a list of `DataItem` values, not a change against
the previous frame. Subclass `Backend` from `ecosim.model` to make this
explicit:

```python
from ecosim.model import Backend, DataItem, SpeciesType


class MyBackend(Backend):
    def next_frame(self):
        return [
            DataItem(10.0, 20.0, SpeciesType.HERBIVORE),
            DataItem(-30.0, 50.0, SpeciesType.CARNIVORE),
        ]
```

To show it, hand it to `EcosystemView` from `ecosim.view` together with a Tk
root window:

```python
import tkinter as tk
from ecosim.view import EcosystemView

root = tk.Tk()
EcosystemView(root, MyBackend())
root.mainloop()
```

`EcosystemView.update_frame()` fetches one frame, recounts it and redraws;
`EcosystemView.redraw()` repaints the current frame. With a backend of `None`
the view stays empty.

## Helpers

`ecosim.view` also provides the pure functions the view is built on; they
work without a display:

- `count_species(items)`: a dict with the number of items of every species,
  zero included
- `color_for_type(species)`: the RGB tuple used for a species
- `to_screen_coords(x, y, width, height)`: world to pixel coordinates, with
  screen `y` growing downwards
- `format_elapsed(milliseconds)`: running time as `HH:MM:SS`, hours not
  wrapped at 24

## What it does not do

The only backend included is the random demo. There is no ecological model:
animals do not eat, breed, die or react to each other, and grass does not
grow or persist between frames. The view cannot pause, save or replay a run.

## Tests

```
pip install ".[test]"
pytest
```