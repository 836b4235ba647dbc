# dashlink

State and layout models for the widgets of an in-car dashboard. Each model keeps a widget's state and works out its geometry. You draw the result with whatever front end you like. The package has no dependencies outside the standard library.

## Modules

| Module | What it holds |
| --- | --- |
| `dashlink.vehicle_state` | `VehicleGraphic`, a picture made of named `Element`s that can be turned, hidden, recoloured and labelled. `VehicleState` handles doors, windows, lights, indicators, tyre pressures and parking sensors on top of it. |
| `dashlink.selector` | `Selector`, which cycles left and right through a list of options. It can show an optional placeholder entry. |
| `dashlink.switch` | `Switch`, a sliding on/off switch: its checked state, thumb offset and size. |
| `dashlink.progress` | `ProgressIndicator`, a spinning arc. It covers the size, the animation values (`advance`) and the pen's `dash_pattern()`. |
| `dashlink.tuner` | `Tuner`, a radio dial from 880 to 1080, in tenths of a megahertz. It lays out the dial's `Tick`s and tunes by dragging. |
| `dashlink.icon_engine` | `IconEngine` and `StylizedIconEngine`. These give the tint colour and opacity (`PaintStyle`) for an icon in a given `IconMode` and `IconState` under a light or dark `ThemeMode`. |
| `dashlink.color_picker` | `Color`, an RGB value that reads and writes `#rrggbb`. `ColorPicker` has three sliders that preview a colour until you call `save()`. |
| `dashlink.dialog` | `Dialog`, with buttons, an auto-close timeout, fullscreen fitting and pop-up placement next to a parent `Rect`. It also has `snackbar_width` and `snackbar_height`. |
| `dashlink.fullscreen_toggler` | Ways to leave fullscreen: `NullFullscreenToggler`, `BarFullscreenToggler`, and `ButtonFullscreenToggler`, a floating button you can drag and tap. |

## Examples

### Selector

A placeholder goes in front of the options:

```python
from dashlink.selector import Selector

sel = Selector(["fm", "am"], placeholder="off")
sel.options      # ("off", "fm", "am")
sel.current()    # "off"
sel.next()       # "fm"
sel.previous()   # "off"
```

The functions in `item_listeners` and `idx_listeners` are called after every change.

### Vehicle picture

```python
from dashlink.vehicle_state import VehicleState

car = VehicleState()
car.set_pressure_threshold(30)
car.set_pressure("fl", 25)       # below threshold: shown in the warning colour
car.graphic["fl_pressure_value"].text   # "25"
car.toggle_door("fr", True)      # door turned to 330 degrees, window hidden
car.set_sensor("bml", 2)         # first two segments of that sensor lit
```

Each change that needs a redraw raises `car.revision` by one. Corners are `"fl"`, `"bl"`, `"fr"` and `"br"`. An unknown corner or sensor raises `ValueError`.

### Switch, tuner, colour

```python
from dashlink.switch import Switch
from dashlink.tuner import Tuner
from dashlink.color_picker import Color, ColorPicker

sw = Switch(width=60)
sw.size_hint()       # (44, 24)
sw.toggle()          # True; thumb offset is now 48

dial = Tuner()
dial.set_value(2000) # 1080, clamped to the dial's range

Color(255, 128, 0).name()      # "#ff8000"
Color.from_name("#fff")        # Color(red=255, green=255, blue=255)

picker = ColorPicker()
picker.set_component("red", 300)   # 255, clamped
picker.save()                      # Color(red=255, green=0, blue=0)
```

### Dialog timeout

```python
from dashlink.dialog import Dialog

d = Dialog()
d.open(timeout=3000)
d.tick(1000)
d.touch()          # any event restarts the timeout
d.tick(3000)       # True: the dialog closed itself
```

## What this package does not do

- It draws nothing and opens no windows. It has no GUI toolkit and no command to start.
- It does not talk to a vehicle. There is no OBD-II, ELM327 or CAN bus support.
- It does not store settings.
- It has no plugin loading.

Connect these models to your own rendering, input and data sources.

## Tests

```
pip install "dashlink[test]"
pytest
```