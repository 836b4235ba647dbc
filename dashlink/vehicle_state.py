"""Top-down vehicle picture: named parts that can be turned, hidden, recoloured and labelled."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Iterable, Iterator

CORNERS = ("fl", "bl", "fr", "br")
SENSORS = ("fl", "fml", "fmr", "fr", "bl", "bml", "bmr", "br")
SENSOR_LEVELS = 4

_LEFT_DOOR_OPEN = 30
_RIGHT_DOOR_OPEN = 330
_DEG_TO_RAD = 0.01745329251

REFERENCE_WIDTH = 100
REFERENCE_HEIGHT = 200


def _vehicle_element_ids() -> list[str]:
    ids: list[str] = []
    for corner in CORNERS:
        ids += [
            f"{corner}_door",
            f"{corner}_window",
            f"{corner}_indicator",
            f"{corner}_tire",
            f"{corner}_pressure",
            f"{corner}_pressure_unit",
            f"{corner}_pressure_value",
        ]
    ids += ["l_headlight", "r_headlight", "l_taillight", "r_taillight"]
    for sensor in SENSORS:
        ids += [f"{sensor}_sensor{i}" for i in range(1, SENSOR_LEVELS + 1)]
    return ids


VEHICLE_ELEMENTS = tuple(_vehicle_element_ids())


@dataclass
class Element:
    """One addressable part of the picture."""

    id: str
    rotation: int = 0
    hidden: bool = False
    color: Any = None
    text: str = ""


class VehicleGraphic:
    """A picture of known size made of parts addressed by id.

    Every operation returns whether the addressed part exists, which is when
    the picture has to be redrawn.
    """

    def __init__(self, width: int, height: int, element_ids: Iterable[str] = ()) -> None:
        self.width = width
        self.height = height
        self._elements: dict[str, Element] = {}
        for element_id in element_ids:
            self.add(element_id)

    def add(self, element_id: str) -> Element:
        """Add a part, or return the one already known by that id."""
        return self._elements.setdefault(element_id, Element(element_id))

    def __getitem__(self, element_id: str) -> Element:
        return self._elements[element_id]

    def __contains__(self, element_id: object) -> bool:
        return element_id in self._elements

    def __iter__(self) -> Iterator[Element]:
        return iter(self._elements.values())

    def __len__(self) -> int:
        return len(self._elements)

    def rotate(self, element_id: str, degree: int) -> bool:
        element = self._elements.get(element_id)
        if element is None:
            return False
        element.rotation = degree
        return True

    def toggle(self, element_id: str, hide: bool) -> bool:
        element = self._elements.get(element_id)
        if element is None:
            return False
        element.hidden = bool(hide)
        return True

    def recolor(self, element_id: str, color: Any) -> bool:
        element = self._elements.get(element_id)
        if element is None:
            return False
        element.color = color
        return True

    def recolor_all(self, color: Any, exclude: Iterable[str] = ()) -> bool:
        """Recolour every part except those in ``exclude``."""
        skipped = set(exclude)
        changed = False
        for element in self._elements.values():
            if element.id not in skipped:
                element.color = color
                changed = True
        return changed

    def set_text(self, element_id: str, text: str) -> bool:
        element = self._elements.get(element_id)
        if element is None:
            return False
        element.text = text
        return True


def _check_corner(corner: str) -> str:
    if corner not in CORNERS:
        raise ValueError(f"unknown corner {corner!r}; expected one of {CORNERS}")
    return corner


class VehicleState:
    """Doors, windows, lights, tyre pressures and parking sensors of the vehicle picture.

    ``revision`` goes up every time a change needs a redraw.
    """

    def __init__(self, graphic: VehicleGraphic | None = None) -> None:
        self.graphic = graphic if graphic is not None else VehicleGraphic(
            REFERENCE_WIDTH, REFERENCE_HEIGHT, VEHICLE_ELEMENTS
        )
        self.base_color: Any = None
        self.headlight_color: Any = None
        self.taillight_color: Any = None
        self.indicator_color: Any = None
        self.warning_color: Any = None
        self.headlights = False
        self.taillights = False
        self.pressure_threshold = 0
        self.low_pressure = {corner: False for corner in CORNERS}
        self.sensors_enabled = True
        self.rotation = 0
        self.revision = 0

    def _update(self, changed: bool) -> None:
        if changed:
            self.revision += 1

    def set_base_color(self, color: Any) -> None:
        """Recolour everything not currently shown in a signal colour."""
        exclude = [f"{corner}_indicator" for corner in CORNERS]
        if self.headlights:
            exclude += ["l_headlight", "r_headlight"]
        if self.taillights:
            exclude += ["l_taillight", "r_taillight"]
        for corner in ("br", "bl", "fr", "fl"):
            if self.low_pressure[corner]:
                exclude += [f"{corner}_pressure", f"{corner}_tire"]
        self.base_color = color
        self.graphic.recolor_all(color, exclude)

    def set_headlight_color(self, color: Any) -> None:
        self.headlight_color = color
        if self.headlights:
            self.graphic.recolor("l_headlight", color)
            self.graphic.recolor("r_headlight", color)

    def set_taillight_color(self, color: Any) -> None:
        self.taillight_color = color
        if self.taillights:
            self.graphic.recolor("l_taillight", color)
            self.graphic.recolor("r_taillight", color)

    def set_indicator_color(self, color: Any) -> None:
        self.indicator_color = color
        for corner in CORNERS:
            self.graphic.recolor(f"{corner}_indicator", color)

    def set_warning_color(self, color: Any) -> None:
        self.warning_color = color
        for corner in ("br", "bl", "fr", "fl"):
            if self.low_pressure[corner]:
                self.graphic.recolor(f"{corner}_pressure", color)
                self.graphic.recolor(f"{corner}_tire", color)

    def rotate(self, degree: int) -> None:
        """Turn the whole picture; pressure labels turn back to stay upright."""
        self.rotation = degree
        changed = False
        for corner in CORNERS:
            changed |= self.graphic.rotate(f"{corner}_pressure", 360 - degree)
        self._update(changed)

    def scale_factor(self, width: float, height: float) -> float:
        """Scale at which the turned picture fits into ``width`` by ``height``."""
        degree = int(math.fmod(self.rotation, 180))
        if degree > 90:
            radian = (180 - degree) * _DEG_TO_RAD
        else:
            radian = degree * _DEG_TO_RAD
        gw, gh = self.graphic.width, self.graphic.height
        rotated_width = (gw + gh * math.tan(radian)) * math.cos(radian)
        rotated_height = (gh + gw * math.tan(radian)) * math.cos(radian)
        return min(width / rotated_width, height / rotated_height)

    def toggle_door(self, corner: str, open_: bool) -> None:
        _check_corner(corner)
        angle = _LEFT_DOOR_OPEN if corner.endswith("l") else _RIGHT_DOOR_OPEN
        changed = self.graphic.rotate(f"{corner}_door", angle if open_ else 0)
        changed |= self.graphic.toggle(f"{corner}_window", not open_)
        self._update(changed)

    def toggle_window(self, corner: str, up: bool) -> None:
        _check_corner(corner)
        self._update(self.graphic.toggle(f"{corner}_window", up))

    def toggle_headlights(self, on: bool) -> None:
        self.headlights = bool(on)
        color = self.headlight_color if self.headlights else self.base_color
        changed = self.graphic.recolor("l_headlight", color)
        changed |= self.graphic.recolor("r_headlight", color)
        self._update(changed)

    def toggle_taillights(self, on: bool) -> None:
        self.taillights = bool(on)
        color = self.taillight_color if self.taillights else self.base_color
        changed = self.graphic.recolor("l_taillight", color)
        changed |= self.graphic.recolor("r_taillight", color)
        self._update(changed)

    def _toggle_indicators(self, corners: Iterable[str], on: bool) -> None:
        changed = False
        for corner in corners:
            changed |= self.graphic.toggle(f"{corner}_indicator", on)
        self._update(changed)

    def toggle_l_indicators(self, on: bool) -> None:
        self._toggle_indicators(("fl", "bl"), on)

    def toggle_r_indicators(self, on: bool) -> None:
        self._toggle_indicators(("fr", "br"), on)

    def toggle_hazards(self, on: bool) -> None:
        self._toggle_indicators(CORNERS, on)

    def enable_pressure(self) -> None:
        changed = False
        for corner in CORNERS:
            changed |= self.graphic.toggle(f"{corner}_pressure", True)
        self._update(changed)

    def set_pressure_unit(self, unit: str) -> None:
        changed = False
        for corner in ("br", "bl", "fr", "fl"):
            changed |= self.graphic.set_text(f"{corner}_pressure_unit", unit)
        self._update(changed)

    def set_pressure_threshold(self, value: int) -> None:
        """Pressures below this value are shown in the warning colour."""
        self.pressure_threshold = value

    def set_pressure(self, corner: str, value: int) -> None:
        _check_corner(corner)
        low = value < self.pressure_threshold
        self.low_pressure[corner] = low
        color = self.warning_color if low else self.base_color
        changed = self.graphic.recolor(f"{corner}_pressure", color)
        changed |= self.graphic.recolor(f"{corner}_tire", color)
        changed |= self.graphic.set_text(f"{corner}_pressure_value", str(value))
        self._update(changed)

    def set_wheel_steer(self, degree: int) -> None:
        changed = self.graphic.rotate("fl_tire", degree)
        changed |= self.graphic.rotate("fr_tire", degree)
        self._update(changed)

    def disable_sensors(self) -> None:
        """Clear every parking sensor and ignore later sensor levels."""
        changed = False
        for sensor in SENSORS:
            changed |= self._apply_sensor(sensor, 0)
        self._update(changed)
        self.sensors_enabled = False

    def set_sensor(self, sensor: str, level: int) -> None:
        """Light the first ``level`` segments of a parking sensor such as ``"fml"``."""
        self._update(self._apply_sensor(sensor, level))

    def _apply_sensor(self, sensor: str, level: int) -> bool:
        if sensor not in SENSORS:
            raise ValueError(f"unknown sensor {sensor!r}; expected one of {SENSORS}")
        if not self.sensors_enabled:
            return False
        changed = False
        for i in range(1, SENSOR_LEVELS + 1):
            changed |= self.graphic.toggle(f"{sensor}_sensor{i}", i <= level)
        return changed