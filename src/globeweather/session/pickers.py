# SPDX-License-Identifier: Apache-2.0
"""Picker surfaces that turn user gestures into weather fetches.

Gesture handlers only schedule work: each fetch runs as an ``asyncio`` task
on the current loop and the handler returns the task immediately. Older
fetches are never cancelled; the panels' generation tokens decide which
outcome is displayed.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import asdict, dataclass, field
from typing import Any, Callable, Coroutine, Protocol

from globeweather.errors import GlobeWeatherError, MalformedResponse, ValidationError
from globeweather.geo import Coordinate, parse_float
from globeweather.landmarks import Landmark, find_landmark, load_landmarks
from globeweather.readings import is_well_formed
from globeweather.session.panels import WeatherPanel

LOGGER = logging.getLogger(__name__)

NO_DATA_MESSAGE = MalformedResponse.message


class WeatherSource(Protocol):
    async def weather(self, coordinate: Coordinate) -> dict[str, Any]: ...


@dataclass(frozen=True)
class SurfaceSettings:
    """Camera, controls and sizing constants for the globe surface."""

    auto_rotate: bool = True
    auto_rotate_speed: float = 0.1
    enable_damping: bool = True
    damping_factor: float = 0.25
    rotate_speed: float = 0.5
    initial_altitude: float = 2.5
    landmark_altitude: float = 1.5
    transition_ms: int = 1000
    max_width: int = 1000
    height_ratio: float = 0.7

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def compute_dimensions(
    container_width: float,
    container_height: float,
    viewport_height: float,
    *,
    max_width: int = 1000,
    height_ratio: float = 0.7,
) -> tuple[float, float]:
    """Size the render surface from its container, capped by width and viewport."""

    return (
        min(container_width, max_width),
        min(container_height, viewport_height * height_ratio),
    )


@dataclass
class CameraView:
    lat: float | None = None
    lng: float | None = None
    altitude: float | None = None


@dataclass
class Camera:
    """Mirror of the engine's point-of-view state."""

    view: CameraView = field(default_factory=CameraView)
    last_transition_ms: int = 0

    def point_of_view(
        self,
        *,
        lat: float | None = None,
        lng: float | None = None,
        altitude: float | None = None,
        duration_ms: int = 0,
    ) -> None:
        if lat is not None:
            self.view.lat = lat
        if lng is not None:
            self.view.lng = lng
        if altitude is not None:
            self.view.altitude = altitude
        self.last_transition_ms = duration_ms


class Viewport:
    """Container and window geometry plus resize notifications."""

    def __init__(
        self,
        container_width: float = 1000,
        container_height: float = 600,
        window_height: float = 900,
    ) -> None:
        self.container_width = container_width
        self.container_height = container_height
        self.window_height = window_height
        self._listeners: list[Callable[[], None]] = []

    def add_resize_listener(self, listener: Callable[[], None]) -> None:
        self._listeners.append(listener)

    def remove_resize_listener(self, listener: Callable[[], None]) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def resize(
        self,
        *,
        container_width: float | None = None,
        container_height: float | None = None,
        window_height: float | None = None,
    ) -> None:
        if container_width is not None:
            self.container_width = container_width
        if container_height is not None:
            self.container_height = container_height
        if window_height is not None:
            self.window_height = window_height
        for listener in list(self._listeners):
            listener()


class _Dispatcher:
    """Holds references to in-flight tasks until they finish."""

    def __init__(self) -> None:
        self._pending: set[asyncio.Task] = set()

    def spawn(self, coro: Coroutine[Any, Any, Any]) -> asyncio.Task:
        task = asyncio.get_running_loop().create_task(coro)
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return task

    @property
    def pending(self) -> frozenset[asyncio.Task]:
        return frozenset(self._pending)


async def _load_into(
    panel: WeatherPanel, source: WeatherSource, token: int, coordinate: Coordinate
) -> None:
    try:
        reading = await source.weather(coordinate)
        if not is_well_formed(reading):
            raise MalformedResponse()
    except GlobeWeatherError as exc:
        LOGGER.error("Error fetching weather: %s", exc)
        panel.fail(token, exc)
        return
    panel.resolve(token, reading)


class GlobePicker(_Dispatcher):
    """Clickable globe with landmark markers."""

    def __init__(
        self,
        panel: WeatherPanel,
        source: WeatherSource,
        *,
        landmarks: tuple[Landmark, ...] | None = None,
        settings: SurfaceSettings | None = None,
        camera: Camera | None = None,
    ) -> None:
        super().__init__()
        self.panel = panel
        self.source = source
        self.landmarks = landmarks if landmarks is not None else load_landmarks()
        self.settings = settings or SurfaceSettings()
        self.camera = camera or Camera()
        self.camera.point_of_view(altitude=self.settings.initial_altitude)
        self.dimensions: tuple[float, float] = (800, 600)
        self._viewport: Viewport | None = None

    @property
    def mounted(self) -> bool:
        return self._viewport is not None

    def mount(self, viewport: Viewport) -> None:
        if self._viewport is not None:
            return
        self._viewport = viewport
        self.update_dimensions()
        viewport.add_resize_listener(self.update_dimensions)

    def unmount(self) -> None:
        if self._viewport is None:
            return
        self._viewport.remove_resize_listener(self.update_dimensions)
        self._viewport = None

    def update_dimensions(self) -> None:
        vp = self._viewport
        if vp is None:
            return
        self.dimensions = compute_dimensions(
            vp.container_width,
            vp.container_height,
            vp.window_height,
            max_width=self.settings.max_width,
            height_ratio=self.settings.height_ratio,
        )

    def click_surface(self, lat: float, lon: float) -> asyncio.Task:
        """Free-surface click: fetch for the point under the cursor."""

        return self._dispatch(Coordinate.rounded(lat, lon))

    def select_landmark(self, landmark: Landmark | str) -> asyncio.Task:
        """Marker click: fetch for the landmark and fly the camera to it."""

        if isinstance(landmark, str):
            landmark = find_landmark(landmark)
        task = self._dispatch(landmark.coordinate)
        self.camera.point_of_view(
            lat=landmark.lat,
            lng=landmark.lng,
            altitude=self.settings.landmark_altitude,
            duration_ms=self.settings.transition_ms,
        )
        return task

    def _dispatch(self, coordinate: Coordinate) -> asyncio.Task:
        token = self.panel.begin(coordinate)
        return self.spawn(_load_into(self.panel, self.source, token, coordinate))


@dataclass
class Modal:
    open: bool = False
    message: str | None = None
    reading: dict[str, Any] | None = None

    def show_error(self, message: str) -> None:
        self.open = True
        self.message = message
        self.reading = None

    def show_reading(self, reading: dict[str, Any]) -> None:
        self.open = True
        self.message = None
        self.reading = reading

    def hide(self) -> None:
        self.open = False


class ManualPicker(_Dispatcher):
    """Numeric latitude/longitude form with range validation."""

    def __init__(self, source: WeatherSource, panel: WeatherPanel | None = None) -> None:
        super().__init__()
        self.source = source
        self.panel = panel or WeatherPanel()
        self.modal = Modal()
        self.panel.subscribe(self._sync_modal)

    def submit(self, lat_text: str | None, lon_text: str | None) -> asyncio.Task | None:
        """Validate the form and dispatch a fetch; ``None`` when nothing was sent."""

        lat = parse_float(lat_text)
        lon = parse_float(lon_text)
        if lat is None or lon is None:
            LOGGER.error("Latitude and longitude are required")
            return None

        coordinate = Coordinate(lat, lon)
        if not coordinate.in_range:
            self.modal.show_error(ValidationError.message)
            return None

        self.modal.hide()
        token = self.panel.begin(coordinate)
        return self.spawn(_load_into(self.panel, self.source, token, coordinate))

    def _sync_modal(self, panel: WeatherPanel) -> None:
        if panel.loading:
            return
        if panel.reading is not None:
            self.modal.show_reading(panel.reading)
        elif panel.error is not None:
            self.modal.show_error(NO_DATA_MESSAGE)
