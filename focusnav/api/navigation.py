"""Public navigation element and host API contracts."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol, runtime_checkable

Vec2 = tuple[float, float]


class NavigationDirection(Enum):
    """Directional move requests."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


class DirectionMode(Enum):
    """Frame used to turn a direction into a vector."""

    # Fixed screen frame.
    GLOBAL = "global"
    # Element's own orientation, as reported by the host.
    LOCAL = "local"


class IgnoreRangeMode(Enum):
    """How an element's edge margins are maintained."""

    DISABLED = "disabled"
    AUTO_SYNC_TO_SIZE = "auto_sync_to_size"
    MANUAL = "manual"


@dataclass(frozen=True, slots=True, order=True)
class ElementHandle:
    """Opaque arena handle for one navigable element."""

    id: int


def clamp01(value: float) -> float:
    """Clamp a value into the closed unit interval."""
    return min(1.0, max(0.0, float(value)))


@dataclass(frozen=True, slots=True)
class IgnoreRange:
    """Edge margins measured from an element's anchor point."""

    top: float = 0.0
    bottom: float = 0.0
    left: float = 0.0
    right: float = 0.0

    def __post_init__(self) -> None:
        for name in ("top", "bottom", "left", "right"):
            object.__setattr__(self, name, max(0.0, float(getattr(self, name))))

    def margin_for(self, direction: NavigationDirection) -> float:
        """Return the margin on the side facing ``direction``."""
        if direction is NavigationDirection.UP:
            return self.top
        if direction is NavigationDirection.DOWN:
            return self.bottom
        if direction is NavigationDirection.LEFT:
            return self.left
        return self.right


@dataclass(slots=True)
class DirectionSettings:
    """Per-direction navigation settings for one element."""

    enabled: bool = True
    search_width: float = 0.5
    fallbacks: list[ElementHandle] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.search_width = clamp01(self.search_width)


@dataclass(slots=True, eq=False)
class NavigableElement:
    """Navigation state for one focusable widget.

    Geometry, interactability and focus belong to the host; the element only
    carries what the resolver needs to rank it and to search from it. The
    ``zone`` field is changed through ``ZoneRegistry.set_zone`` so the
    registry indexes stay in sync.
    """

    handle: ElementHandle
    zone: str = ""
    name: str = ""
    priority: int = 0
    direction_mode: DirectionMode = DirectionMode.GLOBAL
    ignore_range_mode: IgnoreRangeMode = IgnoreRangeMode.AUTO_SYNC_TO_SIZE
    ignore_range: IgnoreRange = field(default_factory=IgnoreRange)
    up: DirectionSettings = field(default_factory=DirectionSettings)
    down: DirectionSettings = field(default_factory=DirectionSettings)
    left: DirectionSettings = field(default_factory=DirectionSettings)
    right: DirectionSettings = field(default_factory=DirectionSettings)

    @property
    def label(self) -> str:
        """Human-readable identifier for logs."""
        return self.name or f"element#{self.handle.id}"

    def settings_for(self, direction: NavigationDirection) -> DirectionSettings:
        """Return the settings record for one direction."""
        if direction is NavigationDirection.UP:
            return self.up
        if direction is NavigationDirection.DOWN:
            return self.down
        if direction is NavigationDirection.LEFT:
            return self.left
        return self.right

    def is_direction_enabled(self, direction: NavigationDirection) -> bool:
        return self.settings_for(direction).enabled

    def set_direction_enabled(self, direction: NavigationDirection, enabled: bool) -> None:
        self.settings_for(direction).enabled = bool(enabled)

    def search_width(self, direction: NavigationDirection) -> float:
        return self.settings_for(direction).search_width

    def set_search_width(self, direction: NavigationDirection, value: float) -> None:
        """Set angular search width; values are clamped to ``[0, 1]``."""
        self.settings_for(direction).search_width = clamp01(value)

    def fallbacks(self, direction: NavigationDirection) -> tuple[ElementHandle, ...]:
        return tuple(self.settings_for(direction).fallbacks)

    def set_fallbacks(
        self,
        direction: NavigationDirection,
        targets: Iterable[ElementHandle | NavigableElement],
    ) -> None:
        """Replace the ordered fallback list for one direction."""
        handles = [target.handle if isinstance(target, NavigableElement) else target for target in targets]
        self.settings_for(direction).fallbacks = handles

    def sync_ignore_range_to_size(
        self,
        width: float,
        height: float,
        *,
        scale_x: float = 1.0,
        scale_y: float = 1.0,
    ) -> bool:
        """Derive margins from widget size when auto-sync is enabled."""
        if self.ignore_range_mode is not IgnoreRangeMode.AUTO_SYNC_TO_SIZE:
            return False
        half_h = float(height) * 0.5 * float(scale_y)
        half_w = float(width) * 0.5 * float(scale_x)
        self.ignore_range = IgnoreRange(top=half_h, bottom=half_h, left=half_w, right=half_w)
        return True


@runtime_checkable
class NavigationHost(Protocol):
    """Capabilities the host UI framework supplies to the resolver."""

    def get_screen_position(self, element: NavigableElement) -> Vec2:
        """Return the element anchor in screen space."""

    def is_interactable(self, element: NavigableElement) -> bool:
        """Return whether the widget currently accepts input."""

    def is_active(self, element: NavigableElement) -> bool:
        """Return whether the widget is alive and enabled."""

    def select_focus(self, element: NavigableElement) -> None:
        """Move host focus to the element."""

    def get_local_axes(self, element: NavigableElement) -> tuple[Vec2, Vec2] | None:
        """Return screen-space (up, right) axes, or ``None`` for the screen frame."""


@dataclass(frozen=True, slots=True)
class MoveOutcome:
    """Result of routing one directional move request."""

    handled: bool
    target: NavigableElement | None = None


def create_functional_host(
    get_screen_position: Callable[[NavigableElement], Vec2],
    *,
    select_focus: Callable[[NavigableElement], None] | None = None,
    is_interactable: Callable[[NavigableElement], bool] | None = None,
    is_active: Callable[[NavigableElement], bool] | None = None,
    get_local_axes: Callable[[NavigableElement], tuple[Vec2, Vec2] | None] | None = None,
) -> NavigationHost:
    """Create a host adapter from plain callables."""
    from focusnav.navigation.host import FunctionalHost

    return FunctionalHost(
        position_fn=get_screen_position,
        select_fn=select_focus,
        interactable_fn=is_interactable,
        active_fn=is_active,
        local_axes_fn=get_local_axes,
    )
