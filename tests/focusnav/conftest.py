from __future__ import annotations

from collections.abc import Mapping, Sequence

import pytest

from focusnav.api.navigation import ElementHandle, NavigableElement, Vec2
from focusnav.runtime.config import NavRuntimeConfig, load_runtime_config
from focusnav.runtime.subsystem import NavigationSubsystem, create_navigation_subsystem
from focusnav.zones.graph import RuntimeReachabilityGraph


class FakeHost:
    def __init__(self) -> None:
        self.positions: dict[ElementHandle, Vec2] = {}
        self.local_axes: dict[ElementHandle, tuple[Vec2, Vec2]] = {}
        self.non_interactable: set[ElementHandle] = set()
        self.inactive: set[ElementHandle] = set()
        self.selected: list[NavigableElement] = []

    def place(self, element: NavigableElement, x: float, y: float) -> NavigableElement:
        self.positions[element.handle] = (x, y)
        return element

    def get_screen_position(self, element: NavigableElement) -> Vec2:
        return self.positions.get(element.handle, (0.0, 0.0))

    def is_interactable(self, element: NavigableElement) -> bool:
        return element.handle not in self.non_interactable

    def is_active(self, element: NavigableElement) -> bool:
        return element.handle not in self.inactive

    def select_focus(self, element: NavigableElement) -> None:
        self.selected.append(element)

    def get_local_axes(self, element: NavigableElement) -> tuple[Vec2, Vec2] | None:
        return self.local_axes.get(element.handle)


def make_config(**overrides: object) -> NavRuntimeConfig:
    base = load_runtime_config(env={})
    values = {name: getattr(base, name) for name in NavRuntimeConfig.__dataclass_fields__}
    values.update(overrides)
    return NavRuntimeConfig(**values)


def make_subsystem(
    mapping: Mapping[str, Sequence[str]],
    host: FakeHost | None = None,
    **config_overrides: object,
) -> tuple[NavigationSubsystem, FakeHost]:
    fake_host = host if host is not None else FakeHost()
    subsystem = create_navigation_subsystem(
        fake_host,
        graph=RuntimeReachabilityGraph.from_mapping(mapping),
        config=make_config(**config_overrides),
    )
    return subsystem, fake_host


@pytest.fixture
def fake_host() -> FakeHost:
    return FakeHost()
