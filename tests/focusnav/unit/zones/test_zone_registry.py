from __future__ import annotations

import pytest

from focusnav.api.zones import create_reachability_graph, create_zone_registry
from focusnav.navigation.elements import ElementArena
from focusnav.runtime.errors import NavigationConfigurationError


def _assert_indexes_agree(registry, arena: ElementArena) -> None:
    for element in arena:
        zone = registry.zone_of(element)
        if zone is None:
            assert all(element not in registry.members(z) for z in ("A", "B", "C"))
            continue
        assert element in registry.members(zone)
        for other in ("A", "B", "C"):
            if other != zone:
                assert element not in registry.members(other)


def test_add_registers_configured_zone_only() -> None:
    registry = create_zone_registry(create_reachability_graph({"A": []}))
    arena = ElementArena()
    inside = arena.create(zone="A")
    unconfigured = arena.create(zone="Nowhere")
    empty = arena.create()

    assert registry.add(inside)
    assert not registry.add(unconfigured)
    assert not registry.add(empty)
    assert registry.members("A") == (inside,)
    assert registry.zone_of(unconfigured) is None
    assert len(registry) == 1


def test_add_is_idempotent_for_same_zone() -> None:
    registry = create_zone_registry(create_reachability_graph({"A": []}))
    element = ElementArena().create(zone="A")
    registry.add(element)
    registry.add(element)
    assert registry.members("A") == (element,)


def test_set_zone_moves_element_and_drops_empty_zone_set() -> None:
    graph = create_reachability_graph({"A": [], "B": []})
    registry = create_zone_registry(graph)
    arena = ElementArena()
    element = arena.create(zone="A")
    registry.add(element)

    assert registry.set_zone(element, "B")
    assert element.zone == "B"
    assert registry.zone_of(element) == "B"
    assert registry.members("A") == ()
    assert registry.members("B") == (element,)
    assert registry.each_reachable("A") == ()
    _assert_indexes_agree(registry, arena)


def test_readding_after_direct_zone_change_removes_old_membership() -> None:
    registry = create_zone_registry(create_reachability_graph({"A": [], "B": []}))
    element = ElementArena().create(zone="A")
    registry.add(element)
    element.zone = "B"
    registry.add(element)
    assert registry.members("A") == ()
    assert registry.members("B") == (element,)


def test_add_heals_after_configuration_is_fixed() -> None:
    graph = create_reachability_graph()
    registry = create_zone_registry(graph)
    element = ElementArena().create(zone="Late")
    assert not registry.add(element)
    graph.add_zone("Late")
    assert registry.add(element)
    assert registry.zone_of(element) == "Late"


def test_add_drops_membership_when_zone_was_unconfigured() -> None:
    graph = create_reachability_graph({"A": []})
    registry = create_zone_registry(graph)
    element = ElementArena().create(zone="A")
    registry.add(element)
    graph.remove_zone("A")
    assert not registry.add(element)
    assert not registry.is_registered(element)
    assert registry.members("A") == ()


def test_remove_is_noop_for_unregistered_elements() -> None:
    registry = create_zone_registry(create_reachability_graph({"A": []}))
    arena = ElementArena()
    assert not registry.remove(arena.create(zone="A"))
    assert not registry.remove(arena.create())


def test_removed_element_never_reappears_in_enumeration() -> None:
    registry = create_zone_registry(create_reachability_graph({"A": ["B"], "B": []}))
    arena = ElementArena()
    first = arena.create(zone="A")
    second = arena.create(zone="B")
    registry.add(first)
    registry.add(second)
    assert set(registry.each_reachable("A")) == {first, second}

    assert registry.remove(second)
    assert registry.each_reachable("A") == (first,)
    assert registry.each_reachable("A") == (first,)
    assert not registry.is_registered(second.handle)


def test_each_reachable_respects_graph_direction() -> None:
    registry = create_zone_registry(create_reachability_graph({"A": ["B"], "B": [], "C": []}))
    arena = ElementArena()
    a, b, c = (arena.create(zone=zone) for zone in ("A", "B", "C"))
    for element in (a, b, c):
        registry.add(element)
    assert set(registry.each_reachable("A")) == {a, b}
    assert registry.each_reachable("B") == (b,)
    assert registry.each_reachable("Unknown") == ()


def test_each_reachable_reflects_current_state_per_call() -> None:
    registry = create_zone_registry(create_reachability_graph({"A": []}))
    arena = ElementArena()
    first = arena.create(zone="A")
    registry.add(first)
    before = registry.each_reachable("A")
    second = arena.create(zone="A")
    registry.add(second)
    assert before == (first,)
    assert set(registry.each_reachable("A")) == {first, second}


def test_each_reachable_without_graph_fails_loudly() -> None:
    registry = create_zone_registry(None)
    with pytest.raises(NavigationConfigurationError):
        registry.each_reachable("A")
    with pytest.raises(ValueError):
        registry.each_reachable("A")


def test_indexes_agree_after_mixed_operations() -> None:
    registry = create_zone_registry(create_reachability_graph({"A": [], "B": [], "C": []}))
    arena = ElementArena()
    elements = [arena.create(zone=zone) for zone in ("A", "B", "C", "A")]
    for element in elements:
        registry.add(element)
    registry.set_zone(elements[0], "C")
    registry.remove(elements[1])
    registry.set_zone(elements[2], "")
    registry.set_zone(elements[3], "B")
    registry.add(elements[1])

    _assert_indexes_agree(registry, arena)
    assert registry.members("A") == ()
    assert len(registry) == 3


def test_clear_drops_everything() -> None:
    registry = create_zone_registry(create_reachability_graph({"A": []}))
    element = ElementArena().create(zone="A")
    registry.add(element)
    registry.clear()
    assert len(registry) == 0
    assert registry.each_reachable("A") == ()
