from __future__ import annotations

import logging

import pytest

from focusnav.api.zones import create_reachability_graph
from focusnav.runtime.errors import NavigationConfigurationError
from focusnav.zones.settings_io import (
    load_reachability_settings,
    parse_reachability_mapping,
    save_reachability_settings,
)


def test_save_then_load_preserves_configuration(tmp_path) -> None:
    graph = create_reachability_graph({"Game": ["Menu"], "Menu": ["Menu/Settings"], "Menu/Settings": []})
    path = save_reachability_settings(graph, tmp_path / "nested" / "reachability.json")

    loaded = load_reachability_settings(path)
    assert loaded.to_mapping() == graph.to_mapping()
    assert loaded.can_navigate("Game", "Menu")
    assert not loaded.can_navigate("Menu", "Game")


def test_saved_file_is_sorted_json(tmp_path) -> None:
    graph = create_reachability_graph({"B": [], "A": ["B"]})
    path = save_reachability_settings(graph, tmp_path / "settings.json")
    text = path.read_text(encoding="utf-8")
    assert text.index('"A"') < text.index('"B"')


def test_missing_file_yields_empty_graph(tmp_path, caplog) -> None:
    with caplog.at_level(logging.WARNING):
        graph = load_reachability_settings(tmp_path / "absent.json")
    assert graph.zone_names() == ()
    assert not graph.can_navigate("A", "B")
    assert any(record.getMessage() == "reachability_settings_missing" for record in caplog.records)


def test_malformed_json_raises_configuration_error(tmp_path) -> None:
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(NavigationConfigurationError):
        load_reachability_settings(path)


@pytest.mark.parametrize(
    "payload",
    [
        ["A", "B"],
        {"A": "B"},
        {"A": [1, 2]},
        {"": []},
    ],
)
def test_parse_rejects_wrong_shapes(payload: object) -> None:
    with pytest.raises(NavigationConfigurationError):
        parse_reachability_mapping(payload)


def test_parse_accepts_key_to_list_mapping() -> None:
    assert parse_reachability_mapping({"A": ["B"], "B": []}) == {"A": ["B"], "B": []}
