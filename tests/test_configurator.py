from __future__ import annotations

import logging

import pytest

from slashdb_configurator.candidates import MalformedSchemaError
from slashdb_configurator.configurator import ConfiguratorHost, DeltaFieldConfigurator
from slashdb_configurator.schemas import NO_SELECTION, AdapterConfiguration

SCHEMA = {
    "Source": {
        "children": {
            "modified": {"field": {"fieldName": "modified", "fieldLabel": "Last Modified"}},
            "id": {"field": {"fieldName": "id", "fieldLabel": "id"}},
        }
    }
}


def test_initial_state_uses_default_shape() -> None:
    configurator = DeltaFieldConfigurator()

    assert configurator.delta_candidates == []
    assert configurator.configuration.as_dict() == {"deltaField": None}
    assert configurator.selected_value() == NO_SELECTION
    assert configurator.is_valid() is True


def test_schema_set_derives_options() -> None:
    configurator = DeltaFieldConfigurator()
    configurator.on_schema_set(SCHEMA)

    assert configurator.options() == [
        {"value": NO_SELECTION, "label": "-- None --"},
        {"value": "id", "label": "id"},
        {"value": "modified", "label": "modified (Last Modified)"},
    ]


def test_absent_schema_keeps_previous_candidates() -> None:
    configurator = DeltaFieldConfigurator()
    configurator.on_schema_set(SCHEMA)
    before = list(configurator.delta_candidates)

    configurator.on_schema_set(None)

    assert configurator.delta_candidates == before


def test_malformed_schema_propagates() -> None:
    configurator = DeltaFieldConfigurator()

    with pytest.raises(MalformedSchemaError):
        configurator.on_schema_set({"Source": {}})


def test_user_select_updates_configuration_and_notifies() -> None:
    events = []
    configurator = DeltaFieldConfigurator(listeners=[lambda cfg: events.append(cfg.as_dict())])
    configurator.on_schema_set(SCHEMA)

    configurator.on_user_select("modified")
    configurator.on_user_select(NO_SELECTION)

    assert events == [{"deltaField": "modified"}, {"deltaField": None}]
    assert configurator.selected_value() == NO_SELECTION


def test_existing_configuration_is_used() -> None:
    config = AdapterConfiguration(deltaField="id")
    configurator = DeltaFieldConfigurator(configuration=config)

    assert configurator.selected_value() == "id"
    configurator.on_user_select("modified")
    assert config.delta_field == "modified"


def test_subscribe_and_unsubscribe() -> None:
    calls = []
    listener = calls.append
    configurator = DeltaFieldConfigurator()

    configurator.subscribe(listener)
    configurator.subscribe(listener)
    configurator.on_user_select("id")
    configurator.unsubscribe(listener)
    configurator.on_user_select("modified")

    assert len(calls) == 1


def test_failing_listener_is_logged_and_others_still_run(caplog) -> None:
    def broken(_config) -> None:
        raise RuntimeError("sink unavailable")

    received = []
    configurator = DeltaFieldConfigurator(listeners=[broken, received.append])

    with caplog.at_level(logging.ERROR, logger="slashdb_configurator.configurator"):
        configurator.on_user_select("id")

    assert configurator.configuration.delta_field == "id"
    assert received == [configurator.configuration]
    assert "Configuration listener" in caplog.text


def test_satisfies_host_protocol() -> None:
    host: ConfiguratorHost = DeltaFieldConfigurator()

    assert host.get_default_shape().as_dict() == {"deltaField": None}
