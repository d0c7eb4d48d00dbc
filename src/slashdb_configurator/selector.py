"""Selection utilities."""

from __future__ import annotations

from typing import Any, Callable, MutableMapping, Optional, TypeVar, Union

from .schemas import NO_SELECTION, AdapterConfiguration

ConfigurationLike = Union[AdapterConfiguration, MutableMapping[str, Any]]
ConfigT = TypeVar("ConfigT", AdapterConfiguration, MutableMapping[str, Any])
ChangeListener = Callable[[Any], object]


def normalize_selection(selected_value: str) -> Optional[str]:
    """Map the sentinel to ``None`` and pass any other value through."""

    return None if selected_value == NO_SELECTION else selected_value


def apply_selection(
    configuration: ConfigT,
    selected_value: str,
    notify: Optional[ChangeListener] = None,
) -> ConfigT:
    """Store ``selected_value`` as the delta field and signal the change."""

    delta_field = normalize_selection(selected_value)
    if isinstance(configuration, AdapterConfiguration):
        configuration.delta_field = delta_field
    else:
        configuration["deltaField"] = delta_field

    if notify is not None:
        notify(configuration)
    return configuration


def default_shape() -> AdapterConfiguration:
    """Return a fresh configuration with no delta field selected."""

    return AdapterConfiguration(deltaField=None)


def is_valid(configuration: Optional[ConfigurationLike] = None) -> bool:  # noqa: ARG001
    """Every configuration is valid; without a delta field the adapter runs full extracts."""

    return True


__all__ = [
    "ChangeListener",
    "ConfigurationLike",
    "normalize_selection",
    "apply_selection",
    "default_shape",
    "is_valid",
]
