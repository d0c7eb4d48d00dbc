"""Configurator component that hosts candidate derivation and selection."""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Protocol

from .candidates import SchemaInput, coerce_schema, derive_candidates
from .schemas import NO_SELECTION, AdapterConfiguration, Candidate, SourceSchema
from .selector import ChangeListener, apply_selection, default_shape, is_valid

logger = logging.getLogger(__name__)


class ConfiguratorHost(Protocol):
    """Events a host UI delivers to a source configurator."""

    def on_schema_set(self, schema: Optional[SchemaInput]) -> None:
        ...

    def on_user_select(self, value: str) -> None:
        ...

    def get_default_shape(self) -> AdapterConfiguration:
        ...

    def is_valid(self) -> bool:
        ...


class DeltaFieldConfigurator:
    """Lets a user pick the delta field of the SlashDB adapter."""

    def __init__(
        self,
        configuration: Optional[AdapterConfiguration] = None,
        listeners: Optional[List[ChangeListener]] = None,
    ) -> None:
        self.schema: Optional[SourceSchema] = None
        self.delta_candidates: List[Candidate] = []
        self.configuration = configuration if configuration is not None else self.get_default_shape()
        self._listeners: List[ChangeListener] = list(listeners or [])

    def subscribe(self, listener: ChangeListener) -> None:
        """Register a callback invoked after every configuration change."""

        if listener not in self._listeners:
            self._listeners.append(listener)

    def unsubscribe(self, listener: ChangeListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def on_schema_set(self, schema: Optional[SchemaInput]) -> None:
        """Re-derive candidates for a newly supplied schema."""

        if schema is None:
            logger.debug("No schema supplied; keeping %d existing candidates", len(self.delta_candidates))
            return
        self.schema = coerce_schema(schema)
        self.delta_candidates = derive_candidates(self.schema)
        logger.info("Schema set with %d delta candidates", len(self.delta_candidates) - 1)

    def on_user_select(self, value: str) -> None:
        """Record the picked candidate and propagate the configuration change."""

        apply_selection(self.configuration, value, notify=self._config_updated)
        logger.info("Delta field set to %r", self.configuration.delta_field)

    def get_default_shape(self) -> AdapterConfiguration:
        return default_shape()

    def is_valid(self) -> bool:
        return is_valid(self.configuration)

    def options(self) -> List[Dict[str, str]]:
        """Return candidates as plain ``{"value", "label"}`` dictionaries."""

        return [cand.model_dump() for cand in self.delta_candidates]

    def selected_value(self) -> str:
        """Return the current delta field, or the sentinel when none is set."""

        return self.configuration.delta_field or NO_SELECTION

    def _config_updated(self, configuration: AdapterConfiguration) -> None:
        for listener in list(self._listeners):
            try:
                listener(configuration)
            except Exception:  # noqa: BLE001
                logger.exception("Configuration listener %r failed", listener)


__all__ = ["ConfiguratorHost", "DeltaFieldConfigurator"]
