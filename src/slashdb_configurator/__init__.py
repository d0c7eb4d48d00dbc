"""Top-level package for slashdb_configurator."""

from .candidates import MalformedSchemaError, derive_candidates, pretty_label
from .configurator import ConfiguratorHost, DeltaFieldConfigurator
from .schemas import (
    NO_SELECTION,
    NO_SELECTION_LABEL,
    AdapterConfiguration,
    Candidate,
    SourceSchema,
)
from .selector import apply_selection, default_shape, is_valid

__all__ = [
    "NO_SELECTION",
    "NO_SELECTION_LABEL",
    "AdapterConfiguration",
    "Candidate",
    "ConfiguratorHost",
    "DeltaFieldConfigurator",
    "MalformedSchemaError",
    "SourceSchema",
    "apply_selection",
    "default_shape",
    "derive_candidates",
    "is_valid",
    "pretty_label",
]
