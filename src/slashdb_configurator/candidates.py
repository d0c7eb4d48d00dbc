"""Delta candidate derivation from a SlashDB source schema."""

from __future__ import annotations

import logging
import unicodedata
from typing import Any, List, Mapping, Optional, Tuple, Union

from pydantic import ValidationError

from .schemas import NO_SELECTION, NO_SELECTION_LABEL, Candidate, SourceSchema

logger = logging.getLogger(__name__)

SchemaInput = Union[SourceSchema, Mapping[str, Any]]


class MalformedSchemaError(ValueError):
    """Raised when a schema lacks the ``Source``/``children`` structure."""


def pretty_label(name: str, label: Optional[str]) -> str:
    """Return ``name`` or ``"name (label)"`` when the label adds information."""

    if not label or label == name:
        return name
    return f"{name} ({label})"


# Root collation order of ASCII whitespace, punctuation, symbols and digits.
_ASCII_ORDER = "\t\n\x0b\x0c\r _-,;:!?.'\"()[]{}@*/\\&#%`^+<=>|~$0123456789"
_ASCII_RANK = {ch: rank for rank, ch in enumerate(_ASCII_ORDER)}
_CATEGORY_GROUP = {"Z": 0, "P": 1, "S": 2, "N": 3}


def _primary_weight(ch: str) -> Tuple[int, int, str]:
    group = 0 if ch.isspace() else _CATEGORY_GROUP.get(unicodedata.category(ch)[0], 4)
    return (group, _ASCII_RANK.get(ch, len(_ASCII_ORDER)), ch)


def collation_key(value: str) -> Tuple[Tuple[Tuple[int, int, str], ...], str, str, str]:
    """Sort key approximating a locale collation.

    Whitespace sorts before punctuation, punctuation before symbols, symbols
    before digits and digits before letters. Strings compare first without
    accents or case, then with accents, then with case (lowercase before
    uppercase), and finally by code point so the order is total.
    """

    decomposed = unicodedata.normalize("NFKD", value)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    primary = tuple(_primary_weight(ch) for ch in base.casefold())
    return (primary, decomposed.casefold(), value.swapcase(), value)


def coerce_schema(schema: SchemaInput) -> SourceSchema:
    """Validate a raw mapping into a :class:`SourceSchema`."""

    if isinstance(schema, SourceSchema):
        return schema
    try:
        return SourceSchema.model_validate(schema)
    except ValidationError as exc:
        raise MalformedSchemaError(f"Schema is missing Source or children: {exc}") from exc


def sort_candidates(candidates: List[Candidate]) -> List[Candidate]:
    """Return candidates with the sentinel first and the rest in collation order."""

    sentinels = [cand for cand in candidates if cand.is_sentinel]
    others = sorted(
        (cand for cand in candidates if not cand.is_sentinel),
        key=lambda cand: collation_key(cand.value),
    )
    return sentinels + others


def derive_candidates(schema: Optional[SchemaInput]) -> List[Candidate]:
    """Build the ordered delta candidate list for ``schema``.

    An absent schema yields an empty list. Only direct children of the
    ``Source`` node are offered; nested fields cannot serve as flat delta
    markers.
    """

    if schema is None:
        return []

    source = coerce_schema(schema).source
    candidates = [Candidate(value=NO_SELECTION, label=NO_SELECTION_LABEL)]
    for key, node in source.children.items():
        if node.field is None or not node.field.field_name:
            logger.debug("Skipping schema child %r without a field name", key)
            continue
        name = node.field.field_name
        if name == NO_SELECTION:
            logger.debug("Skipping schema child %r named like the no-selection entry", key)
            continue
        candidates.append(Candidate(value=name, label=pretty_label(name, node.field.field_label)))

    ordered = sort_candidates(candidates)
    logger.debug("Derived %d delta candidates", len(ordered) - 1)
    return ordered


__all__ = [
    "MalformedSchemaError",
    "pretty_label",
    "collation_key",
    "coerce_schema",
    "sort_candidates",
    "derive_candidates",
]
