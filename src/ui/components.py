"""Reusable UI components for the Streamlit app."""

from __future__ import annotations

from typing import Sequence

import orjson
import streamlit as st

from slashdb_configurator.schemas import AdapterConfiguration, Candidate


def render_candidates(candidates: Sequence[Candidate], selected: str) -> None:
    """Render the candidate list with the current selection highlighted."""

    rows = [
        {
            "Selected": "✓" if cand.value == selected else "",
            "Field": cand.value,
            "Label": cand.label,
        }
        for cand in candidates
    ]
    st.dataframe(rows, hide_index=True, width="stretch")


def render_configuration(configuration: AdapterConfiguration) -> None:
    """Render the configuration as formatted JSON."""

    payload = orjson.dumps(configuration.as_dict(), option=orjson.OPT_INDENT_2).decode("utf-8")
    st.code(payload, language="json")


__all__ = ["render_candidates", "render_configuration"]
