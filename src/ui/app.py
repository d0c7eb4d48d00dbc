"""Streamlit UI for configuring the SlashDB adapter delta field."""

from __future__ import annotations

import logging
from typing import Optional

import streamlit as st

from slashdb_configurator.candidates import MalformedSchemaError
from slashdb_configurator.config import Settings, load_settings, persist_settings
from slashdb_configurator.configurator import DeltaFieldConfigurator
from slashdb_configurator.logging_io import configure_logging, make_change_logger
from slashdb_configurator.schemas import NO_SELECTION, SourceSchema
from slashdb_configurator.utils import load_schema, parse_schema
try:  # pragma: no cover - import path differs when run via ``streamlit run``
    from .components import render_candidates, render_configuration
except ImportError:  # pragma: no cover - executed when module has no package context
    from components import render_candidates, render_configuration

st.set_page_config(page_title="SlashDB Adapter Configurator", layout="centered")

logger = logging.getLogger("slashdb_configurator.ui")


def init_state() -> None:
    if "settings" not in st.session_state:
        st.session_state.settings = load_settings()
        configure_logging(st.session_state.settings.log_level)
    if "configurator" not in st.session_state:
        configurator = DeltaFieldConfigurator()
        settings: Settings = st.session_state.settings
        if settings.enable_event_log:
            configurator.subscribe(make_change_logger(settings.event_log_dir, {"source": "ui"}))
        st.session_state.configurator = configurator
    if "schema_error" not in st.session_state:
        st.session_state.schema_error = ""


def _set_schema(schema: Optional[SourceSchema]) -> None:
    st.session_state.configurator.on_schema_set(schema)
    st.session_state.schema_error = ""


def render_sidebar(settings: Settings) -> None:
    st.sidebar.header("Schema")
    default_path = str(settings.schema_path) if settings.schema_path else ""
    path = st.sidebar.text_input("Schema file", value=default_path)
    uploaded = st.sidebar.file_uploader("…or upload a schema", type=["json"])

    if st.sidebar.button("Load schema", type="primary"):
        try:
            if uploaded is not None:
                _set_schema(parse_schema(uploaded.getvalue()))
            elif path:
                _set_schema(load_schema(path))
                persist_settings({"SCHEMA_PATH": path})
            else:
                st.session_state.schema_error = "Choose a schema file first."
        except (MalformedSchemaError, FileNotFoundError) as exc:
            logger.warning("Could not load schema: %s", exc)
            st.session_state.schema_error = str(exc)


def _on_select() -> None:
    st.session_state.configurator.on_user_select(st.session_state.delta_choice)


def render_configurator() -> None:
    configurator: DeltaFieldConfigurator = st.session_state.configurator
    st.title("SlashDB Adapter")

    if st.session_state.schema_error:
        st.error(st.session_state.schema_error)

    candidates = configurator.delta_candidates
    if not candidates:
        st.info("Load a schema to choose a delta field.")
        render_configuration(configurator.configuration)
        return

    values = [cand.value for cand in candidates]
    labels = {cand.value: cand.label for cand in candidates}
    selected = configurator.selected_value()
    index = values.index(selected) if selected in values else values.index(NO_SELECTION)
    st.selectbox(
        "Delta field",
        options=values,
        index=index,
        format_func=lambda value: labels[value],
        key="delta_choice",
        on_change=_on_select,
        help="Field compared against the last extraction to fetch only changed records.",
    )

    render_candidates(candidates, configurator.selected_value())
    render_configuration(configurator.configuration)


def main() -> None:
    init_state()
    render_sidebar(st.session_state.settings)
    render_configurator()


if __name__ == "__main__":  # pragma: no cover - entry point
    main()
