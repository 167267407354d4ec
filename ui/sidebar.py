# ui/sidebar.py - Sidebar Components (query arguments)
from dataclasses import replace

import streamlit as st

from config.settings import Settings


def render_query_arguments(settings: Settings) -> Settings:
    """
    Render inputs for the catalog query arguments.

    Args:
        settings: Settings holding the default arguments

    Returns:
        A copy of the settings with the arguments chosen in the sidebar
    """
    st.sidebar.markdown("### Query arguments")

    min_pieces = st.sidebar.number_input(
        "Minimum number of pieces:",
        min_value=0,
        value=settings.min_pieces,
        step=100,
        key="min_pieces"
    )
    tags_set_name = st.sidebar.text_input(
        "Set name for tags:",
        value=settings.tags_set_name,
        key="tags_set_name"
    )
    subtheme_theme = st.sidebar.text_input(
        "Theme for subthemes:",
        value=settings.subtheme_theme,
        key="subtheme_theme"
    )
    piece_count = st.sidebar.number_input(
        "Exact number of pieces:",
        min_value=0,
        value=settings.piece_count,
        key="piece_count"
    )
    theme_substring = st.sidebar.text_input(
        "Theme contains:",
        value=settings.theme_substring,
        key="theme_substring"
    )
    average_theme_substring = st.sidebar.text_input(
        "Theme for average name length:",
        value=settings.average_theme_substring,
        key="average_theme_substring"
    )

    col1, col2 = st.sidebar.columns(2)
    with col1:
        min_name_length = st.number_input(
            "Name longer than:",
            min_value=0,
            value=settings.min_name_length,
            key="min_name_length"
        )
    with col2:
        name_limit = st.number_input(
            "Show at most:",
            min_value=1,
            value=settings.name_limit,
            key="name_limit"
        )

    return replace(
        settings,
        min_pieces=int(min_pieces),
        tags_set_name=tags_set_name,
        subtheme_theme=subtheme_theme,
        piece_count=int(piece_count),
        theme_substring=theme_substring,
        average_theme_substring=average_theme_substring,
        min_name_length=int(min_name_length),
        name_limit=int(name_limit)
    )


def render_sidebar(settings: Settings) -> Settings:
    """Render the full sidebar and return the chosen query arguments."""
    st.sidebar.title("Brickset Catalog")
    st.sidebar.caption(f"Data file: {settings.brickset_file}")
    st.sidebar.markdown("---")
    return render_query_arguments(settings)
