# ui/main_content.py - Main Content Components
import streamlit as st
import pandas as pd

from config.settings import Settings
from core.exceptions import EmptyResultError
from repositories.lego_set_repository import LegoSetRepository


def catalog_frame(repository: LegoSetRepository) -> pd.DataFrame:
    """Tabular view of every set, in file order."""
    records = [lego_set.to_dict() for lego_set in repository.get_all()]
    frame = pd.DataFrame(records, columns=["number", "name", "pieces", "theme", "subtheme", "tags"])
    frame["tags"] = frame["tags"].apply(", ".join)
    return frame


def themes_frame(repository: LegoSetRepository) -> pd.DataFrame:
    """One row per theme with its set count and names."""
    groups = repository.names_grouped_by_theme()
    return pd.DataFrame(
        [
            {"theme": theme, "sets": len(names), "names": ", ".join(names)}
            for theme, names in groups.items()
        ],
        columns=["theme", "sets", "names"]
    )


def render_overview(repository: LegoSetRepository) -> None:
    """Render record count and the raw catalog."""
    st.metric("Sets in catalog", repository.count())

    with st.expander("Raw catalog", expanded=False):
        st.dataframe(catalog_frame(repository), use_container_width=True)


def render_lookup_queries(repository: LegoSetRepository, settings: Settings) -> None:
    """Render the existence, tag, subtheme and piece-count queries."""
    st.subheader("Lookups")
    col1, col2 = st.columns(2)

    with col1:
        st.metric(
            f"Sets with at least {settings.min_pieces} pieces",
            "Yes" if repository.has_sets_with_pieces_at_least(settings.min_pieces) else "No"
        )
        st.metric(
            f"Theme containing '{settings.theme_substring}'",
            "Yes" if repository.has_theme_containing(settings.theme_substring) else "No"
        )

    with col2:
        st.markdown(f"**Tags of '{settings.tags_set_name}'**")
        tags = repository.tags_for_set_named(settings.tags_set_name)
        st.write(", ".join(tags) if tags else "No tags")
        st.markdown("**Subthemes**")
        st.write(repository.subthemes_in_theme(settings.subtheme_theme))

    st.markdown(f"**Sets with exactly {settings.piece_count} pieces**")
    numbers = repository.number_to_name_for_piece_count(settings.piece_count)
    st.dataframe(
        pd.DataFrame(list(numbers.items()), columns=["number", "name"]),
        use_container_width=True
    )


def render_theme_queries(repository: LegoSetRepository, settings: Settings) -> None:
    """Render the grouping, ordering and averaging queries."""
    st.subheader("Themes")
    st.dataframe(themes_frame(repository), use_container_width=True)

    col1, col2 = st.columns(2)
    with col1:
        st.markdown("**Themes starting with A**")
        for theme in repository.themes_starting_with_a():
            st.write(theme)
        st.markdown("**First sets with 0 pieces**")
        for name in repository.names_of_sets_with_zero_pieces():
            st.write(name)

    with col2:
        try:
            average = repository.average_name_length_in_theme(settings.average_theme_substring)
            st.metric(f"Average name length in '{settings.average_theme_substring}'", f"{average:.2f}")
        except EmptyResultError:
            st.warning(f"No sets with theme containing '{settings.average_theme_substring}'.")

        st.markdown(f"**Names longer than {settings.min_name_length} characters**")
        for name in repository.top_names_over_length(settings.min_name_length, settings.name_limit):
            st.write(name)


def render_main_content(repository: LegoSetRepository, settings: Settings) -> None:
    """Render the whole catalog explorer page."""
    render_overview(repository)
    st.markdown("---")
    render_lookup_queries(repository, settings)
    st.markdown("---")
    render_theme_queries(repository, settings)
