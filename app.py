# app.py - Main Entry Point
"""
Brickset Catalog Explorer
=========================

Streamlit page over the read-only LegoSet catalog queries.

Run with:
    streamlit run app.py
"""

import streamlit as st
import logging

from config.settings import Settings, configure_logging

logger = logging.getLogger(__name__)


@st.cache_resource
def setup_application():
    """Bootstrap settings, logging and the DI container once per process."""
    from core.container import configure_container

    settings = Settings.from_streamlit_secrets()
    configure_logging(settings)
    container = configure_container(settings)
    return container, settings


def render_app(container, settings: Settings):
    """Render the Streamlit application."""
    from repositories.lego_set_repository import LegoSetRepository
    from ui.sidebar import render_sidebar
    from ui.main_content import render_main_content

    st.title("🧱 Brickset Catalog Explorer")
    st.markdown("*Read-only queries over the LEGO set catalog*")
    st.markdown("---")

    query_settings = render_sidebar(settings)
    repository = container.resolve(LegoSetRepository)
    render_main_content(repository, query_settings)


def main():
    """Main application entry point."""
    st.set_page_config(
        page_title="Brickset Catalog",
        page_icon="🧱",
        layout="wide"
    )

    try:
        container, settings = setup_application()
        render_app(container, settings)

    except Exception as e:
        logger.error(f"Application error: {e}", exc_info=True)
        st.error(f"An error occurred: {str(e)}")

        from config.settings import get_settings
        if get_settings().debug:
            st.exception(e)


if __name__ == "__main__":
    main()
