"""UI components for Streamlit application."""

from .sidebar import render_sidebar
from .main_content import render_main_content

__all__ = ['render_sidebar', 'render_main_content']
