"""Streamlit user interface for the tracker."""
