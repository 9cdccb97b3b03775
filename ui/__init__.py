"""UI package for the Forward Exchange Rate Calculator Streamlit application.

Having this file ensures `ui` is treated as a proper Python package in
all execution contexts (Streamlit, pytest, CLI).
"""
