"""
Streamlit dashboard — presentation layer over the comparison engine.
"""
