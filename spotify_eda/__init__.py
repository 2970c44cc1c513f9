# spotify_eda/__init__.py
"""
Top-level package for the Spotify tracks exploratory analysis.
Provides modular access to data loading and exploration utilities.
"""
