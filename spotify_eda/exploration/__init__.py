# spotify_eda/exploration/__init__.py
"""
data exploration package
========================
Top-level package for data exploration and visualization.
"""
from . import core

__all__ = ["core"]
