# spotify_eda/data/__init__.py
"""
data loading package
====================
this package provides core utilities for reading the tracks dataset.
- io_utils : input helper for locating and loading the tracks csv
"""
from .io_utils import TRACKS_COLUMNS, check_dsfile_exists, load_tracks

__all__ = ["TRACKS_COLUMNS", "check_dsfile_exists", "load_tracks"]
