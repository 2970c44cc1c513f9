#!/usr/bin/env python3

import os
from pathlib import Path
from typing import Union
import pandas as pd


#########################################
##                PARAMS               ##
#########################################

TRACKS_COLUMNS = [
    "id",
    "name",
    "popularity",
    "duration_ms",
    "explicit",
    "artists",
    "id_artists",
    "release_date",
    "danceability",
    "energy",
    "key",
    "loudness",
    "mode",
    "speechiness",
    "acousticness",
    "instrumentalness",
    "liveness",
    "valence",
    "tempo",
    "time_signature",
]

PathLike = Union[str, Path]


#########################################
##            SANITY CHECK             ##
#########################################

def check_dsfile_exists(file: PathLike, folder: PathLike = "") -> Path:
    path = Path(os.path.join(folder, file))
    if not path.is_file():
        raise FileNotFoundError(f"[ERROR] FileNotFound: {path}")
    return path

def _check_columns(df: pd.DataFrame, expected: list) -> None:
    missing = [c for c in expected if c not in df.columns]
    if missing:
        raise ValueError(f"[ERROR] Tracks file is missing columns: {', '.join(missing)}")


#########################################
##                MAIN                 ##
#########################################

def load_tracks(file: PathLike, folder: PathLike = "", expected: list = TRACKS_COLUMNS) -> pd.DataFrame:
    """
    Reads the tracks csv into a dataframe and checks it against the expected schema.
    Extra columns are kept, missing ones abort the run.
    """
    path = check_dsfile_exists(file, folder)
    try:
        df = pd.read_csv(path)
    except pd.errors.EmptyDataError as e:
        raise ValueError(f"[ERROR] Tracks file is empty: {path}") from e

    _check_columns(df, expected)
    if df.empty:
        raise ValueError(f"[ERROR] Tracks file is empty: {path}")
    print(f"[INFO] Loaded {len(df):,} tracks with {df.shape[1]} columns from {path.name}")
    return df


