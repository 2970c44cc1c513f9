import matplotlib
matplotlib.use("Agg")

import numpy as np
import pandas as pd
import pytest


N_TRACKS = 60


@pytest.fixture
def raw_tracks() -> pd.DataFrame:
    """Small synthetic table with the tracks.csv schema."""
    rng = np.random.default_rng(0)
    n = N_TRACKS
    return pd.DataFrame({
        "id": [f"track{i:03d}" for i in range(n)],
        "name": [f"Song {i}" for i in range(n)],
        "popularity": rng.integers(0, 101, n),
        "duration_ms": rng.integers(120_000, 400_000, n),
        "explicit": [0, 1] * (n // 2),
        "artists": ["['Artist A']", "['Artist B', 'Artist C']", "['Artist D']"] * (n // 3),
        "id_artists": ["['a1']", "['b2', 'c3']", "['d4']"] * (n // 3),
        "release_date": ["1965", "1987-04", "2003-11-21"] * (n // 3),
        "danceability": rng.uniform(0, 1, n),
        "energy": rng.uniform(0, 1, n),
        "key": rng.integers(0, 12, n),
        "loudness": rng.uniform(-30, 0, n),
        "mode": [1, 1, 0] * (n // 3),
        "speechiness": rng.uniform(0, 1, n),
        "acousticness": rng.uniform(0, 1, n),
        "instrumentalness": rng.uniform(0, 1, n),
        "liveness": rng.uniform(0, 1, n),
        "valence": rng.uniform(0, 1, n),
        "tempo": rng.uniform(60, 200, n),
        "time_signature": [4, 4, 3, 5] * (n // 4),
    })


@pytest.fixture
def tracks_csv(tmp_path, raw_tracks):
    path = tmp_path / "tracks.csv"
    raw_tracks.to_csv(path, index=False)
    return path
