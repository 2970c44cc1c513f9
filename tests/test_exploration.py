import os

import pandas as pd
import pytest

from pathlib import Path

from spotify_eda.exploration.exploration import PROJECT_ROOT, gen_correlation, gen_scatter, prep_tracks, resolve_path, run_exploration

FIGURES = [
    "numeric_densities.png",
    "categorical_counts.png",
    "scatter_popularity.png",
    "correlation_heatmap.png",
]


def test_prep_tracks_prunes_and_retypes(raw_tracks, capsys):
    df, types = prep_tracks(raw_tracks)

    assert "id" not in df.columns and "id_artists" not in df.columns
    assert "release_year" in types["numeric"]
    assert set(types["categorical"]) == {"explicit", "mode", "key", "time_signature"}
    assert all(isinstance(df[c].dtype, pd.CategoricalDtype) for c in types["categorical"])
    assert set(df["explicit"].cat.categories) == {"Clean", "Explicit"}

    out = capsys.readouterr().out
    assert "Numeric columns that look categorical" in out
    assert "time_signature" in out


def test_prep_tracks_warns_about_unparseable_dates(raw_tracks, capsys):
    raw_tracks.loc[0, "release_date"] = "unknown"

    df, _ = prep_tracks(raw_tracks)

    assert pd.isna(df.loc[0, "release_year"])
    assert "[WARN] 1 tracks without a parseable release year" in capsys.readouterr().out


def test_gen_correlation_returns_matrix(tmp_path, raw_tracks):
    df, _ = prep_tracks(raw_tracks)

    corr = gen_correlation(df, tmp_path, show=False)

    assert corr.loc["popularity", "popularity"] == pytest.approx(1.0)
    assert os.path.isfile(tmp_path / "correlation_heatmap.png")


def test_run_exploration_end_to_end(tmp_path, tracks_csv, capsys):
    out_dir = tmp_path / "results"

    df = run_exploration(tracks_csv, out_dir)

    for fname in FIGURES:
        assert (out_dir / fname).is_file()
    assert "release_year" in df.columns
    assert "id" not in df.columns

    out = capsys.readouterr().out
    assert "OVERVIEW" in out
    assert "NUMERIC STATISTICS" in out
    assert "[TIMEIT] run_exploration" in out


def test_resolve_path_anchors_relative_values_at_project_root():
    assert resolve_path("results/exploration") == PROJECT_ROOT / "results" / "exploration"


def test_resolve_path_keeps_absolute_values(tmp_path):
    assert resolve_path(str(tmp_path / "tracks.csv")) == tmp_path / "tracks.csv"


def test_gen_scatter_plots_pairs_against_popularity(tmp_path, raw_tracks, capsys):
    df, _ = prep_tracks(raw_tracks)

    gen_scatter(df, tmp_path, show=False)

    assert (tmp_path / "scatter_popularity.png").is_file()
    assert f"Sampled {len(raw_tracks):,} tracks" in capsys.readouterr().out
