#!/usr/bin/env python3
"""
Visually and numerically explores the Spotify tracks dataset
- overview : shape, dtypes and missing values
- column pruning : identifier columns dropped, release year derived from the release date
- column types : numeric vs categorical, candidates printed for manual review
- recoding : 0/1 columns into labelled categories
- data quality : values outside the documented feature ranges (reported only)
- statistics : descriptive tables for numeric and categorical columns
- densities : kde plots per numeric column
- categories : count plots per categorical column
- scatter : sampled tracks, variable pairs colored by popularity
- correlations : heatmap over a fixed subset of numeric columns

Outputs:
    png files : results/exploration/<figure_type>.png

Usage:
    python -m spotify_eda.exploration.exploration
"""

import os
from pathlib import Path
from typing import Union
import pandas as pd
from dotenv import load_dotenv
from spotify_eda.data import load_tracks
from .core import (
    TARGET, SAMPLE_SIZE, RANDOM_STATE, categorical_columns, text_columns, binary_labels, corr_columns, scatter_pairs, value_ranges, colors, timeit, drop_identifiers, add_release_year, suggest_categorical, classify_columns, recode_binary, apply_column_types, sample_rows, correlation_matrix, describe_numeric, describe_categorical, summarize_missing, check_value_ranges, kdeplot_numeric_densities, scatterplot_target_pairs, heatmap_correlation, countplot_categoricals
)


#########################################
##                CONFIG               ##
#########################################

FILE_DIR = Path(__file__).resolve().parent
PROJECT_ROOT = FILE_DIR.parents[1]
load_dotenv(PROJECT_ROOT / ".env")

def resolve_path(value: Union[str, Path], root: Path = PROJECT_ROOT) -> Path:
    """Relative paths are taken from the project root, not the working directory."""
    path = Path(value).expanduser()
    return path if path.is_absolute() else root / path

IN_FILE = resolve_path(os.getenv("TRACKS_CSV", "datasets/raw/tracks.csv"))
OUT_DIR = resolve_path(os.getenv("EXPLORATION_OUT_DIR", "results/exploration"))
SHOW = os.getenv("SHOW_PLOTS", "false").strip().lower() in ("1", "true", "yes")


#########################################
##               HELPER                ##
#########################################

def _section(title: str):
    print(f"\n==============================")
    print(f"  {title.upper()}")
    print(f"==============================")

def _print_table(df: pd.DataFrame):
    with pd.option_context("display.max_columns", None, "display.width", 200, "display.precision", 3):
        print(df)


#########################################
##              OVERVIEW               ##
#########################################

def gen_overview(df: pd.DataFrame):
    _section("Overview")
    print(f"[INFO] Shape: {df.shape[0]:,} rows x {df.shape[1]} columns")
    print("\nData types:")
    print(df.dtypes.to_string())

    missing = summarize_missing(df)
    print("\nMissing values:")
    if len(missing) > 0:
        _print_table(missing)
    else:
        print("  No missing values!")


#########################################
##             PREPARATION             ##
#########################################

def prep_tracks(df: pd.DataFrame) -> tuple[pd.DataFrame, dict]:
    """
    Prunes, retypes and recodes the raw tracks table.
    The categorical classification is the curated one, the candidates are only printed for review.
    """
    _section("Preparation")
    df = drop_identifiers(df)
    df = add_release_year(df)
    n_no_year = int(df["release_year"].isna().sum())
    if n_no_year:
        print(f"[WARN] {n_no_year:,} tracks without a parseable release year")

    suggestions = suggest_categorical(df)
    print("[INFO] Numeric columns that look categorical:")
    for col in suggestions["candidates"]:
        print(f"\t- {col}: {', '.join(suggestions['reasons'][col])}")

    _section("Documented range check")
    _print_table(check_value_ranges(df, value_ranges))

    # recoded 0/1 columns turn non-numeric and land in the categorical group
    df = recode_binary(df, binary_labels)
    types = classify_columns(df, categorical=categorical_columns, text=text_columns)
    for group, cols in types.items():
        print(f"[INFO] {group} ({len(cols)}): {', '.join(cols)}")
    df = apply_column_types(df, types)

    return df, types


#########################################
##             STATISTICS              ##
#########################################

def gen_statistics(df: pd.DataFrame, types: dict):
    _section("Numeric statistics")
    _print_table(describe_numeric(df, types["numeric"]))
    _section("Categorical statistics")
    _print_table(describe_categorical(df, types["categorical"]))


#########################################
##               FIGURES               ##
#########################################

def gen_distributions(df: pd.DataFrame, types: dict, out_folder: Union[str, Path], show: bool):
    kdeplot_numeric_densities(
        df,
        cols=types["numeric"],
        col=colors["density"],
        title="Density of numeric track features",
        folder=out_folder,
        fname="numeric_densities.png",
        show=show
    )
    countplot_categoricals(
        df,
        cols=types["categorical"],
        col=colors["count"],
        title="Tracks per category",
        folder=out_folder,
        fname="categorical_counts.png",
        show=show
    )

def gen_scatter(df: pd.DataFrame, out_folder: Union[str, Path], show: bool):
    """
    Scatter plots of the sampled tracks. Each panel puts one feature pair on the axes
    and plots it against the target as point color, so popularity is never on an axis.
    """
    sample = sample_rows(df, n=SAMPLE_SIZE, random_state=RANDOM_STATE)
    print(f"[INFO] Sampled {len(sample):,} tracks for scatter plots")
    scatterplot_target_pairs(
        sample,
        pairs=scatter_pairs,
        target=TARGET,
        palette=colors["scatter"],
        title=f"Feature pairs colored by {TARGET} ({len(sample):,} sampled tracks)",
        folder=out_folder,
        fname=f"scatter_{TARGET}.png",
        show=show
    )

def gen_correlation(df: pd.DataFrame, out_folder: Union[str, Path], show: bool) -> pd.DataFrame:
    corr = correlation_matrix(df, corr_columns)
    _section("Correlations")
    _print_table(corr)
    heatmap_correlation(
        corr,
        cmap=colors["corr"],
        title="Correlation matrix of numeric track features",
        folder=out_folder,
        fname="correlation_heatmap.png",
        show=show
    )
    return corr


#########################################
##                 RUN                 ##
#########################################

@timeit
def run_exploration(in_file: Union[str, Path], out_folder: Union[str, Path], show: bool = False) -> pd.DataFrame:
    df = load_tracks(in_file)
    gen_overview(df)
    df, types = prep_tracks(df)
    gen_statistics(df, types)
    gen_distributions(df, types, out_folder, show)
    gen_scatter(df, out_folder, show)
    gen_correlation(df, out_folder, show)
    return df


if __name__ == "__main__":
    OUT_DIR.mkdir(parents=True, exist_ok=True)

    print("[INFO] Starting data exploration...")
    result = run_exploration(IN_FILE, OUT_DIR, SHOW)
    print("[DONE] Data exploration completed!")
