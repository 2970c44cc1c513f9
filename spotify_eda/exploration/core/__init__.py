# spotify_eda/exploration/core/__init__.py
"""
core data exploration
=====================
this package provides core utilities for data processing, analysis and visualization. It incl.
- params : column lists, label maps, documented ranges and colors
- time_utils : timing decorator and release date parsing
- data_prep : utilities for pruning, retyping, recoding and summarizing the tracks table
- plots : standardized plotting utilities for data visualization
"""
from .params import TARGET, SAMPLE_SIZE, RANDOM_STATE, id_columns, text_columns, categorical_columns, binary_labels, corr_columns, scatter_pairs, value_ranges, colors
from .time_utils import timeit, extract_release_year
from .data_prep import drop_identifiers, add_release_year, suggest_categorical, classify_columns, detect_binary_columns, recode_binary, apply_column_types, sample_rows, correlation_matrix, describe_numeric, describe_categorical, summarize_missing, check_value_ranges
from .plots import kdeplot_numeric_densities, scatterplot_target_pairs, heatmap_correlation, countplot_categoricals

__all__ = ["TARGET", "SAMPLE_SIZE", "RANDOM_STATE", "id_columns", "text_columns", "categorical_columns", "binary_labels", "corr_columns", "scatter_pairs", "value_ranges", "colors", "timeit", "extract_release_year", "drop_identifiers", "add_release_year", "suggest_categorical", "classify_columns", "detect_binary_columns", "recode_binary", "apply_column_types", "sample_rows", "correlation_matrix", "describe_numeric", "describe_categorical", "summarize_missing", "check_value_ranges", "kdeplot_numeric_densities", "scatterplot_target_pairs", "heatmap_correlation", "countplot_categoricals"]
