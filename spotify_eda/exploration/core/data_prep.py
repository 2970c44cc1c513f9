import pandas as pd
import numpy as np
from typing import Optional
from .params import (
    id_columns, text_columns, categorical_columns, binary_labels, corr_columns, value_ranges, SAMPLE_SIZE, RANDOM_STATE
)
from .time_utils import extract_release_year


#########################################
##           COLUMN PRUNING            ##
#########################################

def drop_identifiers(df: pd.DataFrame, cols: list = id_columns) -> pd.DataFrame:
    """Drops identifier columns, absent ones are ignored."""
    return df.drop(columns=[c for c in cols if c in df.columns])

def add_release_year(
    df: pd.DataFrame,
    date_col: str = "release_date",
    year_col: str = "release_year"
) -> pd.DataFrame:
    df = df.copy()
    df[year_col] = extract_release_year(df[date_col])
    return df


#########################################
##        TYPE RECLASSIFICATION        ##
#########################################

def suggest_categorical(df: pd.DataFrame, max_unique: int = 12) -> dict:
    """
    Flags numeric columns that look categorical, to support the manual review of the density plots.
    - max_unique [int] : a numeric column with at most this many distinct values is a candidate
    Returns
    -------
        dict:
            "candidates" : list of numeric columns that may be categorical
            "reasons" : per-column explanation
    """
    candidates, reasons = [], {}

    for col in df.select_dtypes(include="number").columns:
        s = df[col].dropna()
        if s.empty:
            continue

        n_unique = s.nunique()
        if n_unique > max_unique:
            continue

        col_reasons = [f"{n_unique} distinct values (<= {max_unique})"]
        values = s.astype(float)
        if (values == values.round()).all():
            col_reasons.append("integer-valued")
        if values.isin([0.0, 1.0]).all():
            col_reasons.append("values in {0, 1}")

        candidates.append(col)
        reasons[col] = col_reasons

    return {"candidates": candidates, "reasons": reasons}

def classify_columns(
    df: pd.DataFrame,
    categorical: list = categorical_columns,
    text: list = text_columns
) -> dict:
    """
    Splits the columns into numeric, categorical and free-text groups.
    Curated categorical columns win over their numeric dtype, every other non-numeric column is categorical.
    """
    groups = {"numeric": [], "categorical": [], "text": []}
    for col in df.columns:
        if col in text:
            groups["text"].append(col)
        elif col in categorical:
            groups["categorical"].append(col)
        elif pd.api.types.is_numeric_dtype(df[col]) and not pd.api.types.is_bool_dtype(df[col]):
            groups["numeric"].append(col)
        else:
            groups["categorical"].append(col)

    return groups

def detect_binary_columns(df: pd.DataFrame) -> list:
    binary = []
    for col in df.columns:
        if not pd.api.types.is_numeric_dtype(df[col]):
            continue
        s = df[col].dropna()
        if not s.empty and s.astype(float).isin([0.0, 1.0]).all():
            binary.append(col)
    return binary

def recode_binary(
    df: pd.DataFrame,
    labels: dict = binary_labels,
    cols: Optional[list] = None
) -> pd.DataFrame:
    """
    Recodes 0/1 columns into labelled categories.
    Columns without an entry in labels get No/Yes. By default the labelled columns plus every detected 0/1 column are recoded.
    """
    df = df.copy()
    if cols is None:
        cols = [c for c in labels if c in df.columns]
        cols += [c for c in detect_binary_columns(df) if c not in cols]

    for col in cols:
        s = df[col].dropna()
        if not pd.api.types.is_numeric_dtype(df[col]) or not s.astype(float).isin([0.0, 1.0]).all():
            raise ValueError(f"[ERROR] Column '{col}' is not 0/1 valued, cannot recode")
        mapping = labels.get(col, {0: "No", 1: "Yes"})
        df[col] = pd.Categorical(df[col].map(mapping), categories=[mapping[0], mapping[1]])

    return df

def apply_column_types(df: pd.DataFrame, types: dict) -> pd.DataFrame:
    df = df.copy()
    for col in types["categorical"]:
        if not isinstance(df[col].dtype, pd.CategoricalDtype):
            df[col] = df[col].astype("category")
    return df


#########################################
##              SAMPLING               ##
#########################################

def sample_rows(df: pd.DataFrame, n: int = SAMPLE_SIZE, random_state: int = RANDOM_STATE) -> pd.DataFrame:
    """Samples n rows without replacement. Frames shorter than n come back whole, shuffled."""
    if n < 0:
        raise ValueError(f"[ERROR] Sample size must be non-negative, got {n}")
    return df.sample(n=min(n, len(df)), replace=False, random_state=random_state)


#########################################
##             STATISTICS              ##
#########################################

def correlation_matrix(df: pd.DataFrame, cols: list = corr_columns, method: str = "pearson") -> pd.DataFrame:
    missing = [c for c in cols if c not in df.columns]
    if missing:
        raise ValueError(f"[ERROR] Correlation columns not found: {', '.join(missing)}")
    non_numeric = [c for c in cols if not pd.api.types.is_numeric_dtype(df[c]) or pd.api.types.is_bool_dtype(df[c])]
    if non_numeric:
        raise ValueError(f"[ERROR] Correlation columns are not numeric: {', '.join(non_numeric)}")

    return df[cols].astype(float).corr(method=method)

def describe_numeric(df: pd.DataFrame, cols: list) -> pd.DataFrame:
    """describe() per numeric column, extended by skewness and missing count."""
    values = df[cols].astype(float)
    stats = values.describe().T
    stats["skew"] = values.skew()
    stats["missing"] = values.isna().sum()
    return stats

def describe_categorical(df: pd.DataFrame, cols: list) -> pd.DataFrame:
    rows = {}
    for col in cols:
        counts = df[col].value_counts(dropna=True)
        count = int(counts.sum())
        rows[col] = {
            "count": count,
            "unique": int((counts > 0).sum()),
            "top": counts.index[0] if count else None,
            "freq": int(counts.iloc[0]) if count else 0,
            "top_share": counts.iloc[0] / count if count else np.nan,
        }
    return pd.DataFrame.from_dict(rows, orient="index")

def summarize_missing(df: pd.DataFrame) -> pd.DataFrame:
    missing = df.isna().sum()
    missing = missing[missing > 0]
    summary = pd.DataFrame({
        "missing": missing,
        "percent": (missing / len(df) * 100).round(2) if len(df) else missing.astype(float)
    })
    return summary.sort_values("missing", ascending=False)


#########################################
##            DATA QUALITY             ##
#########################################

def check_value_ranges(df: pd.DataFrame, ranges: dict = value_ranges) -> pd.DataFrame:
    """
    Counts values outside the documented (min, max) range per column.
    Observations only, nothing is clipped or dropped.
    """
    rows = {}
    for col, (lo, hi) in ranges.items():
        if col not in df.columns or not pd.api.types.is_numeric_dtype(df[col]):
            continue
        s = df[col].dropna().astype(float)
        outside = (s < lo) | (s > hi)
        rows[col] = {
            "min_allowed": lo,
            "max_allowed": hi,
            "observed_min": s.min() if len(s) else np.nan,
            "observed_max": s.max() if len(s) else np.nan,
            "n_out_of_range": int(outside.sum()),
            "share_out_of_range": outside.mean() if len(s) else 0.0,
        }

    return pd.DataFrame.from_dict(
        rows,
        orient="index",
        columns=["min_allowed", "max_allowed", "observed_min", "observed_max", "n_out_of_range", "share_out_of_range"]
    )
