import time
from functools import wraps
import pandas as pd

def timeit(func):
    @wraps(func)
    def wrapper(*args, **kwargs):
        start = time.perf_counter()
        result = func(*args, **kwargs)
        end = time.perf_counter()
        print(f"[TIMEIT] {func.__name__} executed in {end - start:.4f}s")
        return result
    return wrapper

def extract_release_year(dates: pd.Series) -> pd.Series:
    """
    Extracts the release year from date strings of mixed precision.
        "1922"       -> 1922
        "1922-02"    -> 1922
        "1922-02-22" -> 1922
    Anything without a leading 4-digit year becomes <NA>.
    """
    years = dates.astype("string").str.strip().str.extract(r"^(\d{4})", expand=False)
    return pd.to_numeric(years, errors="coerce").astype("Int64")


#extract_release_year(pd.Series(["1922-02-22", "1929", "n/a"]))
