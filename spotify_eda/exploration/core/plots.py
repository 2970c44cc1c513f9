import os, math, warnings
import pandas as pd
import numpy as np
import seaborn as sns
import matplotlib.pyplot as plt
warnings.filterwarnings("ignore", message=".*tight_layout.*")


#########################################
##                CONFIG               ##
#########################################

custom_rc = {
    "figure.titlesize": 22,
    "axes.titlesize": 16,
    "axes.titlepad": 12,
    "axes.labelsize": 14,
    "axes.labelpad": 8,
    "xtick.labelsize": 12,
    "ytick.labelsize": 12,
    "legend.title_fontsize": 12,
    "legend.fontsize": 11,
    "grid.alpha": 0.4,
    "grid.linestyle": "--",
}

def apply_custom_theme() -> None:
    """Apply consistent Seaborn + Matplotlib styling."""
    sns.set_theme(style="whitegrid", rc=custom_rc)

def _save(fig, folder: str, fname: str, show: bool) -> str:
    os.makedirs(folder, exist_ok=True)
    path = os.path.join(folder, fname)
    fig.savefig(
        path,
        bbox_inches="tight",
        pad_inches=0.2,
        dpi=150
    )
    print(f"[OK] Saved to {fname}")
    if show:
        plt.show()
    plt.close(fig)
    return path

def _grid(n: int, ncols: int) -> tuple[int, int]:
    if n == 0:
        raise ValueError("[ERROR] No columns to plot")
    ncols = max(1, min(ncols, n))
    return math.ceil(n / ncols), ncols


#########################################
##              DENSITIES              ##
#########################################

def kdeplot_numeric_densities(
    df: pd.DataFrame,
    cols: list,
    ncols: int = 4,
    col: str = "#1DB954",
    title: str = "Density of numeric track features",
    folder: str = "./",
    fname: str = "kdeplot_numeric_densities.png",
    show: bool = False
) -> str:
    """Grid of kernel density plots, one panel per numeric column."""
    apply_custom_theme()

    nrows, ncols = _grid(len(cols), ncols)
    fig, axes = plt.subplots(nrows, ncols, figsize=(5 * ncols, 3.5 * nrows), squeeze=False)
    axes = axes.ravel()

    for ax, c in zip(axes, cols):
        values = df[c].dropna().astype(float)
        if values.nunique() > 1:
            sns.kdeplot(x=values, fill=True, color=col, linewidth=1.5, ax=ax)
        else:
            # kde is undefined for constant columns
            ax.axvline(values.iloc[0] if len(values) else 0.0, color=col, linewidth=2)
        ax.set_title(c)
        ax.set_xlabel("")
        ax.set_ylabel("Density")

    for ax in axes[len(cols):]:
        ax.set_visible(False)

    fig.suptitle(title)
    plt.tight_layout()
    return _save(fig, folder, fname, show)


#########################################
##              SCATTERS               ##
#########################################

def scatterplot_target_pairs(
    df: pd.DataFrame,
    pairs: list,
    target: str = "popularity",
    palette: str = "viridis",
    title: str = "",
    folder: str = "./",
    fname: str = "scatterplot_target_pairs.png",
    show: bool = False
) -> str:
    """Scatter plots of variable pairs, points colored by the target column."""
    if not pairs:
        raise ValueError("[ERROR] No variable pairs to plot")
    apply_custom_theme()

    fig, axes = plt.subplots(1, len(pairs), figsize=(8 * len(pairs), 6), squeeze=False)
    axes = axes.ravel()

    for ax, (x, y) in zip(axes, pairs):
        data = df[[x, y, target]].astype(float)
        sns.scatterplot(
            data=data,
            x=x,
            y=y,
            hue=target,
            palette=palette,
            s=25,
            alpha=0.7,
            linewidth=0,
            ax=ax
        )
        ax.set_title(f"{y} vs {x}")
        if ax.get_legend() is not None:
            sns.move_legend(ax, "best", title=target, frameon=True)

    if title:
        fig.suptitle(title)
    plt.tight_layout()
    return _save(fig, folder, fname, show)


#########################################
##              HEATMAPS               ##
#########################################

def heatmap_correlation(
    corr: pd.DataFrame,
    cmap: str = "coolwarm",
    vmin: float = -1.0,
    vmax: float = 1.0,
    lower_only: bool = True,
    title: str = "Correlation matrix of numeric track features",
    folder: str = "./",
    fname: str = "heatmap_correlation.png",
    show: bool = False
) -> str:
    """Annotated heatmap of a correlation matrix, upper triangle masked by default."""
    apply_custom_theme()

    mask = np.triu(np.ones(corr.shape, dtype=bool), k=1) if lower_only else None
    size = max(6, 0.8 * len(corr))

    fig, ax = plt.subplots(figsize=(size + 2, size))
    sns.heatmap(
        corr,
        mask=mask,
        cmap=cmap,
        vmin=vmin,
        vmax=vmax,
        center=0,
        square=True,
        linewidths=0.5,
        annot=True,
        fmt=".2f",
        annot_kws={"size": 9},
        cbar_kws={"shrink": 0.7, "label": "correlation"},
        ax=ax
    )
    ax.set_title(title)
    ax.tick_params(axis="x", rotation=90)
    plt.tight_layout()
    return _save(fig, folder, fname, show)


#########################################
##              BARPLOTS               ##
#########################################

def countplot_categoricals(
    df: pd.DataFrame,
    cols: list,
    ncols: int = 2,
    col: str = "#5EA7E3",
    title: str = "Category counts",
    folder: str = "./",
    fname: str = "countplot_categoricals.png",
    show: bool = False
) -> str:
    apply_custom_theme()

    nrows, ncols = _grid(len(cols), ncols)
    fig, axes = plt.subplots(nrows, ncols, figsize=(7 * ncols, 4.5 * nrows), squeeze=False)
    axes = axes.ravel()

    for ax, c in zip(axes, cols):
        counts = df[c].value_counts(dropna=True, sort=False).sort_index()
        sns.barplot(
            x=counts.index.astype(str),
            y=counts.values,
            color=col,
            ax=ax
        )
        ax.set_title(c)
        ax.set_xlabel("")
        ax.set_ylabel("Tracks")
        ax.grid(axis="y", linestyle="--", alpha=0.4)

    for ax in axes[len(cols):]:
        ax.set_visible(False)

    fig.suptitle(title)
    plt.tight_layout()
    return _save(fig, folder, fname, show)
