import re
from datetime import datetime
from pathlib import Path
import numpy as np
import pandas as pd
from matplotlib import dates as mdates, pyplot as plt
from matplotlib.axes import Axes
from matplotlib.ticker import FuncFormatter
from hit_core.formatting import fmt_number

LINE_COLOR = "#b91c1c"


def plot_exercise_progress(
    df: pd.DataFrame,
    *,
    exercise: str,
    unit: str,
    best: float | None = None,
    date_fmt: str = "%d-%m-%Y",
    rotation: int = 30,
    ax=None,
) -> Axes:
    """ Line chart of the weight for one exercise over time (df from history.series_frame) """
    if "date" not in df.columns or "weight" not in df.columns:
        raise ValueError(f"Expected 'date' and 'weight' columns, got: {list(df.columns)}")

    x = pd.to_datetime(df["date"], errors="coerce")
    y = pd.to_numeric(df["weight"], errors="coerce").astype(float)

    if ax is None:
        fig, ax = plt.subplots()

    # ---- Plot ----
    mask = x.notna().to_numpy() & np.isfinite(y.to_numpy())
    ax.plot(x[mask], y[mask], color=LINE_COLOR, marker="o", label=exercise)
    ax.grid(True, alpha=0.3, linestyle="--")

    # ---- Axes ----
    ax.xaxis.set_major_formatter(mdates.DateFormatter(date_fmt))
    ax.xaxis.set_major_locator(mdates.AutoDateLocator())
    ax.tick_params(axis="x", rotation=rotation)
    ax.yaxis.set_major_formatter(FuncFormatter(lambda v, pos: f"{fmt_number(round(v, 2))}{unit}"))

    # ---- Labels ----
    title = exercise if best is None else f"{exercise} (best: {fmt_number(best)} {unit})"
    ax.set_title(title)
    ax.set_xlabel("Date")
    ax.set_ylabel(f"Weight ({unit})")

    plt.tight_layout()
    return ax


def plot_slug(name) -> str:
    """ Filename-safe stem, runs outside [A-Za-z0-9_.-] become "_" """
    return re.sub(r"[^A-Za-z0-9_.-]+", "_", str(name)).strip("_") or "plot"


def save_plot(out_dir, dpi, name, fig=None):
    """
    Pure core: Save fig to out_dir, slugifying name and adding a timestamp.
    out_dir must be a valid directory path (absolute or relative).
    """
    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    fig = fig or plt.gcf()

    safe = plot_slug(name)
    ts = datetime.now().strftime("%Y%m%d-%H%M%S")
    path = out_dir / f"{safe}_{ts}.png"

    fig.savefig(path, dpi=dpi, bbox_inches="tight")
    return path
