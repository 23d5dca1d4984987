from typing import Literal
from pathlib import Path
import matplotlib, matplotlib.pyplot as plt
from hit_cli.cli_utils import MenuItem, prompt_menu, numbered_items, print_table
from hit_core.config import PLOTS_DIR
from hit_core.history import series_frame
from hit_core.models import Store
from hit_core.settings import get_unit
from hit_core.plot_core import plot_exercise_progress, plot_slug, save_plot
from hit_core.usecases import get_progress_for_ui, get_overview_for_ui, get_choices_for_ui


def save_cli_wrapper(dpi, name, fig=None):
    path = save_plot(PLOTS_DIR, dpi, name, fig=fig)
    print(f"[plot] Saved: {path}")
    return path


def finish_plot(fig=None, title="plot"):
    """ Show the figure if the backend is GUI; otherwise save to disk.
       If showing fails for any reason, fall back to saving. """

    # Small helper to avoid duplication of code
    def _save_fallback(reason: str):
        out = PLOTS_DIR / f"{plot_slug(title)}.png"
        out.parent.mkdir(parents=True, exist_ok=True)
        fig.savefig(out, dpi=150, bbox_inches="tight")
        print(f"[plot] {reason} → saved: {out}")
        return out

    if fig is None:
        fig = plt.gcf()

    backend = matplotlib.get_backend()
    b = backend.lower()
    # Treat truly non-GUI backends (and inline/module backends) as save-only
    non_gui = (
        b in {"agg", "pdf", "ps", "svg", "cairo", "template", "pgf"}
        or "inline" in b
        or b.startswith("module://")
    )

    if non_gui:
        out = _save_fallback("Non GUI backend")
        plt.close(fig)
        return out

    try:
        plt.show()  # blocking; window stays until closed
        return None
    except Exception as e:
        return _save_fallback(f"show() failed ({type(e).__name__}: {e})")
    finally:
        plt.close(fig)


def progress_table(progress: dict):
    """ Display copy of the series: EU dates and a unit-labelled weight column """
    df = series_frame(progress["series"])
    out = df.copy()
    out["Date"] = out["date"].dt.strftime("%d-%m-%Y")
    out[f"Weight ({progress['unit']})"] = out["weight"]
    return out[["Date", f"Weight ({progress['unit']})"]]


def what_to_print(
    display: Literal["table", "graph", "both"],
    progress: dict,
    export: bool = False,   # Save or not
    show: bool = True,
    dpi: int = 300,
) -> Path | None:
    """ The orchestrator that sets what will be printed. """
    exercise, unit, best = progress["exercise"], progress["unit"], progress["best"]

    if not progress["series"]:
        print(f"\n⚠️ No weights recorded for {exercise} yet.")
        return None

    print(f"\n🏋️ {exercise} — best: {progress['best_label']}")

    if display in ("table", "both"):
        print_table(progress_table(progress))

    if display in ("graph", "both"):
        ax = plot_exercise_progress(series_frame(progress["series"]), exercise=exercise, unit=unit, best=best)
        fig = ax.figure
        saved = None
        if export:
            saved = save_cli_wrapper(dpi, exercise, fig=fig)
        if show:
            saved = finish_plot(fig, title=f"progress_{exercise}") or saved
        else:
            plt.close(fig)
        return saved
    return None


def pick_exercise() -> str | None:
    names = get_choices_for_ui()["exercises"]
    choice = prompt_menu("Choose exercise", numbered_items(names), allow_quit=False)
    if choice == "b":
        return None
    return names[int(choice) - 1]


def progress_menu(store: Store) -> None:
    """ Per-exercise progress (table / graph) and the all-exercises overview """
    while True:
        items1 = [
            MenuItem("1", "Progress for one exercise"),
            MenuItem("2", "Overview of all exercises"),
        ]
        choice1 = prompt_menu("Progress", items1, allow_quit=False)

        if choice1 == "b":
            return

        if choice1 == "2":
            overview = get_overview_for_ui(store)
            print(f"\n📈 Overview ({get_unit(store)})")
            print_table(overview)
            continue

        if (exercise := pick_exercise()) is None:
            continue
        progress = get_progress_for_ui(store, exercise)

        items2 = [
            MenuItem("1", "Table only"),
            MenuItem("2", "Graph only"),
            MenuItem("3", "Table and Graph"),
            MenuItem("4", "Save graph as PNG"),
        ]
        choice2 = prompt_menu("Display", items2, allow_quit=False)

        if choice2 == "1":
            what_to_print("table", progress)
        elif choice2 == "2":
            what_to_print("graph", progress)
        elif choice2 == "3":
            what_to_print("both", progress)
        elif choice2 == "4":
            what_to_print("graph", progress, export=True, show=False)
