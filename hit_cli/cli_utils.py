from dataclasses import dataclass
from typing import Optional, Iterable
from tabulate import tabulate


@dataclass
class MenuItem:
    """ Menu item class """
    key: str                 # what the user types: "1", "a", "v", etc.
    label: str               # text shown to the user
    action: Optional[str] = None  # app action name (TUI), the CLI dispatches on key


# ------------------ MENUS ---------------------------- #
def render_menu(title: str, items: Iterable[MenuItem]) -> None:
    """ Menu Display """
    print(f"\n=== {title} ===")
    for it in items:
        print(f"[{it.key}] {it.label}")


def prompt_menu(title: str, items: list[MenuItem], allow_back: bool = True, allow_quit: bool = True) -> str:
    """ Create the core of the menu """
    # Add "back" , "quit" if missing
    augmented = items.copy()
    if allow_back and not any(i.key.lower() == "b" for i in augmented):
        augmented.append(MenuItem("b", "Back"))
    if allow_quit and not any(i.key.lower() == "q" for i in augmented):
        augmented.append(MenuItem("q", "Quit"))

    valid_keys = {i.key.lower(): i for i in augmented}

    while True:
        render_menu(title, augmented)
        choice = input("> ").strip().lower()
        if choice in valid_keys:
            return valid_keys[choice].key  # return the chosen key so caller decides what to do
        print("⚠️ Invalid choice. Try again.")


def numbered_items(labels: Iterable[str]) -> list[MenuItem]:
    """ 1-based menu items for a list of labels """
    return [MenuItem(str(i + 1), label) for i, label in enumerate(labels)]


# ---------------------- PRINT TABLES ---------------------- #
def print_table(df, tablefmt=None, floatfmt=".2f",
                numalign="decimal", showindex=False,
                headers="keys"):
    """ Takes a dataframe and prints it in table format using tabulate """
    if df is None or len(df) == 0:
        print("⚠️ No results found.")
        return
    print(tabulate(
        df,
        headers=headers,
        tablefmt=tablefmt or "psql",
        showindex=showindex,
        floatfmt=floatfmt,
        numalign=numalign,
    ))


def print_list_table(rows, headers):
    """ Takes list of lists and prints the output """
    if not rows:
        print("⚠️ No results found.")
        return
    print(tabulate(rows, headers=headers, tablefmt="psql", showindex=False, floatfmt=".2f", numalign="decimal"))
