from io import StringIO

from bel import Object
from bel.evaluation.special_forms import SPECIAL_FORMS
from bel.types.list_cursor import ListCursor
from bel.types.pair import Pair
from bel.types.symbol import Symbol

# ----------------- ANSI colors -----------------
RESET = "\033[0m"
COLOR_SYMBOL = "\033[94m"
COLOR_SPECIAL_FORM = "\033[90m"

# ----------------- Defaults -----------------
DEFAULT_OPTIONS = {
    "indent": 4,
    "color_symbols": False,
    "color_special_forms": False,
}


# ----------------- Colorize utility -----------------
def colorize(obj: Object, options: dict = DEFAULT_OPTIONS) -> str:
    text = str(obj)
    if isinstance(obj, Symbol):
        if obj in SPECIAL_FORMS and options.get("color_special_forms", False):
            return f"{COLOR_SPECIAL_FORM}{text}{RESET}"
        if options.get("color_symbols", False):
            return f"{COLOR_SYMBOL}{text}{RESET}"
    return text


# ----------------- Tree dump -----------------
def format_tree(obj: Object, options: dict = DEFAULT_OPTIONS) -> str:
    """One line per atom, nested lists indented one level deeper.

    Raises BelMalformedList if a nested list is not proper.
    """
    with StringIO() as buffer:
        if isinstance(obj, Pair):
            _write_tree(obj, 0, buffer, options)
        else:
            buffer.write(colorize(obj, options))
            buffer.write("\n")
        return buffer.getvalue()


def _write_tree(obj: Object, level: int, buffer: StringIO, options: dict) -> None:
    pad = " " * (level * options.get("indent", 4))
    for item in ListCursor(obj):
        if isinstance(item, Pair):
            _write_tree(item, level + 1, buffer, options)
        else:
            buffer.write(f"{pad}{colorize(item, options)}\n")


def pprint_tree(obj: Object, options: dict = DEFAULT_OPTIONS):
    print(format_tree(obj, options), end="")
