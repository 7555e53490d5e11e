import argparse

DEFAULT_WIDTH    = 500
DEFAULT_HEIGHT   = 500
DEFAULT_STEP     = 10
DEFAULT_SIZE     = 10
DEFAULT_COLOR    = "black"
DEFAULT_INTERVAL = 0

PALETTE = ("black", "red", "green", "blue", "yellow", "purple", "orange")

STEP_RANGE = (1, 50)
SIZE_RANGE = (1, 50)


def coerce_positive_int(value):
    """Best-effort integer coercion for control input.

    Ints pass through; floats and strings that parse as a whole number or a
    float (including exponent forms like "1e2") are truncated toward zero.
    Anything else, including strings with trailing text such as "12px",
    gives None, as does a result that is not positive.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        n = value
    elif isinstance(value, float):
        if value != value or value in (float("inf"), float("-inf")):
            return None
        n = int(value)
    elif isinstance(value, str):
        s = value.strip()
        try:
            n = int(s, 10)
        except ValueError:
            try:
                n = int(float(s))
            except (ValueError, OverflowError):
                return None
    else:
        return None
    return n if n > 0 else None


def is_palette_color(name) -> bool:
    return isinstance(name, str) and name in PALETTE


def positive_int(text: str) -> int:
    n = coerce_positive_int(text)
    if n is None:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {text!r}")
    return n


def non_negative_int(text: str) -> int:
    try:
        n = int(text, 10)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an integer, got {text!r}")
    if n < 0:
        raise argparse.ArgumentTypeError(f"expected a value >= 0, got {n}")
    return n


def palette_color(text: str) -> str:
    name = text.strip().lower()
    if not is_palette_color(name):
        raise argparse.ArgumentTypeError(
            f"unknown color {text!r}, choose from: {', '.join(PALETTE)}"
        )
    return name


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="dotwalk", description="Bounded random walk of a dot")
    p.add_argument("--width", type=positive_int, default=DEFAULT_WIDTH,
                   help="Canvas width in pixels")
    p.add_argument("--height", type=positive_int, default=DEFAULT_HEIGHT,
                   help="Canvas height in pixels")
    p.add_argument("--step", type=positive_int, default=DEFAULT_STEP,
                   help="Initial step size in pixels")
    p.add_argument("--size", type=positive_int, default=DEFAULT_SIZE,
                   help="Initial dot size in pixels")
    p.add_argument("--color", type=palette_color, default=DEFAULT_COLOR,
                   help="Initial dot color")
    p.add_argument("--interval", type=non_negative_int, default=DEFAULT_INTERVAL,
                   help="Tick interval in milliseconds (0 = as fast as possible)")
    p.add_argument("--seed", type=int, default=None,
                   help="Seed for the random source")
    return p


def parse_args(argv=None) -> dict:
    return vars(build_parser().parse_args(argv))
