"""Sets up a guess the number game and loads the GUI."""

import argparse
import tkinter as tk
import numpy as np
import structlog
from guess_the_number.game import TurnEngine
from guess_the_number.game.gui import GuessTheNumberGUI, run_setup
from guess_the_number.log import setup_logging

logger = structlog.get_logger()


def seed_type(value: str) -> int:
    """Argparse type for a non-negative generator seed."""
    try:
        seed = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"{value!r} is not a whole number") from None
    if seed < 0:
        raise argparse.ArgumentTypeError(f"seed must be non-negative, got {seed}")
    return seed


def build_parser() -> argparse.ArgumentParser:
    """Return the command line parser."""

    parser = argparse.ArgumentParser(description="Play guess the number.")

    parser.add_argument(
        "--seed",
        type=seed_type,
        default=None,
        help="Seed for the secret number generator",
    )

    parser.add_argument(
        "--log-dir",
        type=str,
        default=None,
        help="Directory to write a timestamped log file to",
    )

    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=None,
        help="Log level, defaults to $LOG_LEVEL or INFO",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the game until the window is closed."""

    args = build_parser().parse_args(argv)
    setup_logging(args.log_dir, args.log_level)

    rng = np.random.default_rng(seed=args.seed)

    # --- Game Setup ---
    root = tk.Tk()
    root.withdraw()  # Keep the empty window hidden while the dialogs are up
    config = run_setup(root)
    if config is None:
        root.destroy()
        return 0

    engine = TurnEngine(config, rng)

    # --- GUI Setup ---
    root.deiconify()
    GuessTheNumberGUI(root, engine)

    # --- Start GUI Main Loop ---
    root.mainloop()

    logger.info("window closed")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
