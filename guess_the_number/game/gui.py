"""Support for GUI for the guess the number game."""

import tkinter as tk
from tkinter import messagebox, simpledialog, ttk
import structlog
from .config import parse_count, resolve_config, resolve_difficulty, resolve_name
from .engine import TurnEngine
from .errors import InvalidGuessFormat, InvalidSetupValue, SetupCancelled
from .events import score_line
from .rules import Difficulty
from .state import GameConfig

logger = structlog.get_logger()


class DifficultyDialog(simpledialog.Dialog):
    """A modal dialog with a drop-down of difficulty tiers."""

    def __init__(self, parent, title="Difficulty Selection"):
        self.selection: Difficulty | None = None
        self.combobox: ttk.Combobox | None = None
        super().__init__(parent, title)

    def body(self, master):
        tk.Label(master, text="Select a difficulty level:").pack(padx=10, pady=5)
        self.combobox = ttk.Combobox(
            master, values=Difficulty.labels(), state="readonly", width=32
        )
        self.combobox.current(0)  # Easiest tier preselected
        self.combobox.pack(padx=10, pady=5)
        return self.combobox

    def apply(self):
        self.selection = Difficulty.from_choice(self.combobox.get())


def ask_count(master: tk.Misc, prompt: str, title: str) -> int:
    """Ask for a positive number until one is given or the prompt is cancelled."""
    while True:
        raw = simpledialog.askstring(title, prompt, parent=master)
        try:
            return parse_count(raw, title.lower())
        except InvalidSetupValue as e:
            messagebox.showerror("Invalid Input", str(e), parent=master)


def run_setup(master: tk.Misc) -> GameConfig | None:
    """Ask the moderator for the game setup. Returns None if cancelled."""

    try:
        player_count = ask_count(master, "Enter the number of players:", "Number of Players")
        total_rounds = ask_count(master, "Enter the number of rounds:", "Number of Rounds")
        difficulty = resolve_difficulty(DifficultyDialog(master).selection)

        names = []
        for i in range(player_count):
            raw_name = simpledialog.askstring(
                "Player Setup", f"Enter name for Player {i + 1}:", parent=master
            )
            names.append(resolve_name(raw_name, i))

        return resolve_config(player_count, total_rounds, difficulty, names)

    except SetupCancelled as e:
        logger.info("setup cancelled", reason=str(e))
        return None


class GuessTheNumberGUI:
    """A simple Tkinter GUI for the guess the number game."""

    def __init__(self, master: tk.Tk, engine: TurnEngine):
        self.master = master
        master.title("Guess The Number Game")
        master.geometry("500x450")

        self.engine = engine

        # --- Create Widgets ---
        self.widgets: dict = {}

        self.widgets["title_label"] = tk.Label(
            master, text="Guess The Number!", font=("Arial", 24, "bold")
        )
        self.widgets["title_label"].pack(side=tk.TOP, pady=10)

        # Scoreboard on the right
        self.widgets["scoreboard_frame"] = tk.LabelFrame(master, text="Scoreboard")
        self.widgets["scoreboard_frame"].pack(side=tk.RIGHT, fill=tk.Y, padx=10, pady=10)
        self.widgets["scoreboard"] = tk.Text(
            self.widgets["scoreboard_frame"],
            width=22,
            height=10,
            font=("Courier", 12),
            state=tk.DISABLED,
        )
        self.widgets["scoreboard"].pack(fill=tk.BOTH, expand=True)

        # Turn info in the centre
        self.widgets["turn_frame"] = tk.Frame(master)
        self.widgets["turn_frame"].pack(side=tk.TOP, fill=tk.X, padx=20, pady=10)
        for name in ("round_label", "player_label", "instruction_label"):
            self.widgets[name] = tk.Label(
                self.widgets["turn_frame"], text="", font=("Arial", 12), anchor="w"
            )
            self.widgets[name].pack(fill=tk.X, pady=5)

        self.widgets["guess_entry"] = tk.Entry(self.widgets["turn_frame"])
        self.widgets["guess_entry"].pack(fill=tk.X, pady=5)
        self.widgets["guess_entry"].bind("<Return>", lambda event: self.handle_guess())

        self.widgets["guess_button"] = tk.Button(
            master, text="Submit Guess", command=self.handle_guess
        )
        self.widgets["guess_button"].pack(side=tk.BOTTOM, pady=10)

        # --- Initial Setup ---
        self.start_game()

    def update_scoreboard(self, scores: tuple[tuple[str, int], ...]):
        """Rewrites the scoreboard from (name, score) pairs."""
        scoreboard = self.widgets["scoreboard"]
        scoreboard.config(state=tk.NORMAL)
        scoreboard.delete("1.0", tk.END)
        scoreboard.insert(
            tk.END, "\n".join(score_line(name, score) for name, score in scores)
        )
        scoreboard.config(state=tk.DISABLED)

    def update_display(self):
        """Updates all GUI elements based on the current turn."""
        if self.engine.finished:
            return

        view = self.engine.view()
        self.update_scoreboard(view.scores)
        self.widgets["round_label"].config(
            text=f"Round: {view.round_number} of {view.total_rounds}"
        )
        self.widgets["player_label"].config(text=f"Turn: {view.player_name}")
        self.widgets["instruction_label"].config(
            text=f"Enter your guess (1-{view.max_number}):"
        )

        entry = self.widgets["guess_entry"]
        entry.delete(0, tk.END)
        entry.focus_set()

    def handle_guess(self):
        """Handler for the Submit Guess button and the Return key."""
        if self.engine.finished:
            return

        try:
            result = self.engine.submit_guess(self.widgets["guess_entry"].get())
        except InvalidGuessFormat:
            messagebox.showerror("Invalid Guess", "Please enter a valid number.")
            return

        messagebox.showinfo("Turn Over", result.message)

        if result.game_over:
            self.end_game()
        else:
            self.update_display()

    def start_game(self):
        """Initializes the first turn of the game."""
        self.engine.start_turn()
        self.update_display()

    def end_game(self):
        """Shows the final standings and disables guessing."""
        standings = self.engine.standings
        self.update_scoreboard(standings.scores)
        messagebox.showinfo("Game Over", standings.summary())
        self.disable_game_interaction()

    def disable_game_interaction(self):
        """Disables the entry and button when the game is over."""
        self.widgets["guess_entry"].config(state=tk.DISABLED)
        self.widgets["guess_button"].config(state=tk.DISABLED)
