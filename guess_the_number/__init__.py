"""A multi-player guess the number game with a Tkinter GUI."""
