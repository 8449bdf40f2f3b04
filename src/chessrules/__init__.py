"""chessrules: chess rules and move-legality core."""

__version__ = "0.1.0"
