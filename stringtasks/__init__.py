"""Caesar cipher, e-mail and IPv4 validation, tic-tac-toe board evaluation, and a command line."""

__version__ = "0.1.0"
__all__ = ["caesar", "emailcheck", "ipv4", "tictactoe", "cli"]