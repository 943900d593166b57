"""Command-line front end offering the four string tasks."""

import argparse
import sys
from typing import Callable, Optional, Sequence, TextIO

from stringtasks.caesar import decrypt_caesar, encrypt_caesar
from stringtasks.emailcheck import is_valid_email
from stringtasks.ipv4 import is_valid_ipv4
from stringtasks.tictactoe import evaluate

_MENU = (
    "1. Caesar cipher",
    "2. E-mail address check",
    "3. IPv4 address validation",
    "4. Tic-tac-toe result",
)


def _read_line(stdin: TextIO) -> str:
    return stdin.readline().rstrip("\r\n")


def run_caesar(stdin: TextIO, stdout: TextIO) -> None:
    """Read a line and a shift, print it encrypted and then decrypted again."""
    stdout.write("Enter the string: \n")
    text = _read_line(stdin)
    stdout.write("Enter the shift number: ")
    tokens = _read_line(stdin).split()
    if not tokens:
        raise ValueError("no shift number given")
    shift = int(tokens[0])
    encrypted = encrypt_caesar(text, shift)
    stdout.write(f"\n{encrypted}\n\n{decrypt_caesar(encrypted, shift)}\n")


def run_email(stdin: TextIO, stdout: TextIO) -> None:
    """Read an e-mail address and print Yes or No."""
    stdout.write("Insert your e-mail: ")
    address = _read_line(stdin)
    stdout.write("Yes\n" if is_valid_email(address) else "No\n")


def run_ipv4(stdin: TextIO, stdout: TextIO) -> None:
    """Read an IPv4 address and print Valid or Invalid."""
    stdout.write("Insert the IPv4: ")
    ip = _read_line(stdin)
    stdout.write("Valid\n" if is_valid_ipv4(ip) else "Invalid\n")


def run_tictactoe(stdin: TextIO, stdout: TextIO) -> None:
    """Read three board rows and print the verdict."""
    rows = []
    for label in ("first", "second", "third"):
        stdout.write(f"Insert a {label} row: \t")
        rows.append(_read_line(stdin))
    stdout.write(f"{evaluate(rows).value}\n")


_TASKS: dict[int, Callable[[TextIO, TextIO], None]] = {
    1: run_caesar,
    2: run_email,
    3: run_ipv4,
    4: run_tictactoe,
}


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the chosen task; ask for the choice on standard input if none is given."""
    parser = argparse.ArgumentParser(
        prog="stringtasks",
        description="Caesar cipher, e-mail and IPv4 checks, tic-tac-toe judge.",
    )
    parser.add_argument(
        "task", nargs="?", type=int, help="task number 1-4; asked for if omitted"
    )
    args = parser.parse_args(argv)

    stdin, stdout = sys.stdin, sys.stdout
    choice = args.task
    if choice is None:
        stdout.write("\n".join(_MENU) + "\n")
        try:
            choice = int(_read_line(stdin).strip())
        except ValueError:
            choice = None

    task = _TASKS.get(choice) if choice is not None else None
    if task is None:
        stdout.write("Invalid choice...\n")
        return 0

    try:
        task(stdin, stdout)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())