# stringtasks

Four small string exercises in one package, with an interactive command:

1. Caesar cipher: shift English letters by a key, keep their case and
   leave every other character untouched.
2. E-mail address check: prints `Yes` or `No`.
3. IPv4 address check: prints `Valid` or `Invalid`.
4. Tic-tac-toe board evaluation: prints `Incorrect`, `Petya won`,
   `Vasya won` or `Nobody`.

## Installation

```
pip install .
```

## Command line

```
stringtasks
```

A menu lists the four tasks. Type the number of a task on the next line,
then answer its prompts. Any other input prints `Invalid choice...`.

The task number can also be given as an argument, which skips the menu:

```
stringtasks 3
```

Task 1 reads a line of text and then a shift number, and prints the text
encrypted and then decrypted again. If the shift is missing or is not an
integer, an error goes to standard error and the command exits with
status 1.

## Library use

```python
from stringtasks.caesar import encrypt_caesar, decrypt_caesar
from stringtasks.emailcheck import is_valid_email
from stringtasks.ipv4 import is_valid_ipv4
from stringtasks.tictactoe import Outcome, evaluate

encrypt_caesar("The quick brown fox jumps over the lazy dog", 5)
# 'Ymj vznhp gwtbs ktc ozrux tajw ymj qfed itl'
decrypt_caesar("klbkmknklbk", 10)
# 'abracadabra'

is_valid_email("simple@example.com")     # True
is_valid_email("John..Doe@example.com")  # False

is_valid_ipv4("127.0.0.1")    # True
is_valid_ipv4("10.00.000.0")  # False

evaluate(["..X", "OX.", "X.O"])  # Outcome.PETYA_WON
```

### Modules

- `stringtasks.caesar`: `encrypt_caesar(text, shift)` and
  `decrypt_caesar(text, shift)`. Negative shifts are accepted.
- `stringtasks.emailcheck`: `is_valid_email(address)`, plus the pieces it
  is built from: `has_single_at`, `local_part`, `domain_part` (these two
  raise `ValueError` when there is no `@`), `check_allowed`,
  `check_local_part` and `check_domain_part`. The part before `@` may be
  1–64 characters, the part after it 1–63; neither may start or end with
  a dot or hold two dots in a row.
- `stringtasks.ipv4`: `is_valid_ipv4(ip)`, `valid_octet(octet)` and
  `get_octet(ip, number)` (1-based; returns `""` for a missing field).
- `stringtasks.tictactoe`: `evaluate(rows)` returns an `Outcome`
  (`INCORRECT`, `PETYA_WON`, `VASYA_WON`, `NOBODY`; each value is the text
  the command prints). Helpers: `is_valid_board`, `is_consistent`,
  `search_winner`, `winner_in_rows`, `winner_in_columns`,
  `winner_in_diagonals` and `count_mark`. The winner helpers return `"X"`,
  `"O"`, `"."` for no winner or `"?"` for conflicting wins, and raise
  `ValueError` for a board that is not three rows of three cells.
- `stringtasks.cli`: `main(argv=None)` and one `run_*` function per task,
  each taking the input and output streams.

Board rows are three strings of three characters each, made of `X`
(crosses, Petya), `O` (noughts, Vasya) and `.` (empty).

## Running the tests

```
pip install .[test]
pytest
```