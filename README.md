# snplabs

A collection of small console programs and the functions behind them:
bit arithmetic, coloured shapes, word sorting, days per month, reading of
include-dependency listings and a terminal tic-tac-toe game. Every program
is also usable as a library from Python.

The package has no runtime dependencies.

## Programs

### `snp-bitcalc` — binary calculator

Reads an expression such as `0x0c ^ 0x0f` and prints the operands and the
result in binary, hexadecimal and decimal, as 32-bit unsigned values.
Operands starting with `0x` are hexadecimal, operands starting with `0` are
octal, all others decimal. Supported operators: `&`, `|`, `^`, `<` (shift
left) and `>` (shift right); anything else is reported as an invalid
operation. After each result, answer `n` to enter another expression or
anything else to quit.

    snp-bitcalc

From Python, `parse_operand`, `bit_operation`, `format_binary`,
`format_bin`, `format_hex` and `format_dec` in `snplabs.bitcalc` work on an
`Expression`. `bit_operation` raises `ValueError` for an unknown operator.

### `snp-bittricks` — bit manipulation examples

Demonstrates setting, clearing and toggling bits, case conversion with bit
masks, the power-of-two test and swapping two values with XOR.

    snp-bittricks

The helpers are `set_bit`, `clear_bit`, `toggle_bit`, `to_upper`,
`to_lower`, `is_power_of_two` and `xor_swap` in `snplabs.bittricks`.

### `snp-shapes` — coloured shapes

Asks for a shape (oval `0` or rectangle `1`), a size and a colour (red `0`,
green `1`, yellow `2`), then draws the shape with ANSI colours. Answer `n`
to draw another one. `snplabs.shapes.render` returns the drawing of a
`Graphic` (a `ShapeType`, a size and a colour escape sequence) as text.

    snp-shapes

### `snp-wordsort` — sorting words

Reads up to ten distinct words (enter `ZZZ` to stop early), converts them to
upper case and prints them sorted. Words entered twice are rejected and
asked for again; a word of 20 characters or more ends the program with exit
status 1.

    snp-wordsort

From Python, `snplabs.wordsort.read_words(stream, out)` collects the words
and `sort_words` upper-cases and sorts them.

### `snp-monthdays` — days per month

Asks for a month (1–12) and a year (1600–9999), repeating the question
until the answer is in range, and prints whether the year is a leap year and
how many days the month has.

    snp-monthdays

`is_leap_year`, `days_in_month` and `read_int` are in `snplabs.monthdays`;
`days_in_month` raises `ValueError` for a month outside 1–12.

### `snp-tictactoe` — tic-tac-toe in the terminal

A two-player game drawn with ANSI colours. Press `1` to `9` to play a field
and `0` to leave. On an interactive terminal, input is read key by key.

    snp-tictactoe

The game is split into `snplabs.tictactoe.model` (the `Model` board and its
rules), `snplabs.tictactoe.control` (`Control`, the players and field
numbers 1–9) and `snplabs.tictactoe.view` (`View`, drawing and keyboard
input).

## Include-dependency listings

`snplabs.depdata.read_dependencies(root, lines)` reads the include listing
that a compiler writes when asked to show header files: one line per
header, prefixed with dots giving the nesting depth. Only complete lines
starting with a dot are taken. The result is a `DependencyData` holding the
list of directories and the list of `FileEntry` items (base name, directory
index, level), the root file first. More than 64 directories or 256 files
raise `DependencyError`.

## What the package does not do

- There is no command for the day of the week of a date.
- There is no command for checking whether a triangle is right-angled.
- Dependency listings are only read into a `DependencyData`; the package
  does not write them out as a graph, and has no command for them.