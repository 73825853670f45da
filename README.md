# krtools

Small command-line filters and library helpers for text and C source files,
plus a few teaching tools: a reverse-Polish calculator, a buffered file layer
over raw descriptors and a first-fit free-list allocator simulated over a
byte arena.

Pure Python, no third-party dependencies, Python 3.10 or later.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Commands

Most commands read standard input and write to standard output.

### Scanning C source

| Command | What it does |
|---|---|
| `kr-keywords < file.c` | Counts C keywords, skipping comments and character/string literals. Prints each keyword seen with its count. |
| `kr-vargroup [N] < file.c` | Collects names that follow `char`, `double`, `float`, `int`, `long`, `short` or `void` (including comma-separated lists) and groups them by their first `N` characters (default 6). Each group is printed in alphabetical order, followed by a blank line. |
| `kr-define < file.c` | Echoes the input, handling `#define NAME VALUE` (VALUE is a run of letters and digits) and `#undef NAME`, and replacing defined names elsewhere with their values. Comments and literals pass through unchanged. |

### Words and lines

| Command | What it does |
|---|---|
| `kr-xref < text.txt` | Prints every word, in alphabetical order, with the line numbers it occurs on; common linking words such as *and*, *the*, *to* are left out. |
| `kr-wordfreq < text.txt` | Lists words by decreasing count (at most 1000 distinct words). |
| `kr-visprint -o < file` / `kr-visprint -x < file` | Prints input with newlines turned into spaces, non-ASCII bytes as octal (`-o`) or hexadecimal (`-x`) escapes, and a line break at the first blank past column 70. |

### Files

| Command | What it does |
|---|---|
| `kr-compare FILE1 FILE2` | Prints the first pair of lines that differ, with their line number. Nothing is printed if one file runs out first with no difference. |
| `kr-find [-x] [-n] PATTERN [FILE]...` | Prints lines containing `PATTERN`; `-x` prints the lines that do not, `-n` adds line numbers. With files, each file's name is printed before its matches; without, standard input is read. |
| `kr-pages FILE...` | Prints files with line numbers and a page header every ten lines. |
| `kr-cat [FILE]...` | Copies the files, or standard input, to standard output. |
| `kr-fsize [PATH]...` | Lists paths (default `.`) in an `ls -l`-like format: mode, links, owner, group, size, access time, name. Directories are descended into; their contents are listed before the directory itself. |

### Demonstrations

| Command | What it does |
|---|---|
| `kr-calc` | Reverse-Polish calculator: `echo "2 3 4 2 - + +" \| kr-calc` prints `result: 7`. Supports `+ - * / %`; errors such as a zero divisor or an empty stack are printed before the result. |
| `kr-minfmt` | Prints a sample line through the minimal `printf`-style formatter, then reads `%d %i %o %u %x %c %s %f` from standard input and echoes the values read. |
| `kr-hashdemo` | Installs several names that share one hash bucket, looks one up and removes it. |
| `kr-numbers` | Asks for three integers and prints the biggest, and the max, min, average and absolute value of the first ones. |
| `kr-login` | Stores a username and password, then checks a second entry against them. |
| `kr-bufcopy SOURCE [TARGET [OFFSET]]` | Copies SOURCE, starting at byte OFFSET, to TARGET or to standard output, using the buffered file layer. |
| `kr-alloc` | Exercises the allocator's `malloc`, `calloc`, `free` and `bfree`. |

## Library use

```python
from krtools.hashtab import HashTable
from krtools.calculator import evaluate
from krtools.basics import max_of, min_of, biggest
from krtools.alloc import Arena

table = HashTable()
table.install("TEST", "test")
print(table.lookup("TEST"))         # test
table.undef("TEST")

print(evaluate("2 3 4 2 - + +"))    # (7.0, [])

print(max_of(3, 7), min_of(3, 7), biggest(1, 9, 4))

arena = Arena()
address = arena.malloc(27)
arena.write(address, b"Content from malloc here.")
print(arena.read(address, 25))
arena.free(address)
```

Other entry points include `krtools.cscan.words`, `krtools.cscan.count_keywords`,
`krtools.cscan.group_variables`, `krtools.xref.cross_reference`,
`krtools.xref.word_frequencies`, `krtools.define.expand_defines`,
`krtools.charconv.convert_case`, `krtools.charconv.visible_print`,
`krtools.minfmt.minprintf`, `krtools.minfmt.minscanf`,
`krtools.filetools.first_difference`, `krtools.filetools.find_pattern`,
`krtools.filetools.paginate`, `krtools.fsize.describe`,
`krtools.bufio.FileTable` and `krtools.bufio.copy_file`.

### Case conversion

`krtools.charconv.convert_case(text, "lower")` or `"upper"` converts ASCII
letters. `krtools.charconv.case_main` picks the mode from the name the program
is run under (`lower` or `upper`), so no command is installed for it; call it
with `case_main(["upper"])` or run it under one of those names.

## Limitations

- The allocator manages a simulated heap inside a Python `bytearray`; it does
  not hand out real memory.
- `kr-fsize` shows owner and group names only where the `pwd` and `grp`
  modules exist; otherwise it reports that it cannot find them and leaves
  those fields out.
- The C-source tools work on tokens, not a real parser: `kr-define` takes only
  single alphanumeric values, and `kr-vargroup` sees any name after a type
  keyword, function names included.