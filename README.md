# pfmt

A small printf-style formatter. It understands the conversions
`c s p d i u o x X %`, the flags `- + # 0` and space, a field width and a
precision, and it follows the classic printf rules for combining them.
Integer conversions wrap their argument to 32 bits (`%p` to 64 bits), as a
C `int`, `unsigned int` or pointer would.

## Usage

```python
from pfmt.printf import render, printf

render("%5d|%-5s|%#x", 42, "ab", 255)   # '   42|ab   |0xff'
render("%.3s", "abcdef")                # 'abc'
render("%p", 0)                         # '(nil)'
render("%s", None)                      # '(null)'
render("100%z")                         # '100%z'

count = printf("%+d items\n", 7)        # writes '+7 items\n' to stdout, returns 9
```

`render` returns the formatted text. `printf` writes it to standard output,
or to the text stream passed as `stream=`, and returns the number of
characters written.

A `%` that does not start a valid directive is kept as literal text.
Running out of arguments raises `TypeError`; a width or precision too large
to be used raises `ValueError`. A `%c` with a zero argument emits a NUL
character, placed after its padding (or before it with the `-` flag).

Lower-level pieces are available on their own:

- `pfmt.spec.parse_directive(fmt, pos)` parses one `%...` directive into a
  `Directive`, or returns `None` if there is none at `pos`.
- `pfmt.layout` applies precision and padding to converted text
  (`apply_precision`, `apply_padding`).
- `pfmt.convert.render_directive` turns one directive and its argument into
  text; the individual steps (`convert_argument`, `add_plus`, `add_hashtag`,
  `add_blank`, ...) are exposed too.
- `pfmt.numconv` holds integer parsing and base conversion (`parse_long`,
  `atoi`, `to_base`, `digit_count`).
- `pfmt.textutils` holds string helpers: `split`, `strtrim`, `strrtrim`,
  `join_all`, `strncmp`, `strcasecmp`, `strcasencmp`, `strnstr`,
  `strcasestr` and `index_or_end`. The search functions return an index or
  `None`.
- `pfmt.linereader.read_lines(stream)` and `LineReader` read a text or
  binary stream line by line, keeping the newline on each line.

## Command line

```
pfmt
```

runs a fixed demonstration call that formats the string `%z`; since `z` is
not a conversion, it prints `%z` unchanged. The command takes no options.

## What it does not do

There are no floating-point conversions (`f`, `e`, `g`), no length
modifiers such as `l` or `h`, and no `*` width or precision taken from the
arguments.

## Tests

```
pip install -e ".[test]"
pytest
```