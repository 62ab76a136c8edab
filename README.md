# uwkit

A small collection of text and value utilities, with no dependencies beyond
the standard library.

## Modules

- `uwkit.rapidhash` — the 64-bit rapidhash function: `rapidhash(data)`,
  `rapidhash_with_seed(data, seed)`, and the building blocks `rapid_mum` and
  `rapid_mix`. Data longer than 2**32 - 1 bytes raises `ValueError`.
- `uwkit.status` — named status codes (`define_status`, `status_str`) and the
  `Status` dataclass with `code`, `errno`, `file_name`, `line_number` and
  `description`, plus `is_error`, `ok` and `describe()`. `StatusError` is an
  exception that carries a `Status`.
- `uwkit.utf8` — lenient UTF-8 helpers: `encode_char`, `read_utf8_char`,
  `read_utf8_buffer`, `decode_utf8` (null-terminated, invalid sequences
  skipped), `decode_utf8_buffer` (stops before a trailing incomplete sequence
  and reports bytes consumed), `utf8_strlen`, `char_size`, `max_char_size`,
  `utf8_length` and `u32_strcmp`.
- `uwkit.search` — `substring_eq`, `startswith`, `endswith`, `strchr`
  (returns an index or `None`).
- `uwkit.edit` — operations returning new strings: `erase`, `truncate`,
  `insert_many`, `ltrim`, `rtrim`, `trim`, `lower`, `upper`, and
  `append_utf8`, which returns the new text and the number of bytes consumed.
- `uwkit.split` — `split_chr` and `rsplit_chr`; a `maxsplit` of 0 means no
  limit.
- `uwkit.concat` — `substr` with clamped bounds, and `strcat`, which joins
  strings and null-terminated UTF-8 byte strings and raises `StatusError` for
  an error `Status` argument and `TypeError` for anything else.
- `uwkit.convert` — `skip_spaces`, `skip_chars`, `isdigit`, `to_utf8`,
  `substr_to_utf8`, and the C-style parsers `to_int` (decimal, `0x` hex,
  leading-`0` octal) and `to_float`; out-of-range values raise `StatusError`
  carrying `ERANGE`.
- `uwkit.netutils` — `parse_ipv4_address` (returns a 32-bit integer),
  `parse_ipv4_subnet` (returns an `IPv4Subnet` with `subnet` and `netmask`),
  and `split_addr_port` (returns an `(address, port)` tuple). Errors are
  `BadIPAddress`, `MissingNetmask` and `BadNetmask`, all subclasses of
  `ValueError`.
- `uwkit.string_io` — `StringLineReader`, a line reader over a string with
  one line of pushback. `read_line` raises `EOFError` at the end, and
  `unread_line` raises `UnreadError` when a line is already pushed back.

## Installation

```
pip install uwkit
```

For running the tests:

```
pip install "uwkit[test]"
pytest
```

## Examples

```python
from uwkit.rapidhash import rapidhash
from uwkit.split import split_chr
from uwkit.netutils import parse_ipv4_address, parse_ipv4_subnet, split_addr_port
from uwkit.string_io import StringLineReader

digest = rapidhash(b"hello")            # 64-bit integer

split_chr("a/b/c", "/", 1)              # ["a", "b/c"]

parse_ipv4_address("192.168.0.1")       # 3232235521
parse_ipv4_subnet("10.0.0.0/8")         # IPv4Subnet(subnet=167772160, netmask=4278190080)
split_addr_port("[::1]:8080")           # ("[::1]", "8080")

reader = StringLineReader("first\nsecond\n")
for line in reader:
    print(line, end="")
```

## What it does not do

uwkit is a library only: it installs no command-line program. Its string
functions work on ordinary Python `str` values and return new strings; there
is no separate mutable string type, and hashing of text is left to
`rapidhash` over bytes you provide.