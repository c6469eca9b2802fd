# vlrutil

A library of small, general-purpose utilities. It has no third-party
dependencies.

## Modules

### `vlrutil.bits`

- `is_bit_set(value, bit_value)`: True when every bit of `bit_value` is set in `value`.
- `is_single_bit_value(value)`: True when `value` is a positive power of two.
- `is_non_zero(value)`: False for `None`, `False` and anything equal to zero.
- `is_not_blank(value)`: True for a non-empty `str` or bytes-like value. `None`
  counts as empty. Other types raise `TypeError`.
- `to_longlong(low, high)`: combines two unsigned 32-bit halves into a signed
  64-bit value that wraps as two's complement. Halves out of range raise `ValueError`.

### `vlrutil.range_cast`

- `IntType`: an enum of fixed-width integers (`INT8` … `UINT64`) with
  `min_value()`, `max_value()` and `always_fits(source)`.
- `range_checked_cast(value, dest)`: returns `value` if it fits `dest` and
  raises `OverflowError` if it does not.

### `vlrutil.result`

- `make_result_code(severity, facility, code)` and the shortcuts
  `make_result_code_success`, `make_result_code_failure`,
  `make_result_code_failure_call_specific` and `make_result_code_failure_win32`.
  They build signed 32-bit result codes. Each part is range-checked.
- `SResult` wraps a 32-bit result code. It has the constants `SUCCESS`,
  `SUCCESS_WITH_NUANCE`, `SUCCESS_NO_WORK_DONE`, `FAILURE` and `UNINITIALIZED`.
  It has the constructors `for_general_success()`, `for_success_with_nuance()`,
  `for_general_failure()`, `for_hresult(hr)`, `for_call_specific_result(code)`
  and `for_win32_error_code(code)`. Its accessors are `is_success()`,
  `is_failure()`, `is_set()`, `facility_code()`, `unqualified_result_code()`,
  `as_hresult()`, `as_win32_code()` and `to_string()`, which gives the form
  `0x80004005`. An `SResult` compares equal to other `SResult`s and to plain
  integers.

### `vlrutil.levenshtein`

- `generalized_levenshtein_distance(source, target, insert_cost=1, delete_cost=1, replace_cost=1)`
- `generalized_levenshtein_distance_custom_cost(source, target, insert_cost, delete_cost, get_delta_cost)`:
  `get_delta_cost(a, b)` gives the cost of replacing `a` with `b`. A cost of
  zero means the two items match.

Both functions work on any sequences.

### `vlrutil.mru_cache`

`MRUCache(cache_size=100)` keeps the most recently *added* entries.

- `add(key, value)` stores an entry. Each call counts towards the limit,
  including repeated keys.
- `get(key, default=None)` looks up an entry and does not change the eviction order.
- `set_cache_size(n)` changes the limit and evicts the oldest additions when needed.

The cache also supports `in` and `len()`.

### `vlrutil.crc32`

`crc32(data)` returns the CRC-32 (IEEE) of bytes-like data as an unsigned
integer. For `str`, the checksum uses only the low byte of each UTF-16 code unit.

### `vlrutil.multisz`

Conversion between string lists and blocks of NUL-terminated strings that end
with an empty string. The default encoding is UTF-16-LE.

- `multi_sz_to_list(data, encoding)` raises `ValueError` if the block has no
  terminating empty string.
- `list_to_multi_sz(values, encoding)` builds such a block.

### `vlrutil.display`

`to_display_approx_data_size(size)` formats a byte count with two decimals in
bytes, KB, MB or GB, for example `1536` gives `"1.50 KB"`. Sizes beyond 1024 GB
carry the suffix `GB( big )`.

### `vlrutil.string_conversion`

- `multibyte_to_utf16(data, options=None)` decodes bytes to `str`.
- `utf16_to_multibyte(text, options=None)` encodes `str` to bytes.

Both follow the code page in `StringConversionOptions`, a frozen dataclass.
Its `with_*` methods return changed copies. Code page identifiers are in
`CodePage`. `ANSI` uses the locale's preferred encoding, and other numbers map
to `cpNNN` codecs. Invalid input is replaced by default. With the
`MB_ERR_INVALID_CHARS` or `WC_ERR_INVALID_CHARS` flags it raises
`StringConversionError` instead. Custom converters can be installed
process-wide through `ExternalImpl.shared_instance()`, and are then used in
preference to the built-in codecs.

### `vlrutil.convert`

Narrow strings are `bytes` and wide strings are `str`.

- `to_std_string_a(value, options)` and `to_std_string_w(value, options)` pass
  values of the requested width through unchanged and convert the other width.
- `to_std_string(value, options)` returns `str`.
- `to_std_string_w_from_system_default_ascii(value)` decodes bytes in the
  system ANSI code page.
- `to_fmt_arg_string_a(value, options)` and `to_fmt_arg_string_w(value, options)`
  hand back `bytes` or `str` objects as they are.

Unhandled types raise `TypeError`.

### `vlrutil.log`

- `log_message(context, message)`
- `log_message_pf(context, format_string, *args)`, for `%`-style formatting.
- `log_message_fmt(context, format_string, *args, **kwargs)`, for `str.format`-style formatting.

Each function sends a message through the process-wide `Callbacks`, which hold
`check_could_message_be_logged` and `log_message`. Formatting happens only when
the check allows the message. The functions return the text that was logged,
or `None` if it was filtered out or an error occurred; they never raise.

On first use, `bootstrap_callbacks_once()` installs defaults. These allow every
message and emit it on the standard `logging` logger named `vlrutil`. Levels
map from `LogicalLevel`; `TRACE` and `VERBOSE` map to a custom level 5 named
`TRACE`. A `MessageContext` holds a `CodeContext` (file, line, function) and a
`LogicalLevel`. `CodeContext.code_position_indicator()` gives `name:line`, or
`[unknown]`.

### `vlrutil.cleanup`

`AutoCleanupBase` is an abstract base class. Subclasses implement `do_cleanup()`.

- Leaving a `with` block calls `on_destroy_do_cleanup()`. That method marks the
  cleanup as triggered and runs `do_cleanup()` unless `cleanup_enabled` is False.
- An instance discarded before cleanup was triggered emits a `ResourceWarning`.

## Example

```python
from vlrutil.crc32 import crc32
from vlrutil.levenshtein import generalized_levenshtein_distance
from vlrutil.mru_cache import MRUCache
from vlrutil.result import SResult

crc32(b"123456789")                                   # 0xCBF43926
generalized_levenshtein_distance("kitten", "sitting") # 3

cache = MRUCache()
cache.set_cache_size(2)
cache.add("a", 1)
cache.get("a")                                        # 1

SResult.for_general_failure().to_string()             # "0x80004005"
```

## What it does not do

- It is a library only and installs no command-line tool.
- Result codes are built and inspected arithmetically. There is no translation
  of operating-system status codes such as NT status values.
- String conversion relies on Python's codecs. The `SYMBOL` code page is not supported.

## Running the tests

```
pip install .[test]
pytest
```