# bentochains

Building blocks for tools that work with historical US option chain data.
The package has no dependencies outside the standard library.

## Modules

### `bentochains.apputils`

Helpers for command-line tools.

- `execute_shell_command(command)` runs an executable script through the shell
  and returns its standard output. It raises `ValueError` if the file does not
  exist. It raises `RuntimeError` if the file lacks owner or group execute
  permission, or if the script exits with a non-zero status. The error message
  includes the script's output.
- `trim(text)` removes trailing whitespace.
- `split_str(text, delim=",")` and `split_by_linefeed(text)` split text.
- `to_upper(text)` and `to_lower(text)` change the case of ASCII letters only.
- `executable_name(argv0)` returns the file name part of a path.
- `key_script_in_bin_dir(argv0)` returns `<dir of argv0>/../scripts/getkey.sh`.
- `get_key_script(argv)` returns `argv[1]` if it is given, and the path from
  `key_script_in_bin_dir(argv[0])` otherwise.

### `bentochains.timestamps`

Timestamps are integers: nanoseconds since the Unix epoch, in UTC.

- `Timezone` lists the accepted zones: `UTC`, `GMT`, `EST`, `CST`, `MST`, `PST`
  and `NYC` (`"America/New_York"`). Other names raise `ValueError`.
- The US zones use fixed standard offsets plus US daylight-saving rules.
  - `convert_timestamp_to_zulu(timestamp, tz)` shifts local wall-clock time to
    UTC. A local time that is skipped or repeated at a clock change raises
    `ValueError`.
  - `convert_zulu_to_timestamp(timestamp, tz)` shifts UTC to local wall-clock
    time.
  - For zones other than UTC and GMT, both functions truncate the result to
    whole seconds.
- `make_timestamp_zulu(...)`, `make_timestamp(..., tz)`,
  `make_timestamp_from_strings(date_text, time_text, tz)` and
  `make_timestamp_zulu_from_date(date_text)` build timestamps. The zone defaults
  to New York.
- `parse_date("yyyy-mm-dd")` and `parse_time("HH:MM[:SS]")` parse the string
  forms and raise `ValueError` on bad input.
- Formatting:
  - `serialize_timestamp` gives `YYYY-MM-DD HH:MM:SS.nnnnnnnnnZ`.
  - `timestamp_to_string_int_seconds` gives `YYYY-MM-DD HH:MM:SS`.
  - `format_request_time` gives `YYYY-MM-DDTHH:MM:SS.nnnnnnnnn`.
- `ExchangeClose(hour, minute, time_zone)` records when an exchange closes.
  `NASDAQ_CLOSE` is 16:00 New York time.

### `bentochains.logsetup`

- `init_logging(log_thread_id, log_level)` enables console logging to standard
  error for the `bentochains` logger. Each line has the form
  `[timestamp] [thread id] <severity> message`; the thread id is shown only when
  `log_thread_id` is true. An unknown level raises `ValueError`.
- `get_log_levels()` returns the accepted levels:
  `debug|error|info|none|trace|warning`.
- `trace_logging_enabled()` tells whether the level is `trace`.

Until `init_logging` is called, the logger writes nothing.

### `bentochains.sequences`

- `split_vector(items, n_split)` splits a long list into consecutive batches of
  roughly equal size, so that each request stays small. A list of at most
  `n_split` items comes back as one batch.
- `join_lists(lists)` concatenates batched results in order.
- `next_in_time_range(at, keys, time_range)` returns the key closest to `at`, and
  whether it lies strictly within `time_range` of `at`. With no keys it returns
  `(0, False)`.

### `bentochains.csvcolumns`

Column layouts for option chain CSV files:

- `side_by_side_columns()` puts the call and put of one strike on the same row.
  Call columns start with `C_` and put columns with `P_`.
- `stacked_columns()` puts one option on each row. The `Type` column holds an
  `OptionType` value, `Put` or `Call`.
- `capitalize_first(columns)` upper-cases the first letter of each name, for
  example `C_bid` → `C_bid` and `bid` → `Bid`.

## What this package does not do

The package does not include:

- a command-line program;
- a client for fetching symbology or quote data;
- an option chain model;
- a yield-curve reader;
- a writer that fills CSV rows.

It gives only the pieces listed above. You can build those parts on top of them.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from bentochains.timestamps import Timezone, make_timestamp_from_strings, serialize_timestamp
from bentochains.sequences import split_vector

at = make_timestamp_from_strings("2025-04-02", "10:30", Timezone.NYC)
print(serialize_timestamp(at))    # 2025-04-02 14:30:00.000000000Z

batches = split_vector([str(i) for i in range(250)], 100)
print([len(b) for b in batches])  # [83, 83, 84]
```