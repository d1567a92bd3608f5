# hotspotview

Helpers for presenting results of a sampling profiler: human-readable costs,
durations and frequencies, summary and system-information tables, source
location resolution, and the column and event-source choices that a results
view makes.

## Installation

```
pip install hotspotview
```

To run the tests:

```
pip install "hotspotview[test]"
pytest
```

## Formatting values

```python
from hotspotview.util import (
    Symbol, format_cost, format_cost_relative, format_time_string,
    format_frequency, format_symbol, format_string,
)

format_cost(1234567)                     # "1.235E+06"
format_cost_relative(1, 4, True)         # "25%"
format_cost_relative(1, 0)               # "" (no total)
format_time_string(1_500_000_000)        # "01.500s"
format_time_string(1_500_000_000, True)  # "1s"
format_frequency(1000, 1_000_000_000)    # "1000Hz"
format_string("")                        # "??"
format_symbol(Symbol(symbol="_Z3foov", pretty_symbol="foo()"))  # "foo()"
```

`format_time_string` and `format_frequency` raise `ValueError` for negative
input. `hash_combine(seed, value_hash)` mixes two 32-bit hashes, and
`find_libexec_binary(name, application_dir, libexec_rel_path)` returns the
absolute path of an executable file in the application's libexec directory,
or `None` if there is none.

Whether symbols are shown prettified is a process-wide setting:

```python
from hotspotview.settings import Settings

settings = Settings.instance()
disconnect = settings.on_prettify_symbols_changed(lambda value: print("now", value))
settings.set_prettify_symbols(False)   # listeners run only on a real change
disconnect()
```

## Summaries

`hotspotview.summary` holds the `Summary`, `CostSummary` and `CostUnit` types.
`format_summary` turns a summary into an HTML table of the command, run time,
on/off-CPU time, process and thread counts, samples per cost type and lost
chunks; `format_system_info` gives a table of the host, or `""` when no host
name is known. `lost_chunks_message` returns the warning shown when chunks
were lost (or `None`), and `format_byte_size` renders sizes with SI prefixes
in powers of 1000, e.g. `format_byte_size(1500)` is `"1.5 kB"`.

## Source locations

`SourceMapResolver(sysroot, app_path).resolve("file.cpp:42", module_path)`
turns a `file:line` location into a `SourceMapLocation` that points at an
existing file. It tries the sysroot, the sysroot plus the module's directory,
the application path, and the application path plus the module's directory,
joining them as plain strings. The returned location is false when nothing
was found.

## Results views

`hotspotview.resultsutil` decides which cost columns to hide
(`hidden_columns`), which event sources to offer (`event_source_entries`,
each an `EventSourceEntry` with a tooltip made from a `%1` template) and
which position to keep selected after the data changes (`restore_selection`).

## Processes

`hotspotview.processlist.ProcData` describes one process. Processes sort,
compare and hash by their parent process id only; `equals` compares every
field.

## What this package does not do

It does not record or parse profiling data, list running processes, or show
any windows. It works on values you pass in and returns strings and plain
data for a view of your own to display.