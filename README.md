# chkkit

Small helpers for writing tests that are short to read and quick to diagnose.

## Modules

- **`chkkit.iosim`**: `SimulatedIO` is an in-memory stand-in for a reader,
  writer, seeker and closer.
  - `set_reader_data(*args)` loads the bytes that `read(size)` returns.
    `set_reader_error(byte_count, err)` raises `err` once that many more bytes
    have been read.
  - `set_writer_error(limit, err)` accepts only `limit` more bytes. After
    that, `write` raises `err`, or `ForcedOutOfSpaceError` when `err` is
    `None`. `writer_data()` returns every byte accepted so far.
  - `set_read_error`, `set_write_error`, `set_seek_error` and
    `set_close_error` make the next call report a chosen count or position.
    They also make it raise the given error, if one was given.
  - `last_count` holds the count or position reported by the most recent
    read, write or seek. It is set even when that call raised.
- **`chkkit.substitution`**: `Substitutions.add(expr, replacement)` compiles a
  pattern. `Substitutions.apply(text)` applies every pattern in order and
  repeats until the text stops changing. `SUB_TIMESTAMP` and `SUB_DURATION`
  are ready-made patterns for clock times and durations.
- **`chkkit.markup`**: builds got/want output with internal marks:
  - `got_label`, `want_label`, `mark_ins`, `mark_del`, `mark_msg`, and
    `mark_chg` with a `DiffType` of `GOT`, `WANT` or `MERGE`.
  - `got_wnt(got, wnt)` joins the labelled got and want values. It starts
    both on a new line when either value spans several lines.
  - `resolve_marks(line, display)` replaces the marks with the strings of a
    `DisplayMarks`. By default these are ANSI colours.
- **`chkkit.tmpdir`**:
  - `remove_test_dir(path, dir_mode)` and `remove_test_file(path, file_mode)`
    remove a path and ignore a path that is missing. They raise
    `InvalidDirectoryError` or `InvalidFileError` when the path is the wrong
    kind.
  - `clean_unix_script(lines)` strips leading blank lines and trailing blanks
    from script text. It also removes the first line's indentation from every
    line. It raises `ValueError` unless the script starts with `#!/`.
- **`chkkit.errors`**: `CheckError` and its subclasses:
  - `InvalidLastArgError`
  - `InvalidDirectoryError`
  - `InvalidFileError`
  - `ReadPastEndOfDataError`
  - `ForcedOutOfSpaceError`

  When a detail is given, the message is the error text followed by the
  quoted detail, for example `invalid directory: "/tmp/x"`.

## Install

```
pip install chkkit
```

## Examples

A write that runs out of space:

```python
from chkkit.iosim import SimulatedIO
from chkkit.errors import ForcedOutOfSpaceError

sim = SimulatedIO()
sim.set_writer_error(8, None)
try:
    sim.write(b"0123456789")
except ForcedOutOfSpaceError:
    pass
assert sim.writer_data() == b"01234567"
assert sim.last_count == 8
```

Reading to the end and past it:

```python
from chkkit.iosim import SimulatedIO
from chkkit.errors import ReadPastEndOfDataError

sim = SimulatedIO()
sim.set_reader_data("abc")
assert sim.read(2) == b"ab"
assert sim.read() == b"c"
assert sim.read() == b""          # end of data
try:
    sim.read()
except ReadPastEndOfDataError:
    pass
```

Hiding variable parts of output before comparing it:

```python
from chkkit.substitution import Substitutions

subs = Substitutions()
subs.add(r"\d\d:\d\d:\d\d", "{{ts}}")
assert subs.apply("at 12:34:56") == "at {{ts}}"
```

Got/want markup shown without colours:

```python
from chkkit.markup import DiffType, DisplayMarks, got_wnt, mark_chg, resolve_marks

plain = DisplayMarks(chg_on="[", chg_off="]", got_on="", got_off="",
                     wnt_on="", wnt_off="")
text = got_wnt("A" + mark_chg("B", "D", DiffType.GOT) + "C",
               "A" + mark_chg("B", "D", DiffType.WANT) + "C")
assert resolve_marks(text, plain) == "GOT: A[B]C\nWNT: A[D]C"
```

## What it does not do

- There is no session object that creates temporary directories and files
  for you. Nothing here sets or restores environment variables, replaces
  `sys.argv` or feeds standard input and undoes the change afterwards. Use
  `remove_test_dir`, `remove_test_file` and `clean_unix_script` with paths
  you manage yourself, for example with pytest's `tmp_path` and
  `monkeypatch`.
- `chkkit.markup` only decorates text you have already split into its parts.
  It does not compute a difference between two values.

## Running the tests

```
pip install -e ".[test]"
pytest
```