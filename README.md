# bonzai

Small helpers for writing command-line tools in Python. The package uses
only the standard library.

## Modules

- `bonzai.fn`: the `A` list type, whose `map`/`m`, `filter`/`f` and
  `reduce`/`r` methods return new values for chaining, with `each`/`e`,
  `print`, `println`, `printf`, `log` and `logf`; plus the functions
  `mapped`, `filtered`, `reduce`, `pipe`, `pipe_print`, `or_` and `fall`.
- `bonzai.each`: `do`, `until_error`, and the printing and logging helpers
  `print_all`, `println_all`, `printf_all`, `log_all` and `logf_all`.
- `bonzai.filt`: `has_prefix`, `has_prefix_sorted`, `base_has_prefix`,
  `has_suffix`, `has_suffix_sorted`, `base_has_suffix`, `not_empty` and
  `remove_index`.
- `bonzai.mapf`: single-item transforms `mark_dirs`, `hash_comment` and
  `esc_space`.
- `bonzai.maps`: whole-list and mapping helpers `prefix`, `keys`,
  `keys_with_prefix`, `clear`, `mark_dirs`, `base`, `hash_comment`,
  `esc_space` and `trim_space`.
- `bonzai.redu`: `longest` and `unique`.
- `bonzai.checks`: `all_latin_ascii_lower`,
  `all_latin_ascii_lower_with_dashes`, `all_latin_ascii_upper`, `truthy`
  and `started_by_explorer` (which always returns `False`).
- `bonzai.jsonutil`: JSON that leaves `<`, `>` and `&` unescaped:
  `escape`, `marshal`, `marshal_indent`, `unmarshal`, and the `This`
  wrapper with `json`, `unmarshal_json`, `print` and `log`.
- `bonzai.scanner`: a rune-oriented scanner over a byte buffer for
  hand-written parsers: `Scanner` (with `scan`, `peek`, `is_`, `match`,
  `peek_match`, `mark`, `goto`, `positions` and more), `Cursor` and
  `Position`.
- `bonzai.futil`: path and directory helpers such as `exists`,
  `not_exists`, `is_dir`, `here_or_above`, `int_dirs`, `preserve`,
  `revert_if_missing`, `latest_change`, `dir_entries`, `dir_is_empty`,
  `file_size` and `user_state_dir`, with the `NotExistError`,
  `ExistError` and `ExistsError` exceptions and the `PathEntry` record.
- `bonzai.fileops`: file content helpers `touch`, `fetch`, `replace`,
  `head`, `tail`, `replace_all_string`, `find_string`, `overwrite`, `cat`
  and `field`.
- `bonzai.multipart`: the `Multipart` delimited text format, with
  `marshal_text` and `unmarshal_text`.
- `bonzai.github`: a small GitHub REST API `Client` (`api`, `repo`,
  `latest`) and module-level `repo` and `latest` helpers. The default host
  is `github.com`, or the value of the `GH_HOST` environment variable.
- `bonzai.run`: executable paths and per-program cache, config and state
  directories, `execute`, `sys_exec` and `out` for running other
  programs, shell detection, `args_from`, `args_or_in`, `file_or_in`,
  the `trap_panic` context manager, `exit_error`, `exit_`, `exit_off`,
  `exit_on` and signal handling with `trap`.

## Example

```python
from bonzai.fn import A, fall
from bonzai.checks import truthy
from bonzai.scanner import Scanner

A([1, 2, 3]).map(lambda i: i + 1).print()   # prints 234
fall("", "", "three")                       # "three"
truthy("on")                                # True

s = Scanner("foo")
while s.scan():
    print(s.rune)
```

## What it does not do

This is a library only: it installs no command of its own. It renders no
markup text for terminals and has no pager or viewer. `fetch`, `replace`
and the GitHub client make plain blocking HTTP requests with no retries,
timeouts or authentication.

## Testing

The tests use pytest and are installed with the `test` extra.