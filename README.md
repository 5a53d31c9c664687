# sysprov

Building blocks for describing a Linux system as resource state: parsing
`stat` output and `/etc/os-release`, handling HTTP entity tags and octal file
modes, capping captured command output, and turning file, folder, link, group,
identity and release records into attribute dictionaries.

## Installation

```
pip install sysprov
```

## Parsing `stat` output

```python
from sysprov import stat

s = stat.parse_terse_format(
    b"/root/regular-file 6 8 81a4 0 0 9e 3416818 1 0 0 "
    b"1628450121 1628448200 1628448202 4096"
)
s.name                      # "/root/regular-file"
s.size                      # 6
s.mode.is_regular()         # True
s.mode.permission_string()  # "-rw-r--r--"
```

`stat.FORMAT_TERSE_GNU` and `stat.FORMAT_JSON_GNU` are the format strings the
parsers expect. `stat.parse_json_format` reads JSON output and, for symbolic
links, splits the quoted `'name' -> 'target'` form into `name` and `target`.
File names containing spaces are handled by the terse parser. Malformed input
raises `stat.ParseError`. `Stat.to_file_info()` returns a `StatFileInfo` view
with `name()`, `size()`, `mode()` (permission bits only), `mod_time()` and
`is_dir()`.

## Operating system release

```python
import io
from sysprov import osrelease

info = osrelease.parse(io.StringIO('NAME="Alpine Linux"\nID=alpine\nVERSION_ID=3.14.1\n'))
info.id          # "alpine"
info.version_id  # "3.14.1"
```

`osrelease.Info` holds `name`, `id`, `pretty_name`, `version` and
`version_id`; missing keys become empty strings.

## Entity tags and file modes

```python
from sysprov import etag, filemode

etag.parse('W/"xyzzy"')    # Header(etag="xyzzy", weak=True)
str(etag.Header("xyzzy"))  # '"xyzzy"'
filemode.parse("755")      # 493
filemode.format_mode(493)  # "755"
filemode.must_parse("9")   # 0
```

`etag.parse` raises `etag.HeaderParseError` and `filemode.parse` raises
`ValueError` on invalid input.

## Bounded output capture

`limited.LimitedWriter(writer, limit)` forwards writes to `writer` but never
more than `limit` bytes in total: a write past the budget is truncated, and
once the budget is spent further writes raise `EOFError`.

`command.CommandExpect` describes the expected exit code and which output to
capture (64 KiB each for stdout and stderr by default);
`stdout_writer(w)` and `stderr_writer(w)` wrap a writer in a `LimitedWriter`,
or return `None` when that stream is not captured.
`command.expand_command_expect` builds one from a single-element list holding
an `expect` block. `command.command_data(command, expect, exit_code, stdout,
stderr)` checks the exit code and returns a `CommandData` with a stable id and
base64-encoded output.

## Resource state

- `files`: `FileRecord`, `file_request(path, changes)` for create/update
  requests, `file_state` and `file_meta_state` for state,
  `parse_file_import_id` for ids of the form `path[:content|:content_sensitive]`,
  and `source_state` for the `etag=` form stored for a source.
- `file_data.file_data_state`: file meta information plus content.
- `folders`: `FolderRecord`, `LinkRecord`, `folder_request`, `folder_state`,
  `link_request`, `link_state`.
- `groups`: `GroupRecord`, `group_request`, `group_state`, `parse_group_id`.
- `info`: `Identity`, `Release`, `identity_data`, `release_data`.
- `data_ids.data_id_from_attr_values`: hex SHA-1 id of attribute values.
- `internal_data`: `encode_internal_data` / `decode_internal_data` for
  base64-encoded JSON kept alongside state.

Problems are raised as `diagnostics.DiagnosticError`, which carries a list of
`Diagnostic` entries with a `Severity`, summary, detail and attribute path.

Smaller helpers: `hashing.from_reader` and `hashing.sha1_bytes`,
`fields.additional_fields` for structured log fields, and `envutil` for
environment variables and membership checks.

## What this package does not do

It does not connect to remote hosts, run commands, transfer files, or read
and change users, groups, files or links on a system. Callers supply the
records and command results; the package only validates them and maps them to
and from state. There is no command-line tool.

## Development

```
pip install -e ".[test]"
pytest
```