# stringer

`stringer` finds GitHub composite actions and lists their names, descriptions,
inputs and outputs. The results can be written to a JSON file, or kept in a
local cache that is rewritten only when the scanned directory changes.

## Installation

```
pip install .
```

## Command line

Scan a directory tree for composite action definitions:

```
stringer scan path/to/actions
```

Every `.yml` or `.yaml` file under the path is read. A file counts as a
composite action when it is a YAML mapping whose `runs.using` is `composite`
and which has a non-empty string `name` and `description`. Other files are
skipped silently. While parsing, `Found input...` and `found output...` are
printed for actions that declare inputs or outputs.

Each action found is then printed with its inputs and outputs. If none is
found, `No composite actions found` is printed and nothing is written.

With no `--output`, the actions are stored in the cache file (by default
`.stringercache.json` in the current directory) together with a SHA-256 hash
of the paths and modification times of all files under the scanned path. The
cache is rewritten, and `Updating internal actions cache` printed, only when
that hash has changed, when the cache is missing or unreadable, or when
`--force` is given.

Options for `scan`:

- `-o`, `--output PATH` – write the parsed actions to this JSON file instead of the cache
- `--cache PATH` – where the cache lives (default `.stringercache.json`)
- `--force` – rewrite the cache even if it is still up to date
- `--repo OWNER/NAME` – read actions from a GitHub repository instead of the local path
- `--ref REF` – branch or tag to use with `--repo` (default `main`)
- `--token TOKEN` – GitHub token for `--repo`; without it, the `GITHUB_TOKEN`
  environment variable is used, and the scan fails if neither is set

The top-level `-t`/`--toggle` flag is accepted but has no effect. `stringer`
without a subcommand prints help. The command exits with status 1 when the
scan, the fetch or a write fails.

Example:

```
stringer scan .github/actions --output actions.json
```

JSON files are tab-indented. An action is written as an object with `name`,
`description`, `inputs` and `outputs`; its file path is not stored. The cache
is an object with `hash` and `actions`.

## Library use

```python
from stringer.parser import parse_composite_actions
from stringer.store import save_actions, load_cache

actions = parse_composite_actions(".github/actions")
for action in actions:
    print(action.name, action.description, action.inputs, action.outputs, action.path)

save_actions(actions, "actions.json")
```

- `stringer.parser` – `parse_composite_actions(root)` and
  `parse_composite_action_from_bytes(data, path)`; the latter raises
  `ActionParseError` for invalid YAML, a non-composite action, or a missing
  name or description.
- `stringer.store` – `save_actions`, `save_actions_with_hash`, `load_cache`,
  `load_actions`, `is_cache_valid`, `hash_directory` and the `CacheFile`
  dataclass. Read and write failures raise `StoreError`.
- `stringer.types` – the `CompositeAction` dataclass (`to_dict`, `from_dict`),
  and `Workflow`, `Job` and `Step` dataclasses describing workflows.
- `stringer.auth` – `resolve_github_token(cli_token)`, raising
  `TokenNotFoundError` when no token is available.
- `stringer.remote` – `GithubFetcher` and `FetchOptions`, which download raw
  files from `raw.githubusercontent.com` and parse them; files that cannot be
  fetched or parsed are logged as warnings and skipped. `FetchError` is raised
  when no repository is given.

## What it does not do

- Remote scanning does not list a repository's contents. `GithubFetcher`
  fetches only the paths named in `FetchOptions.paths`, which default to the
  repository root alone; `stringer scan --repo` uses that default, so it
  finds no actions unless the library is called with explicit file paths.
  With `--repo`, the `path` argument is still required and is the directory
  hashed for the cache.
- The token is taken only from `--token` or `GITHUB_TOKEN`; it is not
  obtained from any other tool, and it is not sent with the requests.
- Workflow files are not parsed; `Workflow`, `Job` and `Step` are data types
  only.

## Running the tests

```
pip install ".[test]"
pytest
```