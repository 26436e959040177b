# booty

`booty` prepares a local development setup folder in your home directory.

Running `booty init` does two things, in order:

1. It makes sure a `.devsetup` folder exists under your home directory
   (`$HOME`, or `%USERPROFILE%` on Windows). When the folder is created, only
   your user can access it (mode `0700`).
2. It writes an example configuration file to `.devsetup/config/example.yml`.
   New files are created with mode `0640`.

When output goes to a terminal, each step is redrawn in place as it runs,
with a spinner for the step in progress:

```
Initialization running... hang tight 😎

[✓] Environment ready.
[ ] Creating example config file... (pending)
```

When output is not a terminal, only the final summary is printed. A failed
step is marked `[X]` and shows the error. Pressing Ctrl-C stops the display.

## Installation

```
pip install .
```

## Usage

Create or verify your setup:

```
booty init
```

The contents of `example.yml` are taken from a file you name with
`--example-config`. Without it, an empty `example.yml` is written:

```
booty init --example-config path/to/example.yml
```

You can run `booty init` again at any time:

- A folder that already exists is left alone.
- An example config that already exists is not overwritten.

Each of these steps is reported as `(skipped)`.

To list the available commands:

```
booty --help
```

## Limitations

- `booty init --no-example` is accepted, but it has no effect yet. The
  example config step still runs.
- `booty run` only prints `run called`. It does not read or apply any
  configuration.

## Using it as a library

The pieces that `booty init` is built from can also be used on their own.

`booty.filesystem` creates owner-only folders under your home directory. It
also writes files there without overwriting ones that exist. Failures raise
`OSError`.

- `ensure_subdir_in_home(subdir)` returns a `PathCheckResult`. Its `status` is
  a `PathStatus` and its `path` is the full path. Only the last component is
  created, so a missing parent is an error.
- `write_file_to_home_subdir(subdir, filename, data)` returns a message. The
  message says whether the file was created or skipped.

`booty.seqtask.SequentialTaskRunner(tasks, initial_title, final_title)` runs a
list of `SequentialTask(id, message, run)` objects one after another.

- Each task's `run` returns a result message or raises.
- `runner.run(stream)` renders progress to `stream` and returns the final view.
  `stream` defaults to standard output.
- `runner.view()` returns the current view as text.

`booty.initialization.run(example_config, stream)` runs the two `init` steps
with `example_config` as the bytes of the example file.

## Development

```
pip install -e ".[test]"
pytest
```