"""The tasks that set up the local development folder."""

from __future__ import annotations

import os
from typing import TextIO

from booty.filesystem import PathStatus, ensure_subdir_in_home, write_file_to_home_subdir
from booty.seqtask import SequentialTask, SequentialTaskRunner

SETUP_FOLDER = ".devsetup"
STEP_PREPARE_ENV = "prepare-env"
STEP_CREATE_EXAMPLE = "create-example-config"

INITIAL_TITLE = "Initialization running... hang tight 😎"
FINAL_TITLE = "Initialization complete 😌"


def prepare_local_environment() -> str:
    """Ensure the setup folder exists in the home directory."""
    try:
        result = ensure_subdir_in_home(SETUP_FOLDER)
    except OSError as err:
        raise OSError(f"failed to prepare environment: {err}") from err

    if result.status is PathStatus.CREATED:
        return "Environment ready."
    if result.status is PathStatus.ALREADY_EXISTS:
        return "Environment already exists. (skipped)"
    raise OSError("unknown result during environment setup")


def create_example_config(data: bytes) -> str:
    """Write the example config into the setup folder's config directory."""
    try:
        return write_file_to_home_subdir(
            os.path.join(SETUP_FOLDER, "config"), "example.yml", data
        )
    except OSError as err:
        raise OSError(f"could not write config file: {err}") from err


def register_tasks(example_config: bytes) -> list[SequentialTask]:
    return [
        SequentialTask(
            STEP_PREPARE_ENV, "Preparing local environment...", prepare_local_environment
        ),
        SequentialTask(
            STEP_CREATE_EXAMPLE,
            "Creating example config file...",
            lambda: create_example_config(example_config),
        ),
    ]


def run(example_config: bytes, stream: TextIO | None = None) -> str:
    """Run the initialization tasks with a progress display; return the final view."""
    runner = SequentialTaskRunner(register_tasks(example_config), INITIAL_TITLE, FINAL_TITLE)
    return runner.run(stream)