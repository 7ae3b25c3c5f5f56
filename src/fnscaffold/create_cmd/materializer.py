"""ProjectMaterializer: turns a FunctionSpec into a project directory and installs it."""

import os
from enum import Enum

import click

from fnscaffold.create_cmd.create_opts import CreateFunctionOpts
from fnscaffold.create_cmd.editor import suggest_editor
from fnscaffold.create_cmd.function_spec import HANDLER_FILE, FunctionSpec, ProjectLayout
from fnscaffold.create_cmd.project_files import (
    build_compiler_config,
    build_manifest,
    render_handler,
    to_json,
)

COLLISION_MESSAGE = "Project directory already exists!"
INSTALLING_LABEL = "Installing npm packages..."
INSTALLED_LABEL = "Npm packages installed successfully"


class MaterializeOutcome(Enum):
    """Terminal state of a materialize run."""

    COLLIDED = "collided"
    INSTALLED = "installed"
    INSTALL_FAILED = "install_failed"


class ProjectCreationError(Exception):
    """Creating the project directory or writing its files failed."""

    def __init__(self, path, cause: OSError):
        super().__init__(f"{path}: {cause.strerror or cause}")
        self.path = path
        self.cause = cause


class ProjectMaterializer:
    """Creates the project files and runs the installer using injected collaborators."""

    def __init__(self, installer, spinner, opts: CreateFunctionOpts | None = None,
                 editor_fn=suggest_editor):
        self._installer = installer
        self._spinner = spinner
        self._opts = opts or CreateFunctionOpts()
        self._editor_fn = editor_fn

    def materialize(self, spec: FunctionSpec) -> MaterializeOutcome:
        """Create, write, install, then report.

        Returns:
            COLLIDED if the directory already existed (nothing written),
            INSTALL_FAILED if the installer failed (files are kept),
            INSTALLED otherwise.

        Raises:
            ProjectCreationError: If the directory or a file cannot be written
        """
        layout = ProjectLayout.for_spec(spec, self._opts.base_dir)
        contents = _render_files(spec, layout)

        if not _create_directory(layout.directory):
            click.secho(f"\n{COLLISION_MESSAGE}", fg="red", err=True)
            return MaterializeOutcome.COLLIDED

        _write_files(contents)

        if not self._install(layout):
            return MaterializeOutcome.INSTALL_FAILED

        self._print_next_steps(spec)
        return MaterializeOutcome.INSTALLED

    def _install(self, layout: ProjectLayout) -> bool:
        handle = self._spinner.start(INSTALLING_LABEL)
        try:
            result = self._installer.install(layout.directory)
        except BaseException:
            handle.fail("Error installing npm packages")
            raise

        if not result.succeeded:
            handle.fail(f"Error installing npm packages: {result.error_message}")
            return False

        handle.succeed(INSTALLED_LABEL)
        click.echo(result.stdout)
        if result.stderr:
            click.secho(f"Error during npm install: {result.stderr}", fg="yellow", err=True)
        return True

    def _print_next_steps(self, spec: FunctionSpec):
        click.secho(f"\nProject for {spec.name} has been created successfully.", fg="green")
        click.secho("\nChange directory to the function folder:\n", fg="blue")
        click.secho(f"  cd {spec.name}", fg="cyan")
        click.secho("\nStart editing the function file:\n", fg="blue")
        click.secho(f"  {self._editor_fn()} {HANDLER_FILE}", fg="cyan")


def _render_files(spec: FunctionSpec, layout: ProjectLayout):
    """Render all three files before anything touches the disk."""
    return [
        (layout.handler_file, render_handler(spec)),
        (layout.manifest_file, to_json(build_manifest(spec.name))),
        (layout.compiler_config_file, to_json(build_compiler_config())),
    ]


def _create_directory(directory) -> bool:
    """Create *directory* in one exclusive mkdir; False if it already exists."""
    try:
        os.makedirs(directory.parent, exist_ok=True)
    except OSError as e:
        raise ProjectCreationError(directory.parent, e) from e
    try:
        os.mkdir(directory)
    except FileExistsError:
        return False
    except OSError as e:
        raise ProjectCreationError(directory, e) from e
    return True


def _write_files(contents):
    for path, text in contents:
        try:
            path.write_text(text, encoding="utf-8")
        except OSError as e:
            raise ProjectCreationError(path, e) from e
