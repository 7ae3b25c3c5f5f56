"""Click entry point for create-function."""

import sys

import click

from fnscaffold.create_cmd.create_opts import CreateFunctionOpts
from fnscaffold.create_cmd.installer import PackageInstaller
from fnscaffold.create_cmd.materializer import ProjectCreationError, ProjectMaterializer
from fnscaffold.create_cmd.progress import Spinner
from fnscaffold.create_cmd.prompts import collect_function_spec


def create_function(materializer: ProjectMaterializer, prompt_fn=click.prompt):
    """Collect a FunctionSpec interactively and materialize it."""
    spec = collect_function_spec(prompt_fn)
    try:
        return materializer.materialize(spec)
    except ProjectCreationError as e:
        click.secho(f"Error: Could not create project: {e}", fg="red", err=True)
        sys.exit(1)


@click.command("create-function")
def main():
    """Scaffold a new TypeScript cloud function project in the current directory."""
    opts = CreateFunctionOpts()
    installer = PackageInstaller(opts.install_command, timeout=opts.install_timeout)
    materializer = ProjectMaterializer(installer, Spinner(), opts)
    create_function(materializer)
