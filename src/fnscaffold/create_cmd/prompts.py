"""Interactive collection of the function name and kind."""

import click

from fnscaffold.create_cmd.function_spec import FunctionKind, FunctionSpec, validate_function_name

NAME_PROMPT = "Enter the function name"
KIND_PROMPT = "Choose the function type"


def _function_name(value: str) -> str:
    """Click value processor: raising UsageError makes click.prompt ask again."""
    error = validate_function_name(value)
    if error:
        raise click.UsageError(error)
    return value


def collect_name(prompt_fn=click.prompt) -> str:
    # default="" lets empty input reach the validator instead of being re-asked silently
    return prompt_fn(NAME_PROMPT, default="", show_default=False, value_proc=_function_name)


def collect_kind(prompt_fn=click.prompt) -> FunctionKind:
    labels = FunctionKind.labels()
    label = prompt_fn(KIND_PROMPT, type=click.Choice(labels), default=labels[0])
    return FunctionKind.from_label(label)


def collect_function_spec(prompt_fn=click.prompt) -> FunctionSpec:
    """Ask for the name, then the kind, re-prompting until both are valid."""
    name = collect_name(prompt_fn)
    kind = collect_kind(prompt_fn)
    return FunctionSpec(name=name, kind=kind)
