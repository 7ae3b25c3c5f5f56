"""Options dataclass for the create-function command."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from fnscaffold.create_cmd.installer import DEFAULT_INSTALL_COMMAND, DEFAULT_INSTALL_TIMEOUT


@dataclass
class CreateFunctionOpts:
    """All options for creating a function project."""

    base_dir: Path = field(default_factory=Path.cwd)
    install_command: List[str] = field(default_factory=lambda: list(DEFAULT_INSTALL_COMMAND))
    install_timeout: float = DEFAULT_INSTALL_TIMEOUT
