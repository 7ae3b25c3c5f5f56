"""Run the package installer inside a freshly generated project."""

import subprocess
from dataclasses import dataclass
from typing import List, Optional

DEFAULT_INSTALL_COMMAND = ["npm", "install"]
DEFAULT_INSTALL_TIMEOUT = 600


@dataclass
class InstallResult:
    """Outcome of one installer run."""
    returncode: Optional[int]
    stdout: str = ""
    stderr: str = ""
    error_message: Optional[str] = None
    timed_out: bool = False

    @property
    def succeeded(self) -> bool:
        return self.error_message is None and self.returncode == 0


def _failure_message(cmd: List[str], returncode: int, stderr: str) -> str:
    message = f"Command failed: {' '.join(cmd)} (exit status {returncode})"
    detail = stderr.strip()
    if detail:
        message += f"\n{detail}"
    return message


class PackageInstaller:
    """Runs the installer command as a child process and captures its output.

    A non-zero exit, a spawn error, or exceeding the timeout counts as failure.
    Output on stderr alone never does.
    """

    def __init__(self, command: Optional[List[str]] = None, timeout: float = DEFAULT_INSTALL_TIMEOUT):
        self.command = list(command or DEFAULT_INSTALL_COMMAND)
        self.timeout = timeout

    def install(self, cwd) -> InstallResult:
        try:
            result = subprocess.run(
                self.command,
                cwd=str(cwd),
                stdin=subprocess.DEVNULL,
                capture_output=True,
                encoding="utf-8",
                errors="replace",
                timeout=self.timeout,
            )
        except subprocess.TimeoutExpired as e:
            return InstallResult(
                returncode=None,
                stdout=_as_text(e.stdout),
                stderr=_as_text(e.stderr),
                error_message=f"{' '.join(self.command)} timed out after {self.timeout:g} seconds",
                timed_out=True,
            )
        except OSError as e:
            return InstallResult(returncode=None, error_message=str(e))

        if result.returncode != 0:
            return InstallResult(
                returncode=result.returncode,
                stdout=result.stdout,
                stderr=result.stderr,
                error_message=_failure_message(self.command, result.returncode, result.stderr),
            )
        return InstallResult(returncode=0, stdout=result.stdout, stderr=result.stderr)


def _as_text(output) -> str:
    """TimeoutExpired may carry undecoded bytes even when an encoding was requested."""
    if output is None:
        return ""
    if isinstance(output, bytes):
        return output.decode("utf-8", errors="replace")
    return output
