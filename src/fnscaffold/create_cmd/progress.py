"""Terminal spinner shown while the installer runs."""

from rich.console import Console
from rich.text import Text

SUCCEED_SYMBOL = "✔"
FAIL_SYMBOL = "✖"


class SpinnerHandle:
    """A running spinner; stop it with succeed() or fail()."""

    def __init__(self, console: Console, status):
        self._console = console
        self._status = status

    def _finish(self, symbol: str, style: str, label: str):
        self._status.stop()
        self._console.print(Text.assemble((symbol, style), " ", label))

    def succeed(self, label: str):
        self._finish(SUCCEED_SYMBOL, "bold green", label)

    def fail(self, label: str):
        self._finish(FAIL_SYMBOL, "bold red", label)


class Spinner:
    """Starts rich status spinners on a console."""

    def __init__(self, console: Console | None = None):
        self.console = console or Console()

    def start(self, label: str) -> SpinnerHandle:
        status = self.console.status(label)
        status.start()
        return SpinnerHandle(self.console, status)
