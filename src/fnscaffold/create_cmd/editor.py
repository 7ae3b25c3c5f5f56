"""Pick the editor command suggested for opening the generated handler."""

import os
import shutil


def suggest_editor() -> str:
    """Detection order: code, $VISUAL, $EDITOR, vi."""
    if shutil.which("code"):
        return "code"
    visual = os.environ.get("VISUAL")
    if visual:
        return visual
    editor = os.environ.get("EDITOR")
    if editor:
        return editor
    return "vi"
