"""Helpers shared by CLI commands."""

import sys
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from tarjimly.core.languages import Vocabulary, VocabularyError

console = Console()
err_console = Console(stderr=True)


def fail(message: str):
    err_console.print(f"[bold red]✗ {escape(message)}[/bold red]", highlight=False)
    sys.exit(1)


def load_vocabulary(args) -> Vocabulary:
    """--languages wins over TARJIMLY_LANGUAGES."""
    try:
        if args.languages_path:
            return Vocabulary.from_json(Path(args.languages_path))
        return args.settings.vocabulary()
    except VocabularyError as e:
        fail(str(e))
