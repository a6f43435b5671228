"""
Interactive prompting for the key command.

The command only talks to a ``Prompter``; the console implementation asks the
operator through rich and offers tab completion where the terminal supports
readline, while ``DefaultsPrompter`` answers every question with its default
so the command can run unattended.
"""

from typing import Callable, List, Optional, Protocol, Sequence

from rich.console import Console
from rich.prompt import Prompt

try:
    import readline
except ImportError:  # not available on Windows
    readline = None


class Prompter(Protocol):
    def ask(self, question: str, default: Optional[str] = None) -> Optional[str]:
        ...

    def ask_with_completion(
        self, question: str, choices: Sequence[str], default: Optional[str] = None
    ) -> Optional[str]:
        ...


def list_completer(choices: Sequence[str]) -> Callable[[str, int], Optional[str]]:
    """
    Build a readline completer for comma separated answers.

    Only the entry after the last comma is completed, so ``search,doc<TAB>``
    offers ``search,documents.add``, ``search,documents.get`` and so on.
    """

    def complete(text: str, state: int) -> Optional[str]:
        head, _, current = text.rpartition(",")
        prefix = f"{head}," if head else ""
        matches = [
            f"{prefix}{choice}" for choice in choices if choice.startswith(current.strip())
        ]
        return matches[state] if state < len(matches) else None

    return complete


class ConsolePrompter:
    """Ask the operator through the terminal"""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def ask(self, question: str, default: Optional[str] = None) -> Optional[str]:
        answer = Prompt.ask(question, console=self.console, default=default)
        return answer if answer != "" else default

    def ask_with_completion(
        self, question: str, choices: Sequence[str], default: Optional[str] = None
    ) -> Optional[str]:
        if readline is None:
            return self.ask(question, default)

        previous_completer = readline.get_completer()
        previous_delims = readline.get_completer_delims()
        readline.set_completer(list_completer(list(choices)))
        # Complete the whole answer so commas stay part of the text
        readline.set_completer_delims(" ")
        readline.parse_and_bind("tab: complete")
        try:
            return self.ask(question, default)
        finally:
            readline.set_completer(previous_completer)
            readline.set_completer_delims(previous_delims)


class DefaultsPrompter:
    """Answer every question with its default, for --no-interaction runs"""

    def __init__(self):
        self.questions: List[str] = []

    def ask(self, question: str, default: Optional[str] = None) -> Optional[str]:
        self.questions.append(question)
        return default

    def ask_with_completion(
        self, question: str, choices: Sequence[str], default: Optional[str] = None
    ) -> Optional[str]:
        return self.ask(question, default)
