"""
prompt_toolkit completer backed by a grammar Dispatcher.
"""
from typing import Iterable

from prompt_toolkit.completion import CompleteEvent, Completer, Completion
from prompt_toolkit.document import Document

from ..grammar import Dispatcher, Outcome, ValueKind


PLACEHOLDER_LABELS = frozenset(kind.label for kind in ValueKind)


def is_placeholder(candidate: str) -> bool:
    """Check if a candidate is an 'Any <Kind>' label rather than insertable text."""
    return candidate in PLACEHOLDER_LABELS


class GrammarCompleter(Completer):
    """
    Completer that resolves the text before the cursor through a Dispatcher.

    - Partial command names complete to every registered name with that prefix.
    - After the command name and a space, concrete candidates replace the
      argument text; 'Any <Kind>' labels are shown as hints only.
    """

    def __init__(self, dispatcher: Dispatcher) -> None:
        self._dispatcher = dispatcher

    def get_completions(self, document: Document, complete_event: CompleteEvent) -> Iterable[Completion]:
        """Get completions based on current input."""
        text = document.text_before_cursor
        resolution = self._dispatcher.resolve_detailed(text)

        if resolution.outcome == Outcome.NAME_COMPLETION:
            for name in resolution.candidates:
                yield Completion(
                    name,
                    start_position=-len(resolution.head),
                    display_meta='command',
                )
            return

        if ' ' not in text:
            # Name typed in full; offer it back so the menu confirms the match
            yield Completion(
                resolution.command.name,
                start_position=-len(resolution.head),
                display_meta='command',
            )
            return

        tail = resolution.tail
        for candidate in resolution.candidates:
            if is_placeholder(candidate):
                yield Completion(
                    tail,
                    start_position=-len(tail),
                    display=candidate,
                    display_meta='argument',
                )
            else:
                yield Completion(
                    candidate,
                    start_position=-len(tail),
                    display_meta='literal',
                )
