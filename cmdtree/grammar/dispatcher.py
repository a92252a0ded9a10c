"""
Command dispatcher for cmdtree.

Resolves a raw input line either by delegating the text after the command
name to an exactly matching command, or by offering the names of every
command that starts with what has been typed so far.
"""
import logging
import string
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Optional

from .command import Command


logger = logging.getLogger(__name__)

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


class Outcome(Enum):
    """How a single dispatcher call was resolved."""
    DELEGATED = "delegated"
    NAME_COMPLETION = "name_completion"


@dataclass
class Resolution:
    """Result of resolving one input line."""
    outcome: Outcome
    head: str
    tail: str
    candidates: list[str] = field(default_factory=list)
    command: Optional[Command] = None

    @property
    def is_delegated(self) -> bool:
        """Check if the line was handed to a command's argument tree."""
        return self.outcome == Outcome.DELEGATED

    @property
    def is_empty(self) -> bool:
        """Check if nothing matched."""
        return not self.candidates


def split_command_line(raw_input: str) -> tuple[str, str]:
    """
    Split a line at its first space.

    Args:
        raw_input: Full input line

    Returns:
        Tuple of (head, tail); tail is empty when there is no space
    """
    head, _, tail = raw_input.partition(" ")
    return head, tail


def names_equal(left: str, right: str) -> bool:
    """Compare two command names with ASCII-only case folding."""
    return left.translate(_ASCII_LOWER) == right.translate(_ASCII_LOWER)


class Dispatcher:
    """
    Ordered registry of commands.

    Registration order decides both which command wins an exact name match
    and the order of name-completion candidates. Build it once at startup;
    queries never modify it.
    """

    def __init__(self, commands: Optional[Iterable[Command]] = None) -> None:
        self._commands: list[Command] = []
        for command in commands or ():
            self.register(command)

    def register(self, command: Command) -> None:
        """
        Register a command.

        Duplicate names are allowed; exact dispatch picks the first one.

        Args:
            command: Command to append
        """
        if not isinstance(command, Command):
            raise TypeError(f"Expected a Command, got {type(command).__name__}")
        self._commands.append(command)
        logger.debug(f"Registered command: {command.name}")

    @property
    def commands(self) -> tuple[Command, ...]:
        """Registered commands in registration order."""
        return tuple(self._commands)

    def lookup(self, name: str) -> Optional[Command]:
        """Get the first command whose name matches exactly, ignoring ASCII case."""
        for command in self._commands:
            if names_equal(command.name, name):
                return command
        return None

    def resolve_detailed(self, raw_input: str) -> Resolution:
        """
        Resolve an input line, reporting how it was resolved.

        Args:
            raw_input: Full input line without line ending

        Returns:
            Resolution with outcome and candidates
        """
        head, tail = split_command_line(raw_input)
        completions: list[str] = []

        for command in self._commands:
            if names_equal(command.name, head):
                logger.debug(f"Dispatching {tail!r} to command {command.name}")
                return Resolution(
                    outcome=Outcome.DELEGATED,
                    head=head,
                    tail=tail,
                    candidates=command.resolve(tail),
                    command=command,
                )
            if command.name.startswith(head):
                completions.append(command.name)

        logger.debug(f"No command named {head!r}, {len(completions)} name completion(s)")
        return Resolution(
            outcome=Outcome.NAME_COMPLETION,
            head=head,
            tail=tail,
            candidates=completions,
        )

    def resolve(self, raw_input: str) -> list[str]:
        """Resolve an input line to an ordered list of candidate strings."""
        return self.resolve_detailed(raw_input).candidates

    def __len__(self) -> int:
        return len(self._commands)

    def __repr__(self) -> str:
        return f"<Dispatcher commands={len(self._commands)}>"
