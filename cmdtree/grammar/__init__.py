"""Command grammar: typed values, argument nodes, commands and dispatch."""
from .values import GrammarError, TypedValue, ValueKind
from .nodes import ArgumentNode, NodeKind
from .command import Command
from .dispatcher import Dispatcher, Outcome, Resolution, split_command_line

__all__ = [
    'GrammarError', 'TypedValue', 'ValueKind',
    'ArgumentNode', 'NodeKind',
    'Command',
    'Dispatcher', 'Outcome', 'Resolution', 'split_command_line',
]
