"""
cmdtree - A hierarchical command-grammar matcher for interactive shells.
"""
from .constants import APP_NAME, APP_VERSION, APP_DESCRIPTION
from .grammar import (
    ArgumentNode,
    Command,
    Dispatcher,
    GrammarError,
    NodeKind,
    Outcome,
    Resolution,
    TypedValue,
    ValueKind,
)

__version__ = APP_VERSION
__all__ = [
    'APP_NAME', 'APP_VERSION', 'APP_DESCRIPTION',
    'ArgumentNode', 'Command', 'Dispatcher', 'GrammarError',
    'NodeKind', 'Outcome', 'Resolution', 'TypedValue', 'ValueKind',
]
