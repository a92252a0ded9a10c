"""Interactive shell components for cmdtree."""
from .completer import GrammarCompleter, is_placeholder
from .prompt_input import PromptInput, strip_line_ending
from .renderer import CandidateRenderer

__all__ = [
    'GrammarCompleter', 'is_placeholder',
    'PromptInput', 'strip_line_ending',
    'CandidateRenderer',
]
