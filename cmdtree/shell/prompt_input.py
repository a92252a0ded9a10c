"""
Interactive input handler using prompt_toolkit for cmdtree.
Provides real-time grammar completion with a dropdown menu.
"""
from typing import Optional

from prompt_toolkit import PromptSession
from prompt_toolkit.formatted_text import HTML
from prompt_toolkit.history import DummyHistory, InMemoryHistory
from prompt_toolkit.styles import Style

from ..config import ShellConfig
from ..constants import QUIT_COMMAND
from ..grammar import Dispatcher
from .completer import GrammarCompleter


PROMPT_STYLE = Style.from_dict({
    'prompt': '#00ff00',
    'bottom-toolbar': 'bg:#1a1a1a #666666',
    'completion-menu.completion': 'bg:#262626 #ffffff',
    'completion-menu.completion.current': 'bg:#00aaaa #000000 bold',
    'completion-menu.meta.completion': 'bg:#262626 #666666',
    'completion-menu.meta.completion.current': 'bg:#00aaaa #000000',
})


def strip_line_ending(line: str) -> str:
    """Remove trailing carriage return / newline characters from a line."""
    return line.rstrip('\r\n')


def get_status_bar(command_count: int) -> str:
    """Build the bottom toolbar markup."""
    return (
        f'<b>{command_count}</b> commands  '
        f'Tab: complete  {QUIT_COMMAND}: exit'
    )


class PromptInput:
    """
    Interactive input handler with prompt_toolkit.

    Features:
    - Dropdown completion driven by the command grammar
    - Command history (in memory)
    - Ctrl-D quits, Ctrl-C discards the current line
    """

    def __init__(self, dispatcher: Dispatcher, config: Optional[ShellConfig] = None) -> None:
        """
        Initialize the PromptInput.

        Args:
            dispatcher: Dispatcher used for completion
            config: Shell configuration (defaults used when omitted)
        """
        self._dispatcher = dispatcher
        self._config = config or ShellConfig()
        self._completer = GrammarCompleter(dispatcher)
        self._history = InMemoryHistory() if self._config.history else DummyHistory()
        self._session: Optional[PromptSession] = None

    def _get_toolbar(self) -> HTML:
        """Get bottom toolbar with status info."""
        return HTML(get_status_bar(len(self._dispatcher)))

    def _create_session(self) -> PromptSession:
        """Create a new prompt session."""
        return PromptSession(
            completer=self._completer,
            complete_while_typing=self._config.complete_while_typing,
            history=self._history,
            style=PROMPT_STYLE,
            bottom_toolbar=self._get_toolbar,
            mouse_support=False,
            reserve_space_for_menu=8,
        )

    def get_input(self, prompt: Optional[str] = None) -> str:
        """
        Read one line with interactive completion.

        Args:
            prompt: Prompt string to display (defaults to the configured prompt)

        Returns:
            The line without its line ending; QUIT_COMMAND on EOF, '' on Ctrl-C
        """
        if self._session is None:
            self._session = self._create_session()

        try:
            result = self._session.prompt(prompt if prompt is not None else self._config.prompt)
        except EOFError:
            return QUIT_COMMAND
        except KeyboardInterrupt:
            return ''
        return strip_line_ending(result)
