"""
Rich rendering of candidate lists for cmdtree.
"""
import json
from typing import Optional

from rich.console import Console
from rich.text import Text

from ..constants import DEFAULT_MAX_CANDIDATES
from .completer import is_placeholder


class CandidateRenderer:
    """Prints resolved candidates to a rich Console."""

    def __init__(
        self,
        console: Optional[Console] = None,
        max_candidates: int = DEFAULT_MAX_CANDIDATES,
        show_empty: bool = True,
    ) -> None:
        self._console = console or Console()
        self._max_candidates = max_candidates
        self._show_empty = show_empty

    @staticmethod
    def format_plain(candidates: list[str]) -> str:
        """Format candidates as a quoted list, e.g. ["clear"]."""
        return json.dumps(candidates, ensure_ascii=False)

    def render(self, candidates: list[str]) -> Text:
        """
        Render candidates as styled text, one per line.

        Args:
            candidates: Candidate strings in resolution order

        Returns:
            Rich Text, empty when there is nothing to show
        """
        text = Text()
        if not candidates:
            if self._show_empty:
                text.append("no matches", style="dim italic")
            return text

        shown = candidates[:self._max_candidates]
        for index, candidate in enumerate(shown):
            if index:
                text.append("\n")
            if is_placeholder(candidate):
                text.append(f"<{candidate}>", style="italic cyan")
            else:
                text.append(candidate, style="bold green")

        hidden = len(candidates) - len(shown)
        if hidden > 0:
            text.append(f"\n... {hidden} more", style="dim")
        return text

    def print(self, candidates: list[str], plain: bool = False) -> None:
        """Print candidates, either styled or as a plain quoted list."""
        if plain:
            self._console.print(self.format_plain(candidates), markup=False, highlight=False)
            return

        rendered = self.render(candidates)
        if rendered.plain:
            self._console.print(rendered)
