"""
Named commands: the roots of the argument grammar.
"""
from dataclasses import dataclass, field, replace

from .nodes import ArgumentNode
from .values import GrammarError


@dataclass(frozen=True)
class Command:
    """
    A named command holding an ordered tuple of top-level argument nodes.

    Commands are built with `with_node`, which returns a new Command and
    leaves the original untouched:

        command = Command("console").with_node(ArgumentNode.fixed_text("clear"))
    """
    name: str
    nodes: tuple[ArgumentNode, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            raise GrammarError("Command name must be a non-empty string")
        if " " in self.name:
            raise GrammarError(f"Command name must not contain spaces: {self.name!r}")

        nodes = tuple(self.nodes)
        for node in nodes:
            if not isinstance(node, ArgumentNode):
                raise GrammarError(f"Command node must be an ArgumentNode, got {type(node).__name__}")
        object.__setattr__(self, "nodes", nodes)

    def with_node(self, node: ArgumentNode) -> "Command":
        """Return a copy of this command with `node` appended."""
        return replace(self, nodes=self.nodes + (node,))

    def resolve(self, remaining_input: str) -> list[str]:
        """
        Match the input left after the command name against every root node.

        Every root node is tried, in order, regardless of the others.
        """
        responses: list[str] = []
        for node in self.nodes:
            responses.extend(node.match_input(remaining_input))
        return responses

    def __repr__(self) -> str:
        return f"<Command {self.name} nodes={len(self.nodes)}>"
