"""
Argument nodes for the command grammar.

An ArgumentNode is either a Fixed literal the user must type (prefix
matched) or an open Argument slot accepting any value that parses as the
node's kind. Nodes form a tree: each node owns an ordered tuple of children
that are tried, with the same remaining input, after the node itself matches.
"""
import logging
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Optional

from .values import GrammarError, TypedValue, ValueKind


logger = logging.getLogger(__name__)


class NodeKind(Enum):
    """Whether a node is a literal or an open slot."""
    FIXED = "fixed"
    ARGUMENT = "argument"


@dataclass(frozen=True)
class ArgumentNode:
    """One node in a command's argument tree.

    Fixed nodes always carry a concrete value and Argument nodes never do;
    both rules are enforced on construction.

    Attributes:
        kind: NodeKind.FIXED or NodeKind.ARGUMENT.
        value: The TypedValue held by this node.
        children: Ordered child nodes.

    Example:
        node = ArgumentNode.fixed_text("port", ArgumentNode.any_u8())
        node.match_input("")     # ['port', 'Any u8']
    """
    kind: NodeKind
    value: TypedValue
    children: tuple["ArgumentNode", ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not isinstance(self.kind, NodeKind):
            raise GrammarError(f"Unknown node kind: {self.kind!r}")
        if not isinstance(self.value, TypedValue):
            raise GrammarError(f"Node value must be a TypedValue, got {type(self.value).__name__}")
        if self.kind is NodeKind.FIXED and self.value.is_any:
            raise GrammarError("Fixed node requires a concrete value")
        if self.kind is NodeKind.ARGUMENT and not self.value.is_any:
            raise GrammarError("Argument node must not hold a concrete value")

        children = tuple(self.children)
        for child in children:
            if not isinstance(child, ArgumentNode):
                raise GrammarError(f"Child must be an ArgumentNode, got {type(child).__name__}")
        object.__setattr__(self, "children", children)

    @classmethod
    def fixed(cls, kind: ValueKind, value: Any, *children: "ArgumentNode") -> "ArgumentNode":
        """Create a Fixed literal node of the given kind."""
        if value is None:
            raise GrammarError("Fixed node requires a concrete value")
        return cls(NodeKind.FIXED, TypedValue(kind, value), children)

    @classmethod
    def argument(cls, kind: ValueKind, *children: "ArgumentNode") -> "ArgumentNode":
        """Create an open Argument node of the given kind."""
        return cls(NodeKind.ARGUMENT, TypedValue(kind), children)

    @classmethod
    def fixed_u8(cls, value: int, *children: "ArgumentNode") -> "ArgumentNode":
        return cls.fixed(ValueKind.U8, value, *children)

    @classmethod
    def fixed_f32(cls, value: float, *children: "ArgumentNode") -> "ArgumentNode":
        return cls.fixed(ValueKind.F32, value, *children)

    @classmethod
    def fixed_text(cls, value: str, *children: "ArgumentNode") -> "ArgumentNode":
        return cls.fixed(ValueKind.TEXT, value, *children)

    @classmethod
    def any_u8(cls, *children: "ArgumentNode") -> "ArgumentNode":
        return cls.argument(ValueKind.U8, *children)

    @classmethod
    def any_f32(cls, *children: "ArgumentNode") -> "ArgumentNode":
        return cls.argument(ValueKind.F32, *children)

    @classmethod
    def any_text(cls, *children: "ArgumentNode") -> "ArgumentNode":
        return cls.argument(ValueKind.TEXT, *children)

    def with_child(self, node: "ArgumentNode") -> "ArgumentNode":
        """Return a copy of this node with `node` appended to its children."""
        return replace(self, children=self.children + (node,))

    def representative_string(self) -> str:
        """Canonical label of this node's value."""
        return self.value.representative_string()

    def match_input(self, remaining_input: str) -> list[str]:
        """
        Match remaining input against the subtree rooted at this node.

        Args:
            remaining_input: Input left after the command name

        Returns:
            Candidate strings in tree order; empty when the branch is rejected
        """
        if not remaining_input and not self.children:
            return [self.representative_string()]

        own = self._match_own(remaining_input)
        if own is None:
            return []

        responses = [own]
        for child in self.children:
            responses.extend(child.match_input(remaining_input))
        return responses

    def _match_own(self, remaining_input: str) -> Optional[str]:
        """Candidate produced by this node alone, or None on rejection."""
        if self.kind is NodeKind.FIXED:
            stringed = self.representative_string()
            if stringed.startswith(remaining_input):
                return stringed
            return None

        if self.value.kind.parse(remaining_input) is None:
            logger.debug(f"Rejected {remaining_input!r} as {self.value.kind.value}")
            return None
        return self.value.kind.label

    def __repr__(self) -> str:
        return f"<ArgumentNode {self.kind.value} {self.representative_string()!r} children={len(self.children)}>"
