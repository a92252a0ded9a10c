"""
Built-in demo grammar for the cmdtree shell.
"""
from .grammar import ArgumentNode, Command, Dispatcher


def get_builtin_commands() -> list[Command]:
    """Get the commands registered by the default shell, in registration order."""
    return [
        Command("console")
            .with_node(ArgumentNode.fixed_text("clear")),
        Command("volume")
            .with_node(ArgumentNode.any_u8()),
        Command("scale")
            .with_node(ArgumentNode.fixed_f32(1.0))
            .with_node(ArgumentNode.any_f32()),
        Command("say")
            .with_node(ArgumentNode.any_text()),
        Command("net")
            .with_node(ArgumentNode.fixed_text("port", ArgumentNode.any_u8()))
            .with_node(ArgumentNode.fixed_text("ping", ArgumentNode.any_text())),
    ]


def build_default_dispatcher() -> Dispatcher:
    """Build a dispatcher with the built-in commands registered."""
    return Dispatcher(get_builtin_commands())
