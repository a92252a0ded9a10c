"""
Constants and configuration defaults for cmdtree.
"""
from pathlib import Path
from typing import Final

APP_NAME: Final[str] = "cmdtree"
APP_VERSION: Final[str] = "0.1.0"
APP_DESCRIPTION: Final[str] = "Hierarchical command-grammar matcher for interactive shells"

CONFIG_DIR: Final[Path] = Path.home() / ".cmdtree"
CONFIG_FILE: Final[Path] = CONFIG_DIR / "config.json"

ENV_LOG_LEVEL: Final[str] = "CMDTREE_LOG_LEVEL"
ENV_PROMPT: Final[str] = "CMDTREE_PROMPT"

DEFAULT_PROMPT: Final[str] = "> "
DEFAULT_LOG_LEVEL: Final[str] = "WARNING"
DEFAULT_MAX_CANDIDATES: Final[int] = 50

QUIT_COMMAND: Final[str] = "/quit"

# Label prefix for open (Argument) values, e.g. "Any u8"
ANY_LABEL_PREFIX: Final[str] = "Any"
