"""Reusable prompt files: read the `chat.promptFiles` setting and resolve its source folders."""

__version__ = "0.1.0"

from promptfiles.prompts_config import (
    CONFIG_KEY,
    DEFAULT_SOURCE_FOLDER,
    ConfigurationService,
    PromptsConfig,
    as_boolean,
    enabled,
    get_value,
    prompt_source_folders,
    read_setting,
)

__all__ = [
    "CONFIG_KEY",
    "DEFAULT_SOURCE_FOLDER",
    "ConfigurationService",
    "PromptsConfig",
    "__version__",
    "as_boolean",
    "enabled",
    "get_value",
    "prompt_source_folders",
    "read_setting",
]
