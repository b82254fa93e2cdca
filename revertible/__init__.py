"""
Revertible - apply/revert commands with notifications and batch switching.

Usage:
    from revertible import Command, switch_to

    tabs = [Command(name=f"tab-{i}") for i in range(3)]
    switch_to(tabs, data=None, target_index=1)   # only tab-1 applied
    switch_to(tabs, data=None, target_index=-1)  # nothing applied
"""
from .events import Signal, NotificationSink
from .config import (
    ConfigManager,
    AppConfig,
    CommandSettings,
    LoggingSettings,
    configure,
    get_config,
    set_config,
    get_command_settings,
)
from .logging import setup_logging
from .commands import (
    ICommand,
    Instruction,
    Command,
    CommandView,
    apply_all,
    revert_all,
    switch_to,
)

__version__ = "0.1.0"

__all__ = [
    # Events
    "Signal",
    "NotificationSink",

    # Configuration
    "ConfigManager",
    "AppConfig",
    "CommandSettings",
    "LoggingSettings",
    "configure",
    "get_config",
    "set_config",
    "get_command_settings",
    "setup_logging",

    # Commands
    "ICommand",
    "Instruction",
    "Command",
    "CommandView",
    "apply_all",
    "revert_all",
    "switch_to",
]
