"""
Batch operations over ordered collections of commands.

Every command in the collection gets its attempt; a command reporting
False never stops the pass. The collection itself is never modified.
"""
from typing import Any, Sequence

from loguru import logger

from .base import ICommand


def apply_all(commands: Sequence[ICommand], data: Any = None, force: bool = False) -> None:
    """Apply every command, in collection order."""
    for cmd in commands:
        cmd.apply(data, force)


def revert_all(commands: Sequence[ICommand], data: Any = None, force: bool = False) -> None:
    """Revert every command, in collection order."""
    for cmd in commands:
        cmd.revert(data, force)


def switch_to(commands: Sequence[ICommand], data: Any, target_index: int, force: bool = False) -> None:
    """
    Revert all commands except ``target_index``, then apply that one.

    Others are reverted first so two commands never hold an exclusive
    resource at the same time. An out-of-range index (negative included)
    only reverts, leaving nothing selected.

    Args:
        commands: Commands to switch between
        data: Payload passed to every revert and the apply
        target_index: Position of the command to apply
        force: Fire even when a command is already in the target state
    """
    for index, cmd in enumerate(commands):
        if index == target_index:
            continue
        cmd.revert(data, force)

    if 0 <= target_index < len(commands):
        commands[target_index].apply(data, force)
    else:
        logger.debug(f"Switch index {target_index} outside 0..{len(commands) - 1}, nothing applied")
