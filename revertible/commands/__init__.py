"""
Revertible Command System.

Provides:
- ICommand: Capability interface shared by every command variant
- Command: Generic apply/revert state machine with instructions
- CommandView: Payload-checking untyped view of a Command
- apply_all / revert_all / switch_to: Batch operations
"""
from .base import ICommand, Instruction
from .batch import apply_all, revert_all, switch_to
from .command import Command, CommandView

__all__ = [
    # Interfaces
    "ICommand",
    "Instruction",
    # Commands
    "Command",
    "CommandView",
    # Batch operations
    "apply_all",
    "revert_all",
    "switch_to",
]
