"""
Revertible Command Pattern - Capability Interface.

Provides:
- ICommand: Minimal operation set every command variant satisfies
- Instruction: Signature of callbacks run on every transition
"""
from abc import ABC, abstractmethod
from typing import Any, Callable

Instruction = Callable[[Any, bool], None]


class ICommand(ABC):
    """
    Uniform view over any revertible command, regardless of payload type.

    Batch helpers in ``revertible.commands.batch`` only rely on this
    interface, so a single list can mix commands with unrelated payloads.

    Example:
        commands: list[ICommand] = [view_cmd.untyped, filter_cmd.untyped]
        switch_to(commands, data=None, target_index=0)
    """

    @property
    @abstractmethod
    def is_applied(self) -> bool:
        """True if the last transition that actually ran was an apply."""
        pass

    @abstractmethod
    def apply(self, data: Any = None, force: bool = False) -> bool:
        """
        Apply the command, firing the apply sink and instructions.

        Args:
            data: Payload passed to the sink and instructions
            force: Fire even if already applied

        Returns:
            True if the apply was executed
        """
        pass

    @abstractmethod
    def revert(self, data: Any = None, force: bool = False) -> bool:
        """
        Revert the command, firing the revert sink and instructions.

        Args:
            data: Payload passed to the sink and instructions
            force: Fire even if not applied

        Returns:
            True if the revert was executed
        """
        pass

    @abstractmethod
    def execute(self, data: Any, applying: bool, force: bool = False) -> bool:
        """Apply when ``applying`` is True, otherwise revert."""
        pass

    @abstractmethod
    def clear_instructions(self) -> None:
        """Remove every registered instruction."""
        pass

    @abstractmethod
    def dispose(self) -> None:
        """Reset to not-applied, drop instructions and sink subscribers."""
        pass
