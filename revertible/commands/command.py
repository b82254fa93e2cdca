"""
Revertible Command - apply/revert state machine.

One generic implementation serves both typed and untyped usage:

    # Untyped: payload is whatever the caller passes
    cmd = Command(name="show-grid")

    # Typed: payload checked when it arrives through the untyped view
    cmd = Command[Tab](data_type=Tab, name="open-tab")
    cmd.untyped.apply("not a tab")  # False, nothing fires
"""
import inspect
from typing import Any, Callable, Generic, Optional, Sequence, Tuple, TypeVar

from loguru import logger

from .base import ICommand, Instruction
from .batch import apply_all, revert_all, switch_to
from ..config import CommandSettings, get_command_settings
from ..events import NotificationSink, Signal

T = TypeVar('T')


class Command(ICommand, Generic[T]):
    """
    A unit of work with two observable states, applied and reverted.

    Each executed transition sets ``is_applied``, emits the matching sink
    with the payload and then runs every instruction with
    ``(payload, applying)``. Instructions run from a snapshot of the list,
    so handlers added or removed during dispatch only take effect on the
    next transition.

    Example:
        cmd = Command(name="dark-mode")
        cmd.on_apply.connect(lambda data: theme.set("dark"))
        cmd.add_instruction(lambda data, applying: toolbar.setChecked(applying))

        cmd.apply()          # True
        cmd.apply()          # False, already applied
        cmd.apply(force=True)  # True, fires again
        cmd.revert()         # True
    """

    def __init__(self,
                 on_apply: Optional[NotificationSink] = None,
                 on_revert: Optional[NotificationSink] = None,
                 *,
                 data_type: Optional[Any] = None,
                 converter: Optional[Callable[[Any], T]] = None,
                 allow_none: bool = False,
                 name: Optional[str] = None,
                 settings: Optional[CommandSettings] = None):
        """
        Initialize command.

        Args:
            on_apply: Sink emitted on apply (new Signal if omitted)
            on_revert: Sink emitted on revert (new Signal if omitted)
            data_type: Class or tuple of classes accepted by the untyped view
            converter: Callable turning an opaque payload into T; raising
                any exception marks a mismatch
            allow_none: Let the untyped view pass None through a data_type check
            name: Label for logs (default: class name)
            settings: Fixed CommandSettings (default: read from the active config)
        """
        self.name = name or self.__class__.__name__
        self.on_apply = on_apply if on_apply is not None else Signal(f"{self.name}.apply")
        self.on_revert = on_revert if on_revert is not None else Signal(f"{self.name}.revert")
        self._settings = settings

        self._data_type = data_type
        self._converter = converter
        self._allow_none = allow_none
        self._instructions: list = []
        self._is_applied = False
        self._view = CommandView(self)

    def __repr__(self) -> str:
        state = "applied" if self._is_applied else "reverted"
        return f"<{self.__class__.__name__} {self.name!r} {state} instructions={len(self._instructions)}>"

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.dispose()
        return False

    @property
    def settings(self) -> CommandSettings:
        """Settings given at construction, else the active config's ``commands`` section."""
        if self._settings is not None:
            return self._settings
        return get_command_settings()

    @property
    def is_applied(self) -> bool:
        return self._is_applied

    @property
    def untyped(self) -> 'CommandView':
        """Payload-checking view for heterogeneous collections."""
        return self._view

    @property
    def instructions(self) -> Tuple[Instruction, ...]:
        return tuple(self._instructions)

    # --- Batch helpers ---

    @staticmethod
    def apply_commands(commands: Sequence[ICommand], data: Any = None, force: bool = False) -> None:
        """Apply every command in order. See ``batch.apply_all``."""
        apply_all(commands, data, force)

    @staticmethod
    def revert_commands(commands: Sequence[ICommand], data: Any = None, force: bool = False) -> None:
        """Revert every command in order. See ``batch.revert_all``."""
        revert_all(commands, data, force)

    @staticmethod
    def switch_to_command(commands: Sequence[ICommand], data: Any, index: int, force: bool = False) -> None:
        """Revert all but ``index``, then apply ``index`` if valid. See ``batch.switch_to``."""
        switch_to(commands, data, index, force)

    # --- Instructions ---

    def _index_of(self, instruction: Instruction) -> int:
        # Identity match; bound methods compare equal when __self__ and __func__ match
        for index, registered in enumerate(self._instructions):
            if registered is instruction:
                return index
            if inspect.ismethod(instruction) and inspect.ismethod(registered) and registered == instruction:
                return index
        return -1

    def has_instruction(self, instruction: Instruction) -> bool:
        return self._index_of(instruction) >= 0

    def add_instruction(self, instruction: Instruction) -> bool:
        """
        Add an instruction, run on apply or revert after the sink fires.

        Returns:
            False if the instruction was already registered
        """
        if self.has_instruction(instruction):
            return False
        self._instructions.append(instruction)
        return True

    def remove_instruction(self, instruction: Instruction) -> bool:
        """Remove an instruction added through add_instruction."""
        index = self._index_of(instruction)
        if index < 0:
            return False
        del self._instructions[index]
        return True

    def clear_instructions(self) -> None:
        self._instructions.clear()

    # --- Transitions ---

    def apply(self, data: Optional[T] = None, force: bool = False) -> bool:
        """
        Apply the command: emit ``on_apply`` then run the instructions.

        Only runs when not applied yet, unless ``force`` is set.

        Returns:
            True if the apply was executed
        """
        if self._is_applied and not force:
            logger.debug(f"Command '{self.name}' already applied, skipping")
            return False

        self._is_applied = True
        if self.settings.trace_transitions:
            logger.debug(f"Applying command '{self.name}' (force={force})")
        if self.on_apply is not None:
            self.on_apply.emit(data)
        self._perform_instructions(data, True)
        return True

    def revert(self, data: Optional[T] = None, force: bool = False) -> bool:
        """
        Revert the command: emit ``on_revert`` then run the instructions.

        Only runs when applied, unless ``force`` is set.

        Returns:
            True if the revert was executed
        """
        if not self._is_applied and not force:
            logger.debug(f"Command '{self.name}' not applied, skipping revert")
            return False

        self._is_applied = False
        if self.settings.trace_transitions:
            logger.debug(f"Reverting command '{self.name}' (force={force})")
        if self.on_revert is not None:
            self.on_revert.emit(data)
        self._perform_instructions(data, False)
        return True

    def execute(self, data: Optional[T], applying: bool, force: bool = False) -> bool:
        if applying:
            return self.apply(data, force)
        return self.revert(data, force)

    def _perform_instructions(self, data: Optional[T], applying: bool) -> None:
        for instruction in tuple(self._instructions):
            try:
                instruction(data, applying)
            except Exception as e:
                logger.error(f"Instruction {instruction!r} failed on command '{self.name}': {e}")
                raise

    def dispose(self) -> None:
        """
        Hard reset: not applied, no instructions, no sink subscribers.

        Nothing fires. Safe to call repeatedly.
        """
        self._is_applied = False
        self.clear_instructions()
        if self.on_apply is not None:
            self.on_apply.disconnect_all()
        if self.on_revert is not None:
            self.on_revert.disconnect_all()

    # --- Payload conversion ---

    def coerce(self, data: Any) -> T:
        """
        Convert an opaque payload to this command's payload type.

        Raises:
            TypeError: Payload is not an instance of ``data_type``
            Exception: Whatever the converter raises
        """
        if self._converter is not None:
            return self._converter(data)
        if self._data_type is None:
            return data
        if data is None:
            if self._allow_none:
                return data
            raise TypeError(f"Command '{self.name}' does not accept None")
        if not isinstance(data, self._data_type):
            raise TypeError(
                f"Command '{self.name}' expects {self._data_type!r}, got {type(data).__name__}"
            )
        return data


class CommandView(ICommand):
    """
    Non-parametric view of a Command.

    Converts the payload through ``Command.coerce`` before delegating. A
    payload that fails conversion is reported as ``False`` without touching
    the command.
    """

    def __init__(self, command: Command):
        self._command = command

    def __repr__(self) -> str:
        return f"<CommandView of {self._command!r}>"

    @property
    def command(self) -> Command:
        return self._command

    @property
    def is_applied(self) -> bool:
        return self._command.is_applied

    def _convert(self, data: Any, operation: str) -> Tuple[bool, Any]:
        try:
            return True, self._command.coerce(data)
        except Exception as e:
            logger.debug(f"Rejected {operation} payload for '{self._command.name}': {e}")
            return False, None

    def apply(self, data: Any = None, force: bool = False) -> bool:
        ok, payload = self._convert(data, "apply")
        return ok and self._command.apply(payload, force)

    def revert(self, data: Any = None, force: bool = False) -> bool:
        ok, payload = self._convert(data, "revert")
        return ok and self._command.revert(payload, force)

    def execute(self, data: Any, applying: bool, force: bool = False) -> bool:
        ok, payload = self._convert(data, "execute")
        return ok and self._command.execute(payload, applying, force)

    def clear_instructions(self) -> None:
        self._command.clear_instructions()

    def dispose(self) -> None:
        self._command.dispose()
