import logging
import sys
from typing import Callable, Dict, List, Optional, TextIO, Tuple

from .command import ArgumentCountError, Command, CommandError, UnknownCommandError

logger = logging.getLogger(__name__)

# Handlers return the lines to print, or None for no output
Handler = Callable[[Command], Optional[List[str]]]


class StopShell(Exception):
    """Raised by a handler to end the read loop"""


class Shell:
    def __init__(
        self,
        input_stream: TextIO = sys.stdin,
        output: TextIO = sys.stdout,
        errors: TextIO = sys.stderr,
        prompt: str = '',
    ):
        self.input_stream = input_stream
        self.output = output
        self.errors = errors
        self.prompt = prompt
        self.commands: Dict[str, Tuple[int, Handler]] = {}

    def command(self, name: str, arity: int = 0):
        """Decorator for registering command handlers"""
        if arity < 0:
            raise ValueError(f"arity must be >= 0, got {arity}")

        def decorator(handler: Handler):
            self.commands[name] = (arity, handler)
            return handler
        return decorator

    def dispatch(self, command: Command) -> List[str]:
        """Validate a parsed command and hand it to its handler"""
        entry = self.commands.get(command.name)
        if entry is None:
            raise UnknownCommandError(command.name)

        arity, handler = entry
        if len(command.args) != arity:
            raise ArgumentCountError(command.name, arity, len(command.args))

        logger.debug(f"--> {command.name} {' '.join(command.args)}".rstrip())
        result = handler(command)
        return [] if result is None else list(result)

    def execute(self, line: str) -> List[str]:
        """Run one input line and return the lines it prints"""
        command = Command.parse(line)
        if command is None:
            return []
        return self.dispatch(command)

    def run(self) -> int:
        """Read and execute lines until END or end of input.

        Returns the number of commands executed.
        """
        executed = 0
        while True:
            if self.prompt:
                self.output.write(self.prompt)
                self.output.flush()

            line = self.input_stream.readline()
            if not line:
                logger.debug("End of input")
                break

            try:
                lines = self.execute(line)
            except StopShell:
                logger.debug("Session ended")
                break
            except CommandError as e:
                logger.warning(f"Rejected input {line.strip()!r}: {e}")
                print(e.message, file=self.errors)
                continue

            executed += 1
            for out in lines:
                print(out, file=self.output)

        self.output.flush()
        return executed
