from dataclasses import dataclass, field


class CommandError(Exception):
    """Input line that cannot be forwarded to the engine."""

    message = "Invalid input"


class UnknownCommandError(CommandError):
    message = "Invalid input: Command not processed"

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown command {name!r}")


class ArgumentCountError(CommandError):
    message = "Invalid input: Wrong number of arguments"

    def __init__(self, name: str, expected: int, actual: int):
        self.name = name
        self.expected = expected
        self.actual = actual
        super().__init__(f"{name} takes {expected} argument(s), got {actual}")


@dataclass
class Command:
    name: str
    args: list[str] = field(default_factory=list)

    @classmethod
    def parse(cls, line: str) -> 'Command | None':
        """Split a line into a command name and its arguments, None if blank"""
        tokens = line.split()
        if not tokens:
            return None
        return cls(name=tokens[0], args=tokens[1:])

    def arg(self, position: int) -> str:
        if position < 0 or position >= len(self.args):
            raise IndexError(f"{self.name} has no argument at position {position}")
        return self.args[position]
