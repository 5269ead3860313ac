from shell.command import ArgumentCountError, Command, CommandError, UnknownCommandError
from shell.shell import Shell, StopShell

__all__ = ["ArgumentCountError", "Command", "CommandError", "Shell", "StopShell", "UnknownCommandError"]
