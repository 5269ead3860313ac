import logging
import os
import sys

from shell.command import Command
from shell.shell import Shell, StopShell
from simpledb import Engine
from simpledb.models.outcome import CommitOutcome, RollbackOutcome, UnsetOutcome

logging.basicConfig(
    level=os.environ.get("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger()

COMMIT_MESSAGES = {
    CommitOutcome.NO_TRANSACTION: "NO TRANSACTION",
    CommitOutcome.NOTHING_TO_COMMIT: "NOTHING TO COMMIT, CLOSING TRANSACTION",
}

ROLLBACK_MESSAGES = {
    RollbackOutcome.NO_TRANSACTION: "NO TRANSACTION",
    RollbackOutcome.NOTHING_TO_ROLLBACK: "NOTHING TO ROLLBACK TO, CLOSING TRANSACTION",
}


def main() -> int:
    shell = Shell(prompt=os.environ.get("SIMPLEDB_PROMPT", ""))
    engine = Engine()
    register_commands(shell, engine)
    logger.debug(f"Registered commands: {sorted(shell.commands)}")
    executed = shell.run()
    logger.debug(f"Executed {executed} command(s)")
    return 0


def register_commands(shell: Shell, engine: Engine):

    @shell.command('SET', 2)
    def set_value(command: Command):
        engine.set(command.arg(0), command.arg(1))

    @shell.command('GET', 1)
    def get_value(command: Command):
        value = engine.get(command.arg(0))
        return ["NULL" if value is None else value]

    @shell.command('UNSET', 1)
    def unset_value(command: Command):
        key = command.arg(0)
        if engine.unset(key) is UnsetOutcome.NOT_ASSIGNED:
            return [f"{key} IS NOT ASSIGNED"]

    @shell.command('NUMEQUALTO', 1)
    def num_equal_to(command: Command):
        return [str(engine.count_equal_to(command.arg(0)))]

    @shell.command('BEGIN')
    def begin(command: Command):
        engine.begin()

    @shell.command('COMMIT')
    def commit(command: Command):
        message = COMMIT_MESSAGES.get(engine.commit())
        return None if message is None else [message]

    @shell.command('ROLLBACK')
    def rollback(command: Command):
        message = ROLLBACK_MESSAGES.get(engine.rollback())
        return None if message is None else [message]

    @shell.command('END')
    def end(command: Command):
        raise StopShell()


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        pass
