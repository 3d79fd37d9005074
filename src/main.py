"""Main entry point for the terminal todo list."""
import logging
import sys

import click

from cli import CLI
from storage import Storage, TASKS_FILE
from task_list import TaskList

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


@click.command()
@click.option('-f', '--file', 'path', type=click.Path(dir_okay=False), default=str(TASKS_FILE),
              envvar='TODO_FILE', show_default=True, help="Task file to load and save.")
@click.option('-v', '--verbose', is_flag=True, envvar='TODO_VERBOSE', help="Log debug details to stderr.")
def main(path: str, verbose: bool) -> None:
    """Manage a todo list from an interactive numeric menu."""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING,
                        format=LOG_FORMAT, stream=sys.stderr)
    storage = Storage(path)
    store = TaskList()
    storage.load(store)
    sys.exit(CLI(store, storage).run())


if __name__ == "__main__":
    main()
