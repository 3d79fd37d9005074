"""Persistence helpers (load/save) for the todo list.

File format, one task per line:

    id|description|completed

``completed`` is "1" or "0"; any other value reads as not completed. The
description is written raw: a '|' or newline inside it is not escaped.
"""
import logging
from pathlib import Path
from typing import Optional, Tuple, Union

from models import Task
from task_list import TaskList

LOGGER = logging.getLogger(__name__)

TASKS_FILE = Path('tasks.txt')
DELIMITER = '|'

TaskRecord = Tuple[int, str, bool]


class Storage:
    def __init__(self, path: Union[str, Path] = TASKS_FILE):
        self.path: Path = Path(path)

    def load(self, store: TaskList) -> int:
        """Restore tasks from disk into ``store``; return how many were loaded.

        Missing or unreadable file -> store untouched, 0 returned.
        Malformed lines are skipped.
        """
        try:
            with open(self.path, 'r', encoding='utf-8', newline='\n') as f:
                lines = f.read().split('\n')
        except FileNotFoundError:
            LOGGER.debug("No task file at %s; starting empty", self.path)
            return 0
        except (OSError, UnicodeDecodeError) as exc:
            LOGGER.warning("Could not read %s (%s); starting empty", self.path, exc)
            return 0
        if lines and not lines[-1]:
            lines.pop()  # trailing newline
        loaded = 0
        for lineno, line in enumerate(lines, start=1):
            record = parse_line(line)
            if record is None:
                LOGGER.debug("Skipping malformed line %d in %s: %r", lineno, self.path, line)
                continue
            task_id, description, completed = record
            if store.find_by_id(task_id) is not None:
                LOGGER.debug("Skipping duplicate id %d on line %d in %s", task_id, lineno, self.path)
                continue
            store.restore(task_id, description, completed)
            loaded += 1
        LOGGER.debug("Loaded %d tasks from %s", loaded, self.path)
        return loaded

    def save(self, store: TaskList) -> bool:
        """Rewrite the whole file from ``store``. Returns False if the write failed."""
        try:
            with open(self.path, 'w', encoding='utf-8', newline='\n') as f:
                for task in store.all():
                    f.write(format_line(task) + '\n')
        except OSError as exc:
            LOGGER.warning("Could not save tasks to %s: %s", self.path, exc)
            return False
        return True


def parse_line(line: str) -> Optional[TaskRecord]:
    """Split one stored line into (id, description, completed); None if malformed."""
    parts = line.split(DELIMITER, 2)
    if len(parts) != 3:
        return None
    id_part, description, completed_part = parts
    if not completed_part:
        return None
    task_id = parse_int(id_part)
    if task_id is None or task_id < 1:
        return None
    return task_id, description, completed_part == '1'


def format_line(task: Task) -> str:
    return f"{task.id}{DELIMITER}{task.description}{DELIMITER}{'1' if task.completed else '0'}"


def parse_int(text: str) -> Optional[int]:
    """Plain ASCII decimal digits only; no sign, spaces, underscores or other scripts."""
    if not (text.isascii() and text.isdigit()):
        return None
    return int(text)
