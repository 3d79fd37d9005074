"""Record store: ordered in-memory tasks plus id allocation.

The next-id counter lives on the instance, so any number of stores can
exist side by side. Ids only ever grow; deleting a task never frees its id.
"""
from typing import List, Optional, Tuple
from models import Task


class TaskList:
    def __init__(self) -> None:
        self._tasks: List[Task] = []
        self._next_id: int = 1

    # -------------------- id management --------------------
    @property
    def next_id(self) -> int:
        return self._next_id

    def _allocate_id(self) -> int:
        nid = self._next_id
        self._next_id += 1
        return nid

    # -------------------- queries --------------------
    def all(self) -> Tuple[Task, ...]:
        return tuple(self._tasks)

    def find_by_id(self, task_id: int) -> Optional[Task]:
        for task in self._tasks:
            if task.id == task_id:
                return task
        return None

    # -------------------- task operations --------------------
    def append(self, description: str) -> Task:
        task = Task(id=self._allocate_id(), description=description)
        self._tasks.append(task)
        return task

    def remove_by_id(self, task_id: int) -> bool:
        task = self.find_by_id(task_id)
        if task is None:
            return False
        self._tasks.remove(task)
        return True

    def restore(self, task_id: int, description: str, completed: bool) -> Task:
        """Append a task loaded from storage, keeping its stored id.

        The counter is advanced past ``task_id`` so later appends cannot collide.
        """
        task = Task(id=task_id, description=description, completed=completed)
        self._tasks.append(task)
        self._next_id = max(self._next_id, task_id + 1)
        return task

    def __len__(self) -> int:
        return len(self._tasks)

    def __str__(self) -> str:
        done = sum(1 for t in self._tasks if t.completed)
        return f'{len(self._tasks)} tasks, {done} completed'
