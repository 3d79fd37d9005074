"""Interactive menu loop and command handlers for the todo list.

Every handler that changes the store saves it before returning, so the
file on disk always matches what the user last saw.
"""
from typing import Callable, Dict, Optional
from models import Task
from storage import Storage, parse_int
from task_list import TaskList
from theme import color, HEADER_COLOR, ID_COLOR, DONE_COLOR, PENDING_COLOR, DONE_TEXT_COLOR

MENU_BANNER = "====== TODO MENU ======"
LIST_BANNER = "====== TASK LIST ======"
RULE = "======================="

MENU_OPTIONS = (
    "1. Add a task",
    "2. View all tasks",
    "3. Toggle task as complete/incomplete",
    "4. Delete a task",
    "5. Edit a task description",
    "6. Exit",
)
EXIT_CHOICE = 6


def format_task(task: Task) -> str:
    """Render ``[x] id: description``; styling never alters the visible text."""
    mark = color(task.mark, DONE_COLOR if task.completed else PENDING_COLOR)
    text = color(task.description, DONE_TEXT_COLOR) if task.completed else task.description
    return f"[{mark}] {color(str(task.id), ID_COLOR)}: {text}"


def parse_choice(raw: str) -> Optional[int]:
    """Menu selection as an int in 1..6, or None."""
    choice = parse_int(raw.strip())
    if choice is not None and 1 <= choice <= EXIT_CHOICE:
        return choice
    return None


class CLI:
    def __init__(self, store: TaskList, storage: Storage):
        self.store: TaskList = store
        self.storage: Storage = storage
        self.handlers: Dict[int, Callable[[], None]] = {
            1: self.add_task,
            2: self.list_tasks,
            3: self.toggle_task,
            4: self.delete_task,
            5: self.edit_task,
        }

    def run(self) -> int:
        """Main loop; returns the process exit status."""
        try:
            while True:
                choice = self.choose()
                if choice == EXIT_CHOICE:
                    print("Exiting...")
                    return 0
                self.handlers[choice]()
        except (KeyboardInterrupt, EOFError):
            # state was saved after the last mutation
            print("\nInterrupted. Goodbye.")
            return 0

    # -------------------- menu --------------------
    def choose(self) -> int:
        while True:
            self._print_menu()
            choice = parse_choice(input())
            if choice is not None:
                return choice
            print("Invalid input. Try again.")

    def _print_menu(self) -> None:
        print(color(MENU_BANNER, HEADER_COLOR))
        for option in MENU_OPTIONS:
            print(option)
        print(color(RULE, HEADER_COLOR))

    # -------------------- handlers --------------------
    def add_task(self) -> None:
        description = input("Enter task description: ")
        self.store.append(description)
        print("Task added.\n")
        self.storage.save(self.store)

    def list_tasks(self) -> None:
        if not self.store:
            print("No tasks to display.")
            return
        print("\n" + color(LIST_BANNER, HEADER_COLOR))
        self._print_tasks()
        print(color(RULE, HEADER_COLOR) + "\n")

    def toggle_task(self) -> None:
        task = self._select_task("toggle", "Enter the ID of the task to toggle completion: ")
        if task is None:
            return
        task.completed = not task.completed
        state = "complete" if task.completed else "incomplete"
        print(f"Task {task.id} marked as {state}.\n")
        self.storage.save(self.store)

    def delete_task(self) -> None:
        task = self._select_task("delete", "Enter the ID of the task to delete: ")
        if task is None:
            return
        self.store.remove_by_id(task.id)
        print(f"Task {task.id} deleted.\n")
        self.storage.save(self.store)

    def edit_task(self) -> None:
        task = self._select_task("edit", "Enter the ID of the task to edit: ")
        if task is None:
            return
        task.description = input("Enter new description: ")
        print(f"Task {task.id} updated.\n")
        self.storage.save(self.store)

    # ---- shared selection flow ----
    def _select_task(self, verb: str, prompt: str) -> Optional[Task]:
        """Show current tasks and ask for an id; None on empty store, bad input or miss."""
        if not self.store:
            print(f"No tasks to {verb}.")
            return None
        print("\nCurrent tasks:")
        self._print_tasks()
        print()
        raw_id = input(prompt)
        task_id = parse_int(raw_id.strip())
        if task_id is None:
            print("Invalid input.")
            return None
        task = self.store.find_by_id(task_id)
        if task is None:
            print(f"Task with ID {task_id} not found.\n")
        return task

    def _print_tasks(self) -> None:
        for task in self.store.all():
            print(format_task(task))
