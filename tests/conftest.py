import builtins

import pytest

import cli
from cli import CLI
from storage import Storage
from task_list import TaskList


@pytest.fixture(autouse=True)
def plain_output(monkeypatch):
    """Listing assertions compare plain text, whatever FORCE_COLOR says."""
    monkeypatch.setattr(cli, "color", lambda text, *styles: text)


@pytest.fixture
def feed_input(monkeypatch):
    """Replace input() with a scripted sequence; EOF once it runs out."""
    prompts = []

    def install(*lines):
        answers = iter(lines)

        def fake_input(prompt=""):
            prompts.append(prompt)
            try:
                return next(answers)
            except StopIteration:
                raise EOFError

        monkeypatch.setattr(builtins, "input", fake_input)
        return prompts

    return install


@pytest.fixture
def task_file(tmp_path):
    return tmp_path / "tasks.txt"


@pytest.fixture
def app(task_file):
    return CLI(TaskList(), Storage(task_file))
