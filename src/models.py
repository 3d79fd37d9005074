"""Data models for the terminal todo application.

Only exposes the Task dataclass. A task carries nothing beyond its id,
description and completion flag; the on-disk format mirrors exactly those
three fields.
"""
from __future__ import annotations
from dataclasses import dataclass


@dataclass
class Task:
    """A single todo item.

    Fields:
        id: Positive integer, never reused within a store's lifetime.
        description: Free text; may be empty, must not contain '|' or a newline.
        completed: True once toggled done.
    """
    id: int
    description: str
    completed: bool = False

    @property
    def mark(self) -> str:
        return "x" if self.completed else " "
