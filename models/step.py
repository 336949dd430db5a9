"""
models/step.py
--------------
Domain model for one ordered instruction of a project.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class Step:
    """A single step, exclusively owned by one project."""
    project_id: int
    step_text: str
    step_order: int
    step_id: Optional[int] = None

    def __str__(self) -> str:
        return f"ID={self.step_id}, stepOrder={self.step_order}, stepText={self.step_text}"
