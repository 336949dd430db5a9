"""
models/project.py
-----------------
Domain model for a project, the aggregate root of the data model.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Optional

from models.category import Category
from models.material import Material
from models.step import Step


@dataclass
class Project:
    """
    Represents a project and, when fetched individually, everything it owns.

    Attributes:
        project_id: Database primary key (None until inserted).
        project_name: Display name; listings are ordered by it.
        estimated_hours: Planned effort, two decimal places.
        actual_hours: Effort spent so far, two decimal places.
        difficulty: 1 (easy) to 5 (hard). Not validated here.
        notes: Free text.
        materials: Owned materials (empty in summary listings).
        steps: Owned steps (empty in summary listings).
        categories: Linked categories (empty in summary listings).
    """
    project_name: str
    estimated_hours: Optional[Decimal] = None
    actual_hours: Optional[Decimal] = None
    difficulty: Optional[int] = None
    notes: Optional[str] = None
    project_id: Optional[int] = None
    materials: list[Material] = field(default_factory=list)
    steps: list[Step] = field(default_factory=list)
    categories: list[Category] = field(default_factory=list)

    def __str__(self) -> str:
        lines = [
            f"\n   ID={self.project_id}",
            f"   name={self.project_name}",
            f"   estimatedHours={self.estimated_hours}",
            f"   actualHours={self.actual_hours}",
            f"   difficulty={self.difficulty}",
            f"   notes={self.notes}",
            "\n   Materials:",
            *(f"      {m}" for m in self.materials),
            "\n   Steps:",
            *(f"      {s}" for s in self.steps),
            "\n   Categories:",
            *(f"      {c}" for c in self.categories),
        ]
        return "\n".join(lines)
