"""
models/material.py
------------------
Domain model for a material needed by a project.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional


@dataclass
class Material:
    """
    A material line item, exclusively owned by one project.

    Attributes:
        material_id: Database primary key (None for new records).
        project_id: The owning project.
        material_name: What is needed (e.g., '2x4 lumber').
        num_required: Quantity needed.
        cost: Unit cost, two decimal places.
    """
    project_id: int
    material_name: str
    num_required: Optional[int] = None
    cost: Optional[Decimal] = None
    material_id: Optional[int] = None

    def __str__(self) -> str:
        return (
            f"ID={self.material_id}, materialName={self.material_name}, "
            f"numRequired={self.num_required}, cost={self.cost}"
        )
