"""
models/ - Domain Models
=======================
Plain dataclasses for the project aggregate. Attribute names match the
column names of the tables they are read from.
"""

from models.category import Category
from models.material import Material
from models.project import Project
from models.step import Step

__all__ = ["Category", "Material", "Project", "Step"]
