"""
Repositories Package - Employee Expertise Cube
expertise_cube/repositories/__init__.py

Storage layer for employees, projects and expertise scores.
"""

from expertise_cube.repositories.base import BaseStorage
from expertise_cube.repositories.memory import MemoryStorage
from expertise_cube.repositories.seed import seed_sample_data

__all__ = [
    "BaseStorage",
    "MemoryStorage",
    "seed_sample_data",
]
