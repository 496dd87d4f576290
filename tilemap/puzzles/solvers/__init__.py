"""
Solvers Package - Concrete puzzle implementations.

Import this module to register all built-in solvers.
"""

from .expense_report import ExpenseReportSolver
from .toboggan import TobogganSolver

__all__ = [
    "ExpenseReportSolver",
    "TobogganSolver",
]
