from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal


class NetSalaryCalculator(ABC):
    """Calculator interface (Strategy Pattern for suggested net salary)."""

    @abstractmethod
    def net_salary(self, gross_salary: Decimal, total_deduction: Decimal) -> Decimal:
        raise NotImplementedError
