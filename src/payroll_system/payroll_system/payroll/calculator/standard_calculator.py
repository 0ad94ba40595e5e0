from __future__ import annotations

from decimal import Decimal

from ...common.money import quantize_money
from .base import NetSalaryCalculator


class StandardNetSalaryCalculator(NetSalaryCalculator):
    """Standard rule: gross - deduction, not below 0."""

    def net_salary(self, gross_salary: Decimal, total_deduction: Decimal) -> Decimal:
        return quantize_money(max(gross_salary - total_deduction, Decimal("0")))
