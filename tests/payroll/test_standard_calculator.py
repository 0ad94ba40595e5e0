from decimal import Decimal

from src.payroll_system.payroll_system.payroll.calculator.standard_calculator import StandardNetSalaryCalculator


def test_net_is_gross_minus_deduction():
    calc = StandardNetSalaryCalculator()
    assert calc.net_salary(Decimal("50000"), Decimal("7500")) == Decimal("42500.00")


def test_net_never_negative():
    calc = StandardNetSalaryCalculator()
    assert calc.net_salary(Decimal("100"), Decimal("250")) == Decimal("0.00")


def test_net_is_rounded_to_cents():
    calc = StandardNetSalaryCalculator()
    assert str(calc.net_salary(Decimal("10.005"), Decimal("0"))) == "10.01"
