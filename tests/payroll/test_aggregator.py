from __future__ import annotations

from decimal import Decimal

from src.payroll_system.payroll_system.payroll.aggregator import ReportTotals, build_monthly_report
from src.payroll_system.payroll_system.salaries.model import SalaryReportRow


def row(sid, first, last, dept, gross, ded, month="2025-01"):
    gross, ded = Decimal(gross), Decimal(ded)
    return SalaryReportRow(
        salary_id=sid,
        employee_number=sid,
        first_name=first,
        last_name=last,
        position="Staff",
        department_name=dept,
        gross_salary=gross,
        total_deduction=ded,
        net_salary=gross - ded,
        month=month,
    )


ROWS = [
    row(1, "Jane", "Doe", "IT Dept", "50000.00", "7500.00"),
    row(2, "John", "Smith", "HR Dept", "30000.00", "3000.00"),
    row(3, "Anna", "Doe", "IT Dept", "40000.00", "4000.00"),
    row(4, "Zed", "Adams", None, "1000.00", "0.00"),
]


def test_rows_ordered_by_department_then_last_then_first_name():
    report = build_monthly_report("2025-01", ROWS)
    names = [(r.department_name, r.last_name, r.first_name) for r in report.rows]
    assert names == [
        (None, "Adams", "Zed"),
        ("HR Dept", "Smith", "John"),
        ("IT Dept", "Doe", "Anna"),
        ("IT Dept", "Doe", "Jane"),
    ]


def test_totals_sum_each_column():
    report = build_monthly_report("2025-01", ROWS)
    assert report.totals == ReportTotals(
        gross_salary=Decimal("121000.00"),
        total_deduction=Decimal("14500.00"),
        net_salary=Decimal("106500.00"),
    )


def test_other_months_are_ignored():
    report = build_monthly_report("2025-01", ROWS + [row(5, "Late", "Entry", "IT Dept", "1.00", "0", month="2025-02")])
    assert len(report.rows) == 4
    assert all(r.month == "2025-01" for r in report.rows)


def test_empty_month_gives_zero_totals():
    report = build_monthly_report("2030-12", [])
    assert report.is_empty
    assert report.to_dict() == {
        "month": "2030-12",
        "reportData": [],
        "totals": {"grossSalary": "0.00", "totalDeduction": "0.00", "netSalary": "0.00"},
    }


def test_input_order_does_not_change_result():
    forward = build_monthly_report("2025-01", ROWS)
    backward = build_monthly_report("2025-01", list(reversed(ROWS)))
    assert forward == backward


def test_totals_are_associative_over_partitions():
    left = ReportTotals.of(build_monthly_report("2025-01", ROWS[:2]).rows)
    right = ReportTotals.of(build_monthly_report("2025-01", ROWS[2:]).rows)
    assert left + right == build_monthly_report("2025-01", ROWS).totals


def test_many_cents_do_not_drift():
    rows = [row(i, "E", f"N{i:04d}", "IT Dept", "0.10", "0.01") for i in range(1, 1001)]
    totals = build_monthly_report("2025-01", rows).totals
    assert totals.gross_salary == Decimal("100.00")
    assert totals.total_deduction == Decimal("10.00")
    assert totals.net_salary == Decimal("90.00")


def test_wire_shape_uses_camel_case_and_two_decimals():
    data = build_monthly_report("2025-01", ROWS[:1]).to_dict()
    assert data["reportData"] == [
        {
            "employeeNumber": 1,
            "firstName": "Jane",
            "lastName": "Doe",
            "position": "Staff",
            "departmentName": "IT Dept",
            "grossSalary": "50000.00",
            "totalDeduction": "7500.00",
            "netSalary": "42500.00",
            "month": "2025-01",
        }
    ]
    assert data["totals"]["netSalary"] == "42500.00"


def test_same_employee_twice_in_a_month_has_a_fixed_order():
    first = row(7, "Jane", "Doe", "IT Dept", "100.00", "0.00")
    second = SalaryReportRow(**{**first.__dict__, "salary_id": 8, "gross_salary": Decimal("200.00"), "net_salary": Decimal("200.00")})

    forward = build_monthly_report("2025-01", [first, second])
    backward = build_monthly_report("2025-01", [second, first])

    assert forward == backward
    assert [r.to_dict()["netSalary"] for r in forward.rows] == ["100.00", "200.00"]
