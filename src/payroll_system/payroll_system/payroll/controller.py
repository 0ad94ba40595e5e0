from __future__ import annotations

import csv
import io

from flask import Flask, jsonify

from ..common.money import format_money
from ..common.web import handles_errors, login_required
from ..container import Container
from .aggregator import MonthlyReport

CSV_FIELDS = [
    "department_name",
    "last_name",
    "first_name",
    "position",
    "gross_salary",
    "total_deduction",
    "net_salary",
    "month",
]


def register(app: Flask, container: Container) -> None:
    def _write_report_csv(*, report: MonthlyReport, filename: str):
        """Write report rows plus a TOTAL line to a CSV response."""

        out = io.StringIO()
        writer = csv.DictWriter(out, fieldnames=CSV_FIELDS)
        writer.writeheader()
        for r in report.rows:
            writer.writerow(
                {
                    "department_name": r.department_name or "",
                    "last_name": r.last_name,
                    "first_name": r.first_name,
                    "position": r.position,
                    "gross_salary": format_money(r.gross_salary),
                    "total_deduction": format_money(r.total_deduction),
                    "net_salary": format_money(r.net_salary),
                    "month": r.month,
                }
            )
        writer.writerow(
            {
                "department_name": "TOTAL",
                "gross_salary": format_money(report.totals.gross_salary),
                "total_deduction": format_money(report.totals.total_deduction),
                "net_salary": format_money(report.totals.net_salary),
                "month": report.month,
            }
        )

        csv_bytes = out.getvalue().encode("utf-8-sig")
        return app.response_class(
            csv_bytes,
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )

    @app.route("/api/reports/monthly/<month>", methods=["GET"], endpoint="monthly_report")
    @login_required
    @handles_errors("generating monthly report")
    def monthly_report(month: str):
        report = container.payroll_report_service.build_monthly_report(month)
        return jsonify(report.to_dict())

    @app.route("/api/reports/monthly/<month>/export", methods=["GET"], endpoint="monthly_report_export")
    @login_required
    @handles_errors("exporting monthly report")
    def monthly_report_export(month: str):
        report = container.payroll_report_service.build_monthly_report(month)
        return _write_report_csv(report=report, filename=f"payroll_{month}.csv")
