from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..common.money import format_money
from ..common.web import from_wire, handles_errors, json_body, login_required
from ..container import Container
from .model import SalaryRecord, SalaryReportRow

logger = logging.getLogger(__name__)

FIELDS = ("employee_number", "gross_salary", "total_deduction", "net_salary", "month")


def salary_to_dict(s: SalaryRecord) -> dict:
    return {
        "id": s.salary_id,
        "employeeNumber": s.employee_number,
        "grossSalary": format_money(s.gross_salary),
        "totalDeduction": format_money(s.total_deduction),
        "netSalary": format_money(s.net_salary),
        "month": s.month,
    }


def salary_row_to_dict(r: SalaryReportRow) -> dict:
    return {
        "id": r.salary_id,
        "employeeNumber": r.employee_number,
        "firstName": r.first_name,
        "lastName": r.last_name,
        "position": r.position,
        "departmentName": r.department_name,
        "grossSalary": format_money(r.gross_salary),
        "totalDeduction": format_money(r.total_deduction),
        "netSalary": format_money(r.net_salary),
        "month": r.month,
    }


def register(app: Flask, container: Container) -> None:
    @app.route("/api/salaries", methods=["GET"], endpoint="list_salaries")
    @login_required
    @handles_errors("fetching salaries")
    def list_salaries():
        rows = container.salary_service.list_salaries(month=request.args.get("month"))
        return jsonify([salary_row_to_dict(r) for r in rows])

    @app.route("/api/salaries", methods=["POST"], endpoint="create_salary")
    @login_required
    @handles_errors("creating salary record")
    def create_salary():
        salary = container.salary_service.create_salary(from_wire(json_body(), FIELDS))
        logger.info("Salary record %s created for employee %s (%s)", salary.salary_id, salary.employee_number, salary.month)
        return jsonify({"message": "Salary record created successfully", "salary": salary_to_dict(salary)}), 201

    @app.route("/api/salaries/suggest", methods=["GET"], endpoint="suggest_salary")
    @login_required
    @handles_errors("suggesting salary amounts")
    def suggest_salary():
        employee_number = request.args.get("employeeNumber", type=int)
        if employee_number is None:
            return jsonify({"message": "employeeNumber is required"}), 400
        s = container.salary_service.suggest(
            employee_number=employee_number,
            total_deduction=request.args.get("totalDeduction"),
        )
        return jsonify(
            {
                "employeeNumber": s.employee_number,
                "grossSalary": format_money(s.gross_salary),
                "totalDeduction": format_money(s.total_deduction),
                "netSalary": format_money(s.net_salary),
            }
        )

    @app.route("/api/salaries/<int:salary_id>", methods=["GET"], endpoint="get_salary")
    @login_required
    @handles_errors("fetching salary record")
    def get_salary(salary_id: int):
        return jsonify(salary_to_dict(container.salary_service.get_salary(salary_id)))

    @app.route("/api/salaries/<int:salary_id>", methods=["PUT"], endpoint="update_salary")
    @login_required
    @handles_errors("updating salary record")
    def update_salary(salary_id: int):
        salary = container.salary_service.update_salary(salary_id, from_wire(json_body(), FIELDS))
        return jsonify({"message": "Salary record updated successfully", "salary": salary_to_dict(salary)})

    @app.route("/api/salaries/<int:salary_id>", methods=["DELETE"], endpoint="delete_salary")
    @login_required
    @handles_errors("deleting salary record")
    def delete_salary(salary_id: int):
        container.salary_service.delete_salary(salary_id)
        return jsonify({"message": "Salary record deleted successfully"})
