from __future__ import annotations

import logging

from flask import Flask, jsonify

from ..common.datetime_utils import format_iso_date
from ..common.money import format_money
from ..common.web import from_wire, handles_errors, json_body, login_required
from ..container import Container
from .model import Employee

logger = logging.getLogger(__name__)

FIELDS = ("first_name", "last_name", "position", "address", "telephone", "gender", "hired_date", "department_code")


def employee_to_dict(e: Employee) -> dict:
    return {
        "employeeNumber": e.employee_number,
        "firstName": e.first_name,
        "lastName": e.last_name,
        "position": e.position,
        "address": e.address,
        "telephone": e.telephone,
        "gender": e.gender,
        "hiredDate": format_iso_date(e.hired_date),
        "departmentCode": e.department_code,
        "departmentName": e.department_name,
        "departmentGrossSalary": (
            format_money(e.department_gross_salary) if e.department_gross_salary is not None else None
        ),
    }


def register(app: Flask, container: Container) -> None:
    @app.route("/api/employees", methods=["GET"], endpoint="list_employees")
    @login_required
    @handles_errors("fetching employees")
    def list_employees():
        return jsonify([employee_to_dict(e) for e in container.employee_service.list_employees()])

    @app.route("/api/employees", methods=["POST"], endpoint="create_employee")
    @login_required
    @handles_errors("creating employee")
    def create_employee():
        employee = container.employee_service.create_employee(from_wire(json_body(), FIELDS))
        logger.info("Employee %s created", employee.employee_number)
        return jsonify({"message": "Employee created successfully", "employee": employee_to_dict(employee)}), 201

    @app.route("/api/employees/<int:employee_number>", methods=["GET"], endpoint="get_employee")
    @login_required
    @handles_errors("fetching employee")
    def get_employee(employee_number: int):
        return jsonify(employee_to_dict(container.employee_service.get_employee(employee_number)))

    @app.route("/api/employees/<int:employee_number>", methods=["PUT"], endpoint="update_employee")
    @login_required
    @handles_errors("updating employee")
    def update_employee(employee_number: int):
        employee = container.employee_service.update_employee(employee_number, from_wire(json_body(), FIELDS))
        return jsonify({"message": "Employee updated successfully", "employee": employee_to_dict(employee)})

    @app.route("/api/employees/<int:employee_number>", methods=["DELETE"], endpoint="delete_employee")
    @login_required
    @handles_errors("deleting employee")
    def delete_employee(employee_number: int):
        container.employee_service.delete_employee(employee_number)
        logger.info("Employee %s deleted with their salary records", employee_number)
        return jsonify({"message": "Employee deleted successfully"})
