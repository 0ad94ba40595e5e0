from __future__ import annotations

import logging

from flask import Flask, jsonify

from ..common.money import format_money
from ..common.web import from_wire, handles_errors, json_body, login_required
from ..container import Container
from .model import Department

logger = logging.getLogger(__name__)

FIELDS = ("department_code", "department_name", "gross_salary")


def department_to_dict(d: Department) -> dict:
    return {
        "departmentCode": d.department_code,
        "departmentName": d.department_name,
        "grossSalary": format_money(d.gross_salary),
    }


def register(app: Flask, container: Container) -> None:
    @app.route("/api/departments", methods=["GET"], endpoint="list_departments")
    @login_required
    @handles_errors("fetching departments")
    def list_departments():
        return jsonify([department_to_dict(d) for d in container.department_service.list_departments()])

    @app.route("/api/departments", methods=["POST"], endpoint="create_department")
    @login_required
    @handles_errors("creating department")
    def create_department():
        department = container.department_service.create_department(from_wire(json_body(), FIELDS))
        logger.info("Department %s created", department.department_code)
        return jsonify({"message": "Department created successfully", "department": department_to_dict(department)}), 201

    @app.route("/api/departments/<code>", methods=["GET"], endpoint="get_department")
    @login_required
    @handles_errors("fetching department")
    def get_department(code: str):
        return jsonify(department_to_dict(container.department_service.get_department(code)))

    @app.route("/api/departments/<code>", methods=["PUT"], endpoint="update_department")
    @login_required
    @handles_errors("updating department")
    def update_department(code: str):
        department = container.department_service.update_department(code, from_wire(json_body(), FIELDS))
        return jsonify({"message": "Department updated successfully", "department": department_to_dict(department)})

    @app.route("/api/departments/<code>", methods=["DELETE"], endpoint="delete_department")
    @login_required
    @handles_errors("deleting department")
    def delete_department(code: str):
        container.department_service.delete_department(code)
        logger.info("Department %s deleted; its employees were detached", code)
        return jsonify({"message": "Department deleted successfully"})
