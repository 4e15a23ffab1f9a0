from __future__ import annotations

from flask import Flask, jsonify, request

from ..auth.guards import token_required
from ..common.datetime_utils import format_date, require_iso_date
from ..common.validators import as_bool
from ..container import Container
from ..core.exceptions import ValidationError
from .model import Employee


def to_dict(e: Employee) -> dict:
    return {
        "workPermitNumber": e.work_permit_number,
        "name": e.name,
        "passportNumber": e.passport_number,
        "workId": e.work_id,
        "employeeRole": e.employee_role,
        "levy": e.levy,
        "workPermitDateOfIssue": format_date(e.work_permit_date_of_issue),
        "workPermitExpiryDate": format_date(e.work_permit_expiry_date),
        "workContactNumber": e.work_contact_number,
        "workSiteLocation": e.work_site_location,
        "singaporeAddress": e.singapore_address,
        "vaccStatus": e.vacc_status,
        "forSharing": e.for_sharing,
        "shared": e.shared,
        "company": e.company_uen,
        "description": e.description,
    }


def register(app: Flask, container: Container) -> None:
    def _employee_from_json(*, company_uen: str | None = None) -> Employee:
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            raise ValidationError("Request body must be a JSON object")
        try:
            levy = int(data.get("levy") or 0)
        except (TypeError, ValueError):
            raise ValidationError("levy must be an integer")
        return Employee(
            work_permit_number=data.get("workPermitNumber"),
            name=data.get("name"),
            passport_number=data.get("passportNumber"),
            work_id=data.get("workId"),
            employee_role=data.get("employeeRole"),
            levy=levy,
            work_permit_date_of_issue=require_iso_date(data.get("workPermitDateOfIssue"), "workPermitDateOfIssue"),
            work_permit_expiry_date=require_iso_date(data.get("workPermitExpiryDate"), "workPermitExpiryDate"),
            work_contact_number=data.get("workContactNumber"),
            work_site_location=data.get("workSiteLocation"),
            singapore_address=data.get("singaporeAddress"),
            company_uen=company_uen or data.get("company"),
            vacc_status=as_bool(data.get("vaccStatus")),
            for_sharing=as_bool(data.get("forSharing")),
            shared=as_bool(data.get("shared")),
            description=data.get("description"),
        )

    @app.route("/api/employees", methods=["GET"], endpoint="list_employees")
    @token_required
    def list_employees():
        items = container.employee_service.list_employees_by_company(request.args.get("compId"))
        return jsonify([to_dict(e) for e in items])

    @app.route("/api/employees/<emp_id>", methods=["GET"], endpoint="get_employee")
    @token_required
    def get_employee(emp_id: str):
        return jsonify(to_dict(container.employee_service.get_employee(emp_id)))

    @app.route("/api/employees", methods=["POST"], endpoint="create_employee")
    @token_required
    def create_employee():
        employee = _employee_from_json(company_uen=request.args.get("compId"))
        saved = container.employee_service.add_employee(employee)
        return jsonify(to_dict(saved)), 201

    @app.route("/api/employees/<emp_id>", methods=["PUT"], endpoint="update_employee")
    @token_required
    def update_employee(emp_id: str):
        saved = container.employee_service.update_employee(emp_id, _employee_from_json())
        return jsonify(to_dict(saved))

    @app.route("/api/employees/<emp_id>", methods=["DELETE"], endpoint="delete_employee")
    @token_required
    def delete_employee(emp_id: str):
        container.employee_service.delete_employee(emp_id)
        return "", 204
