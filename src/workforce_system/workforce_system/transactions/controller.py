from __future__ import annotations

from flask import Flask, jsonify, request

from ..auth.guards import admin_required, token_required
from ..common.datetime_utils import format_date, require_iso_date
from ..common.validators import require_decimal, require_non_empty
from ..container import Container
from ..core.exceptions import ValidationError
from .model import Transaction
from .service import parse_status


def to_dict(t: Transaction) -> dict:
    return {
        "startDate": format_date(t.start_date),
        "endDate": format_date(t.end_date),
        "totalCost": float(t.total_cost),
        "loanCompanyId": t.loan_company_uen,
        "borrowingCompanyId": t.borrowing_company_uen,
        "employeeId": t.employee_id,
        "status": t.status.value,
    }


def register(app: Flask, container: Container) -> None:
    def _json_body() -> dict:
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            raise ValidationError("Request body must be a JSON object")
        return data

    def _from_json(data: dict) -> Transaction:
        loan_uen = require_non_empty(data.get("loanCompanyId"), "loanCompanyId")
        borrowing_uen = require_non_empty(data.get("borrowingCompanyId"), "borrowingCompanyId")
        employee_id = require_non_empty(data.get("employeeId"), "employeeId")

        # Unknown references surface as NotFoundError (404).
        container.company_service.get_company(loan_uen)
        container.company_service.get_company(borrowing_uen)
        container.employee_service.get_employee(employee_id)

        return Transaction(
            loan_company_uen=loan_uen,
            borrowing_company_uen=borrowing_uen,
            employee_id=employee_id,
            start_date=require_iso_date(data.get("startDate"), "startDate"),
            end_date=require_iso_date(data.get("endDate"), "endDate"),
            total_cost=require_decimal(data.get("totalCost"), "totalCost"),
            status=parse_status(data.get("status") or "Pending"),
        )

    @app.route("/api/transactions", methods=["GET"], endpoint="list_transactions")
    @admin_required
    def list_transactions():
        return jsonify([to_dict(t) for t in container.transaction_service.list_transactions()])

    @app.route("/api/transactions/incoming", methods=["GET"], endpoint="incoming_transactions")
    @token_required
    def incoming_transactions():
        comp_id = request.args.get("compId")
        items = container.transaction_service.list_by_loaning_company(comp_id)
        return jsonify([to_dict(t) for t in items])

    @app.route("/api/transactions/outgoing", methods=["GET"], endpoint="outgoing_transactions")
    @token_required
    def outgoing_transactions():
        comp_id = request.args.get("compId")
        items = container.transaction_service.list_by_borrowing_company(comp_id)
        return jsonify([to_dict(t) for t in items])

    @app.route("/api/transactions", methods=["POST"], endpoint="create_transaction")
    @token_required
    def create_transaction():
        transaction = _from_json(_json_body())
        saved = container.transaction_service.submit(transaction)
        return jsonify(to_dict(saved)), 201

    @app.route("/api/transactions", methods=["PUT"], endpoint="update_transaction_status")
    @token_required
    def update_transaction_status():
        if "status" not in request.args:
            # Body form: only the status of the stored loan is replaced.
            updated = container.transaction_service.update_transaction(_from_json(_json_body()))
            return jsonify(to_dict(updated))

        updated = container.transaction_service.change_status(
            employee_id=request.args.get("empId"),
            start_date=require_iso_date(request.args.get("date"), "date"),
            status=request.args.get("status"),
        )
        return jsonify(to_dict(updated))

    @app.route("/api/transactions", methods=["DELETE"], endpoint="delete_transaction")
    @token_required
    def delete_transaction():
        container.transaction_service.remove_by_employee_and_start_date(
            request.args.get("empId"),
            require_iso_date(request.args.get("date"), "date"),
        )
        return "", 204
