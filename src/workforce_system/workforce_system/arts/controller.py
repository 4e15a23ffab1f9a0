from __future__ import annotations

from flask import Flask, jsonify, request

from ..auth.guards import token_required
from ..common.datetime_utils import format_date, require_iso_date
from ..common.validators import as_bool
from ..container import Container
from ..core.exceptions import ValidationError
from .model import ArtRecord


def to_dict(a: ArtRecord) -> dict:
    return {
        "id": a.art_id,
        "dateOfTest": format_date(a.date_of_test),
        "expiryDate": format_date(a.expiry_date),
        "result": a.result,
        "employeeWP": a.employee_id,
        "employeeName": a.employee_name,
        "company": a.company_uen,
    }


def register(app: Flask, container: Container) -> None:
    @app.route("/api/covidTest", methods=["GET"], endpoint="list_arts")
    @token_required
    def list_arts():
        comp_id = request.args.get("compId")
        if comp_id is None:
            items = container.art_service.list_arts()
        else:
            items = container.art_service.list_arts_by_company(comp_id)
        return jsonify([to_dict(a) for a in items])

    @app.route("/api/covidTest/latest", methods=["GET"], endpoint="list_latest_arts")
    @token_required
    def list_latest_arts():
        comp_id = request.args.get("compId")
        if comp_id is None:
            items = container.art_service.list_latest_arts()
        else:
            items = container.art_service.list_latest_arts_by_company(comp_id)
        return jsonify([to_dict(a) for a in items])

    @app.route("/api/covidTest", methods=["POST"], endpoint="create_art")
    @token_required
    def create_art():
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            raise ValidationError("Request body must be a JSON object")
        result = data.get("result")
        saved = container.art_service.add_art(
            employee_id=request.args.get("empId"),
            company_uen=request.args.get("compId"),
            date_of_test=require_iso_date(data.get("dateOfTest"), "dateOfTest"),
            result=None if result is None else as_bool(result),
        )
        return jsonify(to_dict(saved)), 201

    @app.route("/api/covidTest/<int:art_id>", methods=["DELETE"], endpoint="delete_art")
    @token_required
    def delete_art(art_id: int):
        container.art_service.delete_art(art_id)
        return "", 204
