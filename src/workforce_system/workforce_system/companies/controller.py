from __future__ import annotations

from flask import Flask, jsonify, request

from ..auth.guards import admin_required, token_required
from ..container import Container
from ..core.exceptions import ValidationError
from .model import Company


def to_dict(c: Company) -> dict:
    return {"uen": c.uen, "name": c.name}


def register(app: Flask, container: Container) -> None:
    def _company_from_json() -> Company:
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            raise ValidationError("Request body must be a JSON object")
        return Company(uen=data.get("uen"), name=data.get("name"))

    @app.route("/api/companies", methods=["GET"], endpoint="list_companies")
    @token_required
    def list_companies():
        name = request.args.get("name")
        if name is not None:
            return jsonify(to_dict(container.company_service.get_company_by_name(name)))
        return jsonify([to_dict(c) for c in container.company_service.list_companies()])

    @app.route("/api/companies/<uen>", methods=["GET"], endpoint="get_company")
    @token_required
    def get_company(uen: str):
        return jsonify(to_dict(container.company_service.get_company(uen)))

    @app.route("/api/companies", methods=["POST"], endpoint="create_company")
    @admin_required
    def create_company():
        saved = container.company_service.add_company(_company_from_json())
        return jsonify(to_dict(saved)), 201

    @app.route("/api/companies/<uen>", methods=["PUT"], endpoint="update_company")
    @admin_required
    def update_company(uen: str):
        saved = container.company_service.update_company(uen, _company_from_json())
        return jsonify(to_dict(saved))

    @app.route("/api/companies/<uen>", methods=["DELETE"], endpoint="delete_company")
    @admin_required
    def delete_company(uen: str):
        container.company_service.delete_company(uen)
        return "", 204
