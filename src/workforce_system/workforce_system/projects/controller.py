from __future__ import annotations

from flask import Flask, jsonify, request

from ..auth.guards import token_required
from ..common.datetime_utils import format_date, require_iso_date
from ..container import Container
from ..core.exceptions import ValidationError
from .model import Project, ProjectMember


def to_dict(p: Project) -> dict:
    return {
        "id": p.project_id,
        "projectName": p.name,
        "startDate": format_date(p.start_date),
        "completionDate": format_date(p.completion_date),
        "budget": p.budget,
        "progress": p.progress,
        "companies": [{"id": c.uen, "name": c.name} for c in p.companies],
        "employees": [{"workPermitNumber": m.work_permit_number, "name": m.name} for m in p.members],
    }


def register(app: Flask, container: Container) -> None:
    def _project_from_json() -> Project:
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            raise ValidationError("Request body must be a JSON object")

        employees = data.get("employees")
        if employees is None:
            employees = []
        if not isinstance(employees, list):
            raise ValidationError("employees must be a list")
        members = []
        for item in employees:
            wp = item.get("workPermitNumber") if isinstance(item, dict) else item
            members.append(ProjectMember(work_permit_number=wp))

        completion = data.get("completionDate")
        return Project(
            project_id=None,
            name=data.get("projectName"),
            start_date=require_iso_date(data.get("startDate"), "startDate"),
            completion_date=require_iso_date(completion, "completionDate") if completion else None,
            budget=data.get("budget"),
            progress=data.get("progress", 0),
            members=tuple(members),
        )

    @app.route("/api/projects", methods=["GET"], endpoint="list_projects")
    @token_required
    def list_projects():
        company_id = request.args.get("companyId")
        if company_id is None:
            items = container.project_service.list_projects()
        else:
            items = container.project_service.list_company_projects(company_id)
        return jsonify([to_dict(p) for p in items])

    @app.route("/api/projects/<int:project_id>", methods=["GET"], endpoint="get_project")
    @token_required
    def get_project(project_id: int):
        return jsonify(to_dict(container.project_service.get_project(project_id)))

    @app.route("/api/projects", methods=["POST"], endpoint="create_project")
    @token_required
    def create_project():
        saved = container.project_service.add_project(_project_from_json())
        return jsonify(to_dict(saved)), 201

    @app.route("/api/projects/<int:project_id>", methods=["PUT"], endpoint="update_project")
    @token_required
    def update_project(project_id: int):
        saved = container.project_service.update_project(project_id, _project_from_json())
        return jsonify(to_dict(saved))

    @app.route("/api/projects/<int:project_id>", methods=["DELETE"], endpoint="delete_project")
    @token_required
    def delete_project(project_id: int):
        container.project_service.delete_project(project_id)
        return "", 204
