from __future__ import annotations

from flask import Flask, jsonify, request

from ..auth.guards import admin_required, token_required
from ..container import Container
from ..core.exceptions import ValidationError
from .model import Skill


def to_dict(s: Skill) -> dict:
    return {"skill": s.name, "task": s.task}


def register(app: Flask, container: Container) -> None:
    def _skill_from_json() -> Skill:
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            raise ValidationError("Request body must be a JSON object")
        return Skill(name=data.get("skill"), task=data.get("task"))

    @app.route("/api/skills", methods=["GET"], endpoint="list_skills")
    @token_required
    def list_skills():
        return jsonify([to_dict(s) for s in container.skill_service.list_skills()])

    @app.route("/api/skills/<skill_id>", methods=["GET"], endpoint="get_skill")
    @token_required
    def get_skill(skill_id: str):
        return jsonify(to_dict(container.skill_service.get_skill(skill_id)))

    @app.route("/api/skills", methods=["POST"], endpoint="create_skill")
    @admin_required
    def create_skill():
        saved = container.skill_service.add_skill(_skill_from_json())
        return jsonify(to_dict(saved)), 201

    @app.route("/api/skills/<skill_id>", methods=["PUT"], endpoint="update_skill")
    @admin_required
    def update_skill(skill_id: str):
        saved = container.skill_service.update_skill(skill_id, _skill_from_json())
        return jsonify(to_dict(saved))

    @app.route("/api/skills/<skill_id>", methods=["DELETE"], endpoint="delete_skill")
    @admin_required
    def delete_skill(skill_id: str):
        container.skill_service.delete_skill(skill_id)
        return "", 204
