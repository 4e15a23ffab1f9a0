from __future__ import annotations

from flask import Flask, jsonify, request

from ..auth.guards import token_required
from ..container import Container
from ..core.exceptions import ValidationError
from .model import EmployeeSkill, SkillSummary


def to_dict(es: EmployeeSkill) -> dict:
    return {
        "workPermitNumber": es.employee_id,
        "name": es.employee_name,
        "description": es.description,
        "employeeRole": es.employee_role,
        "skillName": es.skill,
        "experience": es.experience,
        "cost": float(es.cost),
        "rating": es.rating,
        "company": es.company_name,
        "uen": es.company_uen,
    }


def summary_to_dict(s: SkillSummary) -> dict:
    return {"name": s.skill, "pax": s.headcount, "min": float(s.min_cost)}


def register(app: Flask, container: Container) -> None:
    service = container.employee_skill_service

    def _from_json(*, company_uen) -> EmployeeSkill:
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            raise ValidationError("Request body must be a JSON object")
        return EmployeeSkill(
            employee_id=data.get("employeeId"),
            skill=data.get("skillId"),
            company_uen=company_uen,
            experience=data.get("experience", 0),
            rating=data.get("rating", 0),
            cost=data.get("cost", 0),
        )

    @app.route("/api/employeeSkills", methods=["GET"], endpoint="list_employee_skills")
    @token_required
    def list_employee_skills():
        emp_id = request.args.get("empId")
        skill_id = request.args.get("skillId")
        comp_id = request.args.get("compId")

        if emp_id is not None and skill_id is not None:
            return jsonify(to_dict(service.get_employee_skill(emp_id, skill_id)))
        if emp_id is not None:
            items = service.list_by_employee(emp_id)
        elif skill_id is not None:
            items = service.list_by_skill(skill_id, exclude_company_uen=comp_id)
        elif comp_id is not None:
            items = service.list_by_company(comp_id)
        else:
            items = service.list_employee_skills()
        return jsonify([to_dict(es) for es in items])

    @app.route("/api/employeeSkills/all", methods=["GET"], endpoint="list_employee_skills_elsewhere")
    @token_required
    def list_employee_skills_elsewhere():
        items = service.list_available_to(request.args.get("compId"))
        return jsonify([to_dict(es) for es in items])

    @app.route("/api/employeeSkills/collate", methods=["GET"], endpoint="collate_employee_skills")
    @token_required
    def collate_employee_skills():
        return jsonify([summary_to_dict(s) for s in service.collate(request.args.get("compId"))])

    @app.route("/api/employeeSkills", methods=["POST"], endpoint="create_employee_skill")
    @token_required
    def create_employee_skill():
        saved = service.add_employee_skill(_from_json(company_uen=request.args.get("compId")))
        return jsonify(to_dict(saved)), 201

    @app.route("/api/employeeSkills", methods=["PUT"], endpoint="update_employee_skill")
    @token_required
    def update_employee_skill():
        saved = service.update_employee_skill(
            request.args.get("empId"),
            request.args.get("skillId"),
            _from_json(company_uen=request.args.get("compId")),
        )
        return jsonify(to_dict(saved))

    @app.route("/api/employeeSkills", methods=["DELETE"], endpoint="delete_employee_skill")
    @token_required
    def delete_employee_skill():
        service.delete_employee_skill(request.args.get("empId"), request.args.get("skillId"))
        return "", 204
