from __future__ import annotations

from dataclasses import replace
from datetime import date

import pytest

from src.workforce_system.workforce_system.auth.verifier import StaticTokenVerifier
from src.workforce_system.workforce_system.companies.model import Company
from src.workforce_system.workforce_system.container import wire
from src.workforce_system.workforce_system.employee_skills.model import SkillSummary
from src.workforce_system.workforce_system.employees.model import Employee
from src.workforce_system.workforce_system.main import create_app
from src.workforce_system.workforce_system.projects.model import ProjectMember


class MemCompanies:
    def __init__(self, *companies):
        self.rows = {c.uen: c for c in companies}

    def list_all(self):
        return list(self.rows.values())

    def get_by_uen(self, uen):
        return self.rows.get(uen)

    def get_by_name(self, name):
        return next((c for c in self.rows.values() if c.name == name), None)

    def insert(self, company):
        self.rows[company.uen] = company
        return company

    def update(self, company):
        self.rows[company.uen] = company
        return company

    def delete_by_uen(self, uen):
        return self.rows.pop(uen, None) is not None


class MemEmployees:
    def __init__(self, *employees):
        self.rows = {e.work_permit_number: e for e in employees}

    def get_by_id(self, work_permit_number):
        return self.rows.get(work_permit_number)

    def list_by_company(self, company_uen):
        return [e for e in self.rows.values() if e.company_uen == company_uen]


class MemArts:
    def list_all(self):
        return []

    def list_latest_per_employee(self, *, company_uen=None):
        return []


class MemTransactions:
    def __init__(self):
        self.rows = {}

    def list_all(self):
        return list(self.rows.values())

    def list_by_employee(self, employee_id):
        return [t for t in self.rows.values() if t.employee_id == employee_id]

    def get_by_employee_and_start_date(self, *, employee_id, start_date):
        return next(
            (t for t in self.rows.values() if t.employee_id == employee_id and t.start_date == start_date),
            None,
        )

    def get_by_key(self, key):
        return self.rows.get(key)

    def insert(self, transaction):
        self.rows[transaction.key] = transaction
        return transaction

    def update_status(self, key, status):
        self.rows[key] = replace(self.rows[key], status=status)

    def delete_by_key(self, key):
        return self.rows.pop(key, None) is not None

    def list_by_loan_company(self, company_uen):
        return [t for t in self.rows.values() if t.loan_company_uen == company_uen]

    def list_by_borrowing_company(self, company_uen):
        return [t for t in self.rows.values() if t.borrowing_company_uen == company_uen]


class MemSkills:
    def __init__(self):
        self.rows = {}

    def list_all(self):
        return list(self.rows.values())

    def get_by_name(self, name):
        return self.rows.get(name)

    def insert(self, skill):
        self.rows[skill.name] = skill
        return skill


class MemEmployeeSkills:
    def __init__(self):
        self.rows = {}

    def list_all(self):
        return list(self.rows.values())

    def get_by_key(self, key):
        return self.rows.get(key)

    def insert(self, employee_skill):
        self.rows[employee_skill.key] = employee_skill
        return employee_skill

    def summarize_excluding_company(self, company_uen):
        by_skill = {}
        for es in self.rows.values():
            if es.company_uen != company_uen:
                by_skill.setdefault(es.skill, []).append(es.cost)
        return [
            SkillSummary(skill=skill, headcount=len(costs), min_cost=min(costs))
            for skill, costs in sorted(by_skill.items())
        ]


class MemProjects:
    def __init__(self):
        self.rows = {}
        self.members = {}

    def get_by_id(self, project_id):
        project = self.rows.get(project_id)
        if project is None:
            return None
        return replace(
            project,
            members=tuple(ProjectMember(work_permit_number=wp, name=WORKER.name) for wp in self.members.get(project_id, ())),
        )

    def insert(self, project):
        project_id = len(self.rows) + 1
        self.rows[project_id] = replace(project, project_id=project_id)
        return project_id

    def replace_members(self, project_id, employee_ids):
        self.members[project_id] = list(employee_ids)


LOANER = Company(uen="201900001A", name="Loaner Pte Ltd")
BORROWER = Company(uen="201900002B", name="Borrower Pte Ltd")

WORKER = Employee(
    work_permit_number="WP00012345",
    name="Rahim Uddin",
    passport_number="BD12345678",
    work_id="WID0001234",
    employee_role="Welder",
    levy=450,
    work_permit_date_of_issue=date(2023, 1, 1),
    work_permit_expiry_date=date(2027, 1, 1),
    work_contact_number="81234567",
    work_site_location="Tuas South Avenue 1",
    singapore_address="Blk 12 Jurong West St 41",
    company_uen=LOANER.uen,
)

USER = {"Authorization": "Bearer user-token"}
ADMIN = {"Authorization": "Bearer admin-token"}


@pytest.fixture
def client(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    container = wire(
        companies_repo=MemCompanies(LOANER, BORROWER),
        employees_repo=MemEmployees(WORKER),
        arts_repo=MemArts(),
        transactions_repo=MemTransactions(),
        skills_repo=MemSkills(),
        employee_skills_repo=MemEmployeeSkills(),
        projects_repo=MemProjects(),
        token_verifier=StaticTokenVerifier.from_setting("admin-token:ADMIN,user-token:USER"),
    )
    app = create_app(container)
    return app.test_client()


def loan_body(start="2024-01-01", end="2024-01-31", **overrides):
    body = {
        "startDate": start,
        "endDate": end,
        "totalCost": 1000,
        "loanCompanyId": LOANER.uen,
        "borrowingCompanyId": BORROWER.uen,
        "employeeId": WORKER.work_permit_number,
        "status": "Pending",
    }
    body.update(overrides)
    return body


def test_health_needs_no_token(client):
    assert client.get("/health").get_json() == {"status": "ok"}


def test_requests_without_token_are_unauthorized(client):
    resp = client.get(f"/api/transactions/incoming?compId={LOANER.uen}")
    assert resp.status_code == 401
    assert resp.get_json()["error"] == "Unauthenticated"


def test_create_then_list_incoming_and_outgoing(client):
    resp = client.post("/api/transactions", json=loan_body(), headers=USER)
    assert resp.status_code == 201
    assert resp.get_json()["status"] == "Pending"

    incoming = client.get(f"/api/transactions/incoming?compId={LOANER.uen}", headers=USER).get_json()
    outgoing = client.get(f"/api/transactions/outgoing?compId={BORROWER.uen}", headers=USER).get_json()
    assert [t["employeeId"] for t in incoming] == [WORKER.work_permit_number]
    assert incoming == outgoing


def test_colliding_loan_returns_conflict_with_both_ranges(client):
    client.post("/api/transactions", json=loan_body(), headers=USER)
    resp = client.post("/api/transactions", json=loan_body("2024-01-15", "2024-02-15"), headers=USER)

    assert resp.status_code == 409
    body = resp.get_json()
    assert body["error"] == "DateConflict"
    assert body["conflictStartDate"] == "2024-01-01"
    assert body["conflictEndDate"] == "2024-01-31"


def test_unknown_employee_returns_not_found(client):
    resp = client.post("/api/transactions", json=loan_body(employeeId="WP99999999"), headers=USER)
    assert resp.status_code == 404


def test_missing_dates_is_bad_request(client):
    body = loan_body()
    del body["startDate"]
    resp = client.post("/api/transactions", json=body, headers=USER)
    assert resp.status_code == 400
    assert resp.get_json()["error"] == "MissingValue"


def test_status_update_and_delete(client):
    client.post("/api/transactions", json=loan_body(), headers=USER)

    resp = client.put(
        f"/api/transactions?empId={WORKER.work_permit_number}&date=2024-01-01&status=Accepted",
        headers=USER,
    )
    assert resp.status_code == 200
    assert resp.get_json()["status"] == "Accepted"
    assert resp.get_json()["totalCost"] == 1000

    resp = client.delete(f"/api/transactions?empId={WORKER.work_permit_number}&date=2024-01-01", headers=USER)
    assert resp.status_code == 204

    resp = client.delete(f"/api/transactions?empId={WORKER.work_permit_number}&date=2024-01-01", headers=USER)
    assert resp.status_code == 404


def test_company_writes_need_admin(client):
    body = {"uen": "201900003C", "name": "New Co"}
    assert client.post("/api/companies", json=body, headers=USER).status_code == 403
    assert client.post("/api/companies", json=body, headers=ADMIN).status_code == 201
    assert client.post("/api/companies", json=body, headers=ADMIN).status_code == 409


def test_listing_every_transaction_needs_admin(client):
    client.post("/api/transactions", json=loan_body(), headers=USER)
    assert client.get("/api/transactions", headers=USER).status_code == 403

    resp = client.get("/api/transactions", headers=ADMIN)
    assert resp.status_code == 200
    assert [t["startDate"] for t in resp.get_json()] == ["2024-01-01"]


def test_put_with_body_replaces_only_the_status(client):
    client.post("/api/transactions", json=loan_body(), headers=USER)

    resp = client.put(
        "/api/transactions",
        json=loan_body(end="2024-06-30", totalCost=5, status="Rejected"),
        headers=USER,
    )
    assert resp.status_code == 200
    body = resp.get_json()
    assert body["status"] == "Rejected"
    assert body["endDate"] == "2024-01-31"
    assert body["totalCost"] == 1000


def test_covid_tests_listed_without_company_filter(client):
    resp = client.get("/api/covidTest", headers=USER)
    assert resp.status_code == 200
    assert resp.get_json() == []


def test_skill_catalogue_writes_need_admin(client):
    body = {"skill": "Welding", "task": "Structural steel welding"}
    assert client.post("/api/skills", json=body, headers=USER).status_code == 403
    assert client.post("/api/skills", json=body, headers=ADMIN).status_code == 201
    assert client.get("/api/skills/Welding", headers=USER).get_json() == body


def test_employee_skill_marketplace_collates_other_companies(client):
    client.post("/api/skills", json={"skill": "Welding", "task": "Steel"}, headers=ADMIN)
    resp = client.post(
        f"/api/employeeSkills?compId={LOANER.uen}",
        json={"employeeId": WORKER.work_permit_number, "skillId": "Welding", "experience": 3, "rating": 4.5, "cost": 120},
        headers=USER,
    )
    assert resp.status_code == 201

    seen_by_borrower = client.get(f"/api/employeeSkills/collate?compId={BORROWER.uen}", headers=USER).get_json()
    seen_by_loaner = client.get(f"/api/employeeSkills/collate?compId={LOANER.uen}", headers=USER).get_json()
    assert seen_by_borrower == [{"name": "Welding", "pax": 1, "min": 120.0}]
    assert seen_by_loaner == []


def test_employee_skill_rating_above_five_is_bad_request(client):
    client.post("/api/skills", json={"skill": "Welding", "task": "Steel"}, headers=ADMIN)
    resp = client.post(
        f"/api/employeeSkills?compId={LOANER.uen}",
        json={"employeeId": WORKER.work_permit_number, "skillId": "Welding", "rating": 6},
        headers=USER,
    )
    assert resp.status_code == 400


def test_create_project_staffs_known_employees(client):
    body = {
        "projectName": "Tuas Depot",
        "startDate": "2024-01-01",
        "completionDate": "2024-12-31",
        "budget": "1.2M",
        "progress": 10,
        "employees": [{"workPermitNumber": WORKER.work_permit_number}],
    }
    resp = client.post("/api/projects", json=body, headers=USER)
    assert resp.status_code == 201
    created = resp.get_json()
    assert created["id"] == 1
    assert created["employees"] == [{"workPermitNumber": WORKER.work_permit_number, "name": WORKER.name}]

    body["employees"] = [{"workPermitNumber": "WP99999999"}]
    assert client.post("/api/projects", json=body, headers=USER).status_code == 404
