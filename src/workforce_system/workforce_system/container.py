from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .arts.mysql_art_repository import MySQLArtRepository
from .arts.repository import ArtRepository
from .arts.service import ArtService
from .auth.verifier import StaticTokenVerifier, TokenVerifier
from .companies.mysql_company_repository import MySQLCompanyRepository
from .companies.repository import CompanyRepository
from .companies.service import CompanyService
from .database.connection import DBConfig, DatabaseConnection
from .employee_skills.mysql_employee_skill_repository import MySQLEmployeeSkillRepository
from .employee_skills.repository import EmployeeSkillRepository
from .employee_skills.service import EmployeeSkillService
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .employees.service import EmployeeService
from .projects.mysql_project_repository import MySQLProjectRepository
from .projects.repository import ProjectRepository
from .projects.service import ProjectService
from .skills.mysql_skill_repository import MySQLSkillRepository
from .skills.repository import SkillRepository
from .skills.service import SkillService
from .transactions.mysql_transaction_repository import MySQLTransactionRepository
from .transactions.repository import TransactionRepository
from .transactions.service import TransactionService


@dataclass(frozen=True)
class Container:
    companies_repo: CompanyRepository
    employees_repo: EmployeeRepository
    arts_repo: ArtRepository
    transactions_repo: TransactionRepository
    skills_repo: SkillRepository
    employee_skills_repo: EmployeeSkillRepository
    projects_repo: ProjectRepository

    company_service: CompanyService
    employee_service: EmployeeService
    art_service: ArtService
    transaction_service: TransactionService
    skill_service: SkillService
    employee_skill_service: EmployeeSkillService
    project_service: ProjectService

    token_verifier: TokenVerifier
    conn: Optional[DatabaseConnection] = None


def wire(
    *,
    companies_repo: CompanyRepository,
    employees_repo: EmployeeRepository,
    arts_repo: ArtRepository,
    transactions_repo: TransactionRepository,
    skills_repo: SkillRepository,
    employee_skills_repo: EmployeeSkillRepository,
    projects_repo: ProjectRepository,
    token_verifier: TokenVerifier,
    conn: Optional[DatabaseConnection] = None,
) -> Container:
    company_service = CompanyService(companies_repo)
    employee_service = EmployeeService(employees_repo, company_service)
    art_service = ArtService(arts_repo, employee_service, company_service)
    transaction_service = TransactionService(transactions_repo)
    skill_service = SkillService(skills_repo)
    employee_skill_service = EmployeeSkillService(
        employee_skills_repo, employee_service, skill_service, company_service
    )
    project_service = ProjectService(projects_repo, employee_service, company_service)

    return Container(
        companies_repo=companies_repo,
        employees_repo=employees_repo,
        arts_repo=arts_repo,
        transactions_repo=transactions_repo,
        skills_repo=skills_repo,
        employee_skills_repo=employee_skills_repo,
        projects_repo=projects_repo,
        company_service=company_service,
        employee_service=employee_service,
        art_service=art_service,
        transaction_service=transaction_service,
        skill_service=skill_service,
        employee_skill_service=employee_skill_service,
        project_service=project_service,
        token_verifier=token_verifier,
        conn=conn,
    )


def build_container(*, db_config: dict, api_tokens: str = "") -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    return wire(
        companies_repo=MySQLCompanyRepository(conn),
        employees_repo=MySQLEmployeeRepository(conn),
        arts_repo=MySQLArtRepository(conn),
        transactions_repo=MySQLTransactionRepository(conn),
        skills_repo=MySQLSkillRepository(conn),
        employee_skills_repo=MySQLEmployeeSkillRepository(conn),
        projects_repo=MySQLProjectRepository(conn),
        token_verifier=StaticTokenVerifier.from_setting(api_tokens),
        conn=conn,
    )
