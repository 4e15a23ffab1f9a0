"""Workforce System package.

Feature modules (companies, employees, arts, transactions) each follow the same
split: a frozen dataclass model, a repository Protocol, a MySQL repository, a
service holding the business rules and a thin Flask controller.
"""
