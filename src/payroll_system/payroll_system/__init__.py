"""Payroll System package.

This package is organized by feature modules (users, departments, employees,
salaries, payroll) with a thin Flask controller layer and service/repository
layers underneath.
"""
