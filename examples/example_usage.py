"""Example: use the service layer directly (no Flask).

Controllers are a thin layer; business rules live in the services.
"""

import importlib

from config import get_settings_module

from src.payroll_system.payroll_system.common.datetime_utils import current_month
from src.payroll_system.payroll_system.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)
    report = container.payroll_report_service.build_monthly_report(current_month())
    print(report.to_dict())


if __name__ == "__main__":
    main()
