"""Example: use the service layer without Flask.

Controllers stay thin; the hour figures come from the services.
"""

import importlib
from datetime import date

from config import get_settings_module

from src.work_hours.work_hours.container import build_container
from src.work_hours.work_hours.hours.state import SummaryState


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)
    data = container.dashboard_service.build(user_id=1, state=SummaryState(), today=date.today())
    print(f"today={data.daily:.2f}h week={data.weekly:.2f}h")
    for row in data.rows[:5]:
        print(row)


if __name__ == "__main__":
    main()
