"""Example: monthly figures for one user straight from the service layer.

The engine has no UI of its own; this prints the aggregate fields that a
report page or export would format.
"""

import sys
from datetime import date

from src.worktime.worktime.main import create_container


def main():
    user_id = sys.argv[1] if len(sys.argv) > 1 else "demo@example.com"
    today = date.today()

    container = create_container()
    report = container.report_service.monthly_report(user_id, today.year, today.month)

    print(f"{user_id} {report.start_date}..{report.end_date}")
    print(f"  total={report.total_minutes} min  work days={report.work_day_count}  avg={report.average_minutes} min")
    print(f"  longest day={report.longest_day_minutes} min")
    print(f"  earliest in={report.earliest_check_in}  latest out={report.latest_check_out}")
    for day in report.daily_data:
        if day.total_minutes or day.issues:
            print(f"  {day.work_date} {day.total_minutes:>4} min complete={day.is_complete} issues={list(day.issues)}")

    stats = container.report_service.work_day_stats(user_id, today)
    print(f"  attendance days: month={stats.monthly} year={stats.yearly}")


if __name__ == "__main__":
    main()
