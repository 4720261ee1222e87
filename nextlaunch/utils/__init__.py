from nextlaunch.utils.utils import generate_task_run_name, parse_date, utc_now

__all__ = ["parse_date", "utc_now", "generate_task_run_name"]
