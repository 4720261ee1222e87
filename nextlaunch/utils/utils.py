from datetime import datetime, timezone

from prefect.runtime import task_run


def parse_date(s: str | None) -> datetime | None:
    if not s or s.strip() == "":
        return None
    try:
        # Try parsing full ISO format with milliseconds
        parsed = datetime.strptime(s, "%Y-%m-%dT%H:%M:%S.%fZ")
    except ValueError:
        try:
            # Fallback to ISO format without milliseconds
            parsed = datetime.strptime(s, "%Y-%m-%dT%H:%M:%SZ")
        except ValueError:
            # Offsets other than Z, e.g. launch dates in local time
            parsed = datetime.fromisoformat(s)

    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def generate_task_run_name(step_name: str):
    def _generate_name():
        result = task_run.get_parameters().get("result")
        if result is None:
            return f"Next Launch - {step_name}"
        return f"{result.launch.name} - {step_name}"

    return _generate_name
