from prefect import flow, get_run_logger, task
from prefect.cache_policies import NO_CACHE

from nextlaunch.fetcher import LaunchFetcher
from nextlaunch.formatter import format_launch_data
from nextlaunch.models import DisplayRecord, FetchResult
from nextlaunch.utils.utils import generate_task_run_name


# Every run is a fresh lookup, never served from a cached task result
@task(name="Fetch", task_run_name=generate_task_run_name("Fetch"), cache_policy=NO_CACHE)
def fetch_task(fetcher: LaunchFetcher) -> FetchResult:
    return fetcher.fetch_next_launch()


@task(name="Format", task_run_name=generate_task_run_name("Format"), cache_policy=NO_CACHE)
def format_task(result: FetchResult) -> DisplayRecord:
    return format_launch_data(result.launch, result.launchpad)


@flow
def next_launch_flow(base_url: None | str = None) -> dict:
    logger = get_run_logger()
    fetcher = LaunchFetcher(base_url) if base_url else LaunchFetcher()

    # Launchpad resolution happens inside the fetch, so the two steps run in order
    result = fetch_task(fetcher)
    record = format_task(result)

    logger.info(
        "%s from %s in %s day(s): %s",
        record.mission_name,
        record.launch_site,
        record.days_until_launch,
        record.launch_date,
    )
    return record.to_dict()


if __name__ == "__main__":
    next_launch_flow()
