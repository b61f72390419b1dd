"""Fan-out/fan-in aggregation of details, photos and reviews for one location."""

import asyncio
import logging

from core.content_api import ContentApiClient
from core.models import AggregatedLocation

logger = logging.getLogger(__name__)


async def aggregate_location(client: ContentApiClient, location_id: int) -> AggregatedLocation:
    """Fetch the three location documents concurrently and merge them.

    All three calls must succeed. The first call to fail, in completion
    order, cancels whatever is still in flight and is re-raised; no partial
    result is returned.
    """
    details_task = asyncio.create_task(client.fetch_location_details(location_id))
    photos_task = asyncio.create_task(client.fetch_location_photos(location_id))
    reviews_task = asyncio.create_task(client.fetch_location_reviews(location_id))
    tasks = [details_task, photos_task, reviews_task]

    failures: list[BaseException] = []

    def record_failure(task: asyncio.Task) -> None:
        if not task.cancelled() and task.exception() is not None:
            failures.append(task.exception())

    for task in tasks:
        task.add_done_callback(record_failure)

    try:
        _, pending = await asyncio.wait(tasks, return_when=asyncio.FIRST_EXCEPTION)
    except asyncio.CancelledError:
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        raise

    if pending:
        for task in pending:
            task.cancel()
        await asyncio.gather(*pending, return_exceptions=True)

    if failures:
        raise failures[0]

    aggregated = AggregatedLocation(
        details=details_task.result().root,
        photos=photos_task.result().data,
        reviews=reviews_task.result().data,
    )

    logger.info("Aggregated location %d: %s", location_id, aggregated.model_dump_json())
    return aggregated
