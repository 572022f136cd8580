"""Event listing passthrough."""

import structlog

from podstatus.errors import ListFailure
from podstatus.k8s.client import EventLister
from podstatus.k8s.models import Event
from podstatus.summary import resolve_namespace

logger = structlog.get_logger()


async def fetch_events(client: EventLister, namespace: str | None = "") -> list[Event]:
    """Events recorded in a namespace ("default" when empty), in cluster order."""
    namespace = resolve_namespace(namespace)
    logger.info("listing_events", namespace=namespace)
    try:
        events = await client.list_events(namespace)
    except ListFailure as e:
        logger.warning("event_list_failed", namespace=namespace, error=str(e))
        raise
    logger.info("events_fetched", namespace=namespace, count=len(events))
    return events
