from collections.abc import Iterable
from typing import Any

from youtube_related.utils import short_url


def with_short_url(records: Iterable[Any]) -> list[dict[str, Any]]:
    """Dump each scraped record and add its ``https://youtu.be/<id>`` link."""
    results = []
    for record in records:
        data = record.model_dump() if hasattr(record, "model_dump") else dict(record)
        results.append({**data, "url": short_url(data["videoId"])})
    return results
