"""Extract related videos from a youtubei ``next`` response."""

from typing import Any

from ..schemas import RelatedVideo

VIDEO_CONTENT_TYPE = "LOCKUP_CONTENT_TYPE_VIDEO"


def _dig(data: Any, *path: str | int) -> Any:
    for key in path:
        if isinstance(key, int):
            if not isinstance(data, list) or not -len(data) <= key < len(data):
                return None
        elif not isinstance(data, dict):
            return None
        data = data[key] if isinstance(key, int) else data.get(key)
        if data is None:
            return None
    return data


def _text(node: Any) -> str | None:
    """Read a youtubei text node in any of its ``simpleText``/``runs``/``content`` forms."""
    if not isinstance(node, dict):
        return None
    if "simpleText" in node:
        return node["simpleText"]
    if "content" in node:
        return node["content"]
    runs = node.get("runs")
    if runs:
        return "".join(run.get("text", "") for run in runs)
    return None


def _parse_compact_video(renderer: dict[str, Any]) -> RelatedVideo | None:
    video_id = renderer.get("videoId")
    if not video_id:
        return None

    thumbnails = _dig(renderer, "thumbnail", "thumbnails") or []
    return RelatedVideo(
        videoId=video_id,
        title=_text(renderer.get("title")),
        channel=_text(renderer.get("longBylineText")) or _text(renderer.get("shortBylineText")),
        duration=_text(renderer.get("lengthText")),
        views=_text(renderer.get("viewCountText")) or _text(renderer.get("shortViewCountText")),
        published=_text(renderer.get("publishedTimeText")),
        thumbnail=thumbnails[-1].get("url") if thumbnails else None,
    )


def _parse_lockup(lockup: dict[str, Any]) -> RelatedVideo | None:
    if lockup.get("contentType") != VIDEO_CONTENT_TYPE or not lockup.get("contentId"):
        return None

    metadata = _dig(lockup, "metadata", "lockupMetadataViewModel") or {}
    rows = _dig(metadata, "metadata", "contentMetadataViewModel", "metadataRows") or []
    row_texts = [[_text(part.get("text")) for part in row.get("metadataParts") or []] for row in rows]

    image = _dig(lockup, "contentImage", "thumbnailViewModel") or {}
    sources = _dig(image, "image", "sources") or []

    duration = None
    for overlay in image.get("overlays") or []:
        badge = _dig(overlay, "thumbnailOverlayBadgeViewModel", "thumbnailBadges", 0, "thumbnailBadgeViewModel")
        if badge and badge.get("text"):
            duration = badge["text"]
            break

    return RelatedVideo(
        videoId=lockup["contentId"],
        title=_text(metadata.get("title")),
        channel=_dig(row_texts, 0, 0),
        duration=duration,
        views=_dig(row_texts, 1, 0),
        published=_dig(row_texts, 1, 1),
        thumbnail=sources[-1].get("url") if sources else None,
    )


def _iter_items(results: list[dict[str, Any]]):
    for item in results:
        nested = _dig(item, "itemSectionRenderer", "contents")
        if nested:
            yield from _iter_items(nested)
        else:
            yield item


def parse_related_videos(data: dict[str, Any], video_id: str | None = None) -> list[RelatedVideo]:
    """Collect related videos from the watch-next sidebar.

    Args:
        data: Decoded JSON body of the ``youtubei/v1/next`` call
        video_id: Identifier of the source video, excluded from the results

    Returns:
        Related videos in sidebar order, without duplicates
    """
    results = _dig(data, "contents", "twoColumnWatchNextResults", "secondaryResults", "secondaryResults", "results") or []

    videos: list[RelatedVideo] = []
    seen = {video_id} if video_id else set()
    for item in _iter_items(results):
        if "compactVideoRenderer" in item:
            video = _parse_compact_video(item["compactVideoRenderer"])
        elif "lockupViewModel" in item:
            video = _parse_lockup(item["lockupViewModel"])
        else:
            continue

        if video is None or video.videoId in seen:
            continue
        seen.add(video.videoId)
        videos.append(video)

    return videos
