"""News item data model."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class NewsItem:
    """One ranked story from the news feed.

    Attributes:
        title: Story headline.
        url: Link target. ``None`` for text-only posts.
        score: Points, >= 0.
        author: Submitter handle.
        timestamp: Submission time, unix seconds.
        comments_count: Number of comments, >= 0.
    """

    title: str
    url: str | None
    score: int
    author: str
    timestamp: int
    comments_count: int
