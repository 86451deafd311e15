"""Bookmarked learning resources kept in a key-value store."""

from __future__ import annotations

import json
import logging
import time
from dataclasses import asdict, dataclass
from typing import Callable, MutableMapping

logger = logging.getLogger(__name__)

STORAGE_KEY = "defi-simulator-learning-links"

_DEFAULT_LINKS = (
    ("default-1", "What is DeFi? A Beginner's Guide", "https://ethereum.org/en/defi/"),
    (
        "default-2",
        "Understanding Liquidation Risk",
        "https://docs.aave.com/risk/asset-risk/risk-parameters",
    ),
    (
        "default-3",
        "DeFi Yield Farming Explained",
        "https://academy.binance.com/en/articles/what-is-yield-farming-in-decentralized-finance-defi",
    ),
)


@dataclass(frozen=True)
class LearningLink:
    id: str
    title: str
    url: str
    created_at: int  # epoch milliseconds


def _now_ms() -> int:
    return int(time.time() * 1000)


class LearningLinkStore:
    """Bookmark list serialized as JSON under a single key.

    Parameters
    ----------
    storage : MutableMapping[str, str]
        Backing store, e.g. ``st.session_state`` or a plain dict.
    key : str
        Key the JSON list is stored under.
    clock : Callable[[], int] | None
        Epoch-millisecond clock for new links.
    """

    def __init__(
        self,
        storage: MutableMapping[str, str],
        key: str = STORAGE_KEY,
        clock: Callable[[], int] | None = None,
    ) -> None:
        self._storage = storage
        self._key = key
        self._clock = clock or _now_ms

    def default_links(self) -> list[LearningLink]:
        now = self._clock()
        return [LearningLink(id=i, title=t, url=u, created_at=now) for i, t, u in _DEFAULT_LINKS]

    def load(self) -> list[LearningLink]:
        """Stored links, or the defaults when nothing usable is stored."""
        raw = self._storage.get(self._key)
        if not raw:
            return self.default_links()
        try:
            return [LearningLink(**item) for item in json.loads(raw)]
        except (TypeError, ValueError):
            logger.warning("Failed to load learning links; using defaults", exc_info=True)
            return self.default_links()

    def save(self, links: list[LearningLink]) -> None:
        self._storage[self._key] = json.dumps([asdict(link) for link in links])

    def add(self, title: str, url: str) -> LearningLink | None:
        """Append a link. Blank titles or URLs are ignored and return None."""
        title, url = title.strip(), url.strip()
        if not title or not url:
            return None
        now = self._clock()
        links = self.load()
        link = LearningLink(id=f"link-{now}-{len(links)}", title=title, url=url, created_at=now)
        links.append(link)
        self.save(links)
        return link

    def remove(self, link_id: str) -> bool:
        links = self.load()
        kept = [link for link in links if link.id != link_id]
        if len(kept) == len(links):
            return False
        self.save(kept)
        return True
