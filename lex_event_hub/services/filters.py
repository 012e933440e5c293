"""
Quality standard: One predicate, two backends.
Reason: The live listing filters in memory and the database filters in SQL.
Both derive their time window, search and category rules from EventQuery, so
"this weekend" means the same thing on either path.
"""
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from enum import Enum
from typing import Iterable, Optional

from sqlalchemy import func, or_

FRIDAY = 4  # datetime.weekday(): Monday=0


class EventFilter(str, Enum):
    ALL = "all"
    WEEK = "week"
    WEEKEND = "weekend"
    FREE = "free"


@dataclass(frozen=True)
class TimeWindow:
    start: datetime
    end: Optional[datetime] = None
    free_only: bool = False

    def contains(self, moment: datetime) -> bool:
        if moment < self.start:
            return False
        return self.end is None or moment <= self.end


def upcoming_weekend(now: datetime) -> tuple[datetime, datetime]:
    """Friday 00:00:00 through Sunday 23:59:59.999999 of the upcoming weekend.

    On Saturday and Sunday this already points at the following Friday.
    """
    days_until_friday = (FRIDAY - now.weekday()) % 7
    friday = (now + timedelta(days=days_until_friday)).replace(hour=0, minute=0, second=0, microsecond=0)
    sunday = (friday + timedelta(days=2)).replace(hour=23, minute=59, second=59, microsecond=999999)
    return friday, sunday


def resolve_window(mode: EventFilter, now: datetime) -> TimeWindow:
    if mode == EventFilter.WEEK:
        return TimeWindow(start=now, end=now + timedelta(days=7))
    if mode == EventFilter.WEEKEND:
        friday, sunday = upcoming_weekend(now)
        return TimeWindow(start=friday, end=sunday)
    if mode == EventFilter.FREE:
        return TimeWindow(start=now, free_only=True)
    return TimeWindow(start=now)


@dataclass
class EventQuery:
    """Filter mode + optional search text + optional category, pinned to `now`."""
    mode: EventFilter = EventFilter.ALL
    search: Optional[str] = None
    category: Optional[str] = None
    now: datetime = field(default_factory=datetime.now)

    def __post_init__(self):
        mode = self.mode.strip() if isinstance(self.mode, str) else self.mode
        self.mode = EventFilter(mode or EventFilter.ALL)
        self.search = (self.search or "").strip() or None
        self.category = (self.category or "").strip() or None

    @property
    def window(self) -> TimeWindow:
        return resolve_window(self.mode, self.now)

    def matches(self, event) -> bool:
        window = self.window
        if window.free_only and not event.is_free:
            return False
        if not window.contains(event.start_time):
            return False
        if self.category and (event.category or "").lower() != self.category.lower():
            return False
        if self.search:
            needle = self.search.lower()
            haystack = (event.title, event.description, event.location, event.category)
            if not any(needle in (text or "").lower() for text in haystack):
                return False
        return True

    def apply(self, events: Iterable) -> list:
        """Keeps the input order."""
        return [ev for ev in events if self.matches(ev)]

    def where_clauses(self, model) -> list:
        """The same predicate as SQLAlchemy conditions over `model` columns."""
        window = self.window
        conditions = [model.start_time >= window.start]
        if window.end is not None:
            conditions.append(model.start_time <= window.end)
        if window.free_only:
            conditions.append(model.is_free.is_(True))
        if self.category:
            conditions.append(func.lower(model.category) == self.category.lower())
        if self.search:
            # Literal substring: % and _ in the search text are escaped.
            # SQLite lower() folds ASCII only, so non-ASCII letters must match case.
            conditions.append(or_(
                model.title.icontains(self.search, autoescape=True),
                model.description.icontains(self.search, autoescape=True),
                model.location.icontains(self.search, autoescape=True),
                model.category.icontains(self.search, autoescape=True),
            ))
        return conditions
