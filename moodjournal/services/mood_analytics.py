# moodjournal/services/mood_analytics.py
"""
Derived statistics over a user's mood entries.

Everything here is a pure function of the entries passed in and an explicit
``today``; nothing touches the database or the clock. Entries may be the
pydantic ``MoodEntry`` schema or the ORM row, anything with ``date``,
``mood`` and ``note`` attributes.
"""
from __future__ import annotations

from datetime import date, timedelta
from typing import Iterable, List, Optional, Sequence

from moodjournal.models.analytics import MoodCount, MoodStats, WeeklyTrend
from moodjournal.models.mood import Mood, mood_label, mood_score

WEEK = timedelta(days=7)


# --------------------------- distribution -----------------------------------

def mood_distribution(entries: Sequence) -> List[MoodCount]:
    """Count and percentage per mood, in the mood declaration order."""
    counts = {m: 0 for m in Mood}
    for entry in entries:
        try:
            counts[Mood(entry.mood)] += 1
        except ValueError:
            continue

    total = len(entries)
    return [
        MoodCount(
            mood=m,
            label=m.label,
            count=counts[m],
            percentage=(counts[m] / total * 100) if total > 0 else 0.0,
        )
        for m in Mood
    ]


def most_common_mood(entries: Sequence) -> Optional[Mood]:
    """The most frequent mood; ties go to the mood declared first."""
    if not entries:
        return None
    best: Optional[MoodCount] = None
    for row in mood_distribution(entries):
        if best is None or row.count > best.count:
            best = row
    return best.mood


# ------------------------------ streak --------------------------------------

def current_streak(entries: Iterable, today: date) -> int:
    """
    Consecutive days with an entry, counting back from ``today``.

    The i-th newest entry must fall exactly on ``today - i`` days; the first
    entry that does not ends the streak.
    """
    streak = 0
    ordered = sorted(entries, key=lambda e: e.date, reverse=True)
    for i, entry in enumerate(ordered):
        if entry.date != today - timedelta(days=i):
            break
        streak += 1
    return streak


# --------------------------- weekly trend -----------------------------------

def _average_score(entries: Sequence) -> float:
    if not entries:
        return 0.0
    return sum(mood_score(e.mood) for e in entries) / len(entries)


def this_week_entries(entries: Iterable, today: date) -> list:
    week_start = today - WEEK
    return [e for e in entries if e.date >= week_start]


def previous_week_entries(entries: Iterable, today: date) -> list:
    week_start = today - WEEK
    prev_start = today - 2 * WEEK
    return [e for e in entries if prev_start <= e.date < week_start]


def this_week_count(entries: Iterable, today: date) -> int:
    return len(this_week_entries(entries, today))


def weekly_trend(entries: Sequence, today: date) -> WeeklyTrend:
    """Compare the average mood score of the last 7 days with the 7 before."""
    this_week = this_week_entries(entries, today)
    previous_week = previous_week_entries(entries, today)

    this_avg = _average_score(this_week)
    prev_avg = _average_score(previous_week)
    if this_avg > prev_avg:
        direction = "up"
    elif this_avg < prev_avg:
        direction = "down"
    else:
        direction = "stable"

    return WeeklyTrend(
        this_week_average=this_avg,
        previous_week_average=prev_avg,
        this_week_count=len(this_week),
        previous_week_count=len(previous_week),
        direction=direction,
        has_previous_week=bool(previous_week),
    )


# ------------------------------ search --------------------------------------

def format_short_date(d: date) -> str:
    """en-US short date, e.g. ``1/15/2024``."""
    return f"{d.month}/{d.day}/{d.year}"


def entry_matches(entry, term: str) -> bool:
    needle = term.lower()
    label = (mood_label(entry.mood) or "").lower()
    if needle in label:
        return True
    if entry.note is not None and needle in entry.note.lower():
        return True
    return needle in format_short_date(entry.date).lower()


def search_entries(entries: Iterable, term: Optional[str]) -> list:
    """History entries matching ``term``, newest first. Empty term keeps all."""
    matched = [e for e in entries if not term or entry_matches(e, term)]
    return sorted(matched, key=lambda e: e.date, reverse=True)


# ------------------------------ summary -------------------------------------

def summarize(entries: Sequence, today: date) -> MoodStats:
    entries = list(entries)
    return MoodStats(
        total_entries=len(entries),
        distribution=mood_distribution(entries),
        most_common_mood=most_common_mood(entries),
        current_streak=current_streak(entries, today),
        this_week_count=this_week_count(entries, today),
        weekly_trend=weekly_trend(entries, today),
    )
