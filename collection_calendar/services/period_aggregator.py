"""
This module folds collection records into calendar periods.

Records are grouped by contiguous runs of the same week number, not by
distinct week number: the weeks "12", "13", "12" give three periods. Within a
run, type codes and information notes are concatenated without a separator
and the dates of the last record win.
"""
from dataclasses import dataclass, field, replace
from datetime import date, datetime
from functools import reduce
from typing import Iterable, List, Optional

from ..config import DATE_FORMAT
from ..exceptions import DateParseError
from ..models import CollectionRecord, Period


@dataclass
class AggregationState:
    """Accumulator of the fold: closed periods plus the one being built."""

    periods: List[Period] = field(default_factory=list)
    current: Optional[Period] = None


def parse_date(value: str, date_format: str = DATE_FORMAT) -> date:
    try:
        parsed = datetime.strptime(value, date_format).date()
    except ValueError as e:
        raise DateParseError(f"Invalid date {value!r}: {e}") from e
    # strptime accepts unpadded fields such as "2014-1-6"
    if parsed.strftime(date_format) != value:
        raise DateParseError(f"Invalid date {value!r}: expected format {date_format!r}")
    return parsed


def fold_record(
    state: AggregationState, record: CollectionRecord, date_format: str = DATE_FORMAT
) -> AggregationState:
    """Merge one record into the state, closing the current period on a week change."""
    date_begin = parse_date(record.date_begin, date_format)
    date_end = parse_date(record.date_end, date_format)

    current = state.current
    if current is not None and current.number != record.week_number:
        state.periods.append(current)
        current = None
    if current is None:
        current = Period()

    state.current = replace(
        current,
        number=record.week_number,
        types=current.types + record.type,
        date_begin=date_begin,
        date_end=date_end,
        information=current.information + record.information,
    )
    return state


def finish(state: AggregationState) -> List[Period]:
    """Flush the last period. Without any record this is an empty Period."""
    last = state.current if state.current is not None else Period()
    return state.periods + [last]


def aggregate_periods(
    records: Iterable[CollectionRecord], date_format: str = DATE_FORMAT
) -> List[Period]:
    """
    Fold the records into periods.

    Raises:
        DateParseError: If any record has a malformed date. The whole
            aggregation is aborted.
    """
    state = reduce(
        lambda acc, record: fold_record(acc, record, date_format),
        records,
        AggregationState(),
    )
    return finish(state)
