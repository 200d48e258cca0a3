"""
This module selects the records of a single district.
"""
from typing import Iterable, Iterator

from ..models import CollectionRecord


def filter_records(
    records: Iterable[CollectionRecord], district: str
) -> Iterator[CollectionRecord]:
    """Yield the records whose district is exactly `district`, in order."""
    return (record for record in records if record.district == district)
