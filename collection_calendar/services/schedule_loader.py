"""
This module defines the ScheduleLoader for reading and decoding schedule documents.
"""
import json
import logging
import time
from typing import List

import requests

from ..config import (
    DOCUMENT_RECORDS_KEY,
    DOCUMENT_ROOT_KEY,
    DOWNLOAD_MAX_RETRIES,
    DOWNLOAD_RETRY_DELAY,
    DOWNLOAD_TIMEOUT,
)
from ..exceptions import DownloadError, ParsingError
from ..models import CollectionRecord

# Get a logger instance for this module
logger = logging.getLogger(__name__)

# Document key for each CollectionRecord field
RECORD_FIELDS = {
    "municipality_id": "MUNID",
    "code_id": "CODEID",
    "week_number": "NO_SEM",
    "date_begin": "DT01",
    "date_end": "DT02",
    "district": "ARROND",
    "type": "TYPE",
    "description": "DESC",
    "information": "INFO",
}


def is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


class ScheduleLoader:
    """Handles reading and decoding of collection schedule documents."""

    def __init__(
        self,
        max_retries: int = DOWNLOAD_MAX_RETRIES,
        retry_delay: float = DOWNLOAD_RETRY_DELAY,
        timeout: float = DOWNLOAD_TIMEOUT,
    ):
        self.max_retries = max_retries
        self.retry_delay = retry_delay
        self.timeout = timeout

    def load(self, source: str) -> List[CollectionRecord]:
        """
        Reads a schedule document and decodes it into collection records.

        Args:
            source: A local file path, or an http(s) URL of the document.

        Returns:
            The records in document order.

        Raises:
            OSError: If the local file cannot be read.
            DownloadError: If the document cannot be downloaded after retries.
            ParsingError: If the document is not a valid schedule.
        """
        if is_url(source):
            text = self._download_text(source)
        else:
            with open(source, "r", encoding="utf-8", errors="replace") as f:
                text = f.read()
            logger.info(f"Read schedule document from {source}")
        records = self.parse_document(text)
        logger.info(f"Decoded {len(records)} records from {source}")
        return records

    def _download_text(self, url: str) -> str:
        """Downloads the document, retrying on network or HTTP errors."""
        for attempt in range(self.max_retries):
            try:
                response = requests.get(url, timeout=self.timeout)
                response.raise_for_status()
                logger.info(f"Successfully downloaded schedule document from {url}")
                return response.text
            except requests.exceptions.RequestException as e:
                logger.warning(f"Attempt {attempt + 1} failed for {url}. Error: {e}")
                if attempt + 1 == self.max_retries:
                    raise DownloadError(
                        f"Error downloading schedule document from {url}: {e}"
                    ) from e
                time.sleep(self.retry_delay)
        raise DownloadError(f"No download attempt was made for {url}")

    def parse_document(self, text: str) -> List[CollectionRecord]:
        """Decode the JSON schedule document into CollectionRecord objects."""
        try:
            document = json.loads(text)
        except json.JSONDecodeError as e:
            raise ParsingError(f"Failed to parse schedule document: {e}") from e

        try:
            entries = document[DOCUMENT_ROOT_KEY][DOCUMENT_RECORDS_KEY]
        except (KeyError, TypeError) as e:
            raise ParsingError(
                f"Schedule document has no {DOCUMENT_ROOT_KEY}.{DOCUMENT_RECORDS_KEY} list"
            ) from e
        if not isinstance(entries, list):
            raise ParsingError(f"{DOCUMENT_RECORDS_KEY} is not a list")

        return [self._parse_record(index, entry) for index, entry in enumerate(entries)]

    @staticmethod
    def _parse_record(index: int, entry: dict) -> CollectionRecord:
        if not isinstance(entry, dict):
            raise ParsingError(f"Record {index} is not an object")
        values = {}
        for field_name, key in RECORD_FIELDS.items():
            value = entry.get(key)
            if value is None:
                value = ""
            if not isinstance(value, str):
                raise ParsingError(
                    f"Record {index}: field {key} must be a string, got {type(value).__name__}"
                )
            values[field_name] = value
        return CollectionRecord(**values)
