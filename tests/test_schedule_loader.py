"""
Unit tests for the ScheduleLoader.
"""
import json
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
import requests

from collection_calendar.exceptions import DownloadError, ParsingError
from collection_calendar.models import CollectionRecord
from collection_calendar.services.schedule_loader import ScheduleLoader, is_url

SAMPLE_PATH = Path(__file__).parent / "sample_calendar.json"
SAMPLE_URL = "https://donnees.ville.sherbrooke.qc.ca/calendrier-collectes.json"


def wrap(entries):
    return json.dumps(
        {"CALENDRIER_COLLECTES": {"COLLECTE_MATIERES_RESIDUELLES": entries}}
    )


def test_load_local_file():
    records = ScheduleLoader().load(str(SAMPLE_PATH))

    assert len(records) == 4
    assert records[0] == CollectionRecord(
        municipality_id="43027",
        code_id="1",
        week_number="01",
        date_begin="2014-01-06",
        date_end="2014-01-06",
        district="Arrondissement du Mont-Bellevue",
        type="D",
        description="Déchets",
        information="",
    )
    assert records[3].information == "Holiday"


def test_load_missing_file_raises_os_error(tmp_path):
    with pytest.raises(OSError):
        ScheduleLoader().load(str(tmp_path / "missing.json"))


def test_missing_record_keys_default_to_empty():
    records = ScheduleLoader().parse_document(wrap([{"NO_SEM": "01"}]))

    assert records == [CollectionRecord(week_number="01")]


def test_empty_record_list_is_valid():
    assert ScheduleLoader().parse_document(wrap([])) == []


@pytest.mark.parametrize(
    "text",
    [
        "not json",
        json.dumps({"OTHER": {}}),
        json.dumps({"CALENDRIER_COLLECTES": {}}),
        json.dumps({"CALENDRIER_COLLECTES": {"COLLECTE_MATIERES_RESIDUELLES": {}}}),
        json.dumps([1, 2]),
        wrap(["not an object"]),
        wrap([{"NO_SEM": 1}]),
    ],
)
def test_malformed_documents_raise_parsing_error(text):
    with pytest.raises(ParsingError):
        ScheduleLoader().parse_document(text)


def test_is_url():
    assert is_url("http://example.com/a.json")
    assert is_url(SAMPLE_URL)
    assert not is_url("calendrier.json")


@patch("collection_calendar.services.schedule_loader.requests.get")
def test_download_success(mock_requests_get):
    # Arrange
    mock_response = MagicMock()
    mock_response.text = SAMPLE_PATH.read_text(encoding="utf-8")
    mock_response.raise_for_status.return_value = None
    mock_requests_get.return_value = mock_response

    # Act
    records = ScheduleLoader().load(SAMPLE_URL)

    # Assert
    assert len(records) == 4
    mock_requests_get.assert_called_once_with(SAMPLE_URL, timeout=30)


@patch("collection_calendar.services.schedule_loader.requests.get")
def test_download_failure_raises_download_error(mock_requests_get):
    mock_requests_get.side_effect = requests.exceptions.RequestException(
        "Network error"
    )
    loader = ScheduleLoader(max_retries=2, retry_delay=0)

    with pytest.raises(DownloadError, match="Network error"):
        loader.load(SAMPLE_URL)
    assert mock_requests_get.call_count == 2


@patch("collection_calendar.services.schedule_loader.requests.get")
def test_download_retries_after_http_error(mock_requests_get):
    # Arrange
    failing = MagicMock()
    failing.raise_for_status.side_effect = requests.exceptions.HTTPError("Bad Gateway")
    succeeding = MagicMock()
    succeeding.text = wrap([])
    succeeding.raise_for_status.return_value = None
    mock_requests_get.side_effect = [failing, succeeding]
    loader = ScheduleLoader(max_retries=3, retry_delay=0)

    # Act
    records = loader.load(SAMPLE_URL)

    # Assert
    assert records == []
    assert mock_requests_get.call_count == 2


@patch("collection_calendar.services.schedule_loader.requests.get")
def test_downloaded_invalid_content_is_not_retried(mock_requests_get):
    mock_response = MagicMock()
    mock_response.text = "<html>maintenance</html>"
    mock_requests_get.return_value = mock_response

    with pytest.raises(ParsingError):
        ScheduleLoader(retry_delay=0).load(SAMPLE_URL)
    mock_requests_get.assert_called_once()


def test_null_record_values_default_to_empty():
    records = ScheduleLoader().parse_document(
        wrap([{"NO_SEM": "01", "INFO": None, "DESC": None}])
    )

    assert records == [CollectionRecord(week_number="01")]


def test_numeric_record_values_are_rejected():
    with pytest.raises(ParsingError, match="CODEID"):
        ScheduleLoader().parse_document(wrap([{"CODEID": 4}]))


def test_load_replaces_undecodable_bytes(tmp_path):
    document = tmp_path / "latin1.json"
    document.write_bytes(
        b'{"CALENDRIER_COLLECTES": {"COLLECTE_MATIERES_RESIDUELLES": '
        b'[{"NO_SEM": "01", "INFO": "f\xe9ri\xe9"}]}}'
    )

    records = ScheduleLoader().load(str(document))

    assert records[0].information == "f�ri�"
