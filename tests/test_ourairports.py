"""Unit tests for the OurAirports loader and its cache."""

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
import requests

from airport_dataset.errors import ReferenceSourceError
from airport_dataset.sources.ourairports import OurAirportsSource

CSV_TEXT = (
    '"id","ident","type","name","iso_country","municipality","iata_code"\n'
    '5325,"RJAA","large_airport","Narita International Airport","JP","Narita","NRT"\n'
    '3622,"KEWR","large_airport","Newark Liberty International Airport","US","Newark, NJ","EWR"\n'
)


def _response(status: int, text: str = "") -> MagicMock:
    resp = MagicMock()
    resp.status_code = status
    resp.ok = 200 <= status < 300
    resp.text = text
    resp.content = text.encode("utf-8")
    return resp


class TestOurAirportsSource:
    """Tests for OurAirportsSource."""

    @patch("airport_dataset.sources.ourairports.requests.get")
    def test_cache_takes_precedence(self, mock_get: MagicMock, tmp_path: Path) -> None:
        cache = tmp_path / "ourairports.csv"
        cache.write_text(CSV_TEXT, encoding="utf-8")

        index = OurAirportsSource(url="https://example/airports.csv", cache_path=cache).load_index()

        mock_get.assert_not_called()
        assert set(index) == {"RJAA", "KEWR"}
        assert index["KEWR"].municipality == "Newark, NJ"

    @patch("airport_dataset.sources.ourairports.requests.get")
    def test_download_writes_cache(self, mock_get: MagicMock, tmp_path: Path) -> None:
        mock_get.return_value = _response(200, CSV_TEXT)
        cache = tmp_path / "nested" / "dir" / "ourairports.csv"

        rows = OurAirportsSource(url="https://example/airports.csv", cache_path=cache).load_rows()

        assert len(rows) == 2
        assert cache.read_text(encoding="utf-8") == CSV_TEXT
        assert mock_get.call_args[0][0] == "https://example/airports.csv"

    @patch("airport_dataset.sources.ourairports.requests.get")
    def test_download_without_cache(self, mock_get: MagicMock) -> None:
        mock_get.return_value = _response(200, CSV_TEXT)

        index = OurAirportsSource(url="https://example/airports.csv").load_index()

        assert index["RJAA"].iata == "NRT"

    @patch("airport_dataset.sources.ourairports.requests.get")
    def test_http_error_raises(self, mock_get: MagicMock, tmp_path: Path) -> None:
        mock_get.return_value = _response(503, "Service Unavailable")
        cache = tmp_path / "ourairports.csv"

        with pytest.raises(ReferenceSourceError) as exc_info:
            OurAirportsSource(cache_path=cache).load_rows()

        assert exc_info.value.status == 503
        assert not cache.exists()

    @patch("airport_dataset.sources.ourairports.requests.get")
    def test_network_error_raises_reference_error(self, mock_get: MagicMock, tmp_path: Path) -> None:
        mock_get.side_effect = requests.ConnectionError("down")

        with pytest.raises(ReferenceSourceError) as exc_info:
            OurAirportsSource(cache_path=tmp_path / "ourairports.csv").load_index()

        assert exc_info.value.status is None
        assert "down" in str(exc_info.value)
