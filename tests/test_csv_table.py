"""Unit tests for CSV parsing and the OurAirports index."""

from airport_dataset.reference.csv_table import build_index, parse_csv


class TestParseCsv:
    """Tests for parse_csv."""

    def test_header_defines_fields(self) -> None:
        rows = parse_csv("ident,name\nKJFK,John F Kennedy\nEGLL,Heathrow\n")
        assert rows == [
            {"ident": "KJFK", "name": "John F Kennedy"},
            {"ident": "EGLL", "name": "Heathrow"},
        ]

    def test_quoted_comma(self) -> None:
        rows = parse_csv('ident,municipality\nKEWR,"Newark, NJ"\n')
        assert rows[0]["municipality"] == "Newark, NJ"

    def test_escaped_quotes(self) -> None:
        rows = parse_csv('id,note\n1,"She said ""hi"""\n')
        assert rows[0]["note"] == 'She said "hi"'

    def test_crlf_line_endings(self) -> None:
        rows = parse_csv("ident,name\r\nRJAA,Narita\r\nRJTT,Haneda\r\n")
        assert [r["ident"] for r in rows] == ["RJAA", "RJTT"]
        assert rows[1]["name"] == "Haneda"

    def test_blank_lines_skipped(self) -> None:
        rows = parse_csv("\n\nident,name\n\n   \nLFPG,Charles de Gaulle\n\n")
        assert rows == [{"ident": "LFPG", "name": "Charles de Gaulle"}]

    def test_missing_trailing_fields_are_empty_strings(self) -> None:
        rows = parse_csv("ident,iata_code,name\nEDDF\n")
        assert rows == [{"ident": "EDDF", "iata_code": "", "name": ""}]

    def test_extra_fields_ignored(self) -> None:
        rows = parse_csv("ident,name\nEDDF,Frankfurt,extra,more\n")
        assert rows == [{"ident": "EDDF", "name": "Frankfurt"}]

    def test_unterminated_quote_only_affects_its_row(self) -> None:
        rows = parse_csv('ident,name\nAAAA,"Bad name\nBBBB,Second\nCCCC,Third\n')
        assert [r["ident"] for r in rows] == ["AAAA", "BBBB", "CCCC"]
        assert rows[0]["name"] == "Bad name"
        assert rows[1] == {"ident": "BBBB", "name": "Second"}
        assert rows[2] == {"ident": "CCCC", "name": "Third"}

    def test_stray_quote_keeps_large_table_indexed(self) -> None:
        lines = ["ident,name", 'A000,"Stray quote']
        lines += [f"Z{i:03d},Airport {i}" for i in range(1, 500)]
        index = build_index(parse_csv("\n".join(lines)))
        assert len(index) == 500
        assert index["Z499"].name == "Airport 499"

    def test_unterminated_quote_does_not_raise(self) -> None:
        rows = parse_csv('id,note\n1,"never closed\n')
        assert len(rows) == 1
        assert rows[0]["id"] == "1"
        assert rows[0]["note"].startswith("never closed")

    def test_empty_input(self) -> None:
        assert parse_csv("") == []
        assert parse_csv("\n \n") == []

    def test_header_only(self) -> None:
        assert parse_csv("ident,name\n") == []


class TestBuildIndex:
    """Tests for build_index."""

    def test_indexes_by_uppercase_ident(self) -> None:
        index = build_index(
            [{"ident": "rjaa", "iata_code": "NRT", "name": "Narita", "municipality": "Narita", "iso_country": "JP"}]
        )
        row = index["RJAA"]
        assert row.icao == "RJAA"
        assert row.iata == "NRT"
        assert row.municipality == "Narita"
        assert row.iso_country == "JP"

    def test_empty_fields_become_none(self) -> None:
        index = build_index([{"ident": "00AA", "iata_code": "", "name": "Strip", "municipality": ""}])
        row = index["00AA"]
        assert row.iata is None
        assert row.municipality is None
        assert row.iso_country is None

    def test_rows_without_ident_skipped(self) -> None:
        index = build_index([{"ident": "", "name": "Nowhere"}, {"name": "No key"}])
        assert index == {}

    def test_later_duplicate_wins(self) -> None:
        index = build_index([
            {"ident": "KSFO", "name": "Old name"},
            {"ident": "ksfo", "name": "San Francisco International"},
        ])
        assert len(index) == 1
        assert index["KSFO"].name == "San Francisco International"

    def test_parse_and_index_together(self) -> None:
        text = (
            'id,ident,type,name,iso_country,municipality,iata_code\n'
            '3622,KEWR,large_airport,"Newark Liberty International Airport",US,"Newark, NJ",EWR\n'
        )
        index = build_index(parse_csv(text))
        assert index["KEWR"].municipality == "Newark, NJ"
        assert index["KEWR"].iata == "EWR"
