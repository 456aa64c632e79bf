"""
CSV export/import tests.
"""

import logging
from datetime import datetime, timezone

from visionfish.csv_writer import (
    CSV_HEADERS,
    parse_samples_csv,
    samples_to_csv,
)
from visionfish.organoleptic import build_sample
from visionfish.schema import FreshnessCategory


STAMP = datetime(2026, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
LABEL_HEADER = "Mata,Insang,Lendir,Daging,Bau,Tekstur"


class TestSamplesToCsv:

    def test_header_and_row(self, uniform_grades):
        sample = build_sample(uniform_grades(9), fish_name="Nila", sample_id="s1", timestamp=STAMP)
        lines = samples_to_csv([sample]).splitlines()

        assert lines[0] == ",".join(CSV_HEADERS)
        assert lines[1] == "s1,Nila,9,9,9,9,9,9,9.0,Prima,2026-01-02T03:04:05+00:00"

    def test_unassessed_grades_are_blank(self):
        sample = build_sample({"eye": 7}, sample_id="s2", timestamp=STAMP)
        row = samples_to_csv([sample]).splitlines()[1]
        assert row == "s2,,7,,,,,,7.0,Baik,2026-01-02T03:04:05+00:00"

    def test_empty_batch_is_header_only(self):
        assert samples_to_csv([]) == ",".join(CSV_HEADERS) + "\n"

    def test_export_then_import_keeps_identity(self, uniform_grades):
        sample = build_sample({**uniform_grades(7), "odor": 4}, fish_name="Lele", sample_id="s3", timestamp=STAMP)
        restored = parse_samples_csv(samples_to_csv([sample]))

        assert len(restored) == 1
        assert restored[0].sample_id == "s3"
        assert restored[0].fish_name == "Lele"
        assert restored[0].timestamp == STAMP
        assert restored[0].odor == 4
        assert restored[0].score == sample.score


class TestParseSamplesCsv:

    def test_english_headers_and_generated_ids(self):
        samples = parse_samples_csv("eye,gill,slime,flesh,odor,texture\n9,9,9,9,9,8\n")
        assert len(samples) == 1
        assert samples[0].score == 8.8
        assert samples[0].sample_id.startswith("sample_")
        assert samples[0].fish_name is None

    def test_score_and_category_columns_are_recomputed(self):
        content = f"{LABEL_HEADER},Skor,Kategori\n9,9,9,9,9,9,1.0,Busuk\n"
        sample = parse_samples_csv(content)[0]
        assert sample.score == 9.0
        assert sample.category == FreshnessCategory.PRIMA

    def test_missing_parameter_column(self, caplog):
        with caplog.at_level(logging.WARNING, logger="visionfish.csv_writer"):
            assert parse_samples_csv("Mata,Insang\n9,9\n") == []
        assert "Lendir" in caplog.text

    def test_short_rows_skipped(self):
        samples = parse_samples_csv(f"{LABEL_HEADER}\n9,9,9\n8,8,8,8,8,8\n")
        assert len(samples) == 1
        assert samples[0].score == 8.0

    def test_bad_grades_become_unassessed(self, caplog):
        with caplog.at_level(logging.WARNING, logger="visionfish.csv_writer"):
            samples = parse_samples_csv(f"{LABEL_HEADER}\nabc,10,,9,9,9\n")

        sample = samples[0]
        assert (sample.eye, sample.gill, sample.slime) == (None, None, None)
        assert sample.score == 9.0
        assert "non-numeric" in caplog.text
        assert "outside 1-9" in caplog.text

    def test_timestamp_without_offset_is_utc(self):
        sample = parse_samples_csv(f"{LABEL_HEADER},timestamp\n9,9,9,9,9,9,2024-01-01T00:00:00\n")[0]
        assert sample.timestamp == datetime(2024, 1, 1, tzinfo=timezone.utc)

    def test_capitalized_english_headers(self):
        sample = parse_samples_csv("Eye,Gill,Slime,Flesh,Odor,Texture\n9,9,9,9,9,9\n")[0]
        assert sample.category == FreshnessCategory.PRIMA

    def test_bad_timestamp_is_replaced(self):
        sample = parse_samples_csv(f"{LABEL_HEADER},timestamp\n9,9,9,9,9,9,yesterday\n")[0]
        assert sample.timestamp.tzinfo is not None

    def test_empty_content(self):
        assert parse_samples_csv("") == []
        assert parse_samples_csv("   \n") == []

