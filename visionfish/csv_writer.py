"""
CSV module: renders graded samples as CSV text with frozen headers and
parses CSV text back into samples. Files are the caller's concern.

Parameter columns use the SNI form labels so files stay compatible with
spreadsheets filled in by hand. Skor and Kategori are always recomputed on
import; whatever the file says about them is ignored.
"""

import csv
import io
import logging
from datetime import datetime
from typing import Dict, Iterable, List, Optional

from visionfish.organoleptic import build_sample
from visionfish.parameters import PARAMETER_LABELS, PARAMETER_NAMES, get_parameter
from visionfish.schema import OrganolepticSample
from visionfish.thresholds import DEFAULT_FRESHNESS_BANDS

logger = logging.getLogger(__name__)


# Frozen CSV headers
CSV_HEADERS = [
    "sample_id",
    "fish_name",
    "Mata",
    "Insang",
    "Lendir",
    "Daging",
    "Bau",
    "Tekstur",
    "Skor",
    "Kategori",
    "timestamp",
]


def _sample_row(sample: OrganolepticSample) -> Dict[str, str]:
    row = {
        "sample_id": sample.sample_id,
        "fish_name": sample.fish_name or "",
        "Skor": f"{sample.score:.1f}",
        "Kategori": sample.category.value,
        "timestamp": sample.timestamp.isoformat(),
    }
    for name in PARAMETER_NAMES:
        value = getattr(sample, name)
        row[PARAMETER_LABELS[name]] = "" if value is None else str(value)
    return row


def samples_to_csv(samples: Iterable[OrganolepticSample]) -> str:
    """Render samples as CSV text (header row included)."""
    buffer = io.StringIO()
    writer = csv.DictWriter(buffer, fieldnames=CSV_HEADERS, lineterminator="\n")
    writer.writeheader()
    for sample in samples:
        writer.writerow(_sample_row(sample))
    return buffer.getvalue()


def _parameter_columns(headers: List[str]) -> Dict[str, str]:
    """Map parameter name -> column header, accepting labels or English names."""
    columns = {}
    for header in headers:
        try:
            profile = get_parameter(header)
        except ValueError:
            continue
        columns.setdefault(profile.name, header)
    return columns


def _parse_grade(raw: str, column: str, line_no: int) -> Optional[int]:
    text = raw.strip()
    if not text:
        return None
    try:
        value = int(text)
    except ValueError:
        logger.warning(f"Line {line_no}: non-numeric {column} value {text!r} treated as not assessed")
        return None
    bands = DEFAULT_FRESHNESS_BANDS
    if not bands.min_grade <= value <= bands.max_grade:
        logger.warning(f"Line {line_no}: {column}={value} outside {bands.min_grade}-{bands.max_grade}, treated as not assessed")
        return None
    return value


def _parse_timestamp(raw: Optional[str]) -> Optional[datetime]:
    if not raw:
        return None
    try:
        return datetime.fromisoformat(raw.strip())
    except ValueError:
        return None


def parse_samples_csv(content: str) -> List[OrganolepticSample]:
    """
    Parse CSV text into graded samples.

    Rules:
    - The header must name all six parameters (labels or English names)
    - Rows too short to fill every parameter column are skipped
    - Empty, non-numeric or out-of-range grades become None (not assessed)
    - Skor/Kategori columns are ignored; grading is recomputed

    Args:
        content: CSV text

    Returns:
        List of OrganolepticSample in file order
    """
    if not content or not content.strip():
        return []

    reader = csv.DictReader(io.StringIO(content.strip()))
    columns = _parameter_columns(reader.fieldnames or [])
    missing = [PARAMETER_LABELS[n] for n in PARAMETER_NAMES if n not in columns]
    if missing:
        logger.warning(f"CSV header missing parameter columns: {', '.join(missing)}")
        return []

    samples = []
    for row in reader:
        line_no = reader.line_num
        raw_values = {name: row.get(columns[name]) for name in PARAMETER_NAMES}
        if any(raw is None for raw in raw_values.values()):
            logger.warning(f"Line {line_no}: incomplete row skipped")
            continue

        grades = {
            name: _parse_grade(raw, columns[name], line_no)
            for name, raw in raw_values.items()
        }
        samples.append(
            build_sample(
                grades,
                fish_name=(row.get("fish_name") or "").strip() or None,
                sample_id=(row.get("sample_id") or row.get("id") or "").strip() or None,
                timestamp=_parse_timestamp(row.get("timestamp")),
            )
        )

    return samples

