"""XML Record Source — reads the person dataset from disk on every call.

Invariants:
    - No caching: each load() re-reads the file
    - Row order in the file is the snapshot order
    - Missing file, malformed XML, or non-integer id/age → RecordSourceError
    - Unknown child elements of <row> are ignored
"""

import logging
import xml.etree.ElementTree as ET
from pathlib import Path

from usersearch.core.domain_types import Record
from usersearch.core.errors import RecordSourceError

logger = logging.getLogger(__name__)


def _text(row: ET.Element, tag: str) -> str:
    el = row.find(tag)
    return el.text if el is not None and el.text is not None else ""


def _parse_row(row: ET.Element) -> Record:
    return Record(
        id=int(_text(row, "id")),
        guid=_text(row, "guid"),
        age=int(_text(row, "age")),
        first_name=_text(row, "first_name"),
        last_name=_text(row, "last_name"),
        about=_text(row, "about"),
        gender=_text(row, "gender"),
    )


class XmlRecordSource:
    """RecordSource backed by a `<root><row>...</row></root>` XML file."""

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def load(self) -> list[Record]:
        try:
            data = self.path.read_bytes()
        except OSError as e:
            raise RecordSourceError(
                f"failed to read file: {e}", source=str(self.path),
            ) from e
        try:
            root = ET.fromstring(data)
        except ET.ParseError as e:
            raise RecordSourceError(
                f"failed to parse XML: {e}", source=str(self.path),
            ) from e
        try:
            records = [_parse_row(row) for row in root.findall("row")]
        except ValueError as e:
            raise RecordSourceError(
                f"invalid row: {e}", source=str(self.path),
            ) from e
        logger.debug(f"Loaded {len(records)} records from {self.path}")
        return records
