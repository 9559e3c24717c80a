"""Route Dependencies — settings, access-token check, and record source wiring.

Invariants:
    - A missing, empty, or mismatched AccessToken header raises BadAccessTokenError
    - Tokens are compared as bytes: the header as received on the wire (latin-1),
      the configured token as UTF-8
    - A fresh RecordSource is built per request (no module-level cache)
"""

import secrets

from fastapi import Depends, Header

from usersearch.config import Settings, get_settings
from usersearch.core.errors import BadAccessTokenError
from usersearch.core.repository_protocols import RecordSource
from usersearch.infrastructure.record_source import XmlRecordSource


def require_access_token(
    access_token: str | None = Header(None, alias="AccessToken"),
    settings: Settings = Depends(get_settings),
) -> None:
    if not access_token or not settings.access_token:
        raise BadAccessTokenError()
    received = access_token.encode("latin-1")
    if not secrets.compare_digest(received, settings.access_token.encode("utf-8")):
        raise BadAccessTokenError()


def get_record_source(
    settings: Settings = Depends(get_settings),
) -> RecordSource:
    return XmlRecordSource(settings.dataset_path)
