"""Share documents: JSON in, validated threshold settings and encoded shares out.

Document layout::

    {
        "keys": {"n": 4, "k": 3},
        "1": {"base": "10", "value": "4"},
        "2": {"base": "2", "value": "111"},
        ...
    }

Every top-level key other than ``"keys"`` is a share index (the x value).
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from ssr.errors import ShareFileError
from ssr.numerals import MAX_RADIX, MIN_RADIX
from ssr.shares import EncodedShare, Share, ThresholdConfig, decode_shares

logger = logging.getLogger(__name__)

KEYS_FIELD = "keys"


class KeysBlock(BaseModel):
    model_config = ConfigDict(frozen=True)

    n: int = Field(ge=1)
    k: int = Field(ge=1)

    @model_validator(mode="after")
    def _k_within_n(self) -> KeysBlock:
        if self.k > self.n:
            raise ValueError(f"k must be <= n, got k={self.k}, n={self.n}")
        return self


class ShareEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    base: int = Field(ge=MIN_RADIX, le=MAX_RADIX)
    value: str = Field(min_length=1)


class ShareDocument(BaseModel):
    keys: KeysBlock
    shares: dict[int, ShareEntry]


@dataclass(frozen=True)
class ShareSet:
    """A validated share document.

    Attributes:
        config: Declared (n, k).
        encoded: Shares in document order, y values still encoded.
    """

    config: ThresholdConfig
    encoded: list[EncodedShare]

    def decode(self) -> list[Share]:
        return decode_shares(self.encoded)


def parse_share_document(data: Mapping[str, Any]) -> ShareSet:
    """Validate an already-parsed share document.

    Raises:
        ShareFileError: missing or malformed fields, non-integer share
            indices, or two keys naming the same index.
    """
    if not isinstance(data, Mapping):
        raise ShareFileError(f"Share document must be an object, got {type(data).__name__}")

    raw_shares = {key: value for key, value in data.items() if key != KEYS_FIELD}
    try:
        doc = ShareDocument.model_validate(
            {"keys": data.get(KEYS_FIELD), "shares": raw_shares}
        )
    except ValidationError as exc:
        raise ShareFileError(f"Invalid share document: {exc}") from exc

    if len(doc.shares) != len(raw_shares):
        raise ShareFileError("Share document names the same index more than once")

    config = ThresholdConfig(n=doc.keys.n, k=doc.keys.k)
    if len(doc.shares) != config.n:
        logger.warning(
            "Document declares n=%d but carries %d shares", config.n, len(doc.shares)
        )

    encoded = [
        EncodedShare(index=index, radix=entry.base, digits=entry.value)
        for index, entry in doc.shares.items()
    ]
    return ShareSet(config=config, encoded=encoded)


def _reject_duplicate_keys(pairs: list[tuple[str, Any]]) -> dict[str, Any]:
    result: dict[str, Any] = {}
    for key, value in pairs:
        if key in result:
            raise ShareFileError(f"Duplicate key {key!r} in share document")
        result[key] = value
    return result


def load_share_file(path: str | Path) -> ShareSet:
    """Read and validate a JSON share document.

    Repeated keys at any level are rejected rather than letting the last one
    win.
    """
    path = Path(path)
    try:
        with path.open(encoding="utf-8") as fh:
            data = json.load(fh, object_pairs_hook=_reject_duplicate_keys)
    except UnicodeDecodeError as exc:
        raise ShareFileError(f"{path}: not valid UTF-8 ({exc})") from exc
    except json.JSONDecodeError as exc:
        raise ShareFileError(f"{path}: not valid JSON ({exc})") from exc
    return parse_share_document(data)
