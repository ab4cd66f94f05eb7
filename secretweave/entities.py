from typing import NamedTuple
import string
import config
from secretweave.codec import decode, to_decimal
from secretweave.errors import RecordShapeError


class Point(NamedTuple):
    x: int
    y: int


class ShareEntry(NamedTuple):
    """One share as written in a record: x numeral, base and digit string"""
    key: str
    base: int
    digits: str


def _is_int(value):
    return isinstance(value, int) and not isinstance(value, bool)


def _parse_base(key, raw_base):
    if _is_int(raw_base):
        return raw_base
    if isinstance(raw_base, str) and raw_base and all(c in string.digits for c in raw_base):
        return decode(raw_base, 10)
    raise RecordShapeError(f"Share {key!r} has a malformed base: {raw_base!r}", key=key)


def _parse_share(key, entry):
    if not key or not all(c in string.digits for c in key):
        raise RecordShapeError(f"Share key {key!r} is not a decimal numeral", key=key)
    if not isinstance(entry, dict):
        raise RecordShapeError(f"Share {key!r} must be an object with base and value", key=key)
    if "base" not in entry or "value" not in entry:
        raise RecordShapeError(f"Share {key!r} is missing 'base' or 'value'", key=key)
    if not isinstance(entry["value"], str):
        raise RecordShapeError(f"Share {key!r} value must be a digit string", key=key)
    return ShareEntry(key, _parse_base(key, entry["base"]), entry["value"])


class InputRecord:
    """
    One dataset: the threshold metadata plus its shares in record order.
    Shape is validated here, before any share value is decoded.
    """
    def __init__(self, n: int, k: int, shares: list):
        self.n = n
        self.k = k
        self.shares = list(shares)

    @classmethod
    def from_dict(cls, data):
        metadata_key = config.Config.METADATA_KEY
        if not isinstance(data, dict):
            raise RecordShapeError("Record must be a mapping")
        if metadata_key not in data:
            raise RecordShapeError(f"Record is missing the '{metadata_key}' field", key=metadata_key)

        metadata = data[metadata_key]
        if not isinstance(metadata, dict):
            raise RecordShapeError(f"'{metadata_key}' must hold n and k", key=metadata_key)
        n, k = metadata.get("n"), metadata.get("k")
        if not _is_int(n) or not _is_int(k):
            raise RecordShapeError(f"n and k must be integers, got n={n!r}, k={k!r}", key=metadata_key)
        if k < 1:
            raise RecordShapeError(f"Threshold k must be at least 1, got {to_decimal(k)}", key=metadata_key)
        if n < k:
            raise RecordShapeError(f"n={to_decimal(n)} is smaller than threshold k={to_decimal(k)}", key=metadata_key)

        shares = [
            _parse_share(key, entry)
            for key, entry in data.items()
            if key != metadata_key
        ]
        if len(shares) < k:
            raise RecordShapeError(
                f"Not enough shares. Need {to_decimal(k)}, got {len(shares)}",
                key=metadata_key
            )
        return cls(n, k, shares)

    def to_dict(self):
        record = {config.Config.METADATA_KEY: {"n": self.n, "k": self.k}}
        for share in self.shares:
            record[share.key] = {"base": to_decimal(share.base), "value": share.digits}
        return record

    def __repr__(self):
        return f"InputRecord(n={self.n}, k={self.k}, shares={len(self.shares)})"
