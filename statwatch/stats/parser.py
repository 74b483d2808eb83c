"""
Stats Parser - turns the endpoint's single CSV line into a StatsSnapshot
"""

import re
from typing import List

from .snapshot import StatsSnapshot
from ..error_handler import EmptyBodyError, FieldCountError, NumericFormatError

FIELD_NAMES = (
    "load average",
    "total memory",
    "used memory",
    "total disk",
    "used disk",
    "network capacity",
    "network used",
)
FIELD_COUNT = len(FIELD_NAMES)

UINT64_MAX = 2 ** 64 - 1

_DECIMAL_RE = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_UNSIGNED_RE = re.compile(r"[0-9]+")


def trim_trailing_zeros(text: str) -> str:
    """Drop trailing fractional zeros and a dangling decimal point.

    "30.00" -> "30", "30.50" -> "30.5", "45" -> "45". Text without a
    decimal point, or in exponent notation, is returned unchanged.
    """
    if "." not in text or "e" in text.lower():
        return text
    return text.rstrip("0").rstrip(".")


def split_fields(line: str) -> List[str]:
    return [part.strip() for part in line.split(",")]


def parse_load_average(text: str) -> float:
    if not _DECIMAL_RE.fullmatch(text):
        raise NumericFormatError(FIELD_NAMES[0], text)
    return float(text)


def parse_uint64(name: str, text: str) -> int:
    if not _UNSIGNED_RE.fullmatch(text):
        raise NumericFormatError(name, text)
    value = int(text)
    if value > UINT64_MAX:
        raise NumericFormatError(name, text)
    return value


def parse_stats_line(body: str) -> StatsSnapshot:
    """Parse a response body into a snapshot.

    Only the first line of the body is read. Any malformed field fails the
    whole parse; a snapshot is never built from partial data.

    Raises:
        EmptyBodyError: first line is blank
        FieldCountError: not exactly seven comma-separated fields
        NumericFormatError: a field is not a valid number of its type
    """
    line = body.split("\n", 1)[0].strip()
    if not line:
        raise EmptyBodyError()

    fields = split_fields(line)
    if len(fields) != FIELD_COUNT:
        raise FieldCountError(len(fields), FIELD_COUNT)

    load_average = parse_load_average(fields[0])
    counters = [parse_uint64(name, text) for name, text in zip(FIELD_NAMES[1:], fields[1:])]

    return StatsSnapshot(
        load_average=load_average,
        total_memory=counters[0],
        used_memory=counters[1],
        total_disk=counters[2],
        used_disk=counters[3],
        network_capacity=counters[4],
        network_used=counters[5],
        load_average_text=fields[0],
    )
