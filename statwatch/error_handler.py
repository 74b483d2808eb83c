import asyncio
import logging
from enum import Enum
from typing import Optional

import aiohttp

logger = logging.getLogger(__name__)


class ErrorType(Enum):
    """Classification of poll failures"""
    TRANSPORT = "transport"            # connection refused, DNS, timeout
    HTTP_STATUS = "http_status"        # any non-200 response
    EMPTY_BODY = "empty_body"
    FIELD_COUNT = "field_count"
    NUMERIC_FORMAT = "numeric_format"
    UNKNOWN = "unknown"


class StatsPollError(Exception):
    """Base class for everything that makes a single poll cycle fail"""
    error_type = ErrorType.UNKNOWN


class TransportError(StatsPollError):
    error_type = ErrorType.TRANSPORT


class StatusError(StatsPollError):
    """Server answered with something other than 200"""
    error_type = ErrorType.HTTP_STATUS

    def __init__(self, status: int, reason: Optional[str] = None):
        self.status = status
        self.reason = reason
        super().__init__(f"bad status: {status} {reason or ''}".rstrip())


class ParseError(StatsPollError):
    """Body could not be turned into a stats snapshot"""


class EmptyBodyError(ParseError):
    error_type = ErrorType.EMPTY_BODY

    def __init__(self):
        super().__init__("empty body")


class FieldCountError(ParseError):
    error_type = ErrorType.FIELD_COUNT

    def __init__(self, count: int, expected: int):
        self.count = count
        self.expected = expected
        super().__init__(f"unexpected fields count: {count} (expected {expected})")


class NumericFormatError(ParseError):
    error_type = ErrorType.NUMERIC_FORMAT

    def __init__(self, field: str, value: str):
        self.field = field
        self.value = value
        super().__init__(f"parse {field}: invalid value {value!r}")


def classify_error(error: BaseException) -> ErrorType:
    """Classify an error into the poll failure taxonomy"""
    if isinstance(error, StatsPollError):
        return error.error_type
    elif isinstance(error, asyncio.TimeoutError):
        return ErrorType.TRANSPORT
    elif isinstance(error, aiohttp.ClientResponseError):
        return ErrorType.HTTP_STATUS
    elif isinstance(error, aiohttp.ClientError):
        return ErrorType.TRANSPORT

    return ErrorType.UNKNOWN
