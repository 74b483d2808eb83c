import asyncio
from unittest.mock import Mock

import aiohttp
import pytest
from aiohttp.test_utils import TestServer

from statwatch.error_handler import ErrorType, StatusError, TransportError, classify_error
from statwatch.poller import StatsFetcher
from statwatch.poller.fetcher import USER_AGENT

LINE = "1.0,100,50,100,50,100,50"


async def fetch_from(endpoint, timeout_seconds=3.0):
    async with TestServer(endpoint.make_app()) as server:
        async with aiohttp.ClientSession() as session:
            fetcher = StatsFetcher(session, str(server.make_url('/_stats')), timeout_seconds)
            try:
                return await fetcher.fetch(), fetcher
            except Exception as e:
                return e, fetcher


def test_fetch_returns_body_on_200(stats_endpoint):
    stats_endpoint.queue((200, LINE + "\n"))

    body, fetcher = asyncio.run(fetch_from(stats_endpoint))

    assert body == LINE + "\n"
    assert fetcher.last_status == 200
    assert fetcher.last_response_time >= 0
    assert stats_endpoint.user_agents == [USER_AGENT]


@pytest.mark.parametrize("status", [500, 503, 404, 429])
def test_non_200_raises_status_error(stats_endpoint, status):
    stats_endpoint.queue((status, ""))

    error, fetcher = asyncio.run(fetch_from(stats_endpoint))

    assert isinstance(error, StatusError)
    assert error.status == status
    assert error.error_type is ErrorType.HTTP_STATUS
    assert fetcher.last_status == status


def test_connection_refused_raises_transport_error(unused_url):
    async def scenario():
        async with aiohttp.ClientSession() as session:
            fetcher = StatsFetcher(session, unused_url, 1.0)
            with pytest.raises(TransportError) as exc_info:
                await fetcher.fetch()
            return exc_info.value, fetcher

    error, fetcher = asyncio.run(scenario())

    assert error.error_type is ErrorType.TRANSPORT
    assert isinstance(error.__cause__, aiohttp.ClientError)
    assert fetcher.last_status is None


def test_timeout_raises_transport_error():
    writers = []

    async def silent(reader, writer):
        # accept the connection and never answer
        writers.append(writer)

    async def scenario():
        server = await asyncio.start_server(silent, '127.0.0.1', 0)
        port = server.sockets[0].getsockname()[1]
        try:
            async with aiohttp.ClientSession() as session:
                fetcher = StatsFetcher(session, f"http://127.0.0.1:{port}/_stats", 0.2)
                with pytest.raises(TransportError) as exc_info:
                    await fetcher.fetch()
                return exc_info.value
        finally:
            for writer in writers:
                writer.close()
            server.close()
            await server.wait_closed()

    error = asyncio.run(scenario())

    assert "timed out" in str(error)
    assert isinstance(error.__cause__, asyncio.TimeoutError)


def test_classify_error():
    assert classify_error(asyncio.TimeoutError()) is ErrorType.TRANSPORT
    assert classify_error(aiohttp.ClientConnectionError("refused")) is ErrorType.TRANSPORT
    assert classify_error(StatusError(502)) is ErrorType.HTTP_STATUS
    assert classify_error(ValueError("boom")) is ErrorType.UNKNOWN


class RaisingSession:
    """Stands in for a ClientSession whose get() fails before any response"""

    def __init__(self, error):
        self.error = error

    def get(self, *args, **kwargs):
        raise self.error


def fetch_with_error(error):
    fetcher = StatsFetcher(RaisingSession(error), "http://stats.test/_stats", 1.0)

    async def scenario():
        with pytest.raises(Exception) as exc_info:
            await fetcher.fetch()
        return exc_info.value

    return asyncio.run(scenario()), fetcher


def test_client_response_error_becomes_status_error():
    cause = aiohttp.ClientResponseError(Mock(), (), status=502, message="Bad Gateway")

    error, fetcher = fetch_with_error(cause)

    assert isinstance(error, StatusError)
    assert error.status == 502
    assert error.reason == "Bad Gateway"
    assert error.__cause__ is cause
    assert fetcher.last_status == 502


@pytest.mark.parametrize("cause, message", [
    (asyncio.TimeoutError(), "timed out after 1.0s"),
    (aiohttp.ServerDisconnectedError(), "Server disconnected"),
    (aiohttp.ClientPayloadError(), "ClientPayloadError"),
])
def test_client_failures_become_transport_errors(cause, message):
    error, _ = fetch_with_error(cause)

    assert isinstance(error, TransportError)
    assert message in str(error)
    assert error.__cause__ is cause
