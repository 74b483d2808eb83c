import socket
import time

import pytest
from aiohttp import web


class StatsEndpoint:
    """Scripted /_stats handler: each request consumes the next (status, body)"""

    def __init__(self, responses=None):
        self.responses = list(responses or [])
        self.requests = 0
        self.user_agents = []
        self.received_at = []

    def queue(self, *responses):
        self.responses.extend(responses)

    async def handle(self, request):
        self.requests += 1
        self.received_at.append(time.monotonic())
        self.user_agents.append(request.headers.get('User-Agent'))
        status, body = self.responses.pop(0) if self.responses else (200, "")
        return web.Response(status=status, text=body, content_type='text/plain')

    def make_app(self):
        app = web.Application()
        app.router.add_get('/_stats', self.handle)
        return app


@pytest.fixture
def stats_endpoint():
    return StatsEndpoint()


@pytest.fixture
def unused_url():
    """URL on a local port nobody listens on"""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(('127.0.0.1', 0))
        port = sock.getsockname()[1]
    return f"http://127.0.0.1:{port}/_stats"
