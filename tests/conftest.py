import pytest
from dnslib import DNSRecord

from dohgate.message import Message
from dohgate.models import ResolutionResult


class FakeResolver:
    """Stands in for DoHClient and records what it was asked."""

    endpoint = "https://resolver.test/resolve"

    def __init__(self, result=None):
        self.result = result if result is not None else ResolutionResult()
        self.calls = []
        self.closed = False

    def resolve(self, name, qtype):
        self.calls.append((name, qtype))
        return self.result

    def close(self):
        self.closed = True


@pytest.fixture
def make_request():
    def _make(name="example.com.", qtype="A", id=4242, compress=True):
        record = DNSRecord.question(name, qtype)
        record.header.id = id
        return Message(record, compress)

    return _make


@pytest.fixture
def example_payload():
    return {
        "Status": 0,
        "TC": False,
        "RD": True,
        "RA": True,
        "AD": False,
        "CD": False,
        "Question": [{"name": "example.com.", "type": 1}],
        "Answer": [{"name": "example.com.", "type": 1, "TTL": 300, "data": "93.184.216.34"}],
        "Comment": "Response from 192.0.2.53.",
    }


@pytest.fixture
def fake_resolver():
    return FakeResolver
