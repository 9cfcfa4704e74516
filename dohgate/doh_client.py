import requests
from pydantic import ValidationError

from dohgate.config import Config
from dohgate.errors import UpstreamError
from dohgate.logger import get_logger
from dohgate.models import ResolutionResult

log = get_logger("dohgate.doh")

HEADERS = {"Accept": "application/dns-json"}


class DoHClient:
    """Resolves names through a DoH JSON API such as https://dns.google.com/resolve."""

    def __init__(self, endpoint: str = Config.ENDPOINT, timeout: float = Config.DOH_TIMEOUT, session=None):
        self.endpoint = endpoint
        self.timeout = timeout
        self.session = session or requests.Session()

    def fetch(self, name: str, qtype: int) -> ResolutionResult:
        params = {"name": name, "type": str(qtype)}
        try:
            response = self.session.get(self.endpoint, params=params, headers=HEADERS, timeout=self.timeout)
            response.raise_for_status()
            payload = response.json()
        except requests.RequestException as e:
            raise UpstreamError(f"{self.endpoint} failed for {name}: {e}") from e
        except ValueError as e:
            raise UpstreamError(f"{self.endpoint} returned a non-JSON body for {name}: {e}") from e

        try:
            return ResolutionResult.model_validate(payload)
        except ValidationError as e:
            raise UpstreamError(f"{self.endpoint} returned a malformed answer for {name}: {e}") from e

    def resolve(self, name: str, qtype: int) -> ResolutionResult:
        """Like fetch, but any upstream failure yields an empty result."""
        try:
            return self.fetch(name, qtype)
        except UpstreamError as e:
            log.warning("%s", e)
            return ResolutionResult()

    def close(self):
        self.session.close()
