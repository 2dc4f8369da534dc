"""DigitalOcean provider for ACME DNS-01 challenges.

Records are created at the apex of the zone named by the FQDN. The API
assigns each record an integer ID, which is the only handle for deleting
it, so every provider instance keeps a map of FQDN to record ID for the
records it created.

Known limitations:
    * ``ttl`` is not sent; DigitalOcean's default TTL applies.
    * Creating a record for an FQDN that is already tracked replaces the
      tracked ID. The earlier remote record is left in place and can no
      longer be removed through this provider.
    * A create and a remove racing on the same FQDN are not coordinated;
      the outcome depends on which request completes last.
"""

import os

import httpx

from oceandns._logging import Timer, get_logger
from oceandns.exceptions import ProviderApiError, UnknownRecordError
from oceandns.models import DomainRecordResponse, TxtRecordRequest
from oceandns.providers.base import AsyncDnsProvider, DnsProvider
from oceandns.records import RecordIdMap

logger = get_logger(__name__)

DEFAULT_API_URL = "https://api.digitalocean.com/v2"
DEFAULT_TIMEOUT = 30

TOKEN_ENV_VAR = "DO_AUTH_TOKEN"
API_URL_ENV_VAR = "DO_API_URL"


def _settings_from_env() -> tuple[str, str]:
    api_token = os.environ.get(TOKEN_ENV_VAR)
    if not api_token:
        raise ValueError(f"Required environment variable {TOKEN_ENV_VAR} is not set")
    return api_token, os.environ.get(API_URL_ENV_VAR, DEFAULT_API_URL)


def _check_response(response: httpx.Response) -> None:
    """Raise ProviderApiError for any status code >= 400."""
    if response.status_code >= 400:
        raise ProviderApiError.from_response(response.status_code, response.content)


def _parse_record_id(response: httpx.Response) -> int:
    """Extract the new record's ID from a successful creation response.

    Raises:
        pydantic.ValidationError: If the body is not the expected JSON.
    """
    return DomainRecordResponse.model_validate_json(response.content).domain_record.id


def _log_request(response: httpx.Response, elapsed_ms: float) -> None:
    logger.debug(
        "DigitalOcean API request completed",
        extra={
            "method": response.request.method,
            "url": str(response.request.url),
            "status_code": response.status_code,
            "elapsed_ms": round(elapsed_ms, 1),
        },
    )


class _DigitalOceanBase:
    """State and request construction shared by the sync and async providers."""

    def __init__(self, api_token: str, api_url: str, timeout: int) -> None:
        self.api_url = api_url.rstrip("/")
        self.timeout = timeout
        self._api_token = api_token
        self._record_ids = RecordIdMap()

    @property
    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self._api_token}",
            "Content-Type": "application/json",
        }

    def _records_url(self, fqdn: str) -> str:
        return f"{self.api_url}/domains/{fqdn}/records"

    def _record_url(self, fqdn: str, record_id: int) -> str:
        return f"{self._records_url(fqdn)}/{record_id}"

    def _create_payload(self, value: str) -> dict[str, str]:
        return TxtRecordRequest(data=value).model_dump()

    def tracked_record_id(self, fqdn: str) -> int | None:
        """Return the record ID tracked for fqdn, or None if untracked."""
        return self._record_ids.get(fqdn)

    def _lookup_record_id(self, fqdn: str) -> int:
        record_id = self._record_ids.get(fqdn)
        if record_id is None:
            raise UnknownRecordError(fqdn)
        return record_id

    def _track(self, fqdn: str, record_id: int) -> None:
        previous = self._record_ids.set(fqdn, record_id)
        if previous is not None and previous != record_id:
            logger.warning(
                "Replaced tracked TXT record; previous record is orphaned",
                extra={"fqdn": fqdn, "record_id": record_id, "previous_record_id": previous},
            )
        logger.info("TXT record created", extra={"fqdn": fqdn, "record_id": record_id})

    def _forget(self, fqdn: str, record_id: int) -> None:
        self._record_ids.discard(fqdn)
        logger.info("TXT record removed", extra={"fqdn": fqdn, "record_id": record_id})


class DigitalOceanProvider(_DigitalOceanBase, DnsProvider):
    """DNS provider for the DigitalOcean v2 domain records API.

    Safe to share between threads. The record ID map is locked only while
    it is read or written, never while a request is in flight, so calls
    for different FQDNs proceed in parallel.

    Args:
        api_token: Personal access token, sent as a bearer credential.
        api_url: Base URL of the API (default: "https://api.digitalocean.com/v2").
        timeout: HTTP request timeout in seconds (default: 30). Only applies
            to the client this provider creates for itself.
        _http_client: Optional pre-configured httpx client. The caller keeps
            ownership and must close it.
    """

    def __init__(
        self,
        api_token: str,
        api_url: str = DEFAULT_API_URL,
        timeout: int = DEFAULT_TIMEOUT,
        _http_client: httpx.Client | None = None,
    ):
        super().__init__(api_token, api_url, timeout)
        self._owns_client = _http_client is None
        self._client = _http_client or httpx.Client(timeout=timeout)

    @classmethod
    def from_env(cls, **kwargs) -> "DigitalOceanProvider":
        """Create a provider from the DO_AUTH_TOKEN and DO_API_URL variables.

        Raises:
            ValueError: If DO_AUTH_TOKEN is not set.
        """
        api_token, api_url = _settings_from_env()
        return cls(api_token=api_token, api_url=api_url, **kwargs)

    def close(self) -> None:
        """Close the underlying HTTP client if this provider created it."""
        if self._owns_client:
            self._client.close()

    def create_txt_record(self, fqdn: str, value: str, ttl: int) -> None:
        """Create a TXT record at the apex of the zone named by fqdn.

        Args:
            fqdn: Zone name as known to DigitalOcean.
            value: The TXT record value.
            ttl: Ignored; DigitalOcean's default TTL applies.

        Raises:
            ProviderApiError: If the API answers with status >= 400.
            httpx.HTTPError: On connection failures and timeouts.
            pydantic.ValidationError: If a successful response is malformed.
        """
        with Timer() as t:
            response = self._client.post(
                self._records_url(fqdn),
                headers=self._headers,
                json=self._create_payload(value),
            )
        _log_request(response, t.elapsed_ms)
        _check_response(response)

        self._track(fqdn, _parse_record_id(response))

    def remove_txt_record(self, fqdn: str, value: str, ttl: int) -> None:
        """Delete the TXT record previously created for fqdn.

        Args:
            fqdn: Zone name passed to create_txt_record().
            value: Ignored; the record is addressed by its tracked ID.
            ttl: Ignored.

        Raises:
            UnknownRecordError: If no record is tracked for fqdn. No request is made.
            ProviderApiError: If the API answers with status >= 400. The
                record stays tracked.
            httpx.HTTPError: On connection failures and timeouts.
        """
        record_id = self._lookup_record_id(fqdn)

        with Timer() as t:
            response = self._client.delete(
                self._record_url(fqdn, record_id),
                headers=self._headers,
            )
        _log_request(response, t.elapsed_ms)
        _check_response(response)

        self._forget(fqdn, record_id)


class AsyncDigitalOceanProvider(_DigitalOceanBase, AsyncDnsProvider):
    """Asyncio variant of DigitalOceanProvider.

    Behaves identically, issuing requests through an httpx.AsyncClient.
    Concurrent tasks for different FQDNs never block each other on the
    record ID map.
    """

    def __init__(
        self,
        api_token: str,
        api_url: str = DEFAULT_API_URL,
        timeout: int = DEFAULT_TIMEOUT,
        _http_client: httpx.AsyncClient | None = None,
    ):
        super().__init__(api_token, api_url, timeout)
        self._owns_client = _http_client is None
        self._client = _http_client or httpx.AsyncClient(timeout=timeout)

    @classmethod
    def from_env(cls, **kwargs) -> "AsyncDigitalOceanProvider":
        """Create a provider from the DO_AUTH_TOKEN and DO_API_URL variables."""
        api_token, api_url = _settings_from_env()
        return cls(api_token=api_token, api_url=api_url, **kwargs)

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def create_txt_record(self, fqdn: str, value: str, ttl: int) -> None:
        with Timer() as t:
            response = await self._client.post(
                self._records_url(fqdn),
                headers=self._headers,
                json=self._create_payload(value),
            )
        _log_request(response, t.elapsed_ms)
        _check_response(response)

        self._track(fqdn, _parse_record_id(response))

    async def remove_txt_record(self, fqdn: str, value: str, ttl: int) -> None:
        record_id = self._lookup_record_id(fqdn)

        with Timer() as t:
            response = await self._client.delete(
                self._record_url(fqdn, record_id),
                headers=self._headers,
            )
        _log_request(response, t.elapsed_ms)
        _check_response(response)

        self._forget(fqdn, record_id)
