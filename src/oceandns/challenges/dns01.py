"""DNS-01 challenge helpers."""

import base64
import hashlib
from collections.abc import AsyncIterator, Iterator
from contextlib import asynccontextmanager, contextmanager

from oceandns.providers.base import AsyncDnsProvider, DnsProvider

DEFAULT_TTL = 120


def compute_dns_txt_value(key_authorization: str) -> str:
    """Return the TXT record value for a key authorization.

    DNS-01 publishes base64url(SHA-256(key_authorization)) with the
    padding stripped, which is always 43 characters.
    """
    digest = hashlib.sha256(key_authorization.encode()).digest()
    return base64.urlsafe_b64encode(digest).rstrip(b"=").decode()


def _cleanup_failed_note(fqdn: str, error: Exception) -> str:
    return f"removing the TXT record for {fqdn} also failed: {error!r}"


@contextmanager
def challenge_record(
    provider: DnsProvider, fqdn: str, value: str, ttl: int = DEFAULT_TTL
) -> Iterator[None]:
    """Keep a challenge TXT record in place for the duration of the block.

    The record is removed on exit. When the block itself raises, that
    exception is what propagates; a failure to remove the record is
    attached to it as a note. Otherwise errors from removal propagate.

    Usage:
        with challenge_record(provider, "example.com", txt_value):
            client.respond_to_challenge(...)
    """
    provider.create_txt_record(fqdn, value, ttl)
    try:
        yield
    except BaseException as exc:
        try:
            provider.remove_txt_record(fqdn, value, ttl)
        except Exception as cleanup_error:
            exc.add_note(_cleanup_failed_note(fqdn, cleanup_error))
        raise
    provider.remove_txt_record(fqdn, value, ttl)


@asynccontextmanager
async def async_challenge_record(
    provider: AsyncDnsProvider, fqdn: str, value: str, ttl: int = DEFAULT_TTL
) -> AsyncIterator[None]:
    """Asyncio counterpart of challenge_record()."""
    await provider.create_txt_record(fqdn, value, ttl)
    try:
        yield
    except BaseException as exc:
        try:
            await provider.remove_txt_record(fqdn, value, ttl)
        except Exception as cleanup_error:
            exc.add_note(_cleanup_failed_note(fqdn, cleanup_error))
        raise
    await provider.remove_txt_record(fqdn, value, ttl)
