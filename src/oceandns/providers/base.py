"""Abstract base classes for DNS providers."""

from abc import ABC, abstractmethod
from typing import Self


class DnsProvider(ABC):
    """Abstract interface for DNS providers.

    DNS providers are responsible for creating and removing TXT records
    used for ACME DNS-01 challenge validation. Implementations are
    interchangeable: every provider accepts the same arguments even when
    some of them (such as ``ttl``) have no effect on its backend.
    """

    def close(self) -> None:
        """Release resources. Override in subclasses that hold open connections."""

    def __enter__(self) -> Self:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    @abstractmethod
    def create_txt_record(self, fqdn: str, value: str, ttl: int) -> None:
        """Create a TXT record for ACME challenge.

        Args:
            fqdn: The fully-qualified domain name the record belongs to.
            value: The TXT record value (the key authorization digest).
            ttl: Requested record TTL in seconds.

        Raises:
            Exception: If record creation fails.
        """
        ...

    @abstractmethod
    def remove_txt_record(self, fqdn: str, value: str, ttl: int) -> None:
        """Remove a TXT record created by create_txt_record().

        Args:
            fqdn: The fully-qualified domain name the record belongs to.
            value: The TXT record value (for providers that need it).
            ttl: Record TTL in seconds (for providers that need it).

        Raises:
            Exception: If record removal fails.
        """
        ...


class AsyncDnsProvider(ABC):
    """Asyncio counterpart of DnsProvider."""

    async def aclose(self) -> None:
        """Release resources. Override in subclasses that hold open connections."""

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(self, *exc: object) -> None:
        await self.aclose()

    @abstractmethod
    async def create_txt_record(self, fqdn: str, value: str, ttl: int) -> None:
        """Create a TXT record for ACME challenge. See DnsProvider.create_txt_record()."""
        ...

    @abstractmethod
    async def remove_txt_record(self, fqdn: str, value: str, ttl: int) -> None:
        """Remove a TXT record. See DnsProvider.remove_txt_record()."""
        ...
