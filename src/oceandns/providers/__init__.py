"""DNS providers for ACME challenge validation."""

from oceandns.providers.base import AsyncDnsProvider, DnsProvider
from oceandns.providers.digitalocean import AsyncDigitalOceanProvider, DigitalOceanProvider

__all__ = [
    "AsyncDigitalOceanProvider",
    "AsyncDnsProvider",
    "DigitalOceanProvider",
    "DnsProvider",
]
