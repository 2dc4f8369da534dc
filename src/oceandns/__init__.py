"""oceandns - DigitalOcean DNS-01 challenge provider for ACME clients."""

from oceandns.exceptions import DnsProviderError, ProviderApiError, UnknownRecordError
from oceandns.providers import AsyncDigitalOceanProvider, DigitalOceanProvider

__all__ = [
    "AsyncDigitalOceanProvider",
    "DigitalOceanProvider",
    "DnsProviderError",
    "ProviderApiError",
    "UnknownRecordError",
]
__version__ = "0.1.0"
