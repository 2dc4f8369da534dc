"""ACME DNS-01 challenge helpers."""

from oceandns.challenges.dns01 import (
    async_challenge_record,
    challenge_record,
    compute_dns_txt_value,
)

__all__ = [
    "async_challenge_record",
    "challenge_record",
    "compute_dns_txt_value",
]
