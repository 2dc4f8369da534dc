"""DNS provider exceptions."""

from pydantic import ValidationError

from oceandns.models import ApiErrorBody


class DnsProviderError(Exception):
    """Base exception for errors raised by DNS providers."""

    pass


class ProviderApiError(DnsProviderError):
    """The DNS provider's API rejected a request (HTTP status >= 400).

    Represents the error envelope returned by the DigitalOcean API,
    ``{"id": "...", "message": "..."}``. Either field may be empty when
    the response body was missing or could not be decoded.
    """

    def __init__(self, status_code: int, error_id: str = "", message: str = ""):
        self.status_code = status_code
        self.error_id = error_id
        self.message = message
        super().__init__(f"HTTP {status_code}: {error_id}: {message}")

    @classmethod
    def from_response(cls, status_code: int, body: bytes | str | None) -> "ProviderApiError":
        """Create a ProviderApiError from a raw error response body.

        Decoding is best-effort: an empty, non-JSON or oddly shaped body
        still produces an error carrying the status code.

        Args:
            status_code: HTTP status code.
            body: Raw response body.

        Returns:
            ProviderApiError instance.
        """
        info = cls._parse_body(body)
        return cls(status_code=status_code, error_id=info.id, message=info.message)

    @staticmethod
    def _parse_body(body: bytes | str | None) -> ApiErrorBody:
        if not body:
            return ApiErrorBody()
        try:
            return ApiErrorBody.model_validate_json(body)
        except ValidationError:
            return ApiErrorBody()


class UnknownRecordError(DnsProviderError):
    """No tracked record identifier exists for the FQDN.

    Raised when removal is requested for a record this provider instance
    never created, has already removed, or lost on restart.
    """

    def __init__(self, fqdn: str):
        self.fqdn = fqdn
        super().__init__(f"unknown record ID for '{fqdn}'")
