"""Error taxonomy shared by the provider, repositories and routers.

Each error carries the HTTP status and a stable machine-readable code; the
exception handler in ``quoteproxy.main`` renders them as
``{"error": code, "detail": message}``.
"""


class QuoteProxyError(Exception):
    status_code = 500
    code = "internal_error"

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class UpstreamError(QuoteProxyError):
    """The market-data provider could not deliver a usable answer."""

    status_code = 502
    code = "upstream_error"


class UpstreamUnavailable(UpstreamError):
    """Network failure, timeout or non-2xx response from the provider."""

    code = "upstream_unavailable"


class UpstreamMalformed(UpstreamError):
    """The provider answered, but the body does not match the expected schema."""

    code = "upstream_malformed"


class PersistenceFailure(QuoteProxyError):
    code = "persistence_failure"


class ValidationError(QuoteProxyError):
    status_code = 422
    code = "validation_error"
