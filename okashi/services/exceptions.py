"""Domain-specific exceptions."""


class ServiceError(Exception):
    pass


class QueryError(ServiceError):
    pass


class EncodingError(QueryError):
    """The keyword could not be percent-encoded."""


class URLConstructionError(QueryError):
    """The assembled request string is not a usable URL."""


class DecodeError(ServiceError):
    pass


class MalformedPayload(DecodeError):
    """The response body is not the expected JSON document."""


class SearchError(ServiceError):
    pass


class InvalidQuery(SearchError):
    pass


class TransportFailure(SearchError):
    pass


class DecodeFailure(SearchError):
    pass


class SearchSuperseded(SearchError):
    """A newer search was issued before this one completed."""
