class DNSTranslationError(Exception):
    """Base class for failures while turning a DoH JSON answer into a DNS reply."""


class RecordSynthesisError(DNSTranslationError):
    """A textual record could not be parsed into a resource record."""


class UpstreamError(DNSTranslationError):
    """The DoH endpoint could not be reached or returned an unusable body."""
