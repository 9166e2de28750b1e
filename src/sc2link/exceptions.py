"""Typed exceptions raised by the engine client.

Transport and required-submessage failures surface as subclasses of
SC2ClientError so callers can catch them at the request boundary.
Unknown identifiers in catalog data are not errors: those records are
dropped during decoding and never reach this hierarchy.
"""


class SC2ClientError(Exception):
    """Base exception for engine client failures."""


class TransportError(SC2ClientError):
    """Encoding, socket or payload decoding failure.

    The connection is presumed unusable after this is raised. The
    underlying cause is chained as ``__cause__``.
    """


class ResponsePairingError(SC2ClientError):
    """A request was issued while a previous reply is still unread.

    Raised before anything is written, so the connection stays usable.
    """


class MissingSubmessageError(SC2ClientError):
    """The engine omitted a sub-message that the response must carry.

    Attributes:
        submessage: Name of the missing part (e.g. "score_details").
        errors: Error strings the engine attached to the response, if any.

    """

    def __init__(self, submessage: str, *, errors: tuple[str, ...] = ()) -> None:
        self.submessage = submessage
        self.errors = errors
        detail = f"response is missing required {submessage!r}"
        if errors:
            detail = f"{detail} (engine errors: {'; '.join(errors)})"
        super().__init__(detail)


class ParseEnumError(ValueError):
    """String does not name a variant of the target enum."""
