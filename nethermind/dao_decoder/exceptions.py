class DecodingError(Exception):
    """

    Base class for every fault raised while unwrapping governance calldata.  Decoding faults are terminal, and
    abort decoding of the whole input.

    """


class DecodeFault(DecodingError):
    """
    Raised when calldata does not match the binary layout expected for its selector.  Covers truncated data,
    invalid offsets, non-empty padding, values that overflow their type, and input that is not valid hex.
    """


class EncodeFault(DecodingError):
    """Raised when values cannot be ABI encoded against the requested types"""


class SelectorNotFound(DecodingError):
    """Raised when no loaded function signature matches the leading 4 bytes of calldata"""


class SelectorCollision(DecodingError):
    """
    Raised while building a signature registry when two different signatures share a 4 byte selector.  Signature
    sets are small and curated, so a collision always indicates a configuration bug.
    """


class UnrecognizedTimelockMethod(DecodingError):
    """Raised when the outer call is not one of the timelock's schedule or scheduleBatch entry points"""


class UnrecognizedExecutorMethod(DecodingError):
    """Raised when a scheduled payload is not an upgrade executor execute or executeCall call"""


class UnrecognizedTarget(DecodingError):
    """Raised when a timelock target is not the upgrade executor, the retryable router, or a known inbox"""


class UnrecognizedInbox(DecodingError):
    """
    Raised when a retryable ticket envelope addresses an inbox that does not belong to any configured chain.
    Troubleshooting steps:

    * Check the inbox address against the chain list in ``nethermind.dao_decoder.config``
    * Verify the proposal targets Arbitrum mainnet chains, and not a testnet deployment

    """


class UnsupportedDirectInboxCall(DecodingError):
    """
    Raised when the timelock calls an inbox contract directly instead of routing through the retryable ticket
    router.  This path is recognized, but decoding it is deliberately not supported.
    """


class ProposalNotFound(Exception):
    """Raised when a proposal ID is not present in the local proposal dataset"""


class SignatureResolverError(Exception):
    """

    Raised when an external signature lookup fails.  These errors never abort decoding, and are only surfaced
    to callers that query resolvers directly.

    """


class ResolverRateLimitError(SignatureResolverError):
    """Raised when the remote signature database applies rate limits"""


class ResolverHostError(SignatureResolverError):
    """Raised when the remote host returns an error, fails to provide correct data, or when a timeout occurs"""
