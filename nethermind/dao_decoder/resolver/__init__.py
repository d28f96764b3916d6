from .base import SignatureResolver
from .enrich import ChainedResolver, describe_with_signature, enrich_actions
from .etherscan import EtherscanResolver
from .four_byte import FourByteResolver
from .rate_limit import RateLimiter


def default_resolver(etherscan_api_key: str | None = None) -> ChainedResolver:
    """
    4byte lookups first, then verified ABIs from Etherscan when an API key is available
    """
    resolvers: list[SignatureResolver] = [FourByteResolver()]
    if etherscan_api_key:
        resolvers.append(EtherscanResolver(etherscan_api_key))
    return ChainedResolver(*resolvers)


__all__ = [
    "ChainedResolver",
    "EtherscanResolver",
    "FourByteResolver",
    "RateLimiter",
    "SignatureResolver",
    "default_resolver",
    "describe_with_signature",
    "enrich_actions",
]
