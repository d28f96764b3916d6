from .abis import ARBSYS, L1_TIMELOCK, UPGRADE_EXECUTOR
from .classifier import GovernanceClassifier
from .function_decoders import FunctionSignature
from .pipeline import GovernanceDecoder, decode
from .registry import SignatureRegistry
