from nethermind.dao_decoder.config import DEFAULT_CONFIG, GovernanceConfig
from nethermind.dao_decoder.decoding import GovernanceDecoder, decode
from nethermind.dao_decoder.types import Action, ActionType, ChainDescriptor
