from .registry import SignatureRegistry

# Arbitrum L1 timelock (OpenZeppelin TimelockController)
L1_TIMELOCK_SIGNATURES = [
    "function scheduleBatch(address[] targets, uint256[] values, bytes[] payloads, bytes32 predecessor, "
    "bytes32 salt, uint256 delay)",
    "function schedule(address target, uint256 value, bytes data, bytes32 predecessor, bytes32 salt, "
    "uint256 delay)",
]

UPGRADE_EXECUTOR_SIGNATURES = [
    "function execute(address upgrade, bytes upgradeCallData) payable",
    "function executeCall(address target, bytes targetCallData) payable",
]

# ArbSys precompile at 0x64 on every Arbitrum chain.  Governance proposals on the L2 core governor relay
# the timelock call to L1 through sendTxToL1.
ARBSYS_SIGNATURES = [
    "function arbBlockNumber() external view returns (uint256)",
    "function arbBlockHash(uint256 arbBlockNum) external view returns (bytes32)",
    "function arbChainID() external view returns (uint256)",
    "function arbOSVersion() external view returns (uint256)",
    "function getStorageGasAvailable() external view returns (uint256)",
    "function isTopLevelCall() external view returns (bool)",
    "function mapL1SenderContractAddressToL2Alias(address sender, address unused) external pure returns (address)",
    "function wasMyCallersAddressAliased() external view returns (bool)",
    "function myCallersAddressWithoutAliasing() external view returns (address)",
    "function withdrawEth(address destination) external payable returns (uint256)",
    "function sendTxToL1(address destination, bytes data) external payable returns (uint256)",
    "function sendMerkleTreeState() external view returns (uint256 size, bytes32 root, bytes32[] partials)",
]

# Payload of a call to the retryable ticket router: (inbox, l2Target, l2Value, gasLimit, maxFeePerGas, l2Calldata)
RETRYABLE_ENVELOPE_TYPES = ["address", "address", "uint256", "uint256", "uint256", "bytes"]

# Zero argument action contract entry point, perform()
PERFORM_SELECTOR = bytes.fromhex("b147f40c")
PERFORM_SIGNATURE = "perform()"

L1_TIMELOCK = SignatureRegistry("L1Timelock", L1_TIMELOCK_SIGNATURES)
UPGRADE_EXECUTOR = SignatureRegistry("UpgradeExecutor", UPGRADE_EXECUTOR_SIGNATURES)
ARBSYS = SignatureRegistry("ArbSys", ARBSYS_SIGNATURES)

KNOWN_REGISTRIES = [ARBSYS, L1_TIMELOCK, UPGRADE_EXECUTOR]
