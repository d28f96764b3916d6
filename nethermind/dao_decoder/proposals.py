import json
import logging
from dataclasses import dataclass, field
from pathlib import Path

from nethermind.dao_decoder.decoding.codec import hex_to_bytes
from nethermind.dao_decoder.exceptions import ProposalNotFound

root_logger = logging.getLogger("nethermind")
logger = root_logger.getChild("dao_decoder").getChild("proposals")


@dataclass(frozen=True)
class Proposal:
    """ProposalCreated event emitted by the governor, as stored in the proposal dataset"""

    proposal_id: int
    proposer: str
    targets: list[str]
    values: list[int]
    calldatas: list[bytes]
    description: str = ""

    signatures: list[str] = field(default_factory=list)
    start_block: int | None = None
    end_block: int | None = None
    block_number: int | None = None
    transaction_hash: str | None = None

    @property
    def title(self) -> str:
        """First line of the description, without markdown heading markers"""
        first_line = self.description.strip().split("\n", 1)[0]
        return first_line.lstrip("# ").strip()


def load_proposals(path: str | Path) -> list[Proposal]:
    """
    Loads the proposal dataset written by the governor log scraper.

    :param path: JSON file containing a list of ProposalCreated records
    :return: list of Proposals in file order
    """
    with open(path, "r", encoding="utf-8") as proposal_file:
        records = json.load(proposal_file)

    proposals = [
        Proposal(
            proposal_id=int(record["proposalId"]),
            proposer=record["proposer"],
            targets=list(record["targets"]),
            values=[int(value) for value in record.get("values", [])],
            calldatas=[hex_to_bytes(calldata) for calldata in record["calldatas"]],
            description=record.get("description", ""),
            signatures=list(record.get("signatures", [])),
            start_block=record.get("startBlock"),
            end_block=record.get("endBlock"),
            block_number=record.get("blockNumber"),
            transaction_hash=record.get("transactionHash"),
        )
        for record in records
    ]
    logger.debug(f"Loaded {len(proposals)} proposals from {path}")
    return proposals


def find_proposal(proposals: list[Proposal], proposal_id: int | str) -> Proposal:
    """
    Returns the proposal with ``proposal_id``

    :raises ProposalNotFound: if the dataset does not contain the proposal
    """
    proposal_id = int(proposal_id)
    for proposal in proposals:
        if proposal.proposal_id == proposal_id:
            return proposal
    raise ProposalNotFound(f"Proposal {proposal_id} not found in proposal dataset")
