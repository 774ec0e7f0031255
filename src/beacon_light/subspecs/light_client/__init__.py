"""
Trust primitives of a beacon chain light client.

A light client follows the chain from headers alone. It accepts a header when
a sync committee signed it, and it accepts state (the next committee, the
finalized checkpoint) when a Merkle branch proves it under that header's state
root. Everything here answers one of those questions.
"""

from beacon_light.subspecs.bls import is_aggregate_valid, verify_aggregate
from beacon_light.subspecs.chain import calc_sync_period
from beacon_light.subspecs.ssz import branch_to_nodes, bytes32_to_node

from .domain import compute_domain, compute_fork_data_root, compute_signing_root
from .proof import check_proof, is_proof_valid

__all__ = [
    "branch_to_nodes",
    "bytes32_to_node",
    "calc_sync_period",
    "check_proof",
    "compute_domain",
    "compute_fork_data_root",
    "compute_signing_root",
    "is_aggregate_valid",
    "is_proof_valid",
    "verify_aggregate",
]
