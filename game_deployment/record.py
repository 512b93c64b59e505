import json
from datetime import datetime, timezone
from pathlib import Path
from typing import NamedTuple, Optional

from ape.contracts import ContractInstance
from eth_typing import ChecksumAddress
from eth_utils import to_checksum_address

from game_deployment.constants import RECORD_FILENAME_TEMPLATE, RECORD_JSON_FORMAT
from game_deployment.utils import _load_json

# JSON field name -> (record attribute, expected type)
RECORD_FIELDS = {
    "network": ("network", str),
    "contractAddress": ("contract_address", str),
    "deployer": ("deployer", str),
    "blockNumber": ("block_number", int),
    "transactionHash": ("transaction_hash", str),
    "timestamp": ("timestamp", str),
}


class DeploymentRecord(NamedTuple):
    """Represents the outcome of a single contract deployment on one network."""

    network: str
    contract_address: ChecksumAddress
    deployer: ChecksumAddress
    block_number: int
    transaction_hash: str
    timestamp: str

    def to_json(self) -> dict:
        return {field: getattr(self, attribute) for field, (attribute, _) in RECORD_FIELDS.items()}


def _format_timestamp(timestamp: datetime) -> str:
    """ISO-8601 in UTC with millisecond precision, e.g. 2024-01-31T12:00:00.000Z"""
    timestamp = timestamp.astimezone(timezone.utc)
    return timestamp.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _format_hash(txn_hash) -> str:
    if isinstance(txn_hash, (bytes, bytearray)):
        txn_hash = txn_hash.hex()
    if not txn_hash.startswith("0x"):
        txn_hash = f"0x{txn_hash}"
    return txn_hash


def record_from_deployment(
    instance: ContractInstance,
    network_name: str,
    deployer: str,
    timestamp: Optional[datetime] = None,
) -> DeploymentRecord:
    """Creates a deployment record from a freshly deployed contract instance."""
    receipt = instance.receipt
    timestamp = timestamp or datetime.now(timezone.utc)
    return DeploymentRecord(
        network=network_name,
        contract_address=to_checksum_address(instance.address),
        deployer=to_checksum_address(deployer),
        block_number=int(receipt.block_number),
        transaction_hash=_format_hash(receipt.txn_hash),
        timestamp=_format_timestamp(timestamp),
    )


def record_filepath(network_name: str, directory: Path) -> Path:
    """Returns the per-network record location inside a directory."""
    return Path(directory) / RECORD_FILENAME_TEMPLATE.format(network=network_name)


def write_record(record: DeploymentRecord, filepath: Path) -> Path:
    """Writes a deployment record, replacing any previous record for the same network."""
    filepath.parent.mkdir(parents=True, exist_ok=True)
    with open(filepath, "w", encoding="utf-8") as file:
        json.dump(record.to_json(), file, **RECORD_JSON_FORMAT)
    return filepath


def read_record(filepath: Path) -> DeploymentRecord:
    data = _load_json(filepath)
    if not isinstance(data, dict):
        raise ValueError(f"Malformed deployment record at {filepath}.")

    unexpected = set(data) - set(RECORD_FIELDS)
    if unexpected:
        raise ValueError(
            f"Unexpected fields in deployment record at {filepath}: {', '.join(sorted(unexpected))}"
        )

    values = dict()
    for field, (attribute, expected_type) in RECORD_FIELDS.items():
        try:
            value = data[field]
        except KeyError:
            raise ValueError(f"Deployment record at {filepath} is missing '{field}'.")
        # bool is an int subclass but never a valid block number
        if not isinstance(value, expected_type) or isinstance(value, bool):
            raise ValueError(
                f"Field '{field}' in deployment record at {filepath} "
                f"must be of type {expected_type.__name__}."
            )
        values[attribute] = value

    return DeploymentRecord(**values)
