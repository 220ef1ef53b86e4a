import time
import typing
from pathlib import Path
from typing import Any, Dict, List, NamedTuple

from ape.contracts import ContractInstance

from soulbound.constants import (
    ARTIFACT_SUFFIX,
    CHAIN_ID_FILENAME,
    MIGRATIONS_FILENAME,
    SECURITY_CONTACT_KEY,
    SECURITY_CONTACT_TAG,
)
from soulbound.utils import _load_json, _write_json

ContractName = str


class ContractArtifact(NamedTuple):
    """A single contract deployment record, keyed by its logical contract name."""

    name: ContractName
    data: Dict[str, Any]

    @property
    def address(self) -> str:
        return self.data["address"]

    @property
    def block_number(self) -> int:
        return self.data["receipt"]["blockNumber"]


def network_deployments_dir(deployments_dir: Path, network: str) -> Path:
    return Path(deployments_dir) / network


def is_artifact_file(filepath: Path) -> bool:
    """True for contract artifact files; migration markers are not artifacts."""
    name = filepath.name
    return name.endswith(ARTIFACT_SUFFIX) and not name.endswith(MIGRATIONS_FILENAME)


def _normalize_devdoc(data: Dict[str, Any]) -> Dict[str, Any]:
    """Moves the natspec security contact tag to the conventional key."""
    devdoc = data.get("devdoc")
    if devdoc and SECURITY_CONTACT_TAG in devdoc:
        devdoc[SECURITY_CONTACT_KEY] = devdoc.pop(SECURITY_CONTACT_TAG)
    return data


def read_artifact(filepath: Path) -> ContractArtifact:
    data = _load_json(filepath)
    name = filepath.name[: -len(ARTIFACT_SUFFIX)]
    return ContractArtifact(name=name, data=_normalize_devdoc(data))


def read_artifacts(directory: Path) -> List[ContractArtifact]:
    """Reads every contract artifact in a network deployments directory, by filename order."""
    filepaths = sorted(
        p for p in Path(directory).iterdir() if p.is_file() and is_artifact_file(p)
    )
    return [read_artifact(filepath) for filepath in filepaths]


def _get_abi(contract_instance: ContractInstance) -> List[Dict]:
    """Returns the ABI of a contract instance."""
    contract_abi = list()
    for entry in contract_instance.contract_type.abi:
        contract_abi.append(entry.model_dump(mode="json", by_alias=True))
    return contract_abi


def _get_artifact_data(contract_instance: ContractInstance, args: List[Any]) -> Dict[str, Any]:
    contract_type = contract_instance.contract_type
    receipt = contract_instance.receipt
    return {
        "address": contract_instance.address,
        "abi": _get_abi(contract_instance),
        "transactionHash": receipt.txn_hash,
        "receipt": {
            "from": receipt.transaction.sender,
            "contractAddress": contract_instance.address,
            "transactionHash": receipt.txn_hash,
            "blockNumber": receipt.block_number,
            "gasUsed": receipt.gas_used,
            "status": int(receipt.status),
        },
        "args": list(args),
        "devdoc": dict(contract_type.devdoc or {}),
        "userdoc": dict(contract_type.userdoc or {}),
    }


def write_artifact(
    contract_instance: ContractInstance, args: List[Any], directory: Path
) -> Path:
    """Writes the deployment artifact of a contract instance, replacing a previous deployment."""
    contract_name = contract_instance.contract_type.name
    directory.mkdir(parents=True, exist_ok=True)
    filepath = directory / f"{contract_name}{ARTIFACT_SUFFIX}"
    _write_json(_get_artifact_data(contract_instance, args), filepath)
    print(f"(i) Artifact for {contract_name} written to {filepath}")
    return filepath


def write_chain_id(chain_id: int, directory: Path) -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    filepath = directory / CHAIN_ID_FILENAME
    filepath.write_text(str(chain_id))
    return filepath


def read_migrations(directory: Path) -> typing.Dict[str, int]:
    filepath = directory / MIGRATIONS_FILENAME
    if not filepath.exists():
        return dict()
    return _load_json(filepath)


def record_migration(migration_id: str, directory: Path) -> Path:
    """Marks a deployment step as executed on this network."""
    migrations = read_migrations(directory)
    migrations[migration_id] = int(time.time())
    directory.mkdir(parents=True, exist_ok=True)
    return _write_json(migrations, directory / MIGRATIONS_FILENAME)
