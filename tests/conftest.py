import json
from pathlib import Path
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from soulbound.constants import DEPLOYMENTS_DIR, SUBGRAPH_TEMPLATE_FILENAME

NETWORK = "sepolia"
CHAIN_ID = 11155111
TOKEN_ADDRESS = "0xABC"


def token_template():
    return {
        "output": "generated/soulbound.",
        "chain": "mainnet",
        "datasources": [
            {"name": "Token", "address": "0x0", "startBlock": 0, "module": ["token"]},
        ],
    }


def artifact_data(address, block_number, **extra):
    data = {"address": address, "receipt": {"blockNumber": block_number}}
    data.update(extra)
    return data


@pytest.fixture
def project_root(tmp_path) -> Path:
    return tmp_path


@pytest.fixture
def deployments_dir(project_root) -> Path:
    directory = project_root / DEPLOYMENTS_DIR / NETWORK
    directory.mkdir(parents=True)
    return directory


@pytest.fixture
def write_template(project_root):
    def _write(template):
        filepath = project_root / SUBGRAPH_TEMPLATE_FILENAME
        filepath.write_text(json.dumps(template, indent=2))
        return filepath

    return _write


@pytest.fixture
def write_artifact_file(deployments_dir):
    def _write(filename, data):
        filepath = deployments_dir / filename
        filepath.write_text(json.dumps(data))
        return filepath

    return _write


@pytest.fixture
def network():
    explorer = MagicMock()
    return SimpleNamespace(
        name=NETWORK,
        chain_id=CHAIN_ID,
        ecosystem=SimpleNamespace(name="ethereum"),
        explorer=explorer,
    )


@pytest.fixture
def contract_instance():
    abi_entry = MagicMock()
    abi_entry.model_dump.return_value = {"type": "constructor", "inputs": []}
    contract_type = SimpleNamespace(
        name="SoulboundToken",
        source_id="SoulboundToken.sol",
        abi=[abi_entry],
        devdoc={"custom:security-contact": "security@example.com"},
        userdoc={},
    )
    receipt = SimpleNamespace(
        txn_hash="0xdeadbeef",
        block_number=42,
        gas_used=1_234_567,
        status=1,
        transaction=SimpleNamespace(sender="0xDeployer"),
    )
    return SimpleNamespace(address=TOKEN_ADDRESS, contract_type=contract_type, receipt=receipt)
