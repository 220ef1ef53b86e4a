import json
from types import SimpleNamespace

from soulbound import artifacts
from soulbound.artifacts import (
    ContractArtifact,
    is_artifact_file,
    read_artifacts,
    read_migrations,
    record_migration,
    write_artifact,
    write_chain_id,
)
from tests.conftest import TOKEN_ADDRESS, artifact_data


def test_artifact_file_filter(tmp_path):
    assert is_artifact_file(tmp_path / "Token.json")
    assert not is_artifact_file(tmp_path / "Token.migrations.json")
    assert not is_artifact_file(tmp_path / ".migrations.json")
    assert not is_artifact_file(tmp_path / ".chainId")
    assert not is_artifact_file(tmp_path / "solcInputs")


def test_read_artifacts(deployments_dir, write_artifact_file):
    write_artifact_file("Zeta.json", artifact_data("0x2", 2))
    write_artifact_file("Alpha.json", artifact_data("0x1", 1))
    write_artifact_file("Alpha.migrations.json", artifact_data("0x3", 3))
    (deployments_dir / "solcInputs").mkdir()

    loaded = read_artifacts(deployments_dir)

    assert [a.name for a in loaded] == ["Alpha", "Zeta"]
    assert loaded[0].address == "0x1"
    assert loaded[0].block_number == 1


def test_security_contact_normalized_on_every_artifact(deployments_dir, write_artifact_file):
    devdoc = {"custom:security-contact": "security@example.com", "title": "Token"}
    write_artifact_file("Token.json", artifact_data("0x1", 1, devdoc=dict(devdoc)))
    write_artifact_file("Unlisted.json", artifact_data("0x2", 2, devdoc=dict(devdoc)))
    write_artifact_file("NoDoc.json", artifact_data("0x3", 3))

    by_name = {a.name: a for a in read_artifacts(deployments_dir)}

    for name in ("Token", "Unlisted"):
        assert by_name[name].data["devdoc"] == {
            "securityContact": "security@example.com",
            "title": "Token",
        }
    assert "devdoc" not in by_name["NoDoc"].data


def test_contract_artifact_properties():
    artifact = ContractArtifact(name="Token", data=artifact_data("0xABC", 42))
    assert artifact.address == "0xABC"
    assert artifact.block_number == 42


def test_write_artifact(tmp_path, contract_instance):
    directory = tmp_path / "deployments" / "sepolia"
    args = ["Goushuin", "GSOUL", "ipfs://base/"]

    filepath = write_artifact(contract_instance, args=args, directory=directory)

    assert filepath == directory / "SoulboundToken.json"
    with open(filepath) as file:
        data = json.load(file)
    assert data["address"] == TOKEN_ADDRESS
    assert data["args"] == args
    assert data["abi"] == [{"type": "constructor", "inputs": []}]
    assert data["receipt"]["blockNumber"] == 42
    assert data["receipt"]["from"] == "0xDeployer"
    assert data["devdoc"] == {"custom:security-contact": "security@example.com"}

    (artifact,) = read_artifacts(directory)
    assert artifact.name == "SoulboundToken"
    assert artifact.block_number == 42
    assert artifact.data["devdoc"] == {"securityContact": "security@example.com"}


def test_record_migration(tmp_path, monkeypatch):
    directory = tmp_path / "sepolia"
    assert read_migrations(directory) == {}

    monkeypatch.setattr(artifacts, "time", SimpleNamespace(time=lambda: 1700000000.5))
    record_migration("00_deploy_advancedERC721", directory=directory)
    monkeypatch.setattr(artifacts, "time", SimpleNamespace(time=lambda: 1700000100))
    record_migration("01_other", directory=directory)

    assert read_migrations(directory) == {
        "00_deploy_advancedERC721": 1700000000,
        "01_other": 1700000100,
    }


def test_write_chain_id(tmp_path):
    filepath = write_chain_id(11155111, directory=tmp_path / "sepolia")
    assert filepath.read_text() == "11155111"
    assert read_artifacts(tmp_path / "sepolia") == []
