from http import HTTPStatus
from pathlib import Path
from typing import Dict, NamedTuple, Optional

import requests
from ape import compilers, project
from ethpm_types import ContractType

from soulbound.constants import SOURCIFY_SERVER_URL


class SourcifyPayload(NamedTuple):
    std_json_input: Dict
    compiler_version: str
    contract_identifier: str


class SourcifyClient:
    """Submits contracts to the Sourcify verification registry."""

    def __init__(self, server_url: str = SOURCIFY_SERVER_URL, timeout: int = 60):
        self.server_url = server_url.rstrip("/")
        self.timeout = timeout

    def verify(self, chain_id: int, address: str, payload: SourcifyPayload) -> Optional[str]:
        """
        Requests verification of the contract at ``address``.
        Returns the verification job id, or None when the contract is already verified.
        """
        url = f"{self.server_url}/v2/verify/{chain_id}/{address}"
        response = requests.post(
            url,
            json={
                "stdJsonInput": payload.std_json_input,
                "compilerVersion": payload.compiler_version,
                "contractIdentifier": payload.contract_identifier,
            },
            timeout=self.timeout,
        )
        if response.status_code == HTTPStatus.CONFLICT:
            print(f"(i) {address} is already verified on Sourcify")
            return None
        response.raise_for_status()

        verification_id = response.json()["verificationId"]
        print(f"(i) Sourcify verification submitted for {address}: {verification_id}")
        return verification_id


def sourcify_payload(contract_type: ContractType) -> SourcifyPayload:
    """Builds the standard JSON input of a compiled contract through ape's solidity compiler."""
    # source ids are relative to the project root
    source_path = Path(project.path) / contract_type.source_id
    std_json_inputs = compilers.solidity.get_standard_input_json([source_path], project=project)
    if len(std_json_inputs) != 1:
        raise ValueError(
            f"Expected a single compiler version for {contract_type.name}, "
            f"got {len(std_json_inputs)}"
        )
    std_json_input = list(std_json_inputs.values())[0]

    for compiler in project.manifest.compilers or []:
        if contract_type.name in (compiler.contractTypes or []):
            compiler_version = compiler.version
            break
    else:
        raise ValueError(f"No compiler found for {contract_type.name} in project manifest.")

    return SourcifyPayload(
        std_json_input=std_json_input,
        compiler_version=compiler_version,
        contract_identifier=f"{contract_type.source_id}:{contract_type.name}",
    )
