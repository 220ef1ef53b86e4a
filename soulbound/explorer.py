import os
import sys
import time
from enum import Enum
from typing import Callable, Optional

from ape.api import NetworkAPI
from ape.contracts import ContractInstance
from ape.utils import ZERO_ADDRESS
from ape_etherscan.utils import API_KEY_ENV_KEY_MAP

from soulbound.sourcify import SourcifyClient, sourcify_payload

DEFAULT_API_KEY_ENVVAR = "ETHERSCAN_API_KEY"


class ExplorerSupport(Enum):
    SUPPORTED = "supported"
    UNSUPPORTED = "unsupported"
    # the probe itself failed; treated as unsupported
    INDETERMINATE = "indeterminate"

    @property
    def available(self) -> bool:
        return self is ExplorerSupport.SUPPORTED


def probe_explorer(network: NetworkAPI) -> ExplorerSupport:
    """Detects whether a block explorer integration is configured for the network."""
    try:
        explorer = network.explorer
        if explorer is None:
            return ExplorerSupport.UNSUPPORTED
        explorer.get_address_url(ZERO_ADDRESS)
    except Exception:
        return ExplorerSupport.INDETERMINATE
    return ExplorerSupport.SUPPORTED


def api_key_envvar(ecosystem_name: str) -> str:
    return API_KEY_ENV_KEY_MAP.get(ecosystem_name, DEFAULT_API_KEY_ENVVAR)


def get_explorer_api_key(ecosystem_name: str) -> Optional[str]:
    return os.environ.get(api_key_envvar(ecosystem_name)) or None


def _missing_api_key_message(network: NetworkAPI, contract_name: str) -> str:
    envvar = api_key_envvar(network.ecosystem.name)
    return (
        f"\n\nERROR!\n\nYou have not set your Etherscan API key ({envvar}) for the etherscan "
        f"plugin configured in ape-config.yaml. Set it and run\n\n"
        f"ape run verify --network {network.ecosystem.name}:{network.name} "
        f"--contract-name {contract_name}\n\n"
    )


def verify_contract(
    contract_instance: ContractInstance,
    network: NetworkAPI,
    delay: float = 0,
    sourcify: Optional[SourcifyClient] = None,
    sleep: Callable[[float], None] = time.sleep,
) -> bool:
    """
    Best-effort source verification of a deployed contract: Sourcify first, then the
    network's block explorer once an API key is available.
    Returns True when explorer verification was submitted.
    """
    contract_name = contract_instance.contract_type.name
    if not probe_explorer(network).available:
        return False

    sourcify = sourcify or SourcifyClient()
    print(f"(i) Verifying {contract_name} on Sourcify...")
    sourcify.verify(
        chain_id=network.chain_id,
        address=contract_instance.address,
        payload=sourcify_payload(contract_instance.contract_type),
    )

    if not get_explorer_api_key(network.ecosystem.name):
        print(_missing_api_key_message(network, contract_name), file=sys.stderr)
        return False

    if delay:
        print(f"(i) Waiting {delay}s for the explorer to index {contract_name}...")
        sleep(delay)
    print(f"(i) Verifying {contract_name}...")
    network.explorer.publish_contract(contract_instance.address)
    return True
