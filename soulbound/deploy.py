import sys
import typing
from pathlib import Path
from typing import Any, List, Optional

from ape import accounts
from ape.api import AccountAPI, NetworkAPI
from ape.contracts.base import ContractContainer, ContractInstance

from soulbound.artifacts import (
    network_deployments_dir,
    record_migration,
    write_artifact,
    write_chain_id,
)
from soulbound.explorer import verify_contract
from soulbound.params import DeploymentParameters
from soulbound.sourcify import SourcifyClient
from soulbound.utils import is_local_network

MISSING_DEPLOYER_MESSAGE = (
    "\n\nERROR!\n\nThe node you are deploying to does not have access to a private key "
    "to sign this transaction. Import an account with `ape accounts import <alias>` and "
    "pass its alias with --account to solve this.\n\n"
)


def get_deployer_account(network_name: str, alias: Optional[str] = None) -> Optional[AccountAPI]:
    """
    Returns the account that signs the deployment, or None if no signer is available.
    Local networks always use the first test account.
    """
    if is_local_network(network_name):
        return accounts.test_accounts[0]
    if not alias or alias not in accounts.aliases:
        return None
    return accounts.load(alias)


def _abort_missing_deployer() -> None:
    print(MISSING_DEPLOYER_MESSAGE, file=sys.stderr)
    sys.exit(1)


class Deployer:
    """
    Represents an ape account plus the deployment parameters of a deployment step,
    plus artifact persistence and best-effort verification.
    """

    def __init__(
        self,
        params: DeploymentParameters,
        network: NetworkAPI,
        account: Optional[AccountAPI],
        verify: bool = True,
        project_root: Path = Path("."),
        verification_delay: Optional[float] = None,
        sourcify: Optional[SourcifyClient] = None,
    ):
        if account is None:
            _abort_missing_deployer()

        self.params = params
        self.network = network
        self.verify = verify
        self.project_root = Path(project_root)
        if verification_delay is None:
            verification_delay = params.verification_delay
        self.verification_delay = verification_delay
        self.sourcify = sourcify

        self._account = account
        self._constructor_args: typing.Dict[str, List[Any]] = dict()
        self._print_deployment_info()

    @classmethod
    def from_yaml(cls, filepath: Path, *args, **kwargs) -> "Deployer":
        params = DeploymentParameters.from_yaml(filepath)
        return cls(params, *args, **kwargs)

    def get_account(self) -> AccountAPI:
        """Returns the deployer account."""
        return self._account

    @property
    def artifacts_dir(self) -> Path:
        return network_deployments_dir(
            self.project_root / self.params.artifacts_dir, self.network.name
        )

    def deploy(self, container: ContractContainer) -> ContractInstance:
        contract_name = container.contract_type.name
        args = self.params.constructor_args(contract_name)
        print(f"\nDeploying {contract_name} with arguments: {args}")
        instance = self._account.deploy(container, *args)
        self._constructor_args[contract_name] = args
        return instance

    def finalize(self, deployments: List[ContractInstance]) -> None:
        """
        Writes the deployment artifacts, optionally verifies the deployments
        and marks the deployment step as executed.
        """
        directory = self.artifacts_dir
        for instance in deployments:
            args = self._constructor_args.get(instance.contract_type.name, [])
            write_artifact(instance, args=args, directory=directory)
        write_chain_id(self.network.chain_id, directory=directory)

        if self.verify:
            for instance in deployments:
                verify_contract(
                    instance,
                    network=self.network,
                    delay=self.verification_delay,
                    sourcify=self.sourcify,
                )

        record_migration(self.params.id, directory=directory)
        print(f"(i) Deployment {self.params.id} complete on {self.network.name}.")

    def _print_deployment_info(self):
        print(
            f"Deployment: {self.params.id} {self.params.tags}",
            f"Account: {self._account.address}",
            f"Artifacts: {self.artifacts_dir}",
            f"Verify: {self.verify}",
            f"Ecosystem: {self.network.ecosystem.name}",
            f"Network: {self.network.name}",
            f"Chain ID: {self.network.chain_id}",
            sep="\n",
        )
