import typing
from collections import OrderedDict
from pathlib import Path
from typing import Any, List

from soulbound.constants import DEFAULT_VERIFICATION_DELAY, DEPLOYMENTS_DIR
from soulbound.exceptions import DeploymentConfigError
from soulbound.utils import _load_yaml

CONTRACT_CONSTRUCTOR_PARAMETER_KEY = "constructor"


def _get_constructor_parameters(config: typing.Dict) -> OrderedDict:
    contracts = config.get("contracts")
    if not contracts:
        raise DeploymentConfigError("Parameters file missing 'contracts' field.")

    constructor_parameters = OrderedDict()
    for contract_info in contracts:
        if isinstance(contract_info, str):
            constructor_parameters[contract_info] = OrderedDict()
        elif isinstance(contract_info, dict) and len(contract_info) == 1:
            contract_name = list(contract_info.keys())[0]  # only one entry
            contract_data = contract_info[contract_name] or dict()
            parameters = contract_data.get(CONTRACT_CONSTRUCTOR_PARAMETER_KEY) or dict()
            if not isinstance(parameters, dict):
                raise DeploymentConfigError(
                    f"Malformed constructor parameter config for {contract_name}."
                )
            constructor_parameters[contract_name] = OrderedDict(parameters)
        else:
            raise DeploymentConfigError("Malformed constructor parameters YAML.")

    return constructor_parameters


class DeploymentParameters(typing.NamedTuple):
    """Deployment step identity, artifact location and constructor arguments."""

    id: str
    tags: List[str]
    artifacts_dir: Path
    verification_delay: float
    constructor_parameters: OrderedDict

    @classmethod
    def from_config(cls, config: typing.Dict) -> "DeploymentParameters":
        deployment = config.get("deployment")
        if not deployment:
            raise DeploymentConfigError("deployment is not set in params file.")

        deployment_id = deployment.get("id")
        if not deployment_id:
            raise DeploymentConfigError("deployment id is not set in params file.")

        artifacts_config = config.get("artifacts") or dict()
        verification_config = config.get("verification") or dict()

        delay = verification_config.get("delay", DEFAULT_VERIFICATION_DELAY)
        if not isinstance(delay, (int, float)) or delay < 0:
            raise DeploymentConfigError(f"Invalid verification delay: {delay}")

        return cls(
            id=str(deployment_id),
            tags=list(deployment.get("tags") or []),
            artifacts_dir=Path(artifacts_config.get("dir", DEPLOYMENTS_DIR)),
            verification_delay=delay,
            constructor_parameters=_get_constructor_parameters(config),
        )

    @classmethod
    def from_yaml(cls, filepath: Path) -> "DeploymentParameters":
        config = _load_yaml(filepath)
        if not isinstance(config, dict):
            raise DeploymentConfigError(f"Malformed parameters file {filepath}.")
        return cls.from_config(config)

    def constructor_args(self, contract_name: str) -> List[Any]:
        """Returns the ordered constructor arguments for a single contract."""
        try:
            parameters = self.constructor_parameters[contract_name]
        except KeyError:
            raise DeploymentConfigError(f"No parameters for contract '{contract_name}'.")
        return list(parameters.values())
