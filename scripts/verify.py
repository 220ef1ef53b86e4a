from pathlib import Path

import click
from ape import networks, project
from ape.cli import ConnectedProviderCommand, network_option

from soulbound.artifacts import network_deployments_dir, read_artifacts
from soulbound.constants import DEFAULT_PARAMS_FILEPATH
from soulbound.exceptions import MissingDeploymentError
from soulbound.explorer import verify_contract
from soulbound.params import DeploymentParameters


@click.command(cls=ConnectedProviderCommand)
@network_option(required=True)
@click.option(
    "--contract-name",
    "-c",
    "contract_names",
    help="Contract to verify",
    type=click.STRING,
    required=True,
    multiple=True,
)
@click.option(
    "--project-root",
    help="Directory holding the deployments folder",
    type=click.Path(file_okay=False, exists=True, path_type=Path),
    default=Path("."),
)
@click.option(
    "--params",
    "-p",
    "params_filepath",
    help="Deployment parameters file; its artifacts dir locates the deployments",
    type=click.Path(dir_okay=False, exists=True, path_type=Path),
    default=DEFAULT_PARAMS_FILEPATH,
)
def cli(network, contract_names, project_root, params_filepath):
    """Verify deployed contracts from their deployment artifacts."""
    active_network = networks.provider.network
    params = DeploymentParameters.from_yaml(params_filepath)
    directory = network_deployments_dir(
        project_root / params.artifacts_dir, active_network.name
    )
    if not directory.is_dir():
        raise click.ClickException(str(MissingDeploymentError(active_network.name)))

    artifacts = {artifact.name: artifact for artifact in read_artifacts(directory)}
    for contract_name in contract_names:
        try:
            artifact = artifacts[contract_name]
        except KeyError:
            raise click.BadParameter(
                f"Contract '{contract_name}' not found in {directory}",
                param_hint="--contract-name",
            )

        contract_container = getattr(project, contract_name)
        contract_instance = contract_container.at(artifact.address)
        submitted = verify_contract(contract_instance, network=active_network)
        if not submitted:
            click.secho(f"{contract_name} was not submitted to the block explorer.", fg="yellow")


if __name__ == "__main__":
    cli()
