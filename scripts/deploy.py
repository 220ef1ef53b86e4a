#!/usr/bin/python3
from pathlib import Path

import click
from ape import networks, project
from ape.cli import ConnectedProviderCommand, network_option

from soulbound.constants import DEFAULT_PARAMS_FILEPATH, DEPLOYER_ACCOUNT_ENVVAR
from soulbound.deploy import Deployer, get_deployer_account


@click.command(cls=ConnectedProviderCommand)
@network_option(required=True)
@click.option(
    "--account",
    "-a",
    "account_alias",
    help="Alias of the ape account that signs the deployment",
    envvar=DEPLOYER_ACCOUNT_ENVVAR,
    required=False,
)
@click.option(
    "--params",
    "-p",
    "params_filepath",
    help="Deployment parameters file",
    type=click.Path(dir_okay=False, exists=True, path_type=Path),
    default=DEFAULT_PARAMS_FILEPATH,
)
@click.option(
    "--verify/--no-verify",
    help="Verify the deployed contract on Sourcify and the block explorer",
    default=True,
)
@click.option(
    "--verification-delay",
    help="Seconds to wait before submitting to the block explorer",
    type=click.FloatRange(min=0),
    required=False,
)
def cli(network, account_alias, params_filepath, verify, verification_delay):
    """Deploy SoulboundToken and verify it (00_deploy_advancedERC721)."""
    active_network = networks.provider.network
    account = get_deployer_account(active_network.name, alias=account_alias)

    deployer = Deployer.from_yaml(
        filepath=params_filepath,
        network=active_network,
        account=account,
        verify=verify,
        verification_delay=verification_delay,
    )

    soulbound_token = deployer.deploy(project.SoulboundToken)

    deployer.finalize(deployments=[soulbound_token])


if __name__ == "__main__":
    cli()
