#!/usr/bin/python3
from pathlib import Path

import click
from ape import networks
from ape.cli import ConnectedProviderCommand, network_option

from soulbound.constants import DEFAULT_PARAMS_FILEPATH
from soulbound.params import DeploymentParameters
from soulbound.subgraph import run_graph_config


@click.command(cls=ConnectedProviderCommand, name="graph:config")
@network_option(required=True)
@click.option(
    "--project-root",
    help="Directory holding the deployments folder and the subgraph config template",
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
def cli(network, project_root, params_filepath):
    """Generates a subgraph config based on the contracts in this set."""
    params = DeploymentParameters.from_yaml(params_filepath)
    run_graph_config(
        network=networks.provider.network.name,
        project_root=project_root,
        deployments_dir=params.artifacts_dir,
    )


if __name__ == "__main__":
    cli()
