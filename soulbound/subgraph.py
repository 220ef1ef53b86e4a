"""
Subgraph configuration generator.

Merges the deployment artifacts of a network into the datasources of
``subgraph.config.template.json`` and writes the result to ``subgraph.config.json``.
The output is regenerated in full on every run; datasources are never added or
removed relative to the template.
"""

import copy
from collections import OrderedDict
from pathlib import Path
from typing import Any, Dict, List

import click

from soulbound.artifacts import ContractArtifact, network_deployments_dir, read_artifacts
from soulbound.constants import (
    DEPLOYMENTS_DIR,
    SUBGRAPH_CONFIG_FILENAME,
    SUBGRAPH_TEMPLATE_FILENAME,
)
from soulbound.exceptions import MissingDeploymentError
from soulbound.utils import _load_json, _write_json

Datasource = Dict[str, Any]


def read_template(filepath: Path) -> Dict[str, Any]:
    return _load_json(filepath)


def merge_datasources(
    datasources: List[Datasource], artifacts: List[ContractArtifact]
) -> List[Datasource]:
    """
    Updates the address and start block of every datasource named after an artifact.
    Unmatched artifacts are reported and otherwise ignored.
    """
    updated_datasources = OrderedDict()
    for datasource in datasources:
        updated_datasources[datasource["name"]] = datasource

    for artifact in artifacts:
        if artifact.name not in updated_datasources:
            click.secho(
                f"  - No datasource found for {artifact.name}, please add a line in "
                f"{SUBGRAPH_TEMPLATE_FILENAME} with the name field set to the name of "
                f"the contract artifact in the deployments folder.",
                fg="red",
                err=True,
            )
            continue

        click.secho(f"  - Updating address and start block for {artifact.name}", fg="green")
        updated_datasources[artifact.name] = {
            **updated_datasources[artifact.name],
            "address": artifact.address,
            "startBlock": artifact.block_number,
        }

    return list(updated_datasources.values())


def resolve_subgraph_config(
    template: Dict[str, Any], artifacts: List[ContractArtifact], network: str
) -> Dict[str, Any]:
    """Returns the template with live deployment values merged in; the template is not mutated."""
    subgraph_config = copy.deepcopy(template)
    subgraph_config["datasources"] = merge_datasources(
        datasources=subgraph_config.get("datasources", []), artifacts=artifacts
    )
    subgraph_config["chain"] = network
    return subgraph_config


def generate_subgraph_config(
    network: str, project_root: Path = Path("."), deployments_dir: Path = DEPLOYMENTS_DIR
) -> Path:
    """
    Writes the resolved subgraph config for a network and returns its filepath.
    ``deployments_dir`` is relative to ``project_root`` unless absolute.
    """
    project_root = Path(project_root)
    deployments_dir = network_deployments_dir(project_root / deployments_dir, network)
    if not deployments_dir.is_dir():
        raise MissingDeploymentError(network)

    click.secho(
        f"Updating the subgraph config for this smart contract set on network {network}",
        fg="yellow",
    )

    artifacts = read_artifacts(deployments_dir)
    template = read_template(project_root / SUBGRAPH_TEMPLATE_FILENAME)
    subgraph_config = resolve_subgraph_config(template, artifacts, network)

    output_filepath = _write_json(subgraph_config, project_root / SUBGRAPH_CONFIG_FILENAME)

    click.secho(
        f"Done generating subgraph for this smart contract set on network {network}.",
        fg="green",
        bold=True,
    )
    return output_filepath


def run_graph_config(
    network: str, project_root: Path = Path("."), deployments_dir: Path = DEPLOYMENTS_DIR
) -> Path:
    """Command entry point; a missing deployment becomes a click error (exit code 1)."""
    try:
        return generate_subgraph_config(
            network=network, project_root=project_root, deployments_dir=deployments_dir
        )
    except MissingDeploymentError as e:
        raise click.ClickException(str(e))
