class SoulboundDeploymentError(Exception):
    """Base class for deployment tooling errors."""


class MissingDeploymentError(SoulboundDeploymentError, FileNotFoundError):
    """Raised when no deployment artifacts exist for a network."""

    def __init__(self, network: str):
        self.network = network
        super().__init__(f"No deployment on network {network} found")


class DeploymentConfigError(SoulboundDeploymentError, ValueError):
    """Raised when the deployment parameters file is malformed."""
