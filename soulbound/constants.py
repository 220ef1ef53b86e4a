from pathlib import Path

import soulbound

#
# Filesystem
#

PACKAGE_DIR = Path(soulbound.__file__).parent
CONSTRUCTOR_PARAMS_DIR = PACKAGE_DIR / "constructor_params"
DEFAULT_PARAMS_FILEPATH = CONSTRUCTOR_PARAMS_DIR / "soulbound.yml"

# relative to the project root (the working directory of `ape run`)
DEPLOYMENTS_DIR = Path("deployments")
SUBGRAPH_TEMPLATE_FILENAME = "subgraph.config.template.json"
SUBGRAPH_CONFIG_FILENAME = "subgraph.config.json"

#
# Artifacts
#

ARTIFACT_SUFFIX = ".json"
MIGRATIONS_FILENAME = ".migrations.json"
CHAIN_ID_FILENAME = ".chainId"

SECURITY_CONTACT_TAG = "custom:security-contact"
SECURITY_CONTACT_KEY = "securityContact"

ARTIFACT_JSON_FORMAT = {"indent": 2, "ensure_ascii": False}

#
# Deployment
#

LOCAL_NETWORKS = ["local"]
DEPLOYER_ACCOUNT_ENVVAR = "DEPLOYER_ACCOUNT"

# seconds to let the block explorer index the deployment before verifying
DEFAULT_VERIFICATION_DELAY = 10

#
# Verification
#

SOURCIFY_SERVER_URL = "https://sourcify.dev/server"
