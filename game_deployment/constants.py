from pathlib import Path

import game_deployment

#
# Filesystem
#

DEPLOYMENT_DIR = Path(game_deployment.__file__).parent
CONSTRUCTOR_PARAMS_DIR = DEPLOYMENT_DIR / "constructor_params"
DEFAULT_PARAMS_FILEPATH = CONSTRUCTOR_PARAMS_DIR / "project.yml"

RECORD_FILENAME_TEMPLATE = "deployment-{network}.json"
RECORD_JSON_FORMAT = {"indent": 2, "ensure_ascii": False}

#
# Networks
#

LOCAL_NETWORK = "local"
CORE_TESTNET2 = "core_testnet2"

LOCAL_NETWORKS = [LOCAL_NETWORK]
VERIFICATION_NETWORKS = [CORE_TESTNET2]

# additional blocks mined on top of the deployment block before verifying
VERIFICATION_CONFIRMATIONS = 6

#
# Contracts
#

PROJECT_CONTRACT_NAME = "Project"
PROJECT_TITLE = "AI-Training On-Chain Game"
DEFAULT_CURRENCY_SYMBOL = "ETH"

#
# Console
#

BANNER_WIDTH = 50

NEXT_STEPS = [
    "Save the contract address for frontend integration",
    "Fund the contract if needed for prize pool",
    "Test the contract functionality",
    "Deploy to mainnet when ready",
]

#
# Credentials
#

DEPLOYER_ACCOUNT_ALIAS = "deployer"
DEPLOYER_PASSPHRASE_ENVVAR = "DEPLOYER_PASSPHRASE"
DEPLOYER_PRIVATE_KEY_ENVVAR = "DEPLOYER_PRIVATE_KEY"
