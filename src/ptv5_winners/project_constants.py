"""
Fixed parameters for the PoolTogether V5 winners run.

The CLI version is pinned: results are only comparable across runs
computed with the same compileWinners release.
"""

# External winners CLI (npm)
CLI_BINARY = "ptv5"
CLI_PACKAGE = "@generationsoftware/pt-v5-cli"
CLI_VERSION = "2.0.8"

# Relative to the working directory the driver is started from
OUTPUT_DIRECTORY_NAME = "winners/vaultAccounts"

# Prize tier indices handed to compileWinners
PRIZE_TIERS_TO_COMPUTE = (0, 1, 2, 3, 4, 5)

MAX_ATTEMPTS = 50

# Seconds to wait between attempts; 0 retries immediately
RETRY_DELAY_S = 0.0

# Canonical published results, used by the CLI to resume from prior draws
REMOTE_STATUS_URL = (
    "https://raw.githubusercontent.com/GenerationSoftware/pt-v5-winners/"
    "refs/heads/main/winners/vaultAccounts"
)

# Child process environment
CHILD_RPC_ENV_VAR = "JSON_RPC_URL"
NODE_OPTIONS = "--max_old_space_size=32768"
