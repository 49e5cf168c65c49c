from __future__ import annotations

import logging
import os
import shlex
import subprocess
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Tuple

from .networks import NetworkProfile
from .errors import RetriesExhaustedError
from .project_constants import (
    CHILD_RPC_ENV_VAR,
    CLI_BINARY,
    CLI_PACKAGE,
    CLI_VERSION,
    MAX_ATTEMPTS,
    NODE_OPTIONS,
    PRIZE_TIERS_TO_COMPUTE,
    REMOTE_STATUS_URL,
    RETRY_DELAY_S,
)

log = logging.getLogger("runner")


@dataclass(frozen=True)
class RunContext:
    profile: NetworkProfile
    rpc_url: str
    output_dir: Path
    prize_tiers: Tuple[int, ...] = PRIZE_TIERS_TO_COMPUTE

    @property
    def results_dir(self) -> Path:
        return self.output_dir / str(self.profile.chain_id)


@dataclass
class AttemptState:
    maximum: int = MAX_ATTEMPTS
    current: int = 0

    def __post_init__(self) -> None:
        if self.maximum < 1:
            raise ValueError(f"max attempts must be >= 1, got {self.maximum}")

    def has_next(self) -> bool:
        return self.current < self.maximum

    def advance(self) -> int:
        if not self.has_next():
            raise RuntimeError("Attempt budget already spent.")
        self.current += 1
        return self.current


def prepare_output_dir(path: Path) -> Path:
    # OSError (permissions etc.) is left to the caller.
    path.mkdir(parents=True, exist_ok=True)
    return path


def ensure_cli_installed() -> None:
    """
    Probes `ptv5 --version`; installs the pinned CLI globally via npm if the
    check fails. An install failure propagates like any other attempt failure.
    """
    try:
        subprocess.run([CLI_BINARY, "--version"], check=True)
    except (subprocess.CalledProcessError, OSError):
        log.info("Installing PoolTogether V5 CLI version %s...", CLI_VERSION)
        subprocess.run(
            ["npm", "install", "-g", f"{CLI_PACKAGE}@{CLI_VERSION}"], check=True
        )


def build_command(ctx: RunContext) -> List[str]:
    profile = ctx.profile
    cmd = [
        CLI_BINARY,
        "utils",
        "compileWinners",
        "-o", str(ctx.output_dir),
        "-p", profile.prize_pool_address,
        "-c", str(profile.chain_id),
        "-j", profile.contract_json_url,
        "-s", profile.subgraph_url,
        "-r", REMOTE_STATUS_URL,
    ]
    if profile.multicall_address:
        cmd += ["-m", profile.multicall_address]
    return cmd


def build_child_env(
    ctx: RunContext, base_env: Optional[Mapping[str, str]] = None
) -> Dict[str, str]:
    """Returns a fresh environment for the child; base_env is not modified."""
    env = dict(os.environ if base_env is None else base_env)
    env.update(
        {
            CHILD_RPC_ENV_VAR: ctx.rpc_url,
            "NODE_OPTIONS": NODE_OPTIONS,
            "PRIZE_TIERS_TO_COMPUTE": ",".join(str(t) for t in ctx.prize_tiers),
            "DEBUG": "true",
        }
    )
    return env


def run_once(ctx: RunContext) -> None:
    ensure_cli_installed()

    cmd = build_command(ctx)
    log.info("Executing command: %s", shlex.join(cmd))
    subprocess.run(cmd, check=True, env=build_child_env(ctx))


def run_with_retries(
    ctx: RunContext,
    max_attempts: int = MAX_ATTEMPTS,
    retry_delay_s: float = RETRY_DELAY_S,
) -> int:
    """
    Runs compileWinners until it exits 0 or the attempt budget is spent.
    Waits retry_delay_s between attempts (immediate by default).
    Returns the number of attempts used.
    """
    if retry_delay_s < 0:
        raise ValueError(f"retry delay must be >= 0, got {retry_delay_s}")
    state = AttemptState(maximum=max_attempts)
    network = ctx.profile.name
    last_error: Optional[BaseException] = None

    while state.has_next():
        attempt = state.advance()
        log.info(
            "Attempt %d/%d: Running PoolTogether V5 CLI for %s...",
            attempt,
            state.maximum,
            network,
        )
        try:
            run_once(ctx)
        except (subprocess.CalledProcessError, OSError) as e:
            last_error = e
            log.error("Attempt %d failed: %s", attempt, e)
            if state.has_next():
                log.info("Retrying...")
                if retry_delay_s > 0:
                    time.sleep(retry_delay_s)
            continue

        log.info("Computed winners for %s on attempt %d.", network, attempt)
        return attempt

    raise RetriesExhaustedError(state.maximum, last_error)
