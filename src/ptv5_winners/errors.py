"""Exceptions raised by the network runner."""

from __future__ import annotations

from typing import List, Optional


class RunnerError(RuntimeError):
    """Base class for errors the CLI turns into a non-zero exit."""


class NetworkNotFoundError(RunnerError):
    def __init__(self, name: Optional[str], available: List[str]) -> None:
        self.name = name
        self.available = list(available)
        super().__init__(f"Unknown network: {name!r}")


class MissingCredentialError(RunnerError):
    """The RPC URL environment variable for the network is unset or empty."""

    def __init__(self, env_var: str) -> None:
        self.env_var = env_var
        super().__init__(f"{env_var} environment variable is not set.")


class RpcCheckError(RunnerError):
    pass


class RetriesExhaustedError(RunnerError):
    def __init__(self, attempts: int, last_error: Optional[BaseException]) -> None:
        self.attempts = attempts
        self.last_error = last_error
        super().__init__(
            f"Exceeded maximum retries ({attempts}). Last error: {last_error}"
        )
