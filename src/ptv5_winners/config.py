from __future__ import annotations

import os
from dataclasses import dataclass
from dotenv import find_dotenv, load_dotenv

from .errors import MissingCredentialError
from .networks import NetworkProfile


@dataclass(frozen=True)
class Settings:
    rpc_url: str

    @staticmethod
    def from_env(
        profile: NetworkProfile, rpc_url_override: str | None = None
    ) -> "Settings":
        # .env is looked up from the working directory; exported variables win.
        load_dotenv(find_dotenv(usecwd=True), override=False)

        # If user provides --rpc-url, trust it.
        if rpc_url_override:
            return Settings(rpc_url=rpc_url_override)

        env_rpc = os.getenv(profile.rpc_env_var, "").strip()
        if not env_rpc:
            raise MissingCredentialError(profile.rpc_env_var)

        return Settings(rpc_url=env_rpc)
