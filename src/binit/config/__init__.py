"""Configuration Module for binit

Two kinds of configuration live here:

- ``Policy``: the composition switches chosen on the command line
- ``LogSettings``: binit's own diagnostics, read from ``BINIT_*`` variables
  (optionally layered over a dotenv file through ``EnvLoader``)

Example:
    from binit.config import LogSettings, Policy

    policy = Policy(drop_repeats=True, separator=",")
    log = LogSettings.from_env(prefix="BINIT")
"""

from binit.config.env_loader import EnvLoader
from binit.config.policy import Policy
from binit.config.settings import DEFAULT_PREFIX, LogSettings

__all__ = [
    "EnvLoader",
    "Policy",
    "LogSettings",
    "DEFAULT_PREFIX",
]
