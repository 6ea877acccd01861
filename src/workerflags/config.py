"""Configuration for :class:`~workerflags.updater.WorkerFlagsUpdater`.

Values can be set programmatically or overridden with environment
variables. Environment variables always take precedence over programmatic
values when :meth:`UpdaterConfig.from_env` is used.

Example usage::

    from workerflags import UpdaterConfig, UnboundFlagPolicy, WorkerFlagsUpdater

    updater = WorkerFlagsUpdater(
        config=UpdaterConfig(unbound_flag_policy=UnboundFlagPolicy.RAISE)
    )

    # Local override via environment variable
    # $ export WORKERFLAGS_UNBOUND_POLICY=ignore
"""

import os
from enum import Enum
from typing import Any

from pydantic import BaseModel

ENV_UNBOUND_POLICY = "WORKERFLAGS_UNBOUND_POLICY"


class UnboundFlagPolicy(str, Enum):
    """What to do with an update for a flag name that has no binding."""

    IGNORE = "ignore"
    WARN = "warn"
    RAISE = "raise"


class UpdaterConfig(BaseModel):
    unbound_flag_policy: UnboundFlagPolicy = UnboundFlagPolicy.WARN

    @classmethod
    def from_env(cls, **overrides: Any) -> "UpdaterConfig":
        """Build a config from keyword values and ``WORKERFLAGS_*`` variables.

        Raises:
            pydantic.ValidationError: If an environment value is not valid.
        """
        values = dict(overrides)
        policy = os.environ.get(ENV_UNBOUND_POLICY)
        if policy:
            values["unbound_flag_policy"] = policy.strip().lower()
        return cls(**values)
