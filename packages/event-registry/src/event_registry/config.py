"""Emitter configuration: defaults, environment and TOML loading."""

from __future__ import annotations

import logging
import os
import tomllib
from collections.abc import Mapping
from pathlib import Path

from pydantic import BaseModel

logger = logging.getLogger(__name__)

DEFAULT_MAX_LISTENERS = 10
ENV_MAX_LISTENERS = "EVENT_REGISTRY_MAX_LISTENERS"
TOML_TABLE = "event-registry"


class EmitterConfig(BaseModel):
    """Settings applied to a new ``EventEmitter``."""

    max_listeners: int = DEFAULT_MAX_LISTENERS

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> EmitterConfig:
        """Build a config from ``EVENT_REGISTRY_MAX_LISTENERS``.

        Unset or blank falls back to the default. A value that is not an
        integer raises ``pydantic.ValidationError``.
        """
        environ = os.environ if environ is None else environ
        raw = environ.get(ENV_MAX_LISTENERS, "").strip()
        if not raw:
            return cls()
        return cls.model_validate({"max_listeners": raw})

    @classmethod
    def from_toml(cls, path: str | Path) -> EmitterConfig:
        """Build a config from the ``[event-registry]`` table of a TOML file.

        Keys use dashes (``max-listeners``). A missing file or table gives
        the defaults.
        """
        path = Path(path)
        if not path.is_file():
            logger.debug("No config file at %s, using defaults", path)
            return cls()

        with open(path, "rb") as f:
            data = tomllib.load(f)

        table = data.get(TOML_TABLE, {})
        return cls.model_validate({k.replace("-", "_"): v for k, v in table.items()})
