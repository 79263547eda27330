"""
Load connection options from the environment.

The URL is read from ``DATABASE_URL`` (falling back to ``MYSQL_URL``).
Values from an optional ``.env`` file are used only where the process
environment does not define the variable.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping, Sequence
from pathlib import Path

from dotenv import dotenv_values

from .constants import URL_ENV_VARS
from .exceptions import ConfigurationError
from .opts import Opts

logger = logging.getLogger(__name__)


def url_from_env(
    variables: Sequence[str] = URL_ENV_VARS,
    environ: Mapping[str, str] | None = None,
    dotenv_path: str | Path | None = None,
) -> str:
    """
    Return the first non-empty connection URL among ``variables``.

    Args:
        variables: Variable names to look up, in order
        environ: Environment mapping (defaults to ``os.environ``)
        dotenv_path: Optional ``.env`` file consulted after ``environ``

    Raises:
        ConfigurationError: If none of the variables is set
    """
    env: dict[str, str] = {}
    if dotenv_path is not None:
        env.update({k: v for k, v in dotenv_values(dotenv_path).items() if v is not None})
    env.update(os.environ if environ is None else environ)

    for name in variables:
        value = env.get(name)
        if value:
            logger.debug("Using connection URL from %s", name)
            return value
    raise ConfigurationError(f"No connection URL found in environment (tried {', '.join(variables)})")


def opts_from_env(
    variables: Sequence[str] = URL_ENV_VARS,
    environ: Mapping[str, str] | None = None,
    dotenv_path: str | Path | None = None,
) -> Opts:
    """
    Parse connection options from an environment variable.

    Raises:
        ConfigurationError: If no URL variable is set
        UrlError: If the URL is invalid
    """
    return Opts.from_url(url_from_env(variables, environ, dotenv_path))


__all__ = ["opts_from_env", "url_from_env"]
