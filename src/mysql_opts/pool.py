"""
Connection pool constraints and options.

``PoolConstraints`` guarantees ``min <= max``. ``PoolOpts`` keeps
``ttl_check_interval`` at or above one second by substituting the default
for smaller values.
"""

from __future__ import annotations

import logging
from datetime import timedelta
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from .constants import (
    DEFAULT_INACTIVE_CONNECTION_TTL,
    DEFAULT_POOL_MAX,
    DEFAULT_POOL_MIN,
    DEFAULT_TTL_CHECK_INTERVAL,
    MIN_TTL_CHECK_INTERVAL,
)

logger = logging.getLogger(__name__)


class PoolConstraints(BaseModel):
    """
    Lower and upper bound on the number of connections held by a pool.

    Direct construction raises ``pydantic.ValidationError`` when
    ``min > max``; :meth:`new` returns ``None`` instead.
    """

    model_config = ConfigDict(frozen=True)

    min: int = Field(default=DEFAULT_POOL_MIN, ge=0)
    max: int = Field(default=DEFAULT_POOL_MAX, ge=0)

    @model_validator(mode="after")
    def _check_bounds(self) -> PoolConstraints:
        if self.min > self.max:
            raise ValueError(f"pool min ({self.min}) must not exceed max ({self.max})")
        return self

    @classmethod
    def new(cls, min: int, max: int) -> PoolConstraints | None:
        """
        Create constraints if they are valid (``min <= max``).

        Returns:
            The constraints, or ``None`` when the bounds are invalid
        """
        try:
            return cls(min=min, max=max)
        except ValidationError:
            return None

    def as_tuple(self) -> tuple[int, int]:
        """Return the constraints as ``(min, max)``."""
        return (self.min, self.max)


DEFAULT_POOL_CONSTRAINTS = PoolConstraints(min=DEFAULT_POOL_MIN, max=DEFAULT_POOL_MAX)


class PoolOpts(BaseModel):
    """
    Connection pool options.

    Attributes:
        constraints: Pool bounds
        inactive_connection_ttl: Idle time after which a connection above the
            lower bound is recycled. May idle longer because of
            ``ttl_check_interval``.
        ttl_check_interval: How often idle connections are checked for
            expiration. Values under one second are replaced by the default.
    """

    model_config = ConfigDict(frozen=True)

    constraints: PoolConstraints = Field(default=DEFAULT_POOL_CONSTRAINTS)
    inactive_connection_ttl: timedelta = Field(default=DEFAULT_INACTIVE_CONNECTION_TTL)
    ttl_check_interval: timedelta = Field(default=DEFAULT_TTL_CHECK_INTERVAL)

    @field_validator("ttl_check_interval", mode="after")
    @classmethod
    def _floor_ttl_check_interval(cls, value: timedelta) -> timedelta:
        if value < MIN_TTL_CHECK_INTERVAL:
            logger.debug(
                "ttl_check_interval %s is below %s, using default %s",
                value,
                MIN_TTL_CHECK_INTERVAL,
                DEFAULT_TTL_CHECK_INTERVAL,
            )
            return DEFAULT_TTL_CHECK_INTERVAL
        return value

    def _replace(self, **changes: Any) -> PoolOpts:
        # model_copy(update=...) skips validation, so rebuild through the constructor
        values = {
            "constraints": self.constraints,
            "inactive_connection_ttl": self.inactive_connection_ttl,
            "ttl_check_interval": self.ttl_check_interval,
        }
        values.update(changes)
        return type(self)(**values)

    def with_constraints(self, constraints: PoolConstraints) -> PoolOpts:
        """Return a copy with the given constraints."""
        return self._replace(constraints=constraints)

    def with_inactive_connection_ttl(self, ttl: timedelta) -> PoolOpts:
        """Return a copy with the given ``inactive_connection_ttl``."""
        return self._replace(inactive_connection_ttl=ttl)

    def with_ttl_check_interval(self, interval: timedelta) -> PoolOpts:
        """Return a copy with the given ``ttl_check_interval`` (one second floor applies)."""
        return self._replace(ttl_check_interval=interval)

    def active_bound(self) -> int:
        """
        Number of connections the pool keeps in its idle queue.

        * ``max`` if ``inactive_connection_ttl`` is non-zero: the pool holds up to
          ``max`` idle connections, trimmed toward ``min`` on each TTL check.
        * ``min`` otherwise: idle connections above ``min`` are dropped at once.
        """
        if self.inactive_connection_ttl > timedelta(0):
            return self.constraints.max
        return self.constraints.min


__all__ = ["DEFAULT_POOL_CONSTRAINTS", "PoolConstraints", "PoolOpts"]
