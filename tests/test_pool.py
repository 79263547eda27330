"""Unit tests for mysql_opts.pool: pool constraints and pool options."""

from datetime import timedelta

import pytest
from pydantic import ValidationError

from mysql_opts.pool import DEFAULT_POOL_CONSTRAINTS, PoolConstraints, PoolOpts


class TestPoolConstraints:
    @pytest.mark.parametrize(("min", "max"), [(0, 0), (0, 151), (10, 100), (5, 5), (1, 2**32)])
    def test_new_valid(self, min: int, max: int) -> None:
        constraints = PoolConstraints.new(min, max)
        assert constraints is not None
        assert constraints.min == min
        assert constraints.max == max

    @pytest.mark.parametrize(("min", "max"), [(1, 0), (101, 100), (2**32, 1)])
    def test_new_invalid_returns_none(self, min: int, max: int) -> None:
        assert PoolConstraints.new(min, max) is None

    def test_new_negative_returns_none(self) -> None:
        assert PoolConstraints.new(-1, 10) is None

    def test_direct_construction_rejects_min_above_max(self) -> None:
        with pytest.raises(ValidationError):
            PoolConstraints(min=20, max=10)

    def test_default(self) -> None:
        assert PoolConstraints() == DEFAULT_POOL_CONSTRAINTS
        assert DEFAULT_POOL_CONSTRAINTS.as_tuple() == (10, 100)

    def test_as_tuple(self) -> None:
        assert PoolConstraints(min=0, max=151).as_tuple() == (0, 151)

    def test_frozen(self) -> None:
        constraints = PoolConstraints(min=1, max=2)
        with pytest.raises(ValidationError):
            constraints.min = 5  # type: ignore[misc]


class TestPoolOpts:
    def test_defaults(self) -> None:
        opts = PoolOpts()
        assert opts.constraints == DEFAULT_POOL_CONSTRAINTS
        assert opts.inactive_connection_ttl == timedelta(0)
        assert opts.ttl_check_interval == timedelta(seconds=30)

    def test_with_constraints(self) -> None:
        constraints = PoolConstraints(min=15, max=30)
        opts = PoolOpts().with_constraints(constraints)
        assert opts.constraints == constraints

    def test_with_returns_new_instance(self) -> None:
        original = PoolOpts()
        updated = original.with_inactive_connection_ttl(timedelta(seconds=60))
        assert updated.inactive_connection_ttl == timedelta(seconds=60)
        assert original.inactive_connection_ttl == timedelta(0)

    def test_ttl_check_interval_accepts_one_second(self) -> None:
        opts = PoolOpts().with_ttl_check_interval(timedelta(seconds=1))
        assert opts.ttl_check_interval == timedelta(seconds=1)

    def test_ttl_check_interval_accepts_large_value(self) -> None:
        opts = PoolOpts().with_ttl_check_interval(timedelta(seconds=60))
        assert opts.ttl_check_interval == timedelta(seconds=60)

    @pytest.mark.parametrize("interval", [timedelta(0), timedelta(milliseconds=999)])
    def test_ttl_check_interval_below_floor_uses_default(self, interval: timedelta) -> None:
        opts = PoolOpts().with_ttl_check_interval(timedelta(seconds=5)).with_ttl_check_interval(interval)
        assert opts.ttl_check_interval == timedelta(seconds=30)

    def test_ttl_check_interval_floor_applies_on_construction(self) -> None:
        opts = PoolOpts(ttl_check_interval=timedelta(milliseconds=10))
        assert opts.ttl_check_interval == timedelta(seconds=30)

    def test_floor_keeps_other_fields(self) -> None:
        constraints = PoolConstraints(min=1, max=3)
        opts = (
            PoolOpts()
            .with_constraints(constraints)
            .with_inactive_connection_ttl(timedelta(seconds=9))
            .with_ttl_check_interval(timedelta(0))
        )
        assert opts.constraints == constraints
        assert opts.inactive_connection_ttl == timedelta(seconds=9)


class TestActiveBound:
    def test_zero_ttl_uses_min(self) -> None:
        opts = PoolOpts().with_constraints(PoolConstraints(min=3, max=7))
        assert opts.active_bound() == 3

    def test_nonzero_ttl_uses_max(self) -> None:
        opts = (
            PoolOpts()
            .with_constraints(PoolConstraints(min=3, max=7))
            .with_inactive_connection_ttl(timedelta(seconds=1))
        )
        assert opts.active_bound() == 7

    def test_default(self) -> None:
        assert PoolOpts().active_bound() == 10
