"""Tests for session monitor configuration and states."""

import dataclasses

import pytest

from autolock.activity.base import ActivityKind
from autolock.idle.config import ALL_ACTIVITY_KINDS, MonitorConfig
from autolock.idle.state import SessionPhase, SessionState


class TestMonitorConfig:
    """Tests for MonitorConfig."""

    def test_default_values(self):
        """Test defaults leave monitoring off."""
        config = MonitorConfig()
        assert config.total_timeout_ms == 0
        assert config.prompt_duration_ms == 15000
        assert config.activity_kinds == ALL_ACTIVITY_KINDS
        assert not config.enabled

    def test_derived_values(self):
        config = MonitorConfig(total_timeout_ms=20000, prompt_duration_ms=5000)
        assert config.enabled
        assert config.deadline_ms == 15000
        assert config.prompt_seconds == 5

    @pytest.mark.parametrize(
        ("total", "prompt"),
        [(0, 5000), (-1, 0), (5000, 5000), (4000, 5000), (20000, -1)],
    )
    def test_disabled_configs(self, total, prompt):
        assert not MonitorConfig(total_timeout_ms=total, prompt_duration_ms=prompt).enabled

    def test_zero_prompt_is_enabled(self):
        config = MonitorConfig(total_timeout_ms=1000, prompt_duration_ms=0)
        assert config.enabled
        assert config.prompt_seconds == 0

    @pytest.mark.parametrize(
        ("prompt_ms", "seconds"),
        [(1000, 1), (1499, 1), (1500, 2), (15000, 15), (400, 0)],
    )
    def test_prompt_seconds_rounding(self, prompt_ms, seconds):
        config = MonitorConfig(total_timeout_ms=60000, prompt_duration_ms=prompt_ms)
        assert config.prompt_seconds == seconds

    def test_frozen(self):
        config = MonitorConfig(total_timeout_ms=20000, prompt_duration_ms=5000)
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.total_timeout_ms = 1  # type: ignore[misc]

    def test_from_dict(self):
        """Test creating config from dictionary."""
        config = MonitorConfig.from_dict(
            {
                "total_timeout_ms": 60000,
                "prompt_duration_ms": 10000,
                "activity_kinds": ["keypress", "scroll"],
            }
        )
        assert config.total_timeout_ms == 60000
        assert config.prompt_duration_ms == 10000
        assert config.activity_kinds == (ActivityKind.KEY_PRESS, ActivityKind.SCROLL)

    def test_from_dict_defaults(self):
        """Test from_dict uses defaults for missing keys."""
        config = MonitorConfig.from_dict({})
        assert config.total_timeout_ms == 0
        assert config.prompt_duration_ms == 15000
        assert config.activity_kinds == ALL_ACTIVITY_KINDS

    def test_from_dict_unknown_kind(self):
        with pytest.raises(ValueError):
            MonitorConfig.from_dict({"activity_kinds": ["wiggle"]})

    def test_no_activity_kinds_disables(self):
        """Test an empty activity kind list disables monitoring."""
        assert not MonitorConfig(20000, 5000, activity_kinds=()).enabled
        config = MonitorConfig.from_dict(
            {"total_timeout_ms": 20000, "prompt_duration_ms": 5000, "activity_kinds": []}
        )
        assert config.activity_kinds == ()
        assert not config.enabled


class TestSessionState:
    """Tests for SessionState."""

    def test_constructors(self):
        assert SessionState.active().phase == SessionPhase.ACTIVE
        assert SessionState.idle().phase == SessionPhase.IDLE
        prompting = SessionState.prompting(5)
        assert prompting.phase == SessionPhase.PROMPTING
        assert prompting.remaining_seconds == 5

    def test_predicates(self):
        assert SessionState.active().is_active
        assert SessionState.prompting(3).is_prompting
        assert SessionState.idle().is_idle
        assert not SessionState.idle().is_active

    def test_prompting_never_negative(self):
        assert SessionState.prompting(-2).remaining_seconds == 0

    def test_equality(self):
        assert SessionState.prompting(4) == SessionState.prompting(4)
        assert SessionState.prompting(4) != SessionState.prompting(3)
        assert SessionState.active() == SessionState.active()

    def test_str(self):
        assert str(SessionState.active()) == "Active"
        assert str(SessionState.prompting(5)) == "Prompting(5)"
        assert str(SessionState.idle()) == "Idle"
