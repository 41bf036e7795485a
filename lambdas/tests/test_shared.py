"""Tests for shared module."""
import pytest
from pydantic import ValidationError

from shared.config import Config, get_config
from shared.exceptions import (
    ConfigurationError,
    DanglingModifierError,
    DiceRollError,
    InvalidSpecificationError,
    ParseError,
)
from shared.limits import check_limits
from shared.models import (
    DiceGroup,
    DiceSpecification,
    Resolution,
    RolledGroup,
    Step,
)


class TestExceptions:
    """Tests for custom exceptions."""

    def test_dice_roll_error(self):
        """Test base exception."""
        error = DiceRollError("test message")
        assert str(error) == "test message"
        assert error.message == "test message"

    def test_parse_error(self):
        """Test ParseError subclasses keep expression and position."""
        error = DanglingModifierError("No dice", expression="+5", position=1)
        assert isinstance(error, ParseError)
        assert isinstance(error, DiceRollError)
        assert error.expression == "+5"
        assert error.position == 1

    def test_invalid_specification_error(self):
        """Test InvalidSpecificationError."""
        error = InvalidSpecificationError("Too many sides", field="sides")
        assert "Too many sides" in str(error)
        assert error.field == "sides"

    def test_configuration_error(self):
        """Test ConfigurationError."""
        error = ConfigurationError("Missing config", config_key="ALLOWED_ORIGIN")
        assert "Missing config" in str(error)
        assert error.config_key == "ALLOWED_ORIGIN"


class TestConfig:
    """Tests for configuration module."""

    def test_config_from_env(self, env_setup):
        """Test loading config from environment."""
        config = Config.from_env()
        assert config.environment == "test"
        assert config.allowed_origin == "*"

    def test_config_prod_origin(self, env_setup, monkeypatch):
        """Test ALLOWED_ORIGIN is read in prod."""
        monkeypatch.setenv("ENVIRONMENT", "prod")
        monkeypatch.setenv("ALLOWED_ORIGIN", "https://dice.example.com")
        config = Config.from_env()
        assert config.environment == "prod"
        assert config.allowed_origin == "https://dice.example.com"

    def test_config_prod_requires_origin(self, env_setup, monkeypatch):
        """Test error when ALLOWED_ORIGIN is missing in prod."""
        monkeypatch.setenv("ENVIRONMENT", "prod")
        with pytest.raises(ConfigurationError) as exc_info:
            Config.from_env()
        assert exc_info.value.config_key == "ALLOWED_ORIGIN"

    def test_config_unknown_environment(self, env_setup, monkeypatch):
        """Test error for an unknown ENVIRONMENT."""
        monkeypatch.setenv("ENVIRONMENT", "staging")
        with pytest.raises(ConfigurationError) as exc_info:
            Config.from_env()
        assert "staging" in str(exc_info.value)

    def test_get_config_cached(self, env_setup):
        """Test get_config returns the same instance."""
        assert get_config() is get_config()


class TestModels:
    """Tests for dice models."""

    def test_dice_group_defaults(self):
        """Count defaults to 1 and modifier to 0."""
        group = DiceGroup(sides=20)
        assert group.count == 1
        assert group.modifier == 0

    @pytest.mark.parametrize("fields", [{"sides": 0}, {"sides": 6, "count": 0}, {"sides": -4}])
    def test_dice_group_rejects_non_positive(self, fields):
        """Counts and sides must be at least 1."""
        with pytest.raises(ValidationError):
            DiceGroup(**fields)

    def test_specification_requires_groups(self):
        """A specification needs at least one group."""
        with pytest.raises(ValidationError):
            DiceSpecification(groups=())

    def test_specification_rejects_zero_repeat(self):
        """repeat_count must be at least 1."""
        with pytest.raises(ValidationError):
            DiceSpecification(groups=(DiceGroup(sides=6),), repeat_count=0)

    def test_rolled_group_total_must_match(self):
        """Group totals are exact sums."""
        with pytest.raises(ValidationError):
            RolledGroup(count=2, sides=6, modifier=1, rolls=(3, 3), total=6)

    def test_rolled_group_roll_count_must_match(self):
        """Number of rolls equals count."""
        with pytest.raises(ValidationError):
            RolledGroup(count=2, sides=6, rolls=(3,), total=3)

    def test_rolled_group_roll_in_range(self):
        """Rolls lie in [1, sides]."""
        with pytest.raises(ValidationError):
            RolledGroup(count=1, sides=6, rolls=(7,), total=7)

    def test_step_total_must_match(self):
        """Step totals are exact sums of group totals."""
        group = RolledGroup(count=1, sides=6, rolls=(3,), total=3)
        with pytest.raises(ValidationError):
            Step(groups=(group, group), total=7)

    def test_resolution_response_shape(self):
        """Resolutions serialize to the public roll response shape."""
        group = RolledGroup(count=2, sides=6, modifier=3, rolls=(4, 2), total=9)
        resolution = Resolution(steps=(Step(groups=(group,), total=9),))

        assert resolution.to_response() == {
            "step": [
                {
                    "rolls": [
                        {"count": 2, "sides": 6, "modifier": 3, "rolls": [4, 2], "total": 9}
                    ],
                    "total": 9,
                }
            ]
        }


class TestLimits:
    """Tests for specification bounds."""

    def test_within_limits(self):
        """In-range specifications pass through unchanged."""
        spec = DiceSpecification(groups=(DiceGroup(count=99, sides=999, modifier=-100),))
        assert check_limits(spec) is spec

    @pytest.mark.parametrize(
        ("group", "field", "message"),
        [
            (DiceGroup(count=100, sides=6), "count", "Dice count must be between 1 and 99, 100 provided"),
            (DiceGroup(sides=1000), "sides", "Dice sides must be between 1 and 999, 1000 provided"),
            (DiceGroup(sides=6, modifier=101), "modifier", "Dice modifier must be between -100 and 100, 101 provided"),
        ],
    )
    def test_out_of_limits(self, group, field, message):
        """Out-of-range values name the field and bounds."""
        spec = DiceSpecification(groups=(group,))
        with pytest.raises(InvalidSpecificationError) as exc_info:
            check_limits(spec)
        assert exc_info.value.field == field
        assert exc_info.value.message == message

    def test_repeat_count_limit(self):
        """repeat_count is bounded too."""
        spec = DiceSpecification(groups=(DiceGroup(sides=6),), repeat_count=100)
        with pytest.raises(InvalidSpecificationError) as exc_info:
            check_limits(spec)
        assert exc_info.value.field == "repeat_count"
