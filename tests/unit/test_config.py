"""Unit tests for configuration management."""

import pytest
from omegaconf import OmegaConf

from randset.core.config_schema import (
    RandSetConfig, GenerationConfig, ItemConfig, TeamConfig, LoggingConfig,
)
from randset.core.exceptions import ConfigError, RandSetError
from randset.core.hydra_utils import (
    dict_to_config, get_global_config, load_config, print_config, save_config,
    set_global_config,
)
from randset.core.logging_utils import setup_logging


class TestRandSetConfig:
    """Tests for RandSetConfig dataclass."""

    def test_default_config(self):
        """Test creating config with defaults."""
        config = RandSetConfig()

        assert config.seed is None
        assert config.debug is False
        assert config.generation.max_attempts == 100
        assert config.team.team_size == 6

    def test_generation_config(self):
        """Test GenerationConfig defaults."""
        config = GenerationConfig()

        assert config.backfill_draws == 100
        assert config.moves_per_set == 4
        assert config.ability_weights == [0.66, 0.24, 0.10]
        assert not config.legacy_ev_limit

    def test_legacy_generation(self):
        assert GenerationConfig(generation=7).legacy_ev_limit

    def test_item_config(self):
        """Test ItemConfig defaults."""
        config = ItemConfig()

        assert config.choice_scarf_chance == 0.3
        assert config.wallbreaker_life_orb_chance == 0.5

    def test_team_config(self):
        config = TeamConfig()
        assert config.species_clause is True

    def test_custom_values(self):
        """Test creating config with custom values."""
        config = RandSetConfig(
            generation=GenerationConfig(max_attempts=10),
            seed=123,
        )

        assert config.generation.max_attempts == 10
        assert config.seed == 123


class TestHydraLoading:
    """Tests for loading configs through Hydra."""

    def test_load_default(self, project_root):
        config = load_config(config_dir=project_root / "config")

        assert isinstance(config, RandSetConfig)
        assert config.generation.max_attempts == 100
        assert config.items.weakness_policy_chance == 0.2
        assert config.logging.level == "INFO"

    def test_overrides(self, project_root):
        config = load_config(
            overrides=["generation.generation=7", "seed=5"],
            config_dir=project_root / "config",
        )
        assert config.generation.generation == 7
        assert config.generation.legacy_ev_limit
        assert config.seed == 5

    def test_return_dict(self, project_root):
        cfg = load_config(config_dir=project_root / "config", return_dict=True)
        assert cfg.team.team_size == 6

    def test_dict_to_config_partial(self):
        """Missing sections fall back to dataclass defaults."""
        cfg = OmegaConf.create({"generation": {"max_attempts": 5}})
        config = dict_to_config(cfg)

        assert config.generation.max_attempts == 5
        assert config.generation.backfill_draws == 100
        assert config.items == ItemConfig()

    def test_save_roundtrip(self, temp_dir):
        path = temp_dir / "saved.yaml"
        save_config(RandSetConfig(seed=9), path)

        config = load_config(config_name="saved", config_dir=temp_dir)
        assert config.seed == 9

    def test_print_config(self, capsys):
        print_config(RandSetConfig(seed=3))
        out = capsys.readouterr().out
        assert "seed: 3" in out
        assert "max_attempts: 100" in out

    def test_global_config(self):
        custom = RandSetConfig(seed=77)
        set_global_config(custom)
        try:
            assert get_global_config() is custom
        finally:
            set_global_config(None)


class TestErrorsAndLogging:
    """Tests for exceptions and logging setup."""

    def test_exception_hierarchy(self):
        assert issubclass(ConfigError, RandSetError)
        with pytest.raises(RandSetError):
            raise ConfigError("missing")

    def test_setup_logging_file_sink(self, temp_dir):
        log_file = temp_dir / "randset.log"
        setup_logging(LoggingConfig(level="DEBUG", file=str(log_file)))

        from loguru import logger
        logger.info("hello from tests")
        logger.remove()

        assert "hello from tests" in log_file.read_text()
