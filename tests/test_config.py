"""Tests for configuration loading."""

from cardmatch.config import Config, load_config
from cardmatch.models.card import Position


class TestLoadConfig:
    """Tests for load_config."""

    def test_defaults(self):
        config = load_config()
        assert config.layout.base_order == 100
        assert config.layout.active_position == Position(x=690, y=290)
        assert config.logging.level == "INFO"
        assert not config.game_log.enabled

    def test_missing_file(self, tmp_path):
        assert load_config(tmp_path / "missing.yaml") == Config()

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")
        assert load_config(path) == Config()

    def test_load_yaml(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text(
            "levels_dir: my_levels\n"
            "layout:\n"
            "  active_position: {x: 10, y: 20}\n"
            "  base_order: 50\n"
            "logging:\n"
            "  level: DEBUG\n"
            "game_log:\n"
            "  enabled: true\n"
            "  output_path: out.jsonl\n",
            encoding="utf-8",
        )

        config = load_config(path)
        assert config.levels_dir == "my_levels"
        assert config.layout.active_position == Position(x=10, y=20)
        assert config.layout.base_order == 50
        assert config.layout.stock_position == Position(x=290, y=290)
        assert config.logging.level == "DEBUG"
        assert config.game_log.enabled
        assert config.game_log.output_path == "out.jsonl"
