"""Test configuration loading and validation"""

import pytest
import yaml

from lyric_finder.config.settings import Settings
from lyric_finder.exceptions import ConfigError


def write_config(path, data):
    path.write_text(yaml.safe_dump(data), encoding="utf-8")
    return str(path)


class TestSettingsLoading:
    """Test file and environment sources"""

    def test_defaults(self, settings):
        assert settings.catalog.base_url == "https://itunes.apple.com/search"
        assert settings.catalog.limit == 60
        assert settings.lyrics.base_url == "https://api.lyrics.ovh/v1"
        assert settings.discovery.sample_attempts == 20
        assert settings.discovery.prefer_long is False
        assert settings.network.request_timeout == 15
        assert settings.share.base_url == ""
        assert settings.card.theme == "light"
        assert settings.validate()

    def test_yaml_values_applied(self, temp_dir, clean_env):
        """Known keys are applied, unknown sections and keys ignored"""
        path = write_config(temp_dir / "custom.yaml", {
            'discovery': {'sample_attempts': 5, 'prefer_long': True},
            'card': {'theme': 'dark', 'bogus': 1},
            'spotify': {'client_id': 'abc'},
        })

        settings = Settings(config_path=path)

        assert settings.config_path == path
        assert settings.discovery.sample_attempts == 5
        assert settings.discovery.prefer_long is True
        assert settings.card.theme == "dark"
        assert not hasattr(settings.card, 'bogus')
        assert not hasattr(settings, 'spotify')

    def test_environment_overrides_file(self, temp_dir, clean_env):
        path = write_config(temp_dir / "custom.yaml", {'lyrics': {'base_url': 'http://file.local'}})
        clean_env.setenv('LYRIC_FINDER_LYRICS_URL', 'http://env.local/v1')
        clean_env.setenv('LYRIC_FINDER_TIMEOUT', '30')
        clean_env.setenv('LYRIC_FINDER_LOG_LEVEL', 'DEBUG')

        settings = Settings(config_path=path)

        assert settings.lyrics.base_url == "http://env.local/v1"
        assert settings.network.request_timeout == 30
        assert settings.logging.level == "DEBUG"

    def test_invalid_environment_value_ignored(self, temp_dir, clean_env):
        """A non-numeric timeout keeps the default"""
        clean_env.setenv('LYRIC_FINDER_TIMEOUT', 'soon')
        settings = Settings(config_path=write_config(temp_dir / "c.yaml", {}))
        assert settings.network.request_timeout == 15

    def test_card_directory_expanded(self, settings, clean_env):
        settings.card.output_directory = "~/cards"
        assert "~" not in str(settings.get_card_directory())


class TestSettingsValidation:
    """Test validate()"""

    def test_invalid_values(self, settings):
        settings.card.theme = "sepia"
        settings.catalog.limit = 0
        assert settings.validate() is False

    def test_wrong_types_from_yaml(self, temp_dir, clean_env):
        """Quoted numbers and bad size strings fail validation"""
        path = write_config(temp_dir / "custom.yaml", {
            'catalog': {'limit': "60"},
            'logging': {'max_size': "huge", 'level': 10},
        })
        settings = Settings(config_path=path)

        with pytest.raises(ConfigError) as exc_info:
            settings.validate(strict=True)

        errors = exc_info.value.details['errors']
        assert "Invalid catalog limit: 60" in errors
        assert "Invalid log max_size: huge" in errors
        assert "Invalid logging level: 10" in errors

    def test_boolean_limit_rejected(self, settings):
        settings.catalog.limit = True
        assert settings.validate() is False

    def test_strict_raises(self, settings):
        settings.network.request_timeout = -1
        with pytest.raises(ConfigError) as exc_info:
            settings.validate(strict=True)
        assert "request timeout" in str(exc_info.value)
        assert exc_info.value.details['errors']


class TestSettingsPersistence:
    """Test save_config and reset_defaults"""

    def test_save_and_reload(self, settings, temp_dir, clean_env):
        settings.discovery.sample_attempts = 7
        settings.share.base_url = "https://example.org/lyrics"

        path = settings.save_config(str(temp_dir / "saved" / "config.yaml"))
        reloaded = Settings(config_path=str(path))

        assert path.exists()
        assert reloaded.discovery.sample_attempts == 7
        assert reloaded.share.base_url == "https://example.org/lyrics"
        assert reloaded.to_dict() == settings.to_dict()

    def test_save_failure(self, settings, temp_dir):
        """Unwritable targets raise ConfigError"""
        blocker = temp_dir / "not-a-directory"
        blocker.write_text("x", encoding="utf-8")
        with pytest.raises(ConfigError):
            settings.save_config(str(blocker / "config.yaml"))

    def test_reset_defaults(self, settings):
        settings.card.theme = "dark"
        settings.discovery.sample_attempts = 1
        settings.reset_defaults()
        assert settings.card.theme == "light"
        assert settings.discovery.sample_attempts == 20

    def test_to_dict_sections(self, settings):
        assert set(settings.to_dict()) == {
            'catalog', 'lyrics', 'discovery', 'network', 'share', 'card', 'logging'
        }
