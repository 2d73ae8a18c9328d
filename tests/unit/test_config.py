"""Unit tests for LevConfig configuration system."""

import pytest
from pydantic import ValidationError

from lev.config import LevConfig
from lev.enums import OutputFormat
from lev.errors import InvalidArgumentsError


class TestLevConfigDefaults:
    """Tests for LevConfig default values."""

    def test_aws_settings_defer_to_boto3(self):
        config = LevConfig()
        assert config.aws_region is None
        assert config.aws_profile is None
        assert config.endpoint_url is None

    def test_default_output_format(self):
        assert LevConfig().output_format == OutputFormat.ENV

    def test_revision_check_enabled_by_default(self):
        assert LevConfig().use_revision_id is True

    def test_default_log_level(self):
        assert LevConfig().log_level == "WARNING"


class TestLevConfigEnvOverrides:
    """Tests for environment variable overrides."""

    def test_region_and_profile_from_env(self, monkeypatch):
        monkeypatch.setenv("LEV_AWS_REGION", "eu-central-1")
        monkeypatch.setenv("LEV_AWS_PROFILE", "ops")
        config = LevConfig()
        assert config.aws_region == "eu-central-1"
        assert config.aws_profile == "ops"

    def test_output_format_from_env(self, monkeypatch):
        monkeypatch.setenv("LEV_OUTPUT_FORMAT", "json")
        assert LevConfig().output_format == OutputFormat.JSON

    def test_revision_check_from_env(self, monkeypatch):
        monkeypatch.setenv("LEV_USE_REVISION_ID", "false")
        assert LevConfig().use_revision_id is False

    def test_log_level_is_normalized(self, monkeypatch):
        monkeypatch.setenv("LEV_LOG_LEVEL", "debug")
        assert LevConfig().log_level == "DEBUG"

    def test_invalid_log_level(self, monkeypatch):
        monkeypatch.setenv("LEV_LOG_LEVEL", "chatty")
        with pytest.raises(ValidationError):
            LevConfig()

    def test_invalid_output_format(self):
        with pytest.raises(ValidationError):
            LevConfig(output_format="yaml")

    def test_dotenv_file(self, tmp_path):
        (tmp_path / ".env").write_text("LEV_ENDPOINT_URL=http://localhost:4566\n")
        assert LevConfig().endpoint_url == "http://localhost:4566"


class TestLevConfigFromFile:
    """Tests for YAML file loading and precedence."""

    def test_default_file_in_working_directory(self, tmp_path):
        (tmp_path / "lev.yml").write_text("aws_region: ap-south-1\noutput_format: json\n")
        config = LevConfig.from_file()
        assert config.aws_region == "ap-south-1"
        assert config.output_format == OutputFormat.JSON

    def test_no_file_uses_defaults(self):
        config = LevConfig.from_file()
        assert config.aws_region is None

    def test_explicit_file(self, tmp_path):
        path = tmp_path / "custom.yml"
        path.write_text("aws_profile: staging\n")
        assert LevConfig.from_file(path).aws_profile == "staging"

    def test_explicit_missing_file(self, tmp_path):
        with pytest.raises(InvalidArgumentsError, match="not found"):
            LevConfig.from_file(tmp_path / "missing.yml")

    def test_file_must_be_mapping(self, tmp_path):
        path = tmp_path / "list.yml"
        path.write_text("- a\n- b\n")
        with pytest.raises(InvalidArgumentsError, match="mapping"):
            LevConfig.from_file(path)

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "broken.yml"
        path.write_text("aws_region: [unclosed\n")
        with pytest.raises(InvalidArgumentsError):
            LevConfig.from_file(path)

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yml"
        path.write_text("")
        assert LevConfig.from_file(path).aws_region is None

    def test_env_overrides_file(self, tmp_path, monkeypatch):
        (tmp_path / "lev.yml").write_text("aws_region: ap-south-1\naws_profile: file\n")
        monkeypatch.setenv("LEV_AWS_REGION", "us-west-2")

        config = LevConfig.from_file()
        assert config.aws_region == "us-west-2"
        assert config.aws_profile == "file"

    def test_overrides_win_over_env_and_file(self, tmp_path, monkeypatch):
        (tmp_path / "lev.yml").write_text("aws_region: ap-south-1\n")
        monkeypatch.setenv("LEV_AWS_PROFILE", "env")

        config = LevConfig.from_file(aws_region="us-east-2", aws_profile="cli")
        assert config.aws_region == "us-east-2"
        assert config.aws_profile == "cli"

    def test_none_overrides_are_ignored(self, tmp_path):
        (tmp_path / "lev.yml").write_text("use_revision_id: false\n")
        config = LevConfig.from_file(use_revision_id=None, aws_region=None)
        assert config.use_revision_id is False
