"""Unit tests for CLI configuration."""

from actions_model.globals.cli_config import CLIConfig


class TestCLIConfig:
    """Unit tests for the CLIConfig dataclass."""

    def test_config_creation_minimal(self):
        """Test creating config with defaults only."""
        config = CLIConfig()

        assert config.workflow_file is None
        assert config.job is None
        assert config.verbose is False

    def test_config_creation_all_parameters(self):
        """Test creating config with all parameters specified."""
        config = CLIConfig(
            workflow_file="/path/to/workflow.yml",
            job="test",
            verbose=True,
        )

        assert config.workflow_file == "/path/to/workflow.yml"
        assert config.job == "test"
        assert config.verbose is True

    def test_config_equality(self):
        """Test dataclass equality."""
        assert CLIConfig(job="build") == CLIConfig(job="build")
        assert CLIConfig(job="build") != CLIConfig(job="test")
