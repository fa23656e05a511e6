"""
Smoke tests — verify the bootstrap is healthy.

These tests ensure the basic scaffolding works:
- Package imports successfully (which builds the platform history)
- CLI entrypoint responds
- Version is set
"""

from click.testing import CliRunner

import goxplat
from goxplat import __version__
from goxplat.main import cli


class TestBootstrap:
    """Verify the project bootstrap is healthy."""

    def test_version_is_set(self):
        assert __version__
        assert isinstance(__version__, str)

    def test_public_api(self):
        assert str(goxplat.platform_from_string("linux", "armv7")) == "linux/armv7"
        assert goxplat.supported_platforms("go1.16")
        assert all(p.default for p in goxplat.default_platforms("go1.16"))

    def test_cli_help(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "Go cross-compilation platform lookup" in result.output

    def test_cli_version(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_platforms_group_registered(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["platforms", "--help"])
        assert result.exit_code == 0
        assert "list" in result.output
        assert "select" in result.output
        assert "parse" in result.output
