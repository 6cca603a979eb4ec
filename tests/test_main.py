import os
import shutil
import tempfile
import unittest
from unittest.mock import patch
from click.testing import CliRunner
from antdroid import config
from antdroid.main import cli

class TestMain(unittest.TestCase):

    def setUp(self):
        self.runner = CliRunner()
        self.test_dir = tempfile.mkdtemp()
        self.config_path = os.path.join(self.test_dir, config.CONFIG_FILE)

    def tearDown(self):
        shutil.rmtree(self.test_dir)

    def test_commands_registered(self):
        result = self.runner.invoke(cli, ["--help"])
        self.assertEqual(result.exit_code, 0)
        for command in ("build", "clean", "find-apk", "properties", "check-reqs", "config", "log", "version"):
            self.assertIn(command, result.output)

    def test_config_view_not_found(self):
        """Test that viewing a non-existent config returns an error."""
        result = self.runner.invoke(cli, ["--path", self.test_dir, "config", "view"])
        self.assertIn("Error: No antdroid.toml found.", result.output)

    def test_config_view(self):
        """Test that viewing a config prints its content."""
        config.save_config({"android": {"sdk_dir": "/opt/android-sdk"}}, path=self.test_dir)

        result = self.runner.invoke(cli, ["--path", self.test_dir, "config", "view"])
        with open(self.config_path, "r") as f:
            self.assertEqual(result.output.strip(), f.read().strip())

    @patch("click.edit")
    def test_config_edit(self, mock_edit):
        """Test that editing a config calls click.edit."""
        self.runner.invoke(cli, ["--path", self.test_dir, "config", "edit"])
        mock_edit.assert_called_once_with(filename=self.config_path)

    def test_build_rejects_unknown_build_type(self):
        result = self.runner.invoke(cli, ["--path", self.test_dir, "build", "--build-type", "profile"])
        self.assertEqual(result.exit_code, 2)

    def test_log_list(self):
        result = self.runner.invoke(cli, ["log", "--list"])
        self.assertEqual(result.exit_code, 0)

if __name__ == "__main__":
    unittest.main()
