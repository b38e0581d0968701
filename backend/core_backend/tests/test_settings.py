"""
Settings Loading Tests

The settings module reads an optional backend/.env before the environment.
"""
import importlib
from pathlib import Path
from unittest import mock

import core_backend.settings as project_settings


class TestEnvFileLoading:

    def teardown_method(self):
        importlib.reload(project_settings)

    def test_env_file_is_loaded_when_present(self):
        with mock.patch('dotenv.load_dotenv') as load_dotenv, \
                mock.patch.object(Path, 'exists', return_value=True):
            importlib.reload(project_settings)

        load_dotenv.assert_called_once_with(project_settings.BASE_DIR / '.env')

    def test_missing_env_file_is_skipped(self):
        with mock.patch('dotenv.load_dotenv') as load_dotenv, \
                mock.patch.object(Path, 'exists', return_value=False):
            importlib.reload(project_settings)

        load_dotenv.assert_not_called()
