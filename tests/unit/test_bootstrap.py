"""Unit tests for lumania/bootstrap.py."""

from unittest.mock import Mock, patch

import pytest
from sqlalchemy import Engine

from lumania.bootstrap import main, run_database_setup
from lumania.database.sql_runner import BatchResult, BatchStatus


class TestRunDatabaseSetup:
    """Test cases for the startup wiring."""

    @patch("lumania.bootstrap.create_data_source")
    def test_runs_setup_script_and_disposes(
        self, mock_create, data_folder, resources, mock_logger
    ):
        mock_engine = Mock(spec=Engine)
        mock_create.return_value = mock_engine

        with patch("lumania.bootstrap.SQLScriptRunner") as mock_runner_cls:
            expected = BatchResult(
                resource_name="setup.sql", status=BatchStatus.COMPLETED
            )
            mock_runner_cls.return_value.execute_batch.return_value = expected

            result = run_database_setup(data_folder, resources, mock_logger)

        assert result is expected
        store = mock_create.call_args[0][0]
        assert store.get_string("Host") == "db.example.com"
        mock_runner_cls.assert_called_once_with(resources, mock_logger)
        mock_runner_cls.return_value.execute_batch.assert_called_once_with(
            "setup.sql", mock_engine
        )
        mock_engine.dispose.assert_called_once()

    @patch("lumania.bootstrap.create_data_source")
    def test_disposes_on_error(self, mock_create, data_folder, resources, mock_logger):
        mock_engine = Mock(spec=Engine)
        mock_create.return_value = mock_engine

        with patch("lumania.bootstrap.SQLScriptRunner") as mock_runner_cls:
            mock_runner_cls.return_value.execute_batch.side_effect = RuntimeError("boom")

            with pytest.raises(RuntimeError):
                run_database_setup(data_folder, resources, mock_logger)

        mock_engine.dispose.assert_called_once()


class TestMain:
    """Test cases for the command line entry point."""

    @pytest.mark.parametrize(
        "status, failed, exit_code",
        [
            (BatchStatus.COMPLETED, [], 0),
            (BatchStatus.COMPLETED, ["DROP TABLE x"], 0),
            (BatchStatus.RESOURCE_ABSENT, [], 0),
            (BatchStatus.CONNECTION_FAILED, [], 1),
            (BatchStatus.READ_FAILED, [], 1),
            (BatchStatus.TRANSACTION_FAILED, [], 1),
        ],
    )
    @patch("lumania.bootstrap.setup_plugin_logging")
    @patch("lumania.bootstrap.run_database_setup")
    def test_exit_codes(self, mock_run, mock_setup_logging, status, failed, exit_code):
        mock_setup_logging.return_value = Mock()
        mock_run.return_value = BatchResult(
            resource_name="setup.sql", status=status, failed=failed
        )

        assert main(["--data-folder", "data", "--script", "setup.sql"]) == exit_code

    @patch("lumania.bootstrap.setup_plugin_logging")
    @patch("lumania.bootstrap.run_database_setup")
    def test_arguments_forwarded(self, mock_run, mock_setup_logging, tmp_path):
        logger = Mock()
        mock_setup_logging.return_value = logger
        mock_run.return_value = BatchResult(
            resource_name="seed.sql", status=BatchStatus.COMPLETED
        )

        main(
            [
                "--data-folder", "data",
                "--resource-dir", str(tmp_path),
                "--script", "seed.sql",
                "--log-level", "debug",
            ]
        )

        data_folder, bundle, passed_logger, script = mock_run.call_args[0]
        assert data_folder == "data"
        assert bundle.root == str(tmp_path)
        assert passed_logger is logger
        assert script == "seed.sql"
        assert mock_setup_logging.call_args[0][0] == "DEBUG"
