"""Unit tests for the API server entry point."""

import pytest

from site_risk import main


def test_is_running_in_ecs(monkeypatch):
    """Test ECS detection from container metadata variables."""
    monkeypatch.delenv("ECS_CONTAINER_METADATA_URI_V4", raising=False)
    monkeypatch.delenv("ECS_CONTAINER_METADATA_URI", raising=False)
    assert not main.is_running_in_ecs()

    monkeypatch.setenv("ECS_CONTAINER_METADATA_URI_V4", "http://169.254.170.2/v4")
    assert main.is_running_in_ecs()


def test_main_runs_uvicorn(mocker, monkeypatch):
    """Test the server starts with configured host and port."""
    monkeypatch.setenv("API_PORT", "9001")
    mocker.patch.object(main, "configure_logging")
    mock_run = mocker.patch.object(main.uvicorn, "run")

    main.main()

    mock_run.assert_called_once_with(
        "site_risk.api:app", host="0.0.0.0", port=9001, log_config=None
    )


def test_main_exits_on_startup_failure(mocker):
    """Test startup errors exit with status 1."""
    mocker.patch.object(main, "configure_logging")
    mocker.patch.object(main.uvicorn, "run", side_effect=OSError("address in use"))

    with pytest.raises(SystemExit) as exc_info:
        main.main()

    assert exc_info.value.code == 1
