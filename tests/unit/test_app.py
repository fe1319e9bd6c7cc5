"""Tests for the application entry point."""

from unittest.mock import Mock, patch

import gradio as gr
import pytest

from vehicleswap.core.config import VehicleSwapConfig
from vehicleswap.ui.app import main


@pytest.fixture
def keyless_config(monkeypatch) -> VehicleSwapConfig:
    for name in ("VEHICLESWAP_API_KEY", "GEMINI_API_KEY", "API_KEY"):
        monkeypatch.delenv(name, raising=False)
    return VehicleSwapConfig(_env_file=None)


class TestMain:
    def test_missing_key_is_fatal(self, keyless_config, caplog):
        """Without a key main() exits with status 1 before building the UI."""
        with patch("vehicleswap.ui.app.config", keyless_config), \
             patch("vehicleswap.ui.app.create_ui") as mock_create_ui, \
             caplog.at_level("ERROR"):
            with pytest.raises(SystemExit) as exc_info:
                main()

        assert exc_info.value.code == 1
        mock_create_ui.assert_not_called()
        assert "API key is not set" in caplog.text

    def test_launches_with_key(self, test_config):
        with patch("vehicleswap.ui.app.config", test_config), \
             patch("vehicleswap.core.edit_client.genai.Client") as MockClient, \
             patch.object(gr.Blocks, "launch") as mock_launch:
            main()

        MockClient.assert_called_once_with(api_key="test-key")
        mock_launch.assert_called_once()
        kwargs = mock_launch.call_args.kwargs
        assert kwargs["server_name"] == test_config.server_name
        assert kwargs["server_port"] == test_config.server_port
        assert kwargs["share"] is False
        assert ".result-panel" in kwargs["css"]

    def test_key_not_logged(self, test_config, caplog):
        with patch("vehicleswap.ui.app.config", test_config), \
             patch("vehicleswap.ui.app.create_edit_client", return_value=Mock()), \
             patch.object(gr.Blocks, "launch"), \
             caplog.at_level("INFO"):
            main()

        assert "test-key" not in caplog.text
