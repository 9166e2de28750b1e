import pytest
from pydantic import ValidationError

from sc2link.messaging.encoder import MAX_BUFFER_LEN
from sc2link.settings import ClientSettings


class TestClientSettings:
    def test_defaults(self, monkeypatch):
        for name in ("SC2_HOST", "SC2_PORT", "SC2_CONNECT_TIMEOUT", "SC2_READ_TIMEOUT"):
            monkeypatch.delenv(name, raising=False)
        settings = ClientSettings()

        assert settings.host == "127.0.0.1"
        assert settings.port == 5000
        assert settings.connect_timeout == 120.0
        assert settings.read_timeout is None
        assert settings.max_payload_bytes == MAX_BUFFER_LEN
        assert settings.log_dir is None

    def test_values_from_env(self, monkeypatch):
        monkeypatch.setenv("SC2_HOST", "10.0.0.2")
        monkeypatch.setenv("SC2_PORT", "8167")
        monkeypatch.setenv("SC2_READ_TIMEOUT", "2.5")
        settings = ClientSettings()

        assert settings.host == "10.0.0.2"
        assert settings.port == 8167
        assert settings.read_timeout == 2.5

    def test_test_env_file_loaded(self):
        assert ClientSettings().connect_timeout == 5.0

    @pytest.mark.parametrize("port", [0, 65536, -1])
    def test_port_out_of_range_rejected(self, port):
        with pytest.raises(ValidationError, match="port"):
            ClientSettings(port=port)

    def test_host_empty_rejected(self):
        with pytest.raises(ValidationError, match="host"):
            ClientSettings(host="")

    def test_connect_timeout_zero_rejected(self):
        with pytest.raises(ValidationError, match="connect_timeout"):
            ClientSettings(connect_timeout=0)

    def test_read_timeout_negative_rejected(self):
        with pytest.raises(ValidationError, match="read_timeout"):
            ClientSettings(read_timeout=-1)

    def test_max_payload_below_minimum_rejected(self):
        with pytest.raises(ValidationError, match="max_payload_bytes"):
            ClientSettings(max_payload_bytes=512)

    def test_log_dir_empty_rejected(self):
        with pytest.raises(ValidationError, match="log_dir"):
            ClientSettings(log_dir="")
