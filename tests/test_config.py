from __future__ import annotations

import pytest

from voicecart.config import Settings, load_settings
from voicecart.messages import get_message


class TestSettings:
    def test_defaults(self) -> None:
        assert load_settings() == Settings(language="id", log_level="INFO")

    def test_env_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("VOICECART_LANGUAGE", " EN ")
        monkeypatch.setenv("VOICECART_LOG_LEVEL", "debug")
        assert load_settings() == Settings(language="en", log_level="DEBUG")

    def test_unknown_language(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("VOICECART_LANGUAGE", "fr")
        with pytest.raises(ValueError, match="VOICECART_LANGUAGE"):
            load_settings()

    def test_unknown_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("VOICECART_LOG_LEVEL", "LOUD")
        with pytest.raises(ValueError, match="VOICECART_LOG_LEVEL"):
            load_settings()


class TestMessages:
    def test_retry_messages(self) -> None:
        assert get_message("retry") == "Maaf, bisa diulangi lebih jelas?"
        assert get_message("retry", "en") == "Sorry, could you please repeat more clearly?"

    def test_unknown_language_falls_back(self) -> None:
        assert get_message("cart_cleared", "fr") == get_message("cart_cleared", "id")

    def test_parameters(self) -> None:
        assert get_message("item_removed", "en", name="Aqua") == "Removed: Aqua"

    def test_recognized_differs_from_added(self) -> None:
        assert get_message("recognized", name="Aqua", price="5") == "Dikenali: Aqua 5"
        assert get_message("recognized", "en", name="Aqua", price="5") == "Recognized: Aqua 5"
        assert get_message("recognized", name="A", price="1") != get_message(
            "item_added", name="A", price="1"
        )

    def test_unknown_key(self) -> None:
        with pytest.raises(KeyError):
            get_message("nope")
