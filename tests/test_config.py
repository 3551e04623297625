from hourcast.config import Settings


def test_defaults():
    settings = Settings(_env_file=None)
    assert settings.MAX_UPLOAD_BYTES == 500 * 1024 * 1024
    assert settings.allowed_audio_types == {"audio/mpeg", "audio/wav", "audio/ogg"}
    assert settings.STRICT_SCHEDULE_REFERENCES is False
    assert not settings.is_production


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("ALLOWED_AUDIO_TYPES", "audio/mpeg, audio/flac")
    monkeypatch.setenv("CORS_ORIGINS", "http://a.test,http://b.test")
    monkeypatch.setenv("ENVIRONMENT", "Production")
    settings = Settings(_env_file=None)
    assert settings.API_PORT == 8080
    assert settings.allowed_audio_types == {"audio/mpeg", "audio/flac"}
    assert settings.cors_origins == ["http://a.test", "http://b.test"]
    assert settings.is_production
