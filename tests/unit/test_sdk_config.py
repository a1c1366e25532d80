from clients.rental_admin_sdk.config import SDKConfig, normalize_language, parse_bool


def test_sdk_config_defaults(monkeypatch) -> None:
    for key in [
        "RENTAL_API_BASE_URL",
        "RENTAL_API_TIMEOUT_SECONDS",
        "RENTAL_API_VERIFY_SSL",
        "RENTAL_API_RETRY_MAX_ATTEMPTS",
        "RENTAL_API_RETRY_BACKOFF_MS",
        "RENTAL_API_LANGUAGE",
    ]:
        monkeypatch.delenv(key, raising=False)

    config = SDKConfig.from_env(".missing-env")

    assert config.base_url == "http://localhost:3000"
    assert config.timeout_seconds == 30
    assert config.verify_ssl is True
    assert config.retry_max_attempts == 3
    assert config.retry_backoff_ms == 150
    assert config.language == "en"


def test_sdk_config_reads_overrides(monkeypatch) -> None:
    monkeypatch.setenv("RENTAL_API_BASE_URL", "https://rental.example.com/")
    monkeypatch.setenv("RENTAL_API_VERIFY_SSL", "off")
    monkeypatch.setenv("RENTAL_API_RETRY_MAX_ATTEMPTS", "0")
    monkeypatch.setenv("RENTAL_API_LANGUAGE", "AR")

    config = SDKConfig.from_env(".missing-env")

    assert config.base_url == "https://rental.example.com"
    assert config.verify_ssl is False
    assert config.retry_max_attempts == 1
    assert config.language == "ar"


def test_unknown_language_falls_back_to_english() -> None:
    assert normalize_language("fr") == "en"
    assert normalize_language(None) == "en"
    assert normalize_language(" ar ") == "ar"


def test_parse_bool_keeps_default_for_garbage() -> None:
    assert parse_bool("yes") is True
    assert parse_bool("0") is False
    assert parse_bool("maybe", default=False) is False
    assert parse_bool(None) is True
