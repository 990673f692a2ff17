from products_api.config import Settings, settings


def test_connection_string_read_from_nested_key():
    assert settings.database_url.startswith("sqlite:///")
    assert settings.database_url.endswith("test.db")


def test_nested_env_key(monkeypatch):
    monkeypatch.setenv("DATA__DEFAULT_CONNECTION__CONNECTION_STRING", "postgresql://db.example/products")
    monkeypatch.setenv("RESET_DB", "true")
    s = Settings(_env_file=None)
    assert s.database_url == "postgresql://db.example/products"
    assert s.RESET_DB is True
