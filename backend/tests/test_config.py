from adminseed.core.config import Settings


def test_defaults(monkeypatch):
    for k in ("ADMIN_EMAIL", "ADMIN_PASSWORD", "BCRYPT_ROUNDS", "DATABASE_URL", "LOG_LEVEL"):
        monkeypatch.delenv(k, raising=False)
    s = Settings(_env_file=None)
    assert s.admin_email is None
    assert s.admin_password is None
    assert s.bcrypt_rounds == 10
    assert s.log_level == "INFO"
    assert s.database_url.startswith("postgresql+psycopg://")


def test_reads_admin_credentials_from_env(monkeypatch):
    monkeypatch.setenv("ADMIN_EMAIL", "admin@example.com")
    monkeypatch.setenv("ADMIN_PASSWORD", "secret123")
    monkeypatch.setenv("BCRYPT_ROUNDS", "12")
    s = Settings(_env_file=None)
    assert s.admin_email == "admin@example.com"
    assert s.admin_password == "secret123"
    assert s.bcrypt_rounds == 12


def test_env_names_are_case_insensitive(monkeypatch):
    monkeypatch.delenv("ADMIN_EMAIL", raising=False)
    monkeypatch.setenv("admin_email", "admin@example.com")
    assert Settings(_env_file=None).admin_email == "admin@example.com"


def test_reads_dotenv_file(tmp_path, monkeypatch):
    monkeypatch.delenv("ADMIN_EMAIL", raising=False)
    env = tmp_path / ".env"
    env.write_text("ADMIN_EMAIL=dotenv@example.com\n", encoding="utf-8")
    assert Settings(_env_file=env).admin_email == "dotenv@example.com"
