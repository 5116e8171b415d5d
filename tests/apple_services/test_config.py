from pathlib import Path

import pytest

import apple_services as m

_VARS = ("TEAM_ID", "KEY_ID", "PRIVATE_KEY_PATH", "ALGORITHM", "TOKEN_TTL")


@pytest.fixture
def env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    """Clean APPLE_* environment pointing at an empty dotenv file."""
    for name in _VARS:
        # Registers an undo entry, so values load_dotenv writes are removed too.
        monkeypatch.setenv(f"APPLE_{name}", "")
        monkeypatch.delenv(f"APPLE_{name}")
    dotenv = tmp_path / ".env"
    dotenv.write_text("")

    def _set(**values: str) -> Path:
        for name, value in values.items():
            monkeypatch.setenv(f"APPLE_{name}", value)
        return dotenv

    return _set


def test_from_env_defaults(env):
    dotenv = env(TEAM_ID="TEAM0123XY", KEY_ID="abc123", PRIVATE_KEY_PATH="/k.p8")

    config = m.AppleKeyConfig.from_env(dotenv_path=dotenv)

    assert config.team_id == m.TeamId("TEAM0123XY")
    assert config.key_id == m.KeyId("abc123")
    assert config.key_path == Path("/k.p8")
    assert config.algorithm is m.Algorithm.ES256
    assert config.token_ttl == 1200


def test_from_env_reads_dotenv_file(env):
    dotenv = env()
    dotenv.write_text(
        "APPLE_TEAM_ID=FROMFILE01\nAPPLE_KEY_ID=k\nAPPLE_PRIVATE_KEY_PATH=/k.p8\n"
    )

    config = m.AppleKeyConfig.from_env(dotenv_path=dotenv)

    assert config.team_id.value == "FROMFILE01"


def test_missing_required(env):
    dotenv = env(TEAM_ID="T", KEY_ID="k")
    with pytest.raises(m.ConfigurationError, match="APPLE_PRIVATE_KEY_PATH"):
        m.AppleKeyConfig.from_env(dotenv_path=dotenv)


def test_unknown_algorithm(env):
    dotenv = env(TEAM_ID="T", KEY_ID="k", PRIVATE_KEY_PATH="/k", ALGORITHM="HS256")
    with pytest.raises(m.UnknownAlgorithm):
        m.AppleKeyConfig.from_env(dotenv_path=dotenv)


@pytest.mark.parametrize("ttl", ["soon", "0", "-5"])
def test_bad_ttl(env, ttl: str):
    dotenv = env(TEAM_ID="T", KEY_ID="k", PRIVATE_KEY_PATH="/k", TOKEN_TTL=ttl)
    with pytest.raises(m.ConfigurationError):
        m.AppleKeyConfig.from_env(dotenv_path=dotenv)


def test_load_key_and_build_pair(tmp_path: Path, ec_private_key, make_pkcs8, fixed_now):
    key_path = tmp_path / "AuthKey_abc123.p8"
    key_path.write_bytes(make_pkcs8(ec_private_key))
    config = m.AppleKeyConfig(
        team_id=m.TeamId("TEAM0123XY"),
        key_id=m.KeyId("abc123"),
        key_path=key_path,
        token_ttl=600,
    )

    key = config.load_key(checked=True)

    assert config.header(key).to_json() == '{"alg":"ES256","kid":"abc123"}'
    assert config.claims(fixed_now).to_dict() == {
        "iss": "TEAM0123XY",
        "iat": 1_600_000_000,
        "exp": 1_600_000_600,
    }


def test_load_key_checked_mismatch(tmp_path: Path, ec_private_key, make_pkcs8):
    key_path = tmp_path / "k.p8"
    key_path.write_bytes(make_pkcs8(ec_private_key))
    config = m.AppleKeyConfig(
        team_id=m.TeamId("T"),
        key_id=m.KeyId("k"),
        key_path=key_path,
        algorithm=m.Algorithm.RS256,
    )

    assert config.load_key().alg is m.Algorithm.RS256
    with pytest.raises(m.KeyAlgorithmMismatch):
        config.load_key(checked=True)
