from chatmd.config import load_settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("CHATMD_CHUNK_SIZE", raising=False)
    monkeypatch.delenv("CHATMD_STRIP_ARTIFACTS", raising=False)
    s = load_settings()
    assert s.chunk_size == 0
    assert s.strip_artifacts is True


def test_env_overrides_and_quotes(monkeypatch):
    monkeypatch.setenv("CHATMD_CHUNK_SIZE", '"16"')
    monkeypatch.setenv("CHATMD_STRIP_ARTIFACTS", "off")
    s = load_settings()
    assert s.chunk_size == 16
    assert s.strip_artifacts is False


def test_invalid_values_fall_back(monkeypatch):
    monkeypatch.setenv("CHATMD_CHUNK_SIZE", "lots")
    monkeypatch.setenv("CHATMD_STRIP_ARTIFACTS", "maybe")
    s = load_settings()
    assert s.chunk_size == 0
    assert s.strip_artifacts is True
