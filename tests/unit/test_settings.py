from pathlib import Path

from listing_compliance.config.settings import ValidatorConfig, load_config


def test_audit_log_disabled_by_default(monkeypatch):
    monkeypatch.delenv("LISTING_AUDIT_LOG", raising=False)
    assert load_config().audit_log_path is None
    assert ValidatorConfig().audit_log_path is None


def test_audit_log_path_from_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("LISTING_AUDIT_LOG", str(tmp_path / "audit.jsonl"))
    assert load_config().audit_log_path == Path(tmp_path / "audit.jsonl")


def test_openai_mode_needs_key(monkeypatch):
    monkeypatch.setenv("LISTING_AI_API_MODE", "openai")
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    assert load_config().ai_enabled is False
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
    assert load_config().ai_enabled is True
