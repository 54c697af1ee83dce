from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from chat_adapters.adapter import AdapterKind
from chat_adapters.config import ConfigSet, resolve_api_key, resolve_key
from chat_adapters.config.resolver import candidate_env_names
from chat_adapters.errors import ErrorCode, MissingCredentialError


@pytest.fixture()
def config_file(tmp_path, monkeypatch):
    def _write(data, name="adapters.json", raw=None):
        path = tmp_path / name
        path.write_text(raw if raw is not None else json.dumps(data), encoding="utf-8")
        monkeypatch.setenv("CHAT_ADAPTERS_CONFIG_FILE", str(path))
        return path

    return _write


def test_config_set_wins_over_env(monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "sk-env")
    res = resolve_key(AdapterKind.OPENAI, ConfigSet(api_keys={"openai": "sk-explicit"}))
    assert (res.api_key, res.source) == ("sk-explicit", "config_set")  # nosec B101


def test_custom_env_name_before_canonical(monkeypatch):
    monkeypatch.setenv("MY_OPENAI", "sk-custom")
    monkeypatch.setenv("OPENAI_API_KEY", "sk-env")
    cs = ConfigSet(api_key_env_names={AdapterKind.OPENAI: "MY_OPENAI"})
    res = resolve_key(AdapterKind.OPENAI, cs)
    assert res.api_key == "sk-custom"  # nosec B101
    assert res.extra == {"env_var": "MY_OPENAI"}  # nosec B101
    assert candidate_env_names(AdapterKind.OPENAI, cs) == ("MY_OPENAI", "OPENAI_API_KEY")  # nosec B101


def test_canonical_before_alias(monkeypatch):
    monkeypatch.setenv("GEMINI_API_KEY", "canon")
    monkeypatch.setenv("GOOGLE_API_KEY", "alias")
    assert resolve_key(AdapterKind.GEMINI).api_key == "canon"  # nosec B101


def test_alias_reports_its_env_var(monkeypatch):
    monkeypatch.setenv("GOOGLE_API_KEY", "alias")
    res = resolve_key(AdapterKind.GEMINI)
    assert (res.api_key, res.source) == ("alias", "env")  # nosec B101
    assert res.extra == {"env_var": "GOOGLE_API_KEY"}  # nosec B101


def test_placeholder_and_blank_values_skipped(monkeypatch):
    monkeypatch.setenv("COHERE_API_KEY", "changeme")
    monkeypatch.setenv("CO_API_KEY", "real-co")
    assert resolve_key(AdapterKind.COHERE).api_key == "real-co"  # nosec B101
    res = resolve_key(AdapterKind.OPENAI, ConfigSet(api_keys={"openai": "   "}))
    assert res.source == "none"  # nosec B101


def test_config_file_json(config_file):
    config_file({"anthropic": {"api_key": "sk-ant-file"}})
    res = resolve_key(AdapterKind.ANTHROPIC)
    assert (res.api_key, res.source) == ("sk-ant-file", "config_file")  # nosec B101
    assert res.extra["field"] == "api_key"  # nosec B101


def test_config_file_yaml_token_field(config_file):
    config_file(None, name="adapters.yaml", raw="cohere:\n  token: co-yaml\n")
    assert resolve_key(AdapterKind.COHERE).api_key == "co-yaml"  # nosec B101


def test_env_beats_config_file(config_file, monkeypatch):
    config_file({"openai": {"api_key": "sk-file"}})
    monkeypatch.setenv("OPENAI_API_KEY", "sk-env")
    assert resolve_key(AdapterKind.OPENAI).source == "env"  # nosec B101


def test_config_file_can_be_disabled(config_file):
    config_file({"openai": {"api_key": "sk-file"}})
    res = resolve_key(AdapterKind.OPENAI, ConfigSet(use_config_file=False))
    assert res.source == "none" and res.api_key is None  # nosec B101


def test_resolve_api_key_raises():
    with pytest.raises(MissingCredentialError) as ei:
        resolve_api_key(AdapterKind.ANTHROPIC)
    err = ei.value
    assert err.code is ErrorCode.MISSING_CREDENTIAL  # nosec B101
    assert err.adapter_kind == "anthropic"  # nosec B101
    assert "ANTHROPIC_API_KEY" in err.message  # nosec B101


def test_config_set_is_immutable_and_copyable():
    cs = ConfigSet()
    updated = cs.with_api_key(AdapterKind.OPENAI, "sk-1")
    assert cs.api_key_for(AdapterKind.OPENAI) is None  # nosec B101
    assert updated.api_key_for(AdapterKind.OPENAI) == "sk-1"  # nosec B101
    with pytest.raises(ValidationError):
        cs.use_config_file = False
