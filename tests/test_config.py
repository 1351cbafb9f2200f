from pathlib import Path

import pytest
from pydantic import ValidationError

from cargolink.config import MetadataConfig, UnitGraphConfig, resolve_program


def test_default_metadata_args():
    assert MetadataConfig().to_args() == ["metadata", "--format-version", "1"]


def test_metadata_args_with_options():
    config = MetadataConfig(
        no_default_features=True,
        features="serde, fast",
        filter_platform="aarch64-apple-darwin",
        manifest_path=Path("/work/ws/Cargo.toml"),
        no_deps=True,
        locked=True,
    )

    assert config.features == ["serde", "fast"]
    assert config.to_args() == [
        "metadata",
        "--format-version",
        "1",
        "--no-default-features",
        "--features",
        "serde,fast",
        "--filter-platform",
        "aarch64-apple-darwin",
        "--manifest-path",
        "/work/ws/Cargo.toml",
        "--no-deps",
        "--locked",
    ]


def test_all_features_flag():
    assert "--all-features" in MetadataConfig(all_features=True).to_args()


def test_invalid_filter_platform_is_rejected():
    with pytest.raises(ValidationError):
        MetadataConfig(filter_platform="not a triple")


def test_invalid_features_type_is_rejected():
    with pytest.raises(ValidationError):
        MetadataConfig(features=42)


def test_unit_graph_args():
    assert UnitGraphConfig().to_args() == ["+nightly", "build", "-Z", "unstable-options", "--unit-graph"]

    config = UnitGraphConfig(subcommand="test", toolchain=None, extra_args="--release")
    assert config.to_args() == ["test", "-Z", "unstable-options", "--unit-graph", "--release"]


def test_resolve_program_prefers_explicit(monkeypatch):
    monkeypatch.setenv("CARGO", "/from/env/cargo")

    assert resolve_program("/explicit/cargo") == "/explicit/cargo"


def test_resolve_program_uses_environment(monkeypatch):
    monkeypatch.setenv("CARGO", "/from/env/cargo")

    assert resolve_program() == "/from/env/cargo"


def test_resolve_program_searches_path(monkeypatch):
    monkeypatch.delenv("CARGO", raising=False)
    monkeypatch.setattr("cargolink.config.shutil.which", lambda name: f"/usr/local/bin/{name}")

    assert resolve_program() == "/usr/local/bin/cargo"


def test_resolve_program_falls_back_to_name(monkeypatch):
    monkeypatch.delenv("CARGO", raising=False)
    monkeypatch.setattr("cargolink.config.shutil.which", lambda name: None)

    assert resolve_program() == "cargo"
