"""Tests for cppsage.config: defaults and `sage.yaml` overrides."""

from __future__ import annotations

import pytest

from cppsage.config import load_config
from cppsage.errors import ConfigError


def test_defaults(tmp_path):
    root = tmp_path / "myapp"
    root.mkdir()
    config = load_config(root)

    assert config.name == "myapp"
    assert config.root == root.resolve()
    assert config.build_dir == config.root / "build"
    assert config.generator == "Ninja"
    assert config.requirements_file == config.root / "packages" / "requirements.txt"
    assert config.manifest_file == config.root / "conanfile.txt"
    assert config.install_folder == config.root / "packages" / "install"
    assert config.toolchain_file == config.root / "packages" / "install" / "conan_toolchain.cmake"
    assert config.build_file == config.root / "myapp" / "CMakeLists.txt"


def test_explicit_name(tmp_path):
    assert load_config(tmp_path, name="other").name == "other"


def test_yaml_overrides(tmp_path):
    (tmp_path / "sage.yaml").write_text(
        "build_dir: out\ngenerator: Unix Makefiles\ncmake: /opt/cmake/bin/cmake\nconan: conan2\n",
        encoding="utf-8",
    )
    config = load_config(tmp_path)
    assert config.build_dir == config.root / "out"
    assert config.generator == "Unix Makefiles"
    assert config.cmake == "/opt/cmake/bin/cmake"
    assert config.conan == "conan2"


def test_unknown_keys_are_ignored(tmp_path):
    (tmp_path / "sage.yaml").write_text("colour: blue\n", encoding="utf-8")
    config = load_config(tmp_path)
    assert config.generator == "Ninja"


def test_empty_yaml(tmp_path):
    (tmp_path / "sage.yaml").write_text("", encoding="utf-8")
    assert load_config(tmp_path).build_dir_name == "build"


@pytest.mark.parametrize(
    "text",
    [
        "- just\n- a list\n",
        "build_dir: [unclosed\n",
        "generator: 3\n",
        "cmake: ''\n",
    ],
)
def test_malformed_yaml(tmp_path, text):
    (tmp_path / "sage.yaml").write_text(text, encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(tmp_path)
