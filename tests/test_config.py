import pytest

from mvp_creator.components.types import SearchStrategy
from mvp_creator.config import GeneratorConfig, load_config
from mvp_creator.errors import ConfigError


def test_defaults(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    config = load_config()

    assert config.date_format == "%Y/%m/%d"
    assert config.search_strategy == SearchStrategy.ANCESTORS
    assert config.search_depth == 5
    assert config.base_packages[0] == "base"
    assert config.author


def test_load_from_working_directory(tmp_path, monkeypatch):
    (tmp_path / ".mvp-creator.yaml").write_text("author: jane\n")
    monkeypatch.chdir(tmp_path)

    assert load_config().author == "jane"


def test_load_explicit_file(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "author: tester\n"
        "search_strategy: sibling\n"
        "search_depth: 2\n"
        "base_packages: [mvp.base]\n"
        "view_superclass: android.app.Activity\n"
    )

    config = load_config(path)

    assert config.author == "tester"
    assert config.search_strategy == SearchStrategy.SIBLING
    assert config.search_depth == 2
    assert config.base_packages == ["mvp.base"]
    assert config.view_superclass == "android.app.Activity"


def test_empty_file_gives_defaults(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("")

    assert load_config(path) == GeneratorConfig()


@pytest.mark.parametrize(
    "content",
    [
        "unknown_key: 1\n",
        "search_depth: 0\n",
        "search_strategy: everywhere\n",
        "- a\n- b\n",
        "author: [unclosed\n",
    ],
)
def test_invalid_config(tmp_path, content):
    path = tmp_path / "config.yaml"
    path.write_text(content)

    with pytest.raises(ConfigError):
        load_config(path)


def test_missing_file(tmp_path):
    with pytest.raises(ConfigError) as exc:
        load_config(tmp_path / "missing.yaml")
    assert "not found" in str(exc.value)
