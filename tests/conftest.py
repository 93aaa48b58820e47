import sys
from datetime import datetime
from pathlib import Path

import pytest

# Add src directory to Python path
src_path = str(Path(__file__).parent.parent / "src")
if src_path not in sys.path:
    sys.path.append(src_path)

from mvp_creator.config import GeneratorConfig
from mvp_creator.generator import MvpGenerator
from mvp_creator.notifier import RecordingNotifier
from mvp_creator.preferences import InMemoryPreferenceStore
from mvp_creator.renderer import TemplateRenderer
from mvp_creator.store import FileSystemDirectory


@pytest.fixture
def source_root(tmp_path):
    """Create the java source root of an Android module."""
    root = tmp_path / "app" / "src" / "main" / "java"
    root.mkdir(parents=True)
    return root


@pytest.fixture
def app_dir(source_root):
    """Directory of the com.app package, where features are created."""
    path = source_root / "com" / "app"
    path.mkdir(parents=True)
    return path


@pytest.fixture
def config():
    return GeneratorConfig(author="tester")


@pytest.fixture
def fixed_clock():
    return lambda: datetime(2024, 3, 15, 10, 30)


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def preferences():
    return InMemoryPreferenceStore()


@pytest.fixture
def generator(app_dir, notifier, preferences, config, fixed_clock):
    """Create a generator rooted at com.app for testing."""
    return MvpGenerator(
        start_dir=FileSystemDirectory(app_dir),
        notifier=notifier,
        preferences=preferences,
        config=config,
        renderer=TemplateRenderer(clock=fixed_clock),
    )


def _make_base_package(directory: Path, presenter: bool = True, view: bool = True) -> Path:
    base = directory / "base"
    base.mkdir(parents=True, exist_ok=True)
    if presenter:
        (base / "BasePresenter.java").write_text("public interface BasePresenter {}\n")
    if view:
        (base / "BaseView.java").write_text("public interface BaseView<T> {}\n")
    return base


def _tree(path: Path) -> list[str]:
    return sorted(str(p.relative_to(path)) for p in path.rglob("*"))


@pytest.fixture
def make_base_package():
    """Factory creating a base package holding the requested interfaces."""
    return _make_base_package


@pytest.fixture
def list_tree():
    """Lists all paths below a directory, relative and sorted."""
    return _tree
