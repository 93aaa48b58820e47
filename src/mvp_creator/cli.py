"""Command-line interface for MVP Creator."""

import logging
from pathlib import Path

import click

from mvp_creator.components.types import GenerationRequest, SearchStrategy
from mvp_creator.config import load_config
from mvp_creator.errors import ConfigError, InvalidInputError
from mvp_creator.generator import MvpGenerator
from mvp_creator.notifier import ConsoleNotifier, LoggingNotifier
from mvp_creator.preferences import InMemoryPreferenceStore, JsonPreferenceStore
from mvp_creator.store import FileSystemDirectory
from mvp_creator.tasks import BackgroundRunner, WriteSection


def setup_logging(log_level: str) -> None:
    """Set up logging configuration."""
    numeric_level = getattr(logging, log_level.upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Invalid log level: {log_level}")

    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


class SearchStrategyParamType(click.ParamType):
    """Click parameter type for SearchStrategy enum."""

    name = "search_strategy"

    def convert(self, value, param, ctx):
        if isinstance(value, SearchStrategy):
            return value
        try:
            return SearchStrategy(value.lower())
        except ValueError:
            valid = [s.value for s in SearchStrategy]
            self.fail(f"Invalid search strategy '{value}'. Valid options are: {', '.join(valid)}", param, ctx)


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    default="WARNING",
    help="Set the logging level.",
)
@click.option("--config", "config_path", type=click.Path(dir_okay=False, path_type=Path), default=None, help="YAML configuration file.")
@click.pass_context
def cli(ctx: click.Context, log_level: str, config_path: Path) -> None:
    """MVP Creator - Model-View-Presenter package generator.

    Creates contract, view, presenter and model classes for a feature package.
    """
    setup_logging(log_level)

    ctx.ensure_object(dict)
    try:
        ctx.obj["config"] = load_config(config_path)
    except ConfigError as e:
        click.echo(f"Error: {str(e)}", err=True)
        ctx.exit(2)


@cli.command()
@click.option("--root", type=click.Path(exists=True, file_okay=False, path_type=Path), default=".", help="Directory the package is created in.")
@click.option("--project-root", type=click.Path(exists=True, file_okay=False, path_type=Path), default=".", help="Directory holding the saved preferences.")
@click.option("--package", "package_name", default=None, help="Full package name, e.g. com.project.myapplication.bluetooth.")
@click.option("--base/--no-base", default=None, help="Create BasePresenter/BaseView.")
@click.option("--search", "search_strategy", type=SearchStrategyParamType(), default=None, help="How existing base interfaces are located.")
@click.pass_context
def create(ctx: click.Context, root: Path, project_root: Path, package_name: str, base: bool, search_strategy: SearchStrategy):
    """Create an MVP feature package."""
    config = ctx.obj["config"]
    if search_strategy is not None:
        config = config.model_copy(update={"search_strategy": search_strategy})

    preferences = JsonPreferenceStore(project_root, config.preferences_file)
    saved = preferences.load()

    if package_name is None:
        package_name = click.prompt(
            "Full package name (e.g. com.project.myapplication.bluetooth)",
            default=saved.last_package_name or None,
        )
    if base is None:
        base = click.confirm("Create base interfaces (BasePresenter/BaseView)?", default=saved.last_create_base)

    generator = MvpGenerator(
        start_dir=FileSystemDirectory(root),
        notifier=ConsoleNotifier(),
        preferences=preferences,
        config=config,
        write_section=WriteSection(project_root),
    )

    with BackgroundRunner() as runner:
        generator.runner = runner
        report = generator.generate_async(GenerationRequest(package_name=package_name, create_base=base)).result()

    if not report.success:
        ctx.exit(1)


@cli.command()
@click.option("--root", type=click.Path(exists=True, file_okay=False, path_type=Path), default=".", help="Directory the package would be created in.")
@click.option("--package", "package_name", required=True, help="Full package name.")
@click.option("--base/--no-base", default=False, help="Include BasePresenter/BaseView.")
@click.pass_context
def preview(ctx: click.Context, root: Path, package_name: str, base: bool):
    """Print the files a package would get, without writing them."""
    generator = MvpGenerator(
        start_dir=FileSystemDirectory(root),
        notifier=LoggingNotifier(),
        preferences=InMemoryPreferenceStore(),
        config=ctx.obj["config"],
    )

    try:
        artifacts = generator.preview(GenerationRequest(package_name=package_name, create_base=base))
    except InvalidInputError as e:
        click.echo(f"Error: {str(e)}", err=True)
        ctx.exit(1)

    for artifact in artifacts:
        click.echo(f"// ===== {artifact.file_name} =====")
        click.echo(artifact.content)


@cli.group()
def prefs():
    """Manage saved preferences."""
    pass


@prefs.command(name="show")
@click.option("--project-root", type=click.Path(exists=True, file_okay=False, path_type=Path), default=".", help="Directory holding the saved preferences.")
@click.pass_context
def show_prefs(ctx: click.Context, project_root: Path):
    """Show the last used package name and base option."""
    preferences = JsonPreferenceStore(project_root, ctx.obj["config"].preferences_file).load()
    click.echo(preferences.model_dump_json(by_alias=True, indent=2))


if __name__ == "__main__":
    cli()
