"""Generation of MVP feature packages."""

import concurrent.futures
import contextlib
import logging
from typing import Optional

from mvp_creator.base_locator import find_existing_base_interfaces
from mvp_creator.components.types import (
    BaseInterfaceLocation,
    GeneratedArtifact,
    GenerationReport,
    GenerationRequest,
    PersistedPreferences,
    ResolvedContext,
    WriteResult,
)
from mvp_creator.config import GeneratorConfig
from mvp_creator.constants import BASE_PACKAGE_NAME
from mvp_creator.errors import InvalidInputError, InvalidPackageNameError, MvpCreatorError
from mvp_creator.notifier import Notifier
from mvp_creator.package_resolver import class_name_prefix, join_package, last_segment, resolve_or_create, validate_package_name
from mvp_creator.preferences import PreferenceStore
from mvp_creator.renderer import TemplateRenderer
from mvp_creator.store import DirectoryStore
from mvp_creator.tasks import BackgroundRunner, WriteSection
from mvp_creator.writer import FileWriter

logger = logging.getLogger(__name__)


class MvpGenerator:
    """Creates the contract, view, presenter and model of a feature package.

    All collaborators are passed in: the directory the package is created
    in, where notifications go, where the last used options are stored, and
    optionally the write section guarding the project tree and the runner
    used by generate_async().
    """

    def __init__(
        self,
        start_dir: DirectoryStore,
        notifier: Notifier,
        preferences: PreferenceStore,
        config: Optional[GeneratorConfig] = None,
        renderer: Optional[TemplateRenderer] = None,
        write_section: Optional[WriteSection] = None,
        runner: Optional[BackgroundRunner] = None,
    ):
        self.start_dir = start_dir
        self.notifier = notifier
        self.preferences = preferences
        self.config = config or GeneratorConfig()
        self.renderer = renderer or TemplateRenderer()
        self.write_section = write_section
        self.runner = runner
        self.writer = FileWriter(notifier)

    def generate(self, request: GenerationRequest) -> GenerationReport:
        """Run one generation and report its outcome.

        Every fatal error is reported to the notifier and returned in the
        report; files written before the error are kept.
        """
        try:
            package_name = self._validate(request)
        except InvalidInputError as e:
            logger.error("Invalid input: %s", e)
            self.notifier.error(str(e))
            return GenerationReport(success=False, error=str(e))

        report = GenerationReport(success=False, created_base=request.create_base)
        try:
            self.preferences.save(PersistedPreferences(last_package_name=package_name, last_create_base=request.create_base))
            with self.write_section or contextlib.nullcontext():
                self._generate(package_name, request.create_base, report)
        except MvpCreatorError as e:
            return self._fail(report, str(e))
        except Exception as e:
            logger.exception("Unexpected error while generating %s", package_name)
            return self._fail(report, f"{type(e).__name__}: {e}")

        report.success = True
        message = f"MVP package created: {report.full_package}"
        if request.create_base:
            message += "\nBase interfaces included"
        logger.info("Generated %s (%d written, %d skipped)", report.full_package, len(report.written), len(report.skipped))
        self.notifier.info(message)
        return report

    def generate_async(self, request: GenerationRequest) -> concurrent.futures.Future:
        """Run generate() on the background runner.

        The runner is owned by the caller, who shuts it down.
        """
        if self.runner is None:
            raise ValueError("generate_async() requires a BackgroundRunner")
        return self.runner.submit(lambda: self.generate(request))

    def preview(self, request: GenerationRequest) -> list[GeneratedArtifact]:
        """Render every artifact of a request without touching the project tree.

        Raises:
            InvalidInputError: If the package name is blank or unusable
        """
        package_name = self._validate(request)
        base_package = self._base_package() if request.create_base else None
        ctx = self.resolve_context(package_name, self._locate(base_package), self._directory_name(package_name))
        return self.renderer.render(ctx, base_package)

    def resolve_context(self, package_name: str, location: BaseInterfaceLocation, directory_name: str) -> ResolvedContext:
        """Build the rendering context for a validated package name.

        The package declaration follows directory_name, the directory the
        feature classes are written to.
        """
        return ResolvedContext(
            class_name_prefix=class_name_prefix(package_name),
            full_package=join_package(self._ambient_package(), directory_name),
            base_presenter_package=location.presenter_package,
            base_view_package=location.view_package,
            author=self.config.author,
            date_format=self.config.date_format,
            view_superclass=self.config.view_superclass,
        )

    def _validate(self, request: GenerationRequest) -> str:
        package_name = validate_package_name(request.package_name)
        if request.create_base and last_segment(package_name).lower() == BASE_PACKAGE_NAME:
            raise InvalidPackageNameError(package_name, "the feature package would share its directory with the base interfaces")
        return package_name

    def _fail(self, report: GenerationReport, message: str) -> GenerationReport:
        logger.error("Generation failed: %s", message)
        self.notifier.error(f"Generation failed: {message}")
        report.error = message
        return report

    def _directory_name(self, package_name: str) -> str:
        # Same name resolve_or_create() ends up with
        segment = last_segment(package_name)
        existing = self.start_dir.find_subdirectory(segment, ignore_case=True)
        return existing.name if existing is not None else segment.lower()

    def _ambient_package(self) -> str:
        return self.start_dir.package_name(self.config.source_root_marker)

    def _base_package(self) -> str:
        return join_package(self._ambient_package(), BASE_PACKAGE_NAME)

    def _locate(self, base_package: Optional[str]) -> BaseInterfaceLocation:
        if base_package is not None:
            return BaseInterfaceLocation(presenter_package=base_package, view_package=base_package)
        return find_existing_base_interfaces(
            self.start_dir,
            strategy=self.config.search_strategy,
            depth=self.config.search_depth,
            base_packages=self.config.base_packages,
            source_root_marker=self.config.source_root_marker,
        )

    def _generate(self, package_name: str, create_base: bool, report: GenerationReport) -> None:
        package_dir = resolve_or_create(self.start_dir, last_segment(package_name))

        base_dir = None
        base_package = None
        if create_base:
            base_dir = resolve_or_create(self.start_dir, BASE_PACKAGE_NAME)
            base_package = self._base_package()

        ctx = self.resolve_context(package_name, self._locate(base_package), package_dir.name)
        report.full_package = ctx.full_package

        if base_dir is not None:
            self._write(base_dir, self.renderer.render_base(base_package, ctx), report)
        self._write(package_dir, self.renderer.render_feature(ctx), report)

    def _write(self, directory: DirectoryStore, artifacts: list[GeneratedArtifact], report: GenerationReport) -> None:
        for artifact in artifacts:
            status = self.writer.write_if_absent(directory, artifact.file_name, artifact.content)
            report.results.append(WriteResult(file_name=artifact.file_name, status=status))
