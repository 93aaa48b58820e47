"""Rendering of the MVP source files."""

from collections.abc import Callable
from datetime import datetime
from typing import Optional

from mvp_creator.components.types import GeneratedArtifact, ResolvedContext
from mvp_creator.constants import BASE_PRESENTER, BASE_VIEW, FILE_EXTENSION
from mvp_creator.errors import InvalidPackageNameError
from mvp_creator.templates import JavaMethod, JavaSource, JavaType, render_source


def header_lines(author: str, date: datetime, date_format: str) -> list[str]:
    return [f"Author: {author}", f"Date: {date.strftime(date_format)}"]


def contract_name(prefix: str) -> str:
    return f"I{prefix}Contract"


def build_base_presenter(package: str) -> JavaSource:
    """Shared presenter capability with a start() lifecycle hook."""
    return JavaSource(
        package=package,
        type=JavaType(name=BASE_PRESENTER, kind="interface", members=[JavaMethod("void start()")]),
    )


def build_base_view(package: str) -> JavaSource:
    """Shared generic view capability accepting its presenter."""
    return JavaSource(
        package=package,
        type=JavaType(
            name=BASE_VIEW,
            kind="interface",
            type_params="<T>",
            members=[JavaMethod("void setPresenter(T presenter)")],
        ),
    )


def build_contract(ctx: ResolvedContext) -> JavaSource:
    """Contract grouping the View, Presenter and Model capabilities.

    Without a located base interface the nested capability extends nothing,
    i.e. only the implicit root type.
    """
    imports = []
    if ctx.has_base_presenter:
        imports.append(f"{ctx.base_presenter_package}.{BASE_PRESENTER}")
    if ctx.has_base_view:
        imports.append(f"{ctx.base_view_package}.{BASE_VIEW}")

    view = JavaType(
        name="View",
        kind="interface",
        modifiers="",
        extends=[f"{BASE_VIEW}<Presenter>"] if ctx.has_base_view else [],
    )
    presenter = JavaType(
        name="Presenter",
        kind="interface",
        modifiers="",
        extends=[BASE_PRESENTER] if ctx.has_base_presenter else [],
        members=[JavaMethod("void destroy()")],
    )
    model = JavaType(name="Model", kind="interface", modifiers="", members=[JavaMethod("void destroy()")])

    return JavaSource(
        package=ctx.full_package,
        imports=imports,
        type=JavaType(name=contract_name(ctx.class_name_prefix), kind="interface", members=[view, presenter, model]),
    )


def build_activity(ctx: ResolvedContext) -> JavaSource:
    """View implementation creating its presenter in onCreate()."""
    prefix = ctx.class_name_prefix
    contract = contract_name(prefix)
    superclass = ctx.view_superclass.rsplit(".", 1)[-1]

    on_create = [
        "super.onCreate(savedInstanceState);",
        f"mPresenter = new {prefix}Presenter(this);",
    ]
    if ctx.has_base_presenter:
        on_create.append("// mPresenter.start();")

    members = [
        JavaMethod("void onCreate(Bundle savedInstanceState)", modifiers="protected", body=on_create, override=True),
    ]
    if ctx.has_base_view:
        members.append(
            JavaMethod(
                f"void setPresenter({contract}.Presenter presenter)",
                modifiers="public",
                body=["this.mPresenter = presenter;"],
                override=True,
            )
        )

    return JavaSource(
        package=ctx.full_package,
        imports=["android.os.Bundle", ctx.view_superclass],
        type=JavaType(
            name=f"{prefix}Activity",
            extends=[superclass],
            implements=[f"{contract}.View"],
            fields=[f"private {contract}.Presenter mPresenter;"],
            members=members,
        ),
    )


def build_presenter(ctx: ResolvedContext) -> JavaSource:
    """Presenter holding the view and a freshly constructed model."""
    prefix = ctx.class_name_prefix
    contract = contract_name(prefix)

    constructor = [
        "this.mView = view;",
        f"this.mModel = new {prefix}Model();",
    ]
    if ctx.has_base_view:
        constructor.append("this.mView.setPresenter(this);")

    members = [JavaMethod(f"{prefix}Presenter({contract}.View view)", modifiers="public", body=constructor)]
    if ctx.has_base_presenter:
        members.append(JavaMethod("void start()", modifiers="public", body=["// Initialization logic goes here"], override=True))
    members.append(
        JavaMethod("void destroy()", modifiers="public", body=["mModel.destroy();", "mView = null;"], override=True)
    )

    implements = [f"{contract}.Presenter"]
    imports = []
    if ctx.has_base_presenter:
        implements.append(BASE_PRESENTER)
        imports.append(f"{ctx.base_presenter_package}.{BASE_PRESENTER}")

    return JavaSource(
        package=ctx.full_package,
        imports=imports,
        type=JavaType(
            name=f"{prefix}Presenter",
            implements=implements,
            fields=[f"private {contract}.View mView;", f"private {prefix}Model mModel;"],
            members=members,
        ),
    )


def build_model(ctx: ResolvedContext) -> JavaSource:
    prefix = ctx.class_name_prefix
    return JavaSource(
        package=ctx.full_package,
        type=JavaType(
            name=f"{prefix}Model",
            implements=[f"{contract_name(prefix)}.Model"],
            members=[JavaMethod("void destroy()", modifiers="public", body=["// Release resources here"], override=True)],
        ),
    )


class TemplateRenderer:
    """Turns a ResolvedContext into the ordered list of files to write."""

    def __init__(self, clock: Callable[[], datetime] = datetime.now):
        self.clock = clock

    def _artifact(self, source: JavaSource, ctx: ResolvedContext) -> GeneratedArtifact:
        # Every file reads the clock on its own
        source.header = header_lines(ctx.author, self.clock(), ctx.date_format)
        return GeneratedArtifact(file_name=source.type.name + FILE_EXTENSION, content=render_source(source))

    def render_base(self, base_package: str, ctx: ResolvedContext) -> list[GeneratedArtifact]:
        """BasePresenter and BaseView for the given package."""
        return [
            self._artifact(build_base_presenter(base_package), ctx),
            self._artifact(build_base_view(base_package), ctx),
        ]

    def render_feature(self, ctx: ResolvedContext) -> list[GeneratedArtifact]:
        """Contract, view, presenter and model, in that order."""
        if not ctx.class_name_prefix.strip():
            raise InvalidPackageNameError(ctx.full_package)

        return [self._artifact(build(ctx), ctx) for build in (build_contract, build_activity, build_presenter, build_model)]

    def render(self, ctx: ResolvedContext, base_package: Optional[str] = None) -> list[GeneratedArtifact]:
        """All artifacts of a run; the base interfaces come first when base_package is given."""
        if not ctx.class_name_prefix.strip():
            raise InvalidPackageNameError(ctx.full_package)

        artifacts = self.render_base(base_package, ctx) if base_package is not None else []
        return artifacts + self.render_feature(ctx)
