from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from mvp_creator.constants import LAST_BASE_OPTION_KEY, LAST_PACKAGE_KEY


class SearchStrategy(str, Enum):
    """How existing base interfaces are looked up."""

    NONE = "none"
    SIBLING = "sibling"
    ANCESTORS = "ancestors"


class WriteStatus(str, Enum):
    """Outcome of writing a single generated file."""

    WRITTEN = "written"
    SKIPPED = "skipped"


class NotificationLevel(str, Enum):
    """Severity of a user notification."""

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class GenerationRequest(BaseModel):
    """User input for one generation run."""

    model_config = ConfigDict(frozen=True)

    package_name: str = Field(..., description="Dotted package name (e.g., com.app.bluetooth)")
    create_base: bool = Field(default=False, description="Whether BasePresenter/BaseView should be created")


class BaseInterfaceLocation(BaseModel):
    """Packages holding the shared base interfaces, if any were found."""

    presenter_package: Optional[str] = Field(None, description="Package containing BasePresenter")
    view_package: Optional[str] = Field(None, description="Package containing BaseView")

    @property
    def complete(self) -> bool:
        return self.presenter_package is not None and self.view_package is not None


class ResolvedContext(BaseModel):
    """Everything the renderer needs to produce the feature sources."""

    class_name_prefix: str = Field(..., description="Upper-cased final package segment")
    full_package: str = Field(..., description="Package of the generated feature classes")
    base_presenter_package: Optional[str] = Field(None, description="Package to import BasePresenter from")
    base_view_package: Optional[str] = Field(None, description="Package to import BaseView from")
    author: str = Field(..., description="Author shown in file headers")
    date_format: str = Field(..., description="strftime pattern for the header date")
    view_superclass: str = Field(..., description="Fully qualified superclass of the generated view")

    @property
    def has_base_presenter(self) -> bool:
        return bool(self.base_presenter_package)

    @property
    def has_base_view(self) -> bool:
        return bool(self.base_view_package)


class GeneratedArtifact(BaseModel):
    """A rendered source file, not yet written."""

    file_name: str = Field(..., description="File name including extension")
    content: str = Field(..., description="Complete file body")


class WriteResult(BaseModel):
    """Result of handing one artifact to the file writer."""

    file_name: str
    status: WriteStatus


class GenerationReport(BaseModel):
    """Aggregate outcome of a generation run."""

    success: bool
    full_package: Optional[str] = Field(None, description="Package of the generated feature classes")
    created_base: bool = False
    results: list[WriteResult] = Field(default_factory=list)
    error: Optional[str] = Field(None, description="Message of the first fatal error")

    @property
    def written(self) -> list[str]:
        return [r.file_name for r in self.results if r.status == WriteStatus.WRITTEN]

    @property
    def skipped(self) -> list[str]:
        return [r.file_name for r in self.results if r.status == WriteStatus.SKIPPED]


class PersistedPreferences(BaseModel):
    """Values remembered between invocations for one project."""

    model_config = ConfigDict(populate_by_name=True)

    last_package_name: str = Field("", alias=LAST_PACKAGE_KEY)
    last_create_base: bool = Field(False, alias=LAST_BASE_OPTION_KEY)


class Notification(BaseModel):
    """A message delivered to the user."""

    level: NotificationLevel
    title: str
    message: str
