"""Constants used throughout the application."""

# Preference keys
LAST_PACKAGE_KEY = "mvp_creator_last_package"
LAST_BASE_OPTION_KEY = "mvp_creator_last_base_option"
DEFAULT_PREFERENCES_FILE = ".mvp-creator.json"
DEFAULT_CONFIG_FILE = ".mvp-creator.yaml"

# Package layout
BASE_PACKAGE_NAME = "base"
BASE_PACKAGES = ["base", "common.base", "core.base", "framework.base", "mvp.base"]
DEFAULT_SOURCE_ROOT_MARKER = "java"
DEFAULT_SEARCH_DEPTH = 5

# Generated sources
FILE_EXTENSION = ".java"
BASE_PRESENTER = "BasePresenter"
BASE_VIEW = "BaseView"
DEFAULT_DATE_FORMAT = "%Y/%m/%d"
DEFAULT_VIEW_SUPERCLASS = "androidx.appcompat.app.AppCompatActivity"
