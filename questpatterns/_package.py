"""Package metadata and naming constants."""

PACKAGE_NAME = "questpatterns"
PACKAGE_DESCRIPTION = "Classic object-oriented design patterns told through a fantasy game"
__version__ = "1.0.0"
