"""Package metadata shared by the CLI and the HTTP layer."""

PACKAGE_NAME = "azmgmt"
__version__ = "0.1.0"
USER_AGENT = f"{PACKAGE_NAME}/{__version__}"
