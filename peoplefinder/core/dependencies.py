# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""FastAPI dependency injection wiring."""
from peoplefinder.services.directory_client import DirectoryClient
from peoplefinder.services.field_selector import FieldSelector

_directory_client = DirectoryClient()
_field_selector = FieldSelector(_directory_client)


def get_directory_client() -> DirectoryClient:
    return _directory_client


def get_field_selector() -> FieldSelector:
    return _field_selector
