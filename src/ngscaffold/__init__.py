"""ngscaffold: interactive component scaffolding."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("ngscaffold")
except PackageNotFoundError:
    __version__ = "0.0.0"
