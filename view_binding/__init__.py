"""View Binding - ahead-of-time resolution of view template metadata"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("view-binding")
except PackageNotFoundError:
    __version__ = "dev"
