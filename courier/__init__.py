__path__ = __import__("pkgutil").extend_path(__path__, __name__)  # NOQA: F-821
__title__ = 'courier'
__author__ = 'Eiko Reishin (影皇嶺臣)'
__license__ = 'MIT'
__version__ = "0.1.0"

from .commands import *
from .configuration import *
from .dispatcher import *
from .faults import *
from .namespaces import *
from .options import *
from .registry import *
from .utils import camelize, titleize, underscore, trim_all

VersionInfo = __import__("collections").namedtuple("VersionInfo", (
    "major",
    "minor",
    "micro",
    "releaselevel",
    "serial",
    "metadata"
))

version_info = VersionInfo(0, 1, 0, "final", 0, "")

__all__ = (
    "__path__",
    "__title__",
    "__author__",
    "__license__",
    "__version__",
    "version_info",
    "camelize",
    "titleize",
    "underscore",
    "trim_all",
)

# Load the exposed API of every submodule (looked up in sys.modules, since
# configuration/registry are shadowed by the function/object they export).
for _module in ("commands", "configuration", "dispatcher", "faults", "namespaces", "options", "registry"):
    __all__ += __import__("sys").modules[f"{__name__}.{_module}"].__all__
del _module
