__version__ = "1.0.0"

import importlib as _importlib

# Import from modules
from .config import Config, make_config, GOLDEN_RATIO
from .itp import InvalidIntervalError, find_root, find_root_diags, find_roots
from .objective import univariate, with_args
from .solve import solve

# List of modules not explicitly imported above
modules = ["config", "itp", "objective"]

__all__ = modules + [
    k for (k, v) in locals().items() if not k.startswith("_")
]  # all local, public names


def __dir__():
    return __all__


# Lazy load of modules.
def __getattr__(name):
    if name in modules:
        return _importlib.import_module(f"itproot.{name}")
    else:
        try:
            return globals()[name]
        except KeyError:
            raise AttributeError(f"Module 'itproot' has no attribute '{name}'")
