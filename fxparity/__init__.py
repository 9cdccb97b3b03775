"""Forward exchange rate calculator package.

Exports the calculator pipeline (validation, calculation, state store,
debounced scheduler) and the settings loader for convenient imports.

Note: the `viz` package and the Streamlit `ui` package are imported only
by the runner and the app, to keep matplotlib and Streamlit out of
import time for the core.
"""

from .ui_logic import *  # re-export the pipeline API
from .ui_logic import __all__ as _ui_logic_all
from .settings import Settings, SettingsError, load_settings

__all__ = list(_ui_logic_all) + ["Settings", "SettingsError", "load_settings"]

__version__ = "1.0.0"
