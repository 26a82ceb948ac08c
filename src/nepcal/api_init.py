"""Default converter bootstrap (import side-effect)."""
from .api import set_default_converter
from .bootstrap import build_converter

set_default_converter(build_converter())
