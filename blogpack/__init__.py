"""blogpack: static blog pages with flash-free light/dark theme resolution."""

__version__ = "0.1.0"
