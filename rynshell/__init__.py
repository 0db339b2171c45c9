"""An interactive command shell with pipelines, aliases, history hints and a configurable prompt."""

__version__ = "2.0.0a0"