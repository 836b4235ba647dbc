"""Display-state models for dashboard widgets: vehicle picture, selector, switch, tuner, dialogs."""

__version__ = "0.1.0"