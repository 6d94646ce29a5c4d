"""Core infrastructure for dustctl: paths, configuration and theming."""
