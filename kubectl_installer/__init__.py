"""kubectl-installer — install, back up and roll back kubectl."""

__version__ = "0.1.0"
