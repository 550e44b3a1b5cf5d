"""RouteOptimize driver shell: screen navigation and view-state coordination."""

__version__ = "0.1.0"
