"""ViewModel package for shell state and settings.

Modules here hold mutable UI state and typed configuration only; presentation
mutations and timers live in ``routeoptimize.app``.
"""
