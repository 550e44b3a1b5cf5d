"""Adapter package for presentation and timer implementations.

Purpose:
    Concrete implementations of the domain ports: an in-memory presentation
    for tests and headless runs, the Tkinter presentation used by the desktop
    shell, and a manually advanced clock.

Call context:
    Imported by app composition modules (for runtime wiring) and by tests.
"""
