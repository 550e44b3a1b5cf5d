"""Application composition layer for the RouteOptimize shell.

Controllers in this package own the shell's view state and timers and drive
the presentation port; ``main`` wires them to the Tkinter window.
"""
