"""Use-case layer for shell workflows.

Each module applies domain data to the presentation port without owning any
session state, so controllers can call them as plain callables.
"""
