"""
Interface package: command-line access to the solver.

Modules:
    cli — Prints a solution to stdout.
          Can be run as a module: python -m interface.cli 3
"""
