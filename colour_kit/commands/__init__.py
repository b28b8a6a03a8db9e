"""colour-kit subcommands.

Each module here defines a `command` and is picked up by
colour_kit.registry.discover(). Its docstring is the command's help text.
"""
