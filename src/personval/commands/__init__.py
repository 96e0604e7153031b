"""Subcommands of the personval CLI."""
