"""Command groups for the pyplaid CLI."""
