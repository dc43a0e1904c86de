"""A terminal maze game with patrolling ghosts, two levels, three rule variants and a winners list."""

__version__ = "0.1.0"