"""jumprun - a single-screen reflex game: run, jump, don't hit anything."""

__version__ = "0.1.0"
