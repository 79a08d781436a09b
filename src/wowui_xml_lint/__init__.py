"""WoW UI XML Lint — static validator for World of Warcraft addon UI XML."""

__version__ = "0.1.0"
