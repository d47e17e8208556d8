"""PeopleFinder directory lookup: fetch a person record and extract one datum."""

__version__ = "1.0.0"
