"""ScrabTiles – logické jadro hry s kladením písmen (taška, ruka, doska)."""

__version__ = "0.1.0"
