"""Jadro hry bez UI: dlaždice, taška, ruka, doska a stav partie."""
