"""Klondike solitaire for the terminal: cards, piles, rules, drawing and keys."""

__version__ = "1.4.1"