"""Pure header-to-explanation pipeline: extract, parse, resolve, render."""
