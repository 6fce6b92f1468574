"""Worked Python solutions to the exercises, grouped by topic."""