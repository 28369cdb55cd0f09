"""Routing — bracket route templates, first-match-wins lookup, reverse routing.

Templates are compiled to anchored regexes on registration; lookups walk
the routes in order and return the first match.
"""
