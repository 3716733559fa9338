"""Algorithms over a Graph: shortest path, components, centrality.

Every function here is read-only with respect to the graph it receives.
"""
