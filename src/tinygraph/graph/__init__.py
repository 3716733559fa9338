"""Graph layer — the Graph container and its NetworkX bridge.

Depends on domain records, the service result contract, and NetworkX.
It must never import from algo at module level; algorithm entry points on
Graph defer their imports.
"""
