"""Service contracts — result type and telemetry.

Shared by the graph and algo layers. Must never import from graph, algo,
or config.
"""
