"""Performance benchmarks for adjgraph.

This package contains microbenchmarks for hot paths in the library,
including traversal, shortest paths and minimum spanning trees.
"""
