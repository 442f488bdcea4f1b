"""
Example: Ordering build steps with a DirectedGraph

Models build targets and their dependencies, derives a build order with
both topological sorts, then introduces a dependency loop and locates it
with strongly connected components.
"""

from adjgraph import DirectedGraph, configure_logging

TARGETS = ["fetch", "configure", "codegen", "compile", "test", "docs", "package"]

DEPENDENCIES = [
    ("fetch", "configure"),
    ("configure", "codegen"),
    ("configure", "compile"),
    ("codegen", "compile"),
    ("compile", "test"),
    ("compile", "docs"),
    ("test", "package"),
    ("docs", "package"),
]


def main():
    configure_logging(level="WARNING")

    build = DirectedGraph()
    for target in TARGETS:
        build.add_vertex(target)
    for before, after in DEPENDENCIES:
        build.add_edge(before, after)

    print(f"Build order (Kahn): {build.topological_sort()}")
    print(f"Build order (DFS):  {build.topological_sort_dfs()}")
    print(f"Entry points: {build.get_sources()}, final targets: {build.get_sinks()}")

    build.add_edge("package", "codegen")
    print(f"After package -> codegen, DAG: {build.is_dag()}")
    loops = [c for c in build.get_strongly_connected_components() if len(c) > 1]
    print(f"Dependency loop: {sorted(loops[0])}")


if __name__ == "__main__":
    main()
