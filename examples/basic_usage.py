"""Basic usage example for graphwalk-lib."""

import sys
import tempfile
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


from graphwalk import (
    create_graph,
    export_dot,
    print_vertices,
)


def main():
    print("=" * 60)
    print("graphwalk-lib - Basic Usage Example")
    print("=" * 60)

    with create_graph(1) as graph:
        # 1. Build the graph
        print("\n1. Adding vertices and edges...")
        for vertex_id in (1, 2, 3, 4, 5):
            graph.add_vertex(vertex_id)
        graph.add_undirected(1, 2, 5)
        graph.add_undirected(1, 3, 1)
        graph.add_undirected(2, 4, 2)
        graph.add_undirected(3, 4, 9)
        print(f"   {len(graph)} vertices, {graph.edge_count} directed edges")

        # 2. Breadth-first search
        print("\n2. BFS from vertex 1...")
        result = graph.bfs(1)
        print_vertices(graph)
        print(f"   Path to 4: {result.path_to(4)}")
        print(f"   Vertex 5 reached: {result.visited(5)}")

        # 3. Depth-first search
        print("\n3. DFS from vertex 4...")
        result = graph.dfs(4)
        print(f"   Visit order: {result.order}")
        print(f"   Frontier pushes: {result.frontier_pushes}")

        # 4. Export for Graphviz
        print("\n4. Exporting dot file...")
        out = Path(tempfile.gettempdir()) / "graphwalk-demo.dot"
        export_dot(graph, out)
        print(out.read_text())

    print("=" * 60)
    print("Example complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
