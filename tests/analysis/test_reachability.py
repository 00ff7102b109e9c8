from navgraph.analysis.reachability import (
    ReachabilityAnalyzer,
    find_entry_views,
    find_unreachable_views,
    navigation_targets,
)
from navgraph.graph.model import NavigationGraph
from navgraph.graph.schema import EdgeKind, EdgeSpec, NodeSpec, NodeType


def _node(name: str, node_type: NodeType) -> NodeSpec:
    path = f"/app/{name}.xaml"
    return NodeSpec(id=path, label=name, type=node_type, source_path=path)


def _edge(src: str, dst: str, kind: EdgeKind = EdgeKind.SHOW) -> EdgeSpec:
    return EdgeSpec(source=f"/app/{src}.xaml", target=f"/app/{dst}.xaml", kind=kind)


def _build_fixture() -> NavigationGraph:
    nodes = (
        _node("Shell", NodeType.WINDOW),
        _node("Home", NodeType.PAGE),
        _node("Settings", NodeType.DIALOG),
        _node("Orphan", NodeType.PAGE),
        _node("Widget", NodeType.USER_CONTROL),
    )
    edges = (
        _edge("Shell", "Home", EdgeKind.NAVIGATE),
        _edge("Home", "Settings", EdgeKind.SHOW_DIALOG),
        _edge("Settings", "Home", EdgeKind.NAVIGATE),
    )
    return NavigationGraph(nodes=nodes, edges=edges)


def test_entry_views_have_no_incoming_edges():
    assert find_entry_views(_build_fixture()) == [
        "/app/Shell.xaml",
        "/app/Orphan.xaml",
        "/app/Widget.xaml",
    ]


def test_unreachable_views_default_to_entry_windows():
    graph = _build_fixture()
    assert ReachabilityAnalyzer(graph).default_roots() == ["/app/Shell.xaml"]
    assert find_unreachable_views(graph) == ["/app/Orphan.xaml", "/app/Widget.xaml"]


def test_unreachable_views_from_explicit_roots():
    graph = _build_fixture()
    assert find_unreachable_views(graph, ["/app/Settings.xaml"]) == [
        "/app/Shell.xaml",
        "/app/Orphan.xaml",
        "/app/Widget.xaml",
    ]


def test_roots_fall_back_to_all_entries_without_windows():
    nodes = (_node("A", NodeType.PAGE), _node("B", NodeType.PAGE))
    graph = NavigationGraph(nodes=nodes, edges=(_edge("A", "B"),))
    assert ReachabilityAnalyzer(graph).default_roots() == ["/app/A.xaml"]
    assert find_unreachable_views(graph) == []


def test_cycle_without_entry_is_unreachable():
    nodes = (_node("A", NodeType.WINDOW), _node("B", NodeType.WINDOW))
    graph = NavigationGraph(nodes=nodes, edges=(_edge("A", "B"), _edge("B", "A")))
    assert find_entry_views(graph) == []
    assert find_unreachable_views(graph) == ["/app/A.xaml", "/app/B.xaml"]


def test_navigation_targets_preserve_order():
    graph = _build_fixture()
    assert navigation_targets(graph, "/app/Home.xaml") == [
        ("/app/Settings.xaml", EdgeKind.SHOW_DIALOG)
    ]
    assert navigation_targets(graph, "/app/Widget.xaml") == []


def test_empty_graph():
    graph = NavigationGraph.empty()
    assert find_entry_views(graph) == []
    assert find_unreachable_views(graph) == []
