"""Graph exporters."""

from navgraph.export.graphml import export_graphml
from navgraph.export.json import export_json, load_json

EXPORT_FORMATS = ("json", "node_link", "graphml")

__all__ = ["EXPORT_FORMATS", "export_graphml", "export_json", "load_json"]
