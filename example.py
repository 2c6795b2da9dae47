#!/usr/bin/env python3
"""
Example usage of the JSON Node Graph codec.

This script flattens a JSON document into a node table, stores the table,
and rebuilds both the full document and a selected subgraph from it.
"""

import json
import tempfile
from pathlib import Path
from json_nodegraph import CodecConfig, CodecError, NodeGraphCodec
from json_nodegraph.io import NodeTableReader, NodeTableWriter


def main():
    """Main example function."""
    print("JSON Node Graph Example")
    print("=" * 50)

    # Create sample data
    sample_data = {
        "name": "Grace Hopper",
        "title": "Rear Admiral",
        "active": False,
        "contact": {
            "email": "grace@example.com",
            "office": None
        },
        "skills": {
            "cobol": {"level": "expert", "years": 20},
            "flowmatic": {"level": "expert", "years": 5}
        },
        "languages": ["english", "german"],
        "projects": [
            {"name": "UNIVAC I", "year": 1951},
            {"name": "FLOW-MATIC", "year": 1955}
        ]
    }

    json_string = json.dumps(sample_data, indent=2)
    print(f"Original JSON size: {len(json_string)} characters\n")

    # Profile documents carry named skill records
    codec = NodeGraphCodec(CodecConfig.for_profiles())

    with tempfile.TemporaryDirectory() as temp_dir:
        table_path = Path(temp_dir) / "nodes.csv"

        try:
            print("Encoding JSON...")
            nodes = codec.encode(json_string)
            info = NodeTableWriter().write(nodes, table_path)
            print(f"✅ Wrote {info['rows']} nodes ({info['size']} bytes) to {table_path.name}")

            print("\nFirst nodes:")
            for node in nodes[:6]:
                print(f"   depth {node.depth}  {node.path} = {node.value!r}")

            paths, names, values = NodeTableReader().read_columns(table_path)

            print("\nDecoding full document...")
            full = codec.decode(paths, names, values)
            print(full)
            print(f"Identical to input: {json.loads(full) == sample_data}")

            print("\nDecoding the 'contact.email' subgraph with siblings...")
            partial = codec.decode(
                paths, names, values,
                selected_nodes=["contact.email"],
                include_siblings=True,
                descendant_depth=0
            )
            print(partial)

        except CodecError as e:
            print(f"❌ {e.error_type.value} error: {e}")


if __name__ == "__main__":
    main()
