from typing import Optional
import matplotlib.pyplot as plt
import networkx as nx

from product_catalog.core.taxonomy import category_node

NODE_COLORS = {
    "category": "#ffe680",
    "subcategory": "#cfe2ff",
    "product": "#b3ffb3",
}

def visualize_category(G: nx.DiGraph, category: str) -> Optional[plt.Figure]:
    cid = category_node(category)
    if cid not in G:
        return None

    subs = [n for n in G.successors(cid) if G.nodes[n].get("node_type") == "subcategory"]
    products = [
        p for s in subs for p in G.successors(s)
        if G.nodes[p].get("node_type") == "product"
    ]
    if not products:
        return None

    sub = G.subgraph([cid] + subs + products)

    fig, ax = plt.subplots(figsize=(10, 6))
    pos = nx.shell_layout(sub, nlist=[[cid], subs, products])
    colors = [NODE_COLORS.get(sub.nodes[n].get("node_type"), "#f0f0f0") for n in sub.nodes()]

    nx.draw_networkx_nodes(sub, pos, ax=ax, node_size=650, node_color=colors, edgecolors="#000000")
    nx.draw_networkx_edges(sub, pos, ax=ax, alpha=0.7, width=1.5, edge_color="#bbbbbb", arrows=False)

    labels = {n: sub.nodes[n].get("name", n) for n in sub.nodes()}
    nx.draw_networkx_labels(sub, pos, ax=ax, labels=labels, font_size=8, font_color="#000000")

    ax.set_facecolor("#050b16")
    ax.set_title(f"Catalog map for '{category}'", fontsize=10, color="#ffffff")
    ax.axis("off")
    return fig
