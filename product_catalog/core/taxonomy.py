from typing import List
import networkx as nx
from product_catalog.models.product import CatalogData
from product_catalog.utils.logger import logger

def category_node(category: str) -> str:
    return f"category:{category}"

def subcategory_node(category: str, subcategory: str) -> str:
    return f"subcategory:{category}/{subcategory}"

def brand_node(brand: str) -> str:
    return f"brand:{brand}"

def product_node(product_id: str) -> str:
    return f"product:{product_id}"

def build_taxonomy(catalog: CatalogData) -> nx.DiGraph:
    G = nx.DiGraph()

    # Declared categories and subcategories
    for cat in catalog.categories:
        G.add_node(category_node(cat), node_type="category", name=cat)
    for cat, subs in catalog.subcategories.items():
        G.add_node(category_node(cat), node_type="category", name=cat)
        for sub in subs:
            sid = subcategory_node(cat, sub)
            G.add_node(sid, node_type="subcategory", name=sub, category=cat)
            G.add_edge(category_node(cat), sid, edge_type="HAS_SUBCATEGORY")

    for brand in catalog.brands:
        G.add_node(brand_node(brand), node_type="brand", name=brand)

    # Products, plus anything they reference that was not declared
    for p in catalog.products:
        cid = category_node(p.category)
        sid = subcategory_node(p.category, p.subcategory)
        bid = brand_node(p.brand)
        if cid not in G:
            G.add_node(cid, node_type="category", name=p.category)
        if sid not in G:
            G.add_node(sid, node_type="subcategory", name=p.subcategory, category=p.category)
            G.add_edge(cid, sid, edge_type="HAS_SUBCATEGORY")
        if bid not in G:
            G.add_node(bid, node_type="brand", name=p.brand)

        pid = product_node(p.product_id)
        G.add_node(
            pid,
            node_type="product",
            name=p.name,
            product_id=p.product_id,
            category=p.category,
            subcategory=p.subcategory,
            brand=p.brand,
        )
        G.add_edge(sid, pid, edge_type="CONTAINS")
        G.add_edge(pid, bid, edge_type="HAS_BRAND")

    logger.info(f"Taxonomy built: {G.number_of_nodes()} nodes, {G.number_of_edges()} edges")
    return G

def _names_of_type(G: nx.DiGraph, nodes, node_type: str) -> List[str]:
    return sorted({G.nodes[n]["name"] for n in nodes if G.nodes[n].get("node_type") == node_type})

def list_categories(G: nx.DiGraph) -> List[str]:
    return _names_of_type(G, G.nodes, "category")

def list_subcategories(G: nx.DiGraph, category: str) -> List[str]:
    cid = category_node(category)
    if not category or cid not in G:
        return []
    return _names_of_type(G, G.successors(cid), "subcategory")

def list_brands(G: nx.DiGraph, category: str = "") -> List[str]:
    if not category:
        return _names_of_type(G, G.nodes, "brand")
    cid = category_node(category)
    if cid not in G:
        return []
    # category -> subcategory -> product -> brand
    reachable = nx.descendants(G, cid)
    return _names_of_type(G, reachable, "brand")
