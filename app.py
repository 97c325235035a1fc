import streamlit as st
from product_catalog.models.filters import FilterOptions, SORT_LABELS
from product_catalog.pipelines.app_service import AppService
from product_catalog.pipelines.presentation import (
    parse_optional_float,
    product_card_html,
)
from product_catalog.utils.exceptions import CatalogError, InvalidFilterValueError

st.set_page_config(layout="wide", page_title="Product Catalog")

@st.cache_resource
def get_service() -> AppService:
    return AppService()

# ---------- Global CSS ----------
st.markdown("""
<style>
body, .main, .stApp {
    background-color: #050b16;
    color: #e0e6f0;
}
.block-container {
    padding-top: 2.8rem;
    padding-bottom: 1.5rem;
}
.hero-title {
    font-size: 30px;
    font-weight: 800;
    background: linear-gradient(90deg, #5ab0ff, #9f7bff);
    -webkit-background-clip: text;
    color: transparent;
}
.product-card {
    border: 1px solid #1f2a3a;
    border-radius: 14px;
    padding: 14px 16px;
    margin-bottom: 12px;
    background: radial-gradient(circle at top left, #1a2740 0%, #050b16 55%);
    box-shadow: 0 4px 10px rgba(0,0,0,0.7);
}
.product-title {
    font-weight: 700;
    font-size: 17px;
    margin-bottom: 4px;
    color: #ffffff;
}
.product-price {
    font-size: 15px;
    font-weight: 600;
    color: #4fe3c1;
}
.product-meta {
    font-size: 13px;
    color: #d0d6e0;
}
.stars {
    color: #ffc861;
    letter-spacing: 2px;
}
.stock-in { color: #45d69a; font-size: 12px; font-weight: 600; }
.stock-out { color: #ff7a7a; font-size: 12px; font-weight: 600; }
section[data-testid="stSidebar"] {
    background-color: #050b16;
}
</style>
""", unsafe_allow_html=True)

st.markdown('<div class="hero-title">Product Catalog</div>', unsafe_allow_html=True)

try:
    service = get_service()
except CatalogError:
    st.error("Failed to load product data")
    st.stop()

RATING_CHOICES = [None, 4.5, 4.0, 3.5, 3.0]

def _reset_subcategory() -> None:
    current = FilterOptions(category=st.session_state["category"], subcategory=st.session_state["subcategory"])
    st.session_state["subcategory"] = service.with_category(current, current.category).subcategory

def _clear_filters() -> None:
    defaults = service.clear_filters()
    st.session_state.update({
        "search": defaults.search,
        "category": defaults.category,
        "subcategory": defaults.subcategory,
        "brand": defaults.brand,
        "min_price": "",
        "max_price": "",
        "min_rating": defaults.min_rating,
        "in_stock_only": defaults.in_stock_only,
        "sort_key": defaults.sort_key,
    })

# ---------- Sidebar filters ----------
with st.sidebar:
    st.subheader("Filters")
    search = st.text_input("Search", key="search", placeholder="Name, brand or description")

    category = st.selectbox(
        "Category",
        [""] + service.categories(),
        format_func=lambda c: c or "All Categories",
        key="category",
        on_change=_reset_subcategory,
    )
    subcategory = st.selectbox(
        "Subcategory",
        [""] + service.subcategories(category),
        format_func=lambda s: s or "All Subcategories",
        key="subcategory",
    )
    brand = st.selectbox(
        "Brand",
        [""] + service.brands(),
        format_func=lambda b: b or "All Brands",
        key="brand",
    )

    price_cols = st.columns(2)
    min_price_text = price_cols[0].text_input("Min Price (₹)", key="min_price")
    max_price_text = price_cols[1].text_input("Max Price (₹)", key="max_price")

    min_rating = st.selectbox(
        "Minimum Rating",
        RATING_CHOICES,
        format_func=lambda r: "Any" if r is None else f"{r}+ stars",
        key="min_rating",
    )
    in_stock_only = st.checkbox("In stock only", key="in_stock_only")
    sort_key = st.selectbox(
        "Sort by",
        list(SORT_LABELS),
        format_func=SORT_LABELS.get,
        key="sort_key",
    )
    st.button("Clear filters", on_click=_clear_filters)

try:
    min_price = parse_optional_float(min_price_text)
    max_price = parse_optional_float(max_price_text)
except InvalidFilterValueError as e:
    st.sidebar.warning(str(e))
    min_price = max_price = None

options = FilterOptions(
    search=search,
    category=category,
    subcategory=subcategory,
    brand=brand,
    min_price=min_price,
    max_price=max_price,
    min_rating=min_rating,
    in_stock_only=in_stock_only,
    sort_key=sort_key,
)

# ---------- Results ----------
tab_products, tab_map = st.tabs(["Products", "Catalog map"])

with tab_products:
    view = service.get_results(options)
    st.caption(view.count_text)

    if not view.products:
        st.info("No products match the current filters.")
    else:
        cols = st.columns(3)
        for idx, p in enumerate(view.products):
            cols[idx % 3].markdown(product_card_html(p), unsafe_allow_html=True)

with tab_map:
    if not category:
        st.write("Pick a category to see how its subcategories and products are organised.")
    else:
        fig = service.build_visualization(category)
        if fig:
            st.pyplot(fig)
        else:
            st.write("No products in this category.")
