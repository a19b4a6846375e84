"""Tests for product and project field extraction."""

from conftest import CHILLERS_PAGE, PROJECTS_PAGE, product_card
from ingestion import (
    PRODUCTS,
    PROJECTS,
    CatalogDocument,
    ContextResolver,
    ProductFieldExtractor,
    ProjectFieldExtractor,
    SegmentExtractor,
)


def extract_products(text, category="chillers", lookback=3000):
    document = CatalogDocument(text=text, category=category)
    extractor = ProductFieldExtractor(context_resolver=ContextResolver(lookback))
    return [extractor.extract(segment) for segment in SegmentExtractor(PRODUCTS.marker).extract(document)]


def test_product_fields():
    record = extract_products(CHILLERS_PAGE)[0]

    assert record.name == "YK Centrifugal Chiller"
    assert record.category == "chillers"
    assert record.description == "Capacity 250 to 3000 TR"
    assert record.image_reference == "/images/chillers/yk.jpg"
    assert record.features == ["High efficiency", "Low noise"]
    assert record.subcategory is None


def test_segment_without_name_is_dropped():
    records = extract_products(CHILLERS_PAGE)
    assert records[-1] is None
    assert all(record.name for record in records if record is not None)


def test_card_body_cut_at_closing_divs():
    card = product_card(None, "Nameless")
    trailing = '\n<div class="related"><h3>Related Products</h3></div>'
    records = extract_products(card + trailing)
    assert records == [None]


def test_feature_items_inline_glyph_and_empty():
    card = "\n".join(
        [
            '<div class="product-horizontal-card">',
            '<h3 class="product-name">DCU 60</h3>',
            "<h4>Key Features:</h4>",
            "<ul>",
            "<li>&#10003; Quiet fan</li>",
            "<li><span>&#10003;</span>   </li>",
            "<li>&bull; Washable <b>filter</b></li>",
            "</ul>",
            "</div>",
        ]
    )
    record = extract_products(card, category="fan-coil-units")[0]
    assert record.features == ["Quiet fan", "Washable filter"]


def test_section_context_container_and_heading():
    records = extract_products(CHILLERS_PAGE)

    assert records[0].section_context.container_id == "water-cooled-centrifugal-products"
    assert records[0].section_context.heading == "Water-Cooled Centrifugal Chillers"
    assert records[1].section_context.container_id == "york"
    assert records[1].section_context.heading == "Absorption Chillers"


def test_section_context_bounded_by_lookback():
    filler = "<p>" + ("x" * 500) + "</p>"
    text = '<section id="screw-products"><h2 class="brand-title">Screw Chillers</h2>' + filler + product_card("RTWD")

    assert extract_products(text, lookback=100)[0].section_context is None
    assert extract_products(text, lookback=3000)[0].section_context.container_id == "screw-products"


def test_data_id_is_not_a_container_id():
    text = '<div data-id="42" class="wrap">' + product_card("RTWD")
    assert extract_products(text)[0].section_context is None


def test_background_image_reference():
    card = (
        '<div class="product-horizontal-card">'
        '<div class="thumb" style="background-image: url(\'/images/vrf/dvm.png\')"></div>'
        '<h3 class="product-name">DVM S Eco</h3></div>'
    )
    record = extract_products(card, category="variable-refrigerant-flow")[0]
    assert record.image_reference == "/images/vrf/dvm.png"


def extract_projects(text):
    document = CatalogDocument(text=text, category="projects")
    extractor = ProjectFieldExtractor()
    return [extractor.extract(segment) for segment in SegmentExtractor(PROJECTS.marker).extract(document)]


def test_project_fields():
    mall, hotel, missing = extract_projects(PROJECTS_PAGE)

    assert mall.title == "City Mall"
    assert mall.location == "Riyadh"
    assert mall.category == "commercial"
    assert mall.description == "Central plant retrofit"
    assert mall.equipment == "Chillers, Cooling Towers"
    assert mall.image_reference == "/images/projects/mall.jpg"

    assert hotel.natural_key() == ("Harbor Hotel", "Jeddah")
    assert hotel.equipment is None
    assert hotel.image_reference is None

    assert missing is None


def test_project_equipment_list_fallback():
    card = "\n".join(
        [
            '<div class="project-card" data-category="industrial">',
            "<h3>Cold Store</h3>",
            '<p class="project-location">Dammam</p>',
            '<div class="equipment-list"><h4>Equipment Provided:</h4>',
            "<ul><li>Air-Cooled Chillers</li><li>AHUs</li></ul>",
            "</div>",
            "</div>",
        ]
    )
    project = extract_projects(card)[0]
    assert project.equipment == "Air-Cooled Chillers, AHUs"


def test_stray_h3_after_nameless_card_is_not_a_name():
    text = (
        '<div class="product-horizontal-card"><div class="product-info"><p>no name</p>'
        "<footer><h3>Contact Us</h3></footer>"
    )
    assert extract_products(text) == [None]


def test_h3_feature_label_is_not_a_name():
    card = "\n".join(
        [
            '<div class="product-horizontal-card">',
            "<h3>Key Features</h3>",
            "<ul><li>Quiet fan</li></ul>",
            "</div>",
        ]
    )
    assert extract_products(card, category="fan-coil-units") == [None]


def test_nested_container_wins_over_section():
    text = (
        '<section id="screw-products"><h2 class="brand-title">Screw Chillers</h2>'
        '<div id="tab-1" class="tab-pane">' + product_card("RTWD")
    )
    context = extract_products(text)[0].section_context
    assert context.container_id == "tab-1"
    assert context.heading == "Screw Chillers"


def test_heading_carries_over_from_previous_section():
    text = (
        '<section id="scroll-products"><h2 class="brand-title">Scroll Chillers</h2></section>'
        '<section id="screw-products">' + product_card("RTWD")
    )
    context = extract_products(text)[0].section_context
    assert context.container_id == "screw-products"
    assert context.heading == "Scroll Chillers"
