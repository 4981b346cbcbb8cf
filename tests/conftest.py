"""
Shared fixtures: the hotel availability tree used across the suite.

    results
      room type="single"
        rate price="234.00" qualifier="aarp"
        rate price="250.00"
      room type="2 queen"
        rate price="350.00" qualifier="silver"
"""

import pytest

from path_engine import Document, SelectorEngine


HOTEL_MARKUP = """<?xml version="1.0"?>
<results>
  <!-- availability for one night -->
  <room type="single">
    <rate price="234.00" qualifier="aarp"/>
    <rate price="250.00"/>
  </room>
  <room type="2 queen">
    <rate price="350.00" qualifier="silver"/>
  </room>
</results>
"""


def build_hotel_document() -> Document:
    document = Document()
    results = document.append_child(document.create_element("results"))
    results.append_child(document.create_text_node("\n  "))
    results.append_child(document.create_comment(" availability for one night "))

    single = results.append_child(document.create_element("room", {"type": "single"}))
    single.append_child(document.create_element("rate", {"price": "234.00", "qualifier": "aarp"}))
    single.append_child(document.create_text_node("between rates"))
    single.append_child(document.create_element("rate", {"price": "250.00"}))

    queen = results.append_child(document.create_element("room", {"type": "2 queen"}))
    queen.append_child(document.create_element("rate", {"price": "350.00", "qualifier": "silver"}))
    return document


@pytest.fixture
def hotel():
    return build_hotel_document()


@pytest.fixture
def results(hotel):
    return hotel.document_element


@pytest.fixture
def rooms(results):
    return results.children


@pytest.fixture
def rates(results):
    return [rate for room in results.children for rate in room.children]


@pytest.fixture(params=["recursive", "iterative"])
def engine(request):
    return SelectorEngine(strategy=request.param)
