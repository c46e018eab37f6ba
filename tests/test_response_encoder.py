"""Tests for the content-negotiated response encoders."""

import json
from concurrent.futures import ThreadPoolExecutor
from io import BytesIO

import pytest
import yaml

from wfs3_geo.encoding import ResponseEncoder
from wfs3_geo.exceptions import UnsupportedFormat
from wfs3_geo.models import CollectionDocument, LandingPageDocument
from wfs3_geo.request import BaseRequest, CollectionRequest
from wfs3_geo.responses import (
    CollectionResponse,
    CollectionsResponse,
    ConformanceResponse,
    LandingPageResponse,
    find_encoder,
)


class FeaturesResponse(ResponseEncoder):
    def file_name(self, value, request) -> str:
        return "features"


def _write(encoder, value, request) -> bytes:
    sink = BytesIO()
    encoder.write(value, sink, request)
    return sink.getvalue()


class TestResponseEncoder:
    """Test format negotiation on the encoder base class."""

    def test_default_request_is_json(self, landing_page):
        encoder = FeaturesResponse()
        request = BaseRequest()
        assert encoder.can_handle(request)
        assert encoder.get_mime_type(landing_page, request) == "application/json"
        assert encoder.attachment_file_name(landing_page, request) == "features.json"
        assert json.loads(_write(encoder, landing_page, request))["title"] == "Parcels WFS"

    def test_f_alias(self, landing_page):
        encoder = FeaturesResponse()
        request = BaseRequest(f="Application/X-YAML")
        assert encoder.get_mime_type(landing_page, request) == "application/x-yaml"
        assert encoder.attachment_file_name(landing_page, request) == "features.yaml"
        assert yaml.safe_load(_write(encoder, landing_page, request))["title"] == "Parcels WFS"

    def test_xml(self, landing_page):
        encoder = FeaturesResponse()
        request = BaseRequest(output_format="text/xml")
        assert encoder.get_mime_type(landing_page, request) == "text/xml"
        assert encoder.attachment_file_name(landing_page, request) == "features.xml"
        assert b"LandingPage" in _write(encoder, landing_page, request)

    def test_unknown_format(self, landing_page):
        encoder = FeaturesResponse()
        request = BaseRequest(f="bogus/type")
        assert encoder.can_handle(request) is False
        with pytest.raises(UnsupportedFormat, match="bogus/type"):
            encoder.get_mime_type(landing_page, request)
        with pytest.raises(UnsupportedFormat):
            encoder.write(landing_page, BytesIO(), request)

    def test_file_name_is_abstract(self):
        with pytest.raises(TypeError):
            ResponseEncoder()


class TestDocumentResponses:
    """Test the WFS 3.0 document encoders."""

    def test_target_types(self, landing_page, conformance, collections):
        request = BaseRequest()
        assert LandingPageResponse().can_handle(request, landing_page)
        assert not LandingPageResponse().can_handle(request, conformance)
        assert ConformanceResponse().can_handle(request, conformance)
        assert CollectionsResponse().can_handle(request, collections)

    def test_file_names(self, landing_page, conformance, collections):
        request = BaseRequest(f="application/x-yaml")
        assert LandingPageResponse().attachment_file_name(landing_page, request) == "landingPage.yaml"
        assert ConformanceResponse().attachment_file_name(conformance, request) == "conformance.yaml"
        assert CollectionsResponse().attachment_file_name(collections, request) == "collections.yaml"

    def test_collection_named_after_collection(self, parcels_collection):
        request = CollectionRequest(collection_id="parcels", f="text/xml")
        encoder = CollectionResponse()
        assert encoder.attachment_file_name(parcels_collection, request) == "parcels.xml"

    def test_find_encoder(self, parcels_collection):
        encoder = find_encoder(parcels_collection, BaseRequest())
        assert isinstance(encoder, CollectionResponse)

    def test_find_encoder_unknown_format(self, landing_page):
        with pytest.raises(LookupError):
            find_encoder(landing_page, BaseRequest(f="text/html"))


class TestConcurrency:
    """Concurrent encodes match sequential output."""

    def test_parallel_encodes(self, landing_page, conformance, collections):
        formats = ["application/json", "application/x-yaml", "text/xml"]
        jobs = []
        for i in range(30):
            value = [landing_page, conformance, collections][i % 3]
            if i % 5 == 0:
                value = CollectionDocument(name=f"layer_{i}", title=f"Layer {i}")
            jobs.append((value, BaseRequest(f=formats[i % len(formats)])))

        def run(job):
            value, request = job
            return _write(find_encoder(value, request), value, request)

        expected = [run(job) for job in jobs]
        with ThreadPoolExecutor(max_workers=8) as pool:
            actual = list(pool.map(run, jobs))

        assert actual == expected
        assert len(set(expected)) > 3

    def test_landing_page_is_not_a_collection(self):
        value = LandingPageDocument(title="t")
        assert not CollectionResponse().can_handle(BaseRequest(), value)
