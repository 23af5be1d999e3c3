from dataclasses import replace
from unittest.mock import Mock

import grpc
import pytest

from qservice.domain import CategoryRepository
from qservice.rpc import CategoryServicer, codec, create_server
from qservice.rpc.client import CategoryServiceClient

MISSING_ID = "16fd2706-8baf-433b-82eb-8c7fada847da"


@pytest.fixture
def servicer(container):
    return CategoryServicer(container)


@pytest.fixture
def channel(container):
    server, port = create_server(container, "127.0.0.1:0")
    server.start()
    channel = grpc.insecure_channel(f"127.0.0.1:{port}")
    try:
        yield channel
    finally:
        channel.close()
        server.stop(None)


def test_create_returns_data_only(servicer):
    reply = servicer.CreateCategory({"name": "Math"}, None)
    assert set(reply) == {"data"}
    assert reply["data"]["name"] == "Math"
    assert "parentId" not in reply["data"]


def test_duplicate_create_returns_error_only(servicer):
    servicer.CreateCategory({"name": "Math"}, None)
    reply = servicer.CreateCategory({"name": "Math"}, None)
    assert set(reply) == {"error"}
    assert reply["error"]["httpStatusCode"] == 409
    assert reply["error"]["code"] == "QS-BIZ-002-CATEGORY"


def test_invalid_input_reports_details(servicer):
    reply = servicer.CreateCategory({"name": ""}, None)
    error = reply["error"]
    assert error["httpStatusCode"] == 400
    assert error["code"] == "QS-VAL-008-CREATE_CATEGORY"
    assert error["details"][0]["field"] == "name"
    assert error["details"][0]["codeParams"] == []


def test_unexpected_failure_maps_to_system_error(container):
    broken = Mock(spec=CategoryRepository)
    broken.find_one_by_name.side_effect = RuntimeError("boom")
    reply = CategoryServicer(replace(container, category_repository=broken)).CreateCategory({"name": "x"}, None)
    assert reply["error"]["httpStatusCode"] == 500
    assert reply["error"]["code"] == "QS-SYS-005"


def test_malformed_body_gets_an_error_envelope(channel):
    create = channel.unary_unary(codec.method_path("CreateCategory"), response_deserializer=codec.deserialize)
    reply = create(b"{not json", timeout=10)
    assert set(reply) == {"error"}
    assert reply["error"]["httpStatusCode"] == 400
    assert reply["error"]["code"] == "QS-VAL-008-CREATE_CATEGORY"
    assert reply["error"]["details"][0]["field"] == "name"


def test_round_trip_over_grpc(channel):
    client = CategoryServiceClient(channel)
    math = client.create_category("Math")["data"]
    algebra = client.create_category("Algebra", parent_id=math["id"])["data"]
    assert algebra["parentId"] == math["id"]

    roots = client.list_categories(filter={"isRoot": True})["data"]["items"]
    assert [c["name"] for c in roots] == ["Math"]

    children = client.list_categories(filter={"path": [math["id"]]})["data"]["items"]
    assert [c["id"] for c in children] == [algebra["id"]]

    bad_path = client.list_categories(filter={"path": [algebra["id"]]})
    assert bad_path["error"]["httpStatusCode"] == 400
    assert bad_path["error"]["message"] == f"Invalid category path: {algebra['id']}"

    renamed = client.update_category(algebra["id"], "Linear Algebra")["data"]
    assert renamed["name"] == "Linear Algebra"

    blocked = client.delete_category(math["id"])
    assert blocked["error"]["code"] == "QS-BIZ-004-CATEGORY"

    missing = client.delete_categories([algebra["id"], MISSING_ID])
    assert missing["error"]["httpStatusCode"] == 404
    assert missing["error"]["message"] == f"Category with id {MISSING_ID} not found"

    deleted = client.delete_category(algebra["id"])["data"]
    assert deleted["id"] == algebra["id"]
    assert client.delete_categories([math["id"]]) == {"data": True}
    assert client.list_categories()["data"]["items"] == []
