"""Unit tests for decoding JSON payloads against shape descriptors."""

import json
from types import MappingProxyType

import pytest

from oms_client.domain.exceptions import DecodeError, FieldMismatch, MalformedJson
from oms_client.domain.model.collection import ListObject
from oms_client.domain.model.order import ORDER_SHAPE, LineItem, Order
from oms_client.domain.model.shape import ListOf, Object, Raw, Scalar
from oms_client.domain.model.value_objects import MISSING, is_present
from oms_client.domain.service.decoder import decode, decode_value


ITEM = Object({"id": Scalar(str), "amount": Scalar(int)})


# ── Missing vs. null ────────────────────────────────────────────────────────


class TestMissingFields:

    def test_absent_field_is_missing(self):
        value = decode(b"{}", Object({"a": Scalar()})).unwrap()
        assert value["a"] is MISSING
        assert not is_present(value["a"])

    def test_explicit_null_is_none(self):
        value = decode(b'{"a": null}', Object({"a": Scalar()})).unwrap()
        assert value["a"] is None
        assert is_present(value["a"])

    def test_missing_and_null_are_distinguishable(self):
        shape = Object({"a": Scalar()})
        omitted = decode(b"{}", shape).unwrap()["a"]
        null = decode(b'{"a": null}', shape).unwrap()["a"]
        assert omitted != null

    def test_null_nested_object_is_none(self):
        shape = Object({"child": Object({"x": Scalar()})})
        assert decode(b'{"child": null}', shape).unwrap()["child"] is None

    def test_absent_nested_list_is_missing(self):
        shape = Object({"items": ListOf(ITEM)})
        assert decode(b"{}", shape).unwrap()["items"] is MISSING

    def test_dataclass_target_gets_missing_defaults(self):
        order = decode(b'{"id": "ord_1"}', ORDER_SHAPE).unwrap()
        assert isinstance(order, Order)
        assert order.id == "ord_1"
        assert order.line_items is MISSING
        assert order.amount is MISSING


# ── Objects ────────────────────────────────────────────────────────────────


class TestObjects:

    def test_unknown_fields_dropped(self):
        value = decode(b'{"id": "x", "amount": 5, "extra": true}', ITEM).unwrap()
        assert dict(value) == {"id": "x", "amount": 5}

    def test_untyped_object_is_read_only(self):
        value = decode(b'{"id": "x"}', ITEM).unwrap()
        assert isinstance(value, MappingProxyType)
        with pytest.raises(TypeError):
            value["id"] = "y"  # type: ignore[index]

    def test_array_where_object_expected(self):
        result = decode(b'{"child": [1, 2]}', Object({"child": ITEM}))
        assert isinstance(result.error, FieldMismatch)
        assert result.error.path == ("child",)
        assert result.error.expected == "object"
        assert result.error.actual == "array"

    def test_scalar_mismatch_names_field(self):
        result = decode(b'{"id": "x", "amount": "lots"}', ITEM)
        assert result.is_err()
        assert result.error.field == "amount"

    def test_scalar_rejects_object(self):
        result = decode(b'{"a": {"b": 1}}', Object({"a": Scalar()}))
        assert isinstance(result.error, FieldMismatch)

    def test_raw_keeps_any_json(self):
        shape = Object({"metadata": Raw()})
        value = decode(b'{"metadata": {"k": [1, {"z": null}]}}', shape).unwrap()
        assert value["metadata"] == {"k": (1, {"z": None})}

    def test_raw_is_read_only(self):
        shape = Object({"metadata": Raw()})
        metadata = decode(b'{"metadata": {"k": [1, {"z": 2}]}}', shape).unwrap()["metadata"]
        assert isinstance(metadata, MappingProxyType)
        assert isinstance(metadata["k"], tuple)
        with pytest.raises(TypeError):
            metadata["k"] = "changed"  # type: ignore[index]
        with pytest.raises(TypeError):
            metadata["k"][1]["z"] = 3  # type: ignore[index]

    def test_typed_entity_field_rejects_wrong_kind(self):
        result = decode(b'{"id": "o", "amount": "lots"}', ORDER_SHAPE)
        assert isinstance(result.error, FieldMismatch)
        assert result.error.field == "amount"
        assert result.error.expected == "int"
        assert result.error.actual == "string"

    def test_typed_entity_field_rejects_bool_for_int(self):
        result = decode(b'{"line_items": {"data": [{"quantity": true}]}}', ORDER_SHAPE)
        assert result.error.field == "line_items.data[0].quantity"

    def test_typed_entity_field_accepts_null(self):
        assert decode(b'{"amount": null}', ORDER_SHAPE).unwrap().amount is None

    def test_top_level_null_rejected(self):
        result = decode(b"null", ITEM)
        assert isinstance(result.error, FieldMismatch)
        assert result.error.path == ()

    def test_nested_error_path(self):
        body = json.dumps(
            {"line_items": {"data": [{"id": "li_1"}, {"id": "li_2", "tags": "oops"}]}}
        )
        result = decode(body, ORDER_SHAPE)
        assert isinstance(result.error, FieldMismatch)
        assert result.error.path == ("line_items", "data", 1, "tags")
        assert result.error.field == "line_items.data[1].tags"


# ── Lists ──────────────────────────────────────────────────────────────────


class TestLists:

    def test_decodes_in_order(self):
        body = b'[{"id": "a"}, {"id": "b"}, {"id": "c"}]'
        values = decode(body, ListOf(ITEM)).unwrap()
        assert isinstance(values, tuple)
        assert [v["id"] for v in values] == ["a", "b", "c"]

    def test_fail_fast_reports_index(self):
        body = b'[{"id": "a", "amount": 1}, {"id": "b", "amount": "x"}, {"id": "c", "amount": 3}]'
        result = decode(body, ListOf(ITEM))
        assert result.is_err()
        assert isinstance(result.error, FieldMismatch)
        assert result.error.index == 1
        assert result.error.path == (1, "amount")

    def test_first_failure_wins(self):
        body = b'[{"amount": 1}, {"amount": "x"}, {"amount": "y"}]'
        assert decode(body, ListOf(ITEM)).error.index == 1

    def test_no_partial_list_on_failure(self):
        result = decode(b'[{"amount": 1}, {"amount": "x"}]', ListOf(ITEM))
        assert result.unwrap_or(None) is None

    def test_object_where_array_expected(self):
        result = decode(b'{"tags": {"a": 1}}', Object({"tags": ListOf(Scalar(str))}))
        assert result.error.expected == "array"

    def test_empty_list(self):
        assert decode(b"[]", ListOf(ITEM)).unwrap() == ()


# ── Malformed input ────────────────────────────────────────────────────────


class TestMalformedJson:

    def test_truncated_body(self):
        result = decode(b'{"id": ', ITEM)
        assert isinstance(result.error, MalformedJson)
        assert "Malformed JSON" in str(result.error)

    def test_empty_body(self):
        assert isinstance(decode(b"", ITEM).error, MalformedJson)

    def test_invalid_utf8(self):
        assert isinstance(decode(b'{"id": "\xff\xfe"}', ITEM).error, MalformedJson)

    def test_html_error_page(self):
        assert isinstance(decode(b"<html>502</html>", ITEM).error, MalformedJson)

    def test_deeply_nested_body(self):
        body = b"[" * 100_000 + b"]" * 100_000
        result = decode(body, ORDER_SHAPE)
        assert isinstance(result.error, MalformedJson)

    def test_deeply_nested_free_form_value(self):
        nested: list = []
        for _ in range(100_000):
            nested = [nested]
        result = decode_value({"metadata": nested}, ORDER_SHAPE)
        assert isinstance(result.error, DecodeError)


# ── Round trip ─────────────────────────────────────────────────────────────


class TestRoundTrip:

    @pytest.mark.parametrize(
        "payload",
        [
            {"id": "ord_1", "amount": 100, "livemode": False, "metadata": {"a": 1}},
            {
                "id": "ord_2",
                "line_items": {
                    "object": "list",
                    "has_more": False,
                    "data": [{"id": "li_1", "amount": 100, "tags": ["x"]}],
                },
                "customer_info": {"name": "Ana", "email": None},
            },
            {},
        ],
    )
    def test_decode_of_encoded_equals_direct_decode(self, payload):
        from_bytes = decode(json.dumps(payload).encode("utf-8"), ORDER_SHAPE)
        direct = decode_value(payload, ORDER_SHAPE)
        assert from_bytes == direct


# ── Scenario ───────────────────────────────────────────────────────────────


class TestOrderScenario:

    def test_order_with_embedded_line_items(self):
        body = b'{"id":"ord_123","line_items":{"data":[{"id":"li_1","amount":100}]}}'
        order = decode(body, ORDER_SHAPE).unwrap()
        assert order.id == "ord_123"
        assert isinstance(order.line_items, ListObject)
        assert len(order.line_items) == 1
        item = order.line_items.data[0]
        assert isinstance(item, LineItem)
        assert item.amount == 100
        assert item.name is MISSING

    def test_decoded_order_is_immutable(self):
        order = decode(b'{"id": "ord_1"}', ORDER_SHAPE).unwrap()
        with pytest.raises(AttributeError):
            order.id = "other"  # type: ignore[misc]
