"""Unit tests for the status catalog, Paging and the Response envelope."""

import json

import pytest
from pydantic import ValidationError

from response_envelope.errors import InvalidArgumentError
from response_envelope.models.paging import Paging, PagingSnapshot
from response_envelope.models.responses import Response
from response_envelope.models.status import (
    StatusCode,
    is_registered,
    message_for,
    split_structured,
    status_name,
    structured_code,
)


# ---------------------------------------------------------------------------
# Status catalog
# ---------------------------------------------------------------------------


class TestStatusCode:
    def test_standard_values(self):
        assert StatusCode.OK == 200
        assert StatusCode.NOT_FOUND == 404
        assert StatusCode.INTERNAL_SERVER_ERROR == 500
        assert StatusCode.I_AM_A_TEAPOT == 418

    def test_custom_values(self):
        assert StatusCode.SUCCESS == 4000
        assert StatusCode.BAD_REQUEST_TYPE == 4008
        assert StatusCode.INVALID_EMAIL == 4108
        assert StatusCode.CONFLICT_CELEB == 7001

    def test_structured_values(self):
        assert StatusCode.LT_BADREQUEST == 400000
        assert StatusCode.LT_NOTFOUND_USER == 404001
        assert StatusCode.LT_CONFLICT_ORDER_NOT_PROCESSED == 409008
        assert StatusCode.LT_DEADLINE_GOOGLE_VERTEX_EXCEEDED == 504001

    def test_member_carries_message(self):
        assert StatusCode.OK.message == "OK"
        assert StatusCode.NOT_FOUND.message == "Not Found"
        assert StatusCode.I_AM_A_TEAPOT.message == "I'm a teapot"
        assert StatusCode.INVALID_MAIL_FORMAT.message == "Invalid mail format"

    def test_lookup_by_value(self):
        assert StatusCode(404) is StatusCode.NOT_FOUND

    def test_codes_are_unique(self):
        values = [member.value for member in StatusCode]
        assert len(values) == len(set(values))

    def test_no_code_between_bands(self):
        assert all(not 600 <= member.value < 4000 for member in StatusCode)


class TestMessageFor:
    def test_standard_message(self):
        assert message_for(200) == "OK"
        assert message_for(503) == "Service Unavailable"

    def test_accepts_enum_member(self):
        assert message_for(StatusCode.NOT_FOUND) == "Not Found"

    def test_custom_message(self):
        assert message_for(4000) == "SUCCESS"
        assert message_for(4005) == "Wrong email or password"

    def test_structured_message(self):
        assert message_for(404001) == "User not found"

    def test_unregistered_returns_none(self):
        assert message_for(299) is None
        assert message_for(4999) is None
        assert message_for(0) is None
        assert message_for(-1) is None

    def test_is_registered(self):
        assert is_registered(404) is True
        assert is_registered(4999) is False


class TestStatusName:
    def test_known_code(self):
        assert status_name(404) == "NOT_FOUND"
        assert status_name(404001) == "LT_NOTFOUND_USER"

    def test_unknown_code(self):
        assert status_name(299) is None


class TestStructuredCodes:
    def test_compose(self):
        assert structured_code(404, 1) == 404001
        assert structured_code(400, 0) == 400000
        assert structured_code(599, 999) == 599999

    def test_compose_matches_catalog(self):
        assert structured_code(409, 5) == StatusCode.LT_CONFLICT_NICKNAME

    @pytest.mark.parametrize("base", [99, 600, 4000])
    def test_compose_rejects_bad_base(self, base):
        with pytest.raises(InvalidArgumentError):
            structured_code(base, 1)

    @pytest.mark.parametrize("sequence", [-1, 1000])
    def test_compose_rejects_bad_sequence(self, sequence):
        with pytest.raises(InvalidArgumentError):
            structured_code(404, sequence)

    def test_split(self):
        assert split_structured(404001) == (404, 1)
        assert split_structured(StatusCode.LT_RESET_CONTENT_TOKEN) == (205, 1)

    @pytest.mark.parametrize("code", [404, 4008, 7001, 99999, 600000])
    def test_split_outside_band(self, code):
        assert split_structured(code) is None


# ---------------------------------------------------------------------------
# Paging
# ---------------------------------------------------------------------------


class TestPaging:
    def test_positional_construction(self):
        paging = Paging(1, 10, 100)
        assert paging.page == 1
        assert paging.size == 10
        assert paging.total == 100

    def test_all_fields_optional(self):
        paging = Paging()
        assert paging.page is None
        assert paging.size is None
        assert paging.total is None

    def test_setters_are_fluent(self):
        paging = Paging()
        assert paging.set_page(0).set_size(1).set_total(0) is paging
        assert (paging.page, paging.size, paging.total) == (0, 1, 0)

    def test_none_is_noop(self):
        paging = Paging(2, 20, 40)
        paging.set_page(None).set_size(None).set_total(None)
        assert (paging.page, paging.size, paging.total) == (2, 20, 40)

    def test_negative_page_rejected(self):
        with pytest.raises(InvalidArgumentError, match="Page number"):
            Paging().set_page(-1)

    @pytest.mark.parametrize("size", [0, -1])
    def test_non_positive_size_rejected(self, size):
        with pytest.raises(InvalidArgumentError, match="Page size"):
            Paging().set_size(size)

    def test_negative_total_rejected(self):
        with pytest.raises(InvalidArgumentError, match="Total count"):
            Paging().set_total(-1)

    def test_constructor_validates(self):
        with pytest.raises(InvalidArgumentError) as exc_info:
            Paging(1, 0, 100)
        assert exc_info.value.details == {"size": 0}

    @pytest.mark.parametrize("value", ["1", 1.5, True, [1]])
    def test_non_integer_rejected(self, value):
        with pytest.raises(InvalidArgumentError):
            Paging().set_page(value)

    def test_failed_set_keeps_previous_value(self):
        paging = Paging(page=3)
        with pytest.raises(InvalidArgumentError):
            paging.set_page(-5)
        assert paging.page == 3

    def test_no_cross_field_validation(self):
        paging = Paging(page=50, size=10, total=5)
        assert paging.page == 50

    def test_invalid_argument_is_value_and_type_error(self):
        with pytest.raises(ValueError):
            Paging().set_size(0)
        with pytest.raises(TypeError):
            Paging().set_size(0)

    def test_to_dict_omits_absent_fields(self):
        assert Paging(1, 10, 100).to_dict() == {"page": 1, "size": 10, "total": 100}
        assert Paging(page=0).to_dict() == {"page": 0}
        assert Paging().to_dict() == {}


# ---------------------------------------------------------------------------
# Response envelope
# ---------------------------------------------------------------------------


class TestPagingSnapshot:
    def test_copies_fields(self):
        snapshot = PagingSnapshot.of(Paging(2, 20))
        assert snapshot.to_dict() == {"page": 2, "size": 20}

    def test_of_snapshot_returns_same_instance(self):
        snapshot = PagingSnapshot.of(Paging(page=1))
        assert PagingSnapshot.of(snapshot) is snapshot

    @pytest.mark.parametrize("setter", ["set_page", "set_size", "set_total"])
    def test_setters_rejected(self, setter):
        snapshot = PagingSnapshot.of(Paging(1, 10, 100))
        with pytest.raises(InvalidArgumentError, match="read-only"):
            getattr(snapshot, setter)(5)
        assert snapshot.to_dict() == {"page": 1, "size": 10, "total": 100}

    def test_none_setter_is_noop(self):
        snapshot = PagingSnapshot.of(Paging(page=1))
        assert snapshot.set_page(None) is snapshot


class TestResponse:
    def test_required_keys_always_present(self):
        resp = Response(status=204, message="No Content")
        assert resp.to_dict() == {"status": 204, "message": "No Content", "data": None}

    def test_optional_keys_present_when_set(self):
        resp = Response(
            status=200,
            message="OK",
            data=[1, 2, 3],
            paging=Paging(1, 10, 100),
            metadata={"version": "1.0.0"},
        )
        assert resp.to_dict() == {
            "status": 200,
            "message": "OK",
            "data": [1, 2, 3],
            "paging": {"page": 1, "size": 10, "total": 100},
            "metadata": {"version": "1.0.0"},
        }

    def test_json_matches_dict(self):
        resp = Response(status=200, message="OK", data={"a": 1}, metadata={"k": "v"})
        assert json.loads(resp.to_json()) == resp.to_dict()

    def test_json_omits_absent_keys(self):
        parsed = json.loads(Response(status=200, message="OK").to_json())
        assert "paging" not in parsed
        assert "metadata" not in parsed

    def test_is_frozen(self):
        resp = Response(status=200, message="OK")
        with pytest.raises(ValidationError):
            resp.status = 500  # type: ignore[misc]

    def test_constructed_paging_and_metadata_are_detached(self):
        paging = Paging(1, 10)
        metadata = {"k": "v"}
        resp = Response(status=200, message="OK", paging=paging, metadata=metadata)

        paging.set_page(9)
        metadata["k"] = "changed"

        assert isinstance(resp.paging, PagingSnapshot)
        assert resp.to_dict()["paging"] == {"page": 1, "size": 10}
        assert resp.to_dict()["metadata"] == {"k": "v"}
        with pytest.raises(TypeError):
            resp.metadata["k"] = "changed"  # type: ignore[index]

    def test_generic_with_list_data(self):
        resp = Response[list[int]](status=200, message="OK", data=[1, 2, 3])
        assert resp.data == [1, 2, 3]
