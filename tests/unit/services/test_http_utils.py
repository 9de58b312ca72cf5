import pytest

from cpqsync.services.http_utils import is_success, response_detail


@pytest.mark.parametrize("status_code, expected", [
    (200, True), (201, True), (204, True), (299, True),
    (199, False), (301, False), (404, False), (500, False),
])
def test_is_success(make_response, status_code, expected):
    assert is_success(make_response(status_code, {})) is expected


def test_response_detail_prefers_json(make_response):
    assert response_detail(make_response(400, {"error": "invalid_grant"})) == {"error": "invalid_grant"}


def test_response_detail_falls_back_to_text(make_response):
    assert response_detail(make_response(502, text="Bad Gateway")) == "Bad Gateway"
