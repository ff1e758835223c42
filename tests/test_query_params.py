import pytest

from catapult.models import Order, QueryParams


class TestQueryParams:
    def test_empty_params_render_nothing(self):
        assert QueryParams().to_url() == ""

    def test_page_size_only(self):
        assert QueryParams(page_size=25).to_url() == "?pageSize=25"

    def test_all_params(self):
        params = QueryParams(page_size=10, id="5A0069D83F17CF0001777E55", order=Order.DESC)
        assert params.to_url() == "?pageSize=10&id=5A0069D83F17CF0001777E55&order=desc"

    def test_id_without_page_size(self):
        assert QueryParams(id="abc").to_url() == "?id=abc"

    @pytest.mark.parametrize("page_size", [1, 9, 101, 500])
    def test_page_size_passed_through(self, page_size):
        assert QueryParams(page_size=page_size).to_url() == f"?pageSize={page_size}"
