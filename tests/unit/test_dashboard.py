"""Tests for the admin dashboard and its command line front end."""

import json
import random
from unittest.mock import MagicMock, patch

import pytest

import village_dashboard
from village_dashboard import (
    AdminDashboard,
    DashboardError,
    generate_dummy_reviews,
    parse_umkm_json,
    status_badge,
)


UMKM = {
    "id": 7,
    "name": "Yaris Cookies",
    "categoryId": 2,
    "currentCondition": "Aktif",
    "productImages": ["a.jpg"],
    "reviews": [],
    "publishDate": "2025-05-16",
}


@pytest.fixture
def dashboard(mock_api):
    return AdminDashboard(mock_api)


class TestParseUmkmJson:
    def test_drops_id_and_decodes_lists(self):
        text = json.dumps({"id": 3, "name": "Madu", "productImages": '["m.jpg"]', "reviews": ""})
        assert parse_umkm_json(text) == {"name": "Madu", "productImages": ["m.jpg"], "reviews": []}

    @pytest.mark.parametrize("text", ["{not json", "[1, 2]", '{"reviews": "[oops"}', '{"reviews": "{}"}'])
    def test_rejects_bad_input(self, text):
        with pytest.raises(DashboardError):
            parse_umkm_json(text)


def test_dummy_reviews():
    reviews = generate_dummy_reviews(count=4, rng=random.Random(1))
    assert len(reviews) == 4
    assert all(r["rating"] in (4, 5) for r in reviews)
    assert all(r["author"] and r["comment"] and r["date"] for r in reviews)


def test_status_badge():
    assert status_badge({"currentCondition": "Aktif"}) == "success"
    assert status_badge({"currentCondition": "Tutup"}) == "destructive"


class TestAdminDashboard:
    def test_create_adds_dummy_reviews(self, dashboard, mock_api):
        mock_api.create_umkm.return_value = ({**UMKM, "id": 8}, None)

        created = dashboard.create_umkm({"name": "Baru", "categoryId": 1})

        assert created["id"] == 8
        payload = mock_api.create_umkm.call_args.args[0]
        assert len(payload["reviews"]) == 3
        mock_api.list_umkms.assert_called()

    def test_create_keeps_given_reviews(self, dashboard, mock_api):
        mock_api.create_umkm.return_value = (UMKM, None)
        dashboard.create_umkm({"name": "Baru", "categoryId": 1, "reviews": []})
        assert mock_api.create_umkm.call_args.args[0]["reviews"] == []

    def test_update_strips_id(self, dashboard, mock_api):
        mock_api.update_umkm.return_value = (UMKM, None)
        dashboard.update_umkm(7, {"id": 1, "name": "X"})
        mock_api.update_umkm.assert_called_once_with(7, {"name": "X"})

    def test_delete_moves_to_recycle_bin(self, dashboard, mock_api):
        mock_api.list_umkms.return_value = ([UMKM], None)
        mock_api.delete_umkm.return_value = (True, None)
        dashboard.refresh()

        dashboard.delete_umkm(7)

        mock_api.delete_umkm.assert_called_once_with(7)
        mock_api.get_umkm.assert_not_called()
        assert dashboard.recycle_bin == [UMKM]

    def test_delete_fetches_unknown_business(self, dashboard, mock_api):
        mock_api.get_umkm.return_value = (UMKM, None)
        mock_api.delete_umkm.return_value = (True, None)

        dashboard.delete_umkm(7)

        assert dashboard.recycle_bin == [UMKM]

    def test_failed_delete_keeps_bin_empty(self, dashboard, mock_api):
        mock_api.get_umkm.return_value = (UMKM, None)
        mock_api.delete_umkm.return_value = (False, {"status_code": 404, "message": "UMKM not found"})

        with pytest.raises(DashboardError) as excinfo:
            dashboard.delete_umkm(7)

        assert excinfo.value.status_code == 404
        assert dashboard.recycle_bin == []

    def test_restore_creates_new_record(self, dashboard, mock_api):
        dashboard.recycle_bin = [UMKM]
        mock_api.create_umkm.return_value = ({**UMKM, "id": 12}, None)

        restored = dashboard.restore_umkm(7)

        assert restored["id"] == 12
        payload = mock_api.create_umkm.call_args.args[0]
        assert "id" not in payload
        assert payload["publishDate"] == "2025-05-16"
        assert dashboard.recycle_bin == []

    def test_restore_unknown(self, dashboard):
        with pytest.raises(DashboardError):
            dashboard.restore_umkm(1)

    def test_categories(self, dashboard, mock_api):
        mock_api.create_category.return_value = ({"id": 1, "name": "Jasa", "slug": "jasa"}, None)
        mock_api.update_category.return_value = ({"id": 1, "name": "Jasa Cuci", "slug": "jasa"}, None)
        mock_api.delete_category.return_value = (True, None)
        mock_api.list_categories.return_value = ([{"id": 1, "name": "Jasa", "slug": "jasa"}], None)

        dashboard.create_category("Jasa")
        mock_api.create_category.assert_called_once_with({"name": "Jasa"})
        assert dashboard.category_name(1) == "Jasa"

        dashboard.update_category(1, name="Jasa Cuci")
        mock_api.update_category.assert_called_once_with(1, {"name": "Jasa Cuci"})

        dashboard.delete_category(1)
        mock_api.delete_category.assert_called_once_with(1)

    def test_unwrap(self):
        assert AdminDashboard.unwrap([1], None) == [1]
        with pytest.raises(DashboardError, match="Slug exists"):
            AdminDashboard.unwrap(None, {"status_code": 409, "message": "Slug exists"})


class TestCommandLine:
    def test_list(self, mock_api, capsys):
        mock_api.list_umkms.return_value = ([UMKM], None)
        with patch.object(village_dashboard, "VillagePromoAPI", return_value=mock_api) as api_cls:
            code = village_dashboard.main(["--base-url", "http://x/api", "list"])

        assert code == 0
        api_cls.assert_called_once_with(base_url="http://x/api")
        assert json.loads(capsys.readouterr().out) == [UMKM]

    def test_create_from_file(self, mock_api, tmp_path, capsys):
        path = tmp_path / "umkm.json"
        path.write_text(json.dumps({"name": "Madu", "categoryId": 3, "reviews": []}), encoding="utf-8")
        mock_api.create_umkm.return_value = ({"id": 1, "name": "Madu"}, None)
        with patch.object(village_dashboard, "VillagePromoAPI", return_value=mock_api):
            code = village_dashboard.main(["create", "--json", str(path)])

        assert code == 0
        mock_api.create_umkm.assert_called_once_with({"name": "Madu", "categoryId": 3, "reviews": []})

    def test_api_error_exit_code(self, mock_api, capsys):
        mock_api.get_umkm.return_value = (None, {"status_code": 404, "message": "UMKM not found"})
        with patch.object(village_dashboard, "VillagePromoAPI", return_value=mock_api):
            code = village_dashboard.main(["show", "5"])

        assert code == 1
        assert "UMKM not found" in capsys.readouterr().err

    def test_missing_file(self, mock_api, tmp_path):
        with patch.object(village_dashboard, "VillagePromoAPI", return_value=mock_api):
            assert village_dashboard.main(["create", "--json", str(tmp_path / "nope.json")]) == 1
