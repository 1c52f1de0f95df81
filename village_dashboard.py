#!/usr/bin/env python3
"""
Admin dashboard for the village promotion site.

:class:`AdminDashboard` implements what the dashboard does with
business and category records: create (from the form or from a pasted
JSON document), edit, delete into a recycle bin, restore, and manage
categories.  The recycle bin lives only in the dashboard session; a
business deleted on the server is gone there, and restoring it creates
a new record (with a new id) from the copy kept in the bin.

The module also provides a small command line front end:

    python village_dashboard.py list
    python village_dashboard.py create --json new_umkm.json
    python village_dashboard.py category-add "Kerajinan"

The API base URL is taken from ``--base-url`` or the
``VILLAGE_API_BASE_URL`` environment variable.
"""

from __future__ import annotations

import argparse
import json
import logging
import os
import random
import sys
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from village_promo_client import VillagePromoAPI


logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:5000/api"

_DUMMY_AUTHORS = ["John Doe", "Jane Smith", "Mike Johnson", "Sarah Wilson", "David Brown"]
_DUMMY_COMMENTS = [
    "Pelayanannya sangat baik dan ramah!",
    "Produknya berkualitas, recommended!",
    "Harga terjangkau dan tempat nyaman",
    "Suka banget dengan produknya, akan kembali lagi",
    "Pelayanan cepat dan memuaskan",
]


class DashboardError(Exception):
    """An operation failed; ``status_code`` is the HTTP status if there was one."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def generate_dummy_reviews(count: int = 3, rng: Optional[random.Random] = None) -> List[Dict[str, Any]]:
    """Placeholder reviews attached to a new business until real ones arrive."""
    rng = rng or random.Random()
    now = datetime.now(timezone.utc).isoformat()
    return [
        {
            "author": rng.choice(_DUMMY_AUTHORS),
            "rating": rng.randint(4, 5),
            "comment": rng.choice(_DUMMY_COMMENTS),
            "date": now,
        }
        for _ in range(count)
    ]


def parse_umkm_json(text: str) -> Dict[str, Any]:
    """Parse a business pasted into the dashboard as JSON.

    The document must be a JSON object.  An ``id`` field is dropped so
    the server assigns a fresh one.  ``productImages`` and ``reviews``
    may be lists or JSON‑encoded strings.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise DashboardError(f"Invalid JSON: {exc.msg}") from exc
    if not isinstance(data, dict):
        raise DashboardError("Pasted JSON must be an object")
    data.pop("id", None)
    for key in ("productImages", "reviews"):
        value = data.get(key)
        if isinstance(value, str):
            try:
                decoded = json.loads(value) if value.strip() else []
            except json.JSONDecodeError as exc:
                raise DashboardError(f"Field '{key}' is not a valid JSON list") from exc
            if not isinstance(decoded, list):
                raise DashboardError(f"Field '{key}' must be a list")
            data[key] = decoded
    return data


def status_badge(umkm: Dict[str, Any]) -> str:
    """Badge variant for the status column of the business table."""
    return "success" if umkm.get("currentCondition") == "Aktif" else "destructive"


class AdminDashboard:
    """Dashboard operations on top of :class:`VillagePromoAPI`."""

    def __init__(self, client: VillagePromoAPI) -> None:
        self.client = client
        self.umkms: List[Dict[str, Any]] = []
        self.categories: List[Dict[str, Any]] = []
        self.recycle_bin: List[Dict[str, Any]] = []

    @staticmethod
    def unwrap(data: Any, error: Optional[Dict[str, Any]]) -> Any:
        if error:
            raise DashboardError(error.get("message") or "Request failed", error.get("status_code"))
        return data

    def refresh(self) -> None:
        """Reload the business and category tables."""
        self.umkms = self.unwrap(*self.client.list_umkms())
        self.categories = self.unwrap(*self.client.list_categories())

    def category_name(self, category_id: Any) -> Optional[str]:
        for category in self.categories:
            if category.get("id") == category_id:
                return category.get("name")
        return None

    # Businesses ----------------------------------------------------------
    def create_umkm(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Create a business.  New businesses get dummy reviews unless some are given."""
        payload = dict(data)
        if "reviews" not in payload:
            payload["reviews"] = generate_dummy_reviews()
        created = self.unwrap(*self.client.create_umkm(payload))
        logger.info("UMKM created successfully: %s", created.get("id"))
        self.refresh()
        return created

    def create_umkm_from_json(self, text: str) -> Dict[str, Any]:
        return self.create_umkm(parse_umkm_json(text))

    def update_umkm(self, umkm_id: int, data: Dict[str, Any]) -> Dict[str, Any]:
        payload = {k: v for k, v in data.items() if k != "id"}
        updated = self.unwrap(*self.client.update_umkm(umkm_id, payload))
        logger.info("UMKM updated successfully: %s", umkm_id)
        self.refresh()
        return updated

    def delete_umkm(self, umkm_id: int) -> None:
        """Delete a business and keep its last known copy in the recycle bin."""
        snapshot = next((u for u in self.umkms if u.get("id") == umkm_id), None)
        if snapshot is None:
            snapshot, _ = self.client.get_umkm(umkm_id)
        self.unwrap(*self.client.delete_umkm(umkm_id))
        if snapshot:
            self.recycle_bin.append(snapshot)
        logger.info("UMKM %s moved to recycle bin", umkm_id)
        self.refresh()

    def restore_umkm(self, umkm_id: int) -> Dict[str, Any]:
        """Re‑create a binned business.  The restored record gets a new id."""
        snapshot = next((u for u in self.recycle_bin if u.get("id") == umkm_id), None)
        if snapshot is None:
            raise DashboardError(f"UMKM {umkm_id} is not in the recycle bin")
        payload = {k: v for k, v in snapshot.items() if k != "id"}
        restored = self.unwrap(*self.client.create_umkm(payload))
        self.recycle_bin = [u for u in self.recycle_bin if u.get("id") != umkm_id]
        logger.info("UMKM %s restored as %s", umkm_id, restored.get("id"))
        self.refresh()
        return restored

    # Categories ----------------------------------------------------------
    def create_category(self, name: str, slug: Optional[str] = None) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"name": name}
        if slug:
            payload["slug"] = slug
        created = self.unwrap(*self.client.create_category(payload))
        self.refresh()
        return created

    def update_category(self, category_id: int, name: Optional[str] = None, slug: Optional[str] = None) -> Dict[str, Any]:
        payload = {k: v for k, v in {"name": name, "slug": slug}.items() if v is not None}
        updated = self.unwrap(*self.client.update_category(category_id, payload))
        self.refresh()
        return updated

    def delete_category(self, category_id: int) -> None:
        self.unwrap(*self.client.delete_category(category_id))
        self.refresh()


# ----------------------------------------------------------------------
# Command line interface
# ----------------------------------------------------------------------
def _read_json_file(path: str) -> str:
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Manage village UMKM listings and categories.")
    ap.add_argument(
        "--base-url",
        default=os.getenv("VILLAGE_API_BASE_URL", DEFAULT_BASE_URL),
        help="API base URL including the /api prefix",
    )
    sub = ap.add_subparsers(dest="command", required=True)

    sub.add_parser("list", help="List businesses")
    show = sub.add_parser("show", help="Show one business")
    show.add_argument("id", type=int)
    create = sub.add_parser("create", help="Create a business from a JSON file")
    create.add_argument("--json", required=True, dest="json_file")
    update = sub.add_parser("update", help="Update a business from a JSON file")
    update.add_argument("id", type=int)
    update.add_argument("--json", required=True, dest="json_file")
    delete = sub.add_parser("delete", help="Delete a business")
    delete.add_argument("id", type=int)

    sub.add_parser("categories", help="List categories")
    cat_add = sub.add_parser("category-add", help="Create a category")
    cat_add.add_argument("name")
    cat_add.add_argument("--slug")
    cat_update = sub.add_parser("category-update", help="Rename a category or change its slug")
    cat_update.add_argument("id", type=int)
    cat_update.add_argument("--name")
    cat_update.add_argument("--slug")
    cat_delete = sub.add_parser("category-delete", help="Delete a category")
    cat_delete.add_argument("id", type=int)

    sub.add_parser("profile", help="Show the village profile")
    return ap


def run_command(args: argparse.Namespace, dashboard: AdminDashboard) -> Any:
    client = dashboard.client
    if args.command == "list":
        return dashboard.unwrap(*client.list_umkms())
    if args.command == "show":
        return dashboard.unwrap(*client.get_umkm(args.id))
    if args.command == "create":
        return dashboard.create_umkm_from_json(_read_json_file(args.json_file))
    if args.command == "update":
        return dashboard.update_umkm(args.id, parse_umkm_json(_read_json_file(args.json_file)))
    if args.command == "delete":
        dashboard.delete_umkm(args.id)
        return {"deleted": args.id}
    if args.command == "categories":
        return dashboard.unwrap(*client.list_categories())
    if args.command == "category-add":
        return dashboard.create_category(args.name, args.slug)
    if args.command == "category-update":
        return dashboard.update_category(args.id, args.name, args.slug)
    if args.command == "category-delete":
        dashboard.delete_category(args.id)
        return {"deleted": args.id}
    if args.command == "profile":
        return dashboard.unwrap(*client.get_village_profile())
    raise DashboardError(f"Unknown command: {args.command}")


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.WARNING)
    dashboard = AdminDashboard(VillagePromoAPI(base_url=args.base_url))
    try:
        result = run_command(args, dashboard)
    except DashboardError as exc:
        print(f"[!] {exc.message}", file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"[!] {exc}", file=sys.stderr)
        return 1
    print(json.dumps(result, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
