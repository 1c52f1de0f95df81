"""Behaviour of the public village promotion site.

The web front end is a thin rendering layer; what it shows is decided
here, on top of :class:`village_promo_client.VillagePromoAPI`:

* :class:`HomePage` – loads the profile, categories and businesses and
  exposes the hero and profile sections.
* :class:`DirectoryView` – the business directory with its category
  filter and "show more" button.  Pagination happens here, not in the
  API.
* :class:`MapPicker` – the location list next to the embedded map.
* :func:`business_detail` – data for a single business page.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from village_promo_client import VillagePromoAPI


logger = logging.getLogger(__name__)

INITIAL_VISIBLE = 6
SHOW_MORE_STEP = 3
UNKNOWN_CATEGORY_LABEL = "Kategori"


def parse_coordinates(value: Optional[str]) -> Optional[Tuple[float, float]]:
    """Parse a ``"lat,lng"`` string into a pair of floats.

    Returns ``None`` for empty or malformed input.
    """
    if not value:
        return None
    parts = value.split(",")
    if len(parts) != 2:
        return None
    try:
        return float(parts[0]), float(parts[1])
    except ValueError:
        return None


class DirectoryView:
    """Filterable, incrementally revealed list of businesses.

    The directory starts with every business and ``INITIAL_VISIBLE``
    cards shown.  Choosing a category narrows the list; choosing
    ``None`` shows all again.  "Show more" reveals ``SHOW_MORE_STEP``
    further cards until the list is exhausted, after which the next
    press collapses it back to the initial count.
    """

    def __init__(self, umkms: List[Dict[str, Any]], categories: List[Dict[str, Any]]) -> None:
        self.umkms = list(umkms)
        self.categories = list(categories)
        self.selected_category_id: Optional[int] = None
        self.visible_count = INITIAL_VISIBLE

    @property
    def show_all(self) -> bool:
        return self.selected_category_id is None

    def select_category(self, category_id: Optional[int]) -> None:
        self.selected_category_id = category_id

    @property
    def filtered(self) -> List[Dict[str, Any]]:
        if self.show_all:
            return list(self.umkms)
        return [u for u in self.umkms if u.get("categoryId") == self.selected_category_id]

    @property
    def visible(self) -> List[Dict[str, Any]]:
        return self.filtered[: self.visible_count]

    @property
    def has_more(self) -> bool:
        return self.visible_count < len(self.filtered)

    def show_more(self) -> None:
        total = len(self.filtered)
        if self.visible_count < total:
            self.visible_count = min(self.visible_count + SHOW_MORE_STEP, total)
        else:
            self.visible_count = INITIAL_VISIBLE

    def category_name(self, category_id: Any) -> str:
        for category in self.categories:
            if category.get("id") == category_id:
                return category.get("name", UNKNOWN_CATEGORY_LABEL)
        return UNKNOWN_CATEGORY_LABEL


@dataclass
class MapMarker:
    id: int
    name: str
    address: str
    position: Optional[Tuple[float, float]]
    maps1: str = ""
    maps2: str = ""


class MapPicker:
    """Location list and embedded map.

    Picking a business elsewhere on the page (:meth:`focus`) shows its
    overview map (``maps1``); clicking it in the location list
    (:meth:`click`) shows the detailed map (``maps2``).
    """

    def __init__(self, umkms: List[Dict[str, Any]]) -> None:
        self.markers: List[MapMarker] = [
            MapMarker(
                id=u["id"],
                name=u.get("name", ""),
                address=u.get("address", ""),
                position=parse_coordinates(u.get("coordinates")),
                maps1=u.get("maps1", ""),
                maps2=u.get("maps2", ""),
            )
            for u in umkms
        ]
        self.selected_id: Optional[int] = None
        self.map_src: str = self.markers[0].maps1 if self.markers else ""

    def _marker(self, marker_id: int) -> Optional[MapMarker]:
        for marker in self.markers:
            if marker.id == marker_id:
                return marker
        return None

    def focus(self, marker_id: int) -> None:
        self._select(marker_id, "maps1")

    def click(self, marker_id: int) -> None:
        self._select(marker_id, "maps2")

    def _select(self, marker_id: int, attr: str) -> None:
        marker = self._marker(marker_id)
        if marker is None:
            logger.debug("No map marker for business %s", marker_id)
            return
        self.selected_id = marker_id
        url = getattr(marker, attr)
        if url:
            self.map_src = url


@dataclass
class HomePage:
    """Everything the landing page renders, loaded in one go."""

    profile: Optional[Dict[str, Any]]
    categories: List[Dict[str, Any]] = field(default_factory=list)
    umkms: List[Dict[str, Any]] = field(default_factory=list)
    errors: List[Dict[str, Any]] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.directory = DirectoryView(self.umkms, self.categories)
        self.map = MapPicker(self.umkms)

    @classmethod
    def load(cls, client: VillagePromoAPI) -> "HomePage":
        """Fetch the page data.  Failed sections are left empty and recorded in ``errors``."""
        errors = []
        profile, error = client.get_village_profile()
        if error:
            errors.append(error)
        categories, error = client.list_categories()
        if error:
            errors.append(error)
        umkms, error = client.list_umkms()
        if error:
            errors.append(error)
        return cls(profile=profile, categories=categories, umkms=umkms, errors=errors)

    @property
    def hero(self) -> Dict[str, str]:
        if not self.profile:
            return {"title": "", "subtitle": ""}
        return {"title": self.profile.get("name", ""), "subtitle": self.profile.get("description", "")}

    @property
    def profile_section(self) -> Dict[str, Any]:
        p = self.profile or {}
        return {
            "history": p.get("history", ""),
            "vision": p.get("vision", ""),
            "mission": list(p.get("mission") or []),
            "stats": {
                "population": p.get("population", 0),
                "umkmCount": p.get("umkmCount", 0),
                "hamletCount": p.get("hamletCount", 0),
            },
        }

    def view_on_map(self, umkm_id: int) -> None:
        """The "view location" button on a directory card."""
        self.map.focus(umkm_id)


def average_rating(reviews: List[Dict[str, Any]]) -> Optional[float]:
    ratings = [r["rating"] for r in reviews if isinstance(r.get("rating"), (int, float))]
    if not ratings:
        return None
    return round(sum(ratings) / len(ratings), 1)


def business_detail(client: VillagePromoAPI, umkm_id: Any) -> Optional[Dict[str, Any]]:
    """Data for the business detail page, or ``None`` if it cannot be shown."""
    umkm, error = client.get_umkm(umkm_id)
    if error or not umkm:
        return None
    reviews = umkm.get("reviews") or []
    return {
        **umkm,
        "position": parse_coordinates(umkm.get("coordinates")),
        "averageRating": average_rating(reviews),
        "reviewCount": len(reviews),
    }
