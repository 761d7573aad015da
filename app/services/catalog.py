"""Service tier catalog backed by a JSON file.

The file is re-read whenever its modification time changes, so rate card
edits apply to the next request without a restart.
"""
import logging
from decimal import Decimal
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from pydantic import ValidationError

from app.core.config import settings
from app.core.enums import ServiceOption
from app.core.exceptions import CatalogError, TierNotFoundError, UnknownOptionError
from app.schemas.quote import OptionSelection
from app.schemas.tier import ServiceTier, TierCatalogData
from app.services.pricing import PricedOption

logger = logging.getLogger(__name__)


class TierCatalog:

    def __init__(self, path: Path):
        self.path = Path(path)
        self._data: Optional[TierCatalogData] = None
        self._mtime: Optional[int] = None

    def _load(self) -> TierCatalogData:
        try:
            mtime = self.path.stat().st_mtime_ns
        except FileNotFoundError:
            raise CatalogError(f"Tier catalog not found at {self.path}")

        if self._data is not None and mtime == self._mtime:
            return self._data

        try:
            data = TierCatalogData.model_validate_json(self.path.read_text(encoding="utf-8"))
        except ValidationError as e:
            logger.error(f"Invalid tier catalog {self.path}: {e}")
            raise CatalogError(f"Tier catalog at {self.path} is invalid")

        if self._data is not None:
            logger.info(f"Tier catalog changed on disk, reloaded {len(data.tiers)} tiers")
        self._data = data
        self._mtime = mtime
        return data

    def reload(self) -> None:
        self._data = None
        self._mtime = None
        self._load()

    def tiers(self) -> List[ServiceTier]:
        return list(self._load().tiers)

    def get_tier(self, tier_id: str) -> ServiceTier:
        for tier in self._load().tiers:
            if tier.id == tier_id:
                return tier
        raise TierNotFoundError(tier_id)

    def eligible_tiers(self, passengers: int = 1, suitcases: int = 0, backpacks: int = 0) -> List[ServiceTier]:
        """Tiers whose vehicle fits the party and its luggage."""
        eligible = []
        for tier in self._load().tiers:
            capacity = tier.capacity
            if capacity.passengers < passengers or capacity.suitcases < suitcases:
                continue
            if capacity.backpacks is not None and capacity.backpacks < backpacks:
                continue
            eligible.append(tier)
        return eligible

    def surcharges(self) -> Dict[ServiceOption, Decimal]:
        return dict(self._load().options)

    def resolve_options(self, selections: Iterable[OptionSelection]) -> List[PricedOption]:
        """Attach per-unit surcharges, merging repeated names and dropping zero quantities."""
        quantities: Dict[ServiceOption, int] = {}
        for selection in selections:
            quantities[selection.name] = quantities.get(selection.name, 0) + selection.quantity

        table = self._load().options
        priced = []
        for name, quantity in quantities.items():
            if quantity == 0:
                continue
            if name not in table:
                raise UnknownOptionError(str(name))
            priced.append(PricedOption(name=name, quantity=quantity, unit_surcharge=table[name]))
        return priced


catalog: Optional[TierCatalog] = None


def get_catalog() -> TierCatalog:
    global catalog
    if catalog is None:
        catalog = TierCatalog(settings.TIER_CATALOG_PATH)
    return catalog
