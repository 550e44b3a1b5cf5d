"""Package card records used by the package list screen.

The cards are read-only here: the list controller only filters them by
``status`` and toggles their expanded state in the presentation.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Union


class PackageStatus(str, Enum):
    ACTIVE = "active"
    PENDING = "pending"
    COMPLETED = "completed"


@dataclass(frozen=True)
class PackageCard:
    tracking_id: str
    recipient: str
    address: str
    status: PackageStatus
    eta: str = ""

    @property
    def element_id(self) -> str:
        return f"pkg-card-{self.tracking_id.lower()}"

    def summary_lines(self) -> Tuple[str, ...]:
        """Lines rendered on the card; the text filter searches all of them."""
        lines = [self.tracking_id, self.recipient, self.address]
        if self.eta:
            lines.append(f"ETA {self.eta}")
        return tuple(lines)


def parse_status(value: Union[PackageStatus, str]) -> PackageStatus:
    if isinstance(value, PackageStatus):
        return value
    if isinstance(value, str):
        try:
            return PackageStatus(value.strip().lower())
        except ValueError:
            pass
    raise ValueError(f"Unsupported package status: {value!r}")


# Demo route for the day. There is no completed package in this data set,
# so the "completed" tab filters down to nothing.
DEMO_PACKAGES: Tuple[PackageCard, ...] = (
    PackageCard(
        tracking_id="PKG-DRV-2026-0141",
        recipient="Maria Lopez",
        address="1420 Harbor Blvd, Suite 3",
        status=PackageStatus.ACTIVE,
        eta="10:15",
    ),
    PackageCard(
        tracking_id="PKG-DRV-2026-0142",
        recipient="Kenji Watanabe",
        address="88 Orchard Lane",
        status=PackageStatus.ACTIVE,
        eta="10:40",
    ),
    PackageCard(
        tracking_id="PKG-DRV-2026-0157",
        recipient="Aisha Bello",
        address="301 Riverside Dr, Apt 12B",
        status=PackageStatus.ACTIVE,
        eta="11:05",
    ),
    PackageCard(
        tracking_id="PKG-RTN-2026-0033",
        recipient="Northside Pharmacy",
        address="9 Market Square",
        status=PackageStatus.PENDING,
        eta="13:30",
    ),
    PackageCard(
        tracking_id="PKG-RTN-2026-0034",
        recipient="Tom Becker",
        address="57 Elm Street",
        status=PackageStatus.PENDING,
        eta="14:10",
    ),
)


__all__ = [
    "DEMO_PACKAGES",
    "PackageCard",
    "PackageStatus",
    "parse_status",
]
