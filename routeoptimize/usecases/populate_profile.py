from __future__ import annotations

from dataclasses import dataclass

from .element_access import ElementAccess
from ..domain.profiles import Profile


@dataclass
class PopulateProfile:
    """Write one profile bundle into the home and settings screens.

    Every slot is resolved before anything is written, so a strict lookup
    failure leaves the previous profile fully in place.
    """

    elements: ElementAccess

    def __call__(self, profile: Profile) -> None:
        p = self.elements.presentation
        texts = {
            "home-greeting": profile.greeting,
            "home-name": profile.display_name,
            "home-avatar": profile.avatar_initials,
            "settings-name": profile.display_name,
            "settings-email": profile.email,
            "settings-driverid": profile.role_label,
            "settings-avatar": profile.avatar_initials,
        }
        visibility = {
            "admin-home-banner": profile.show_admin_banner,
            "driver-stats": profile.show_driver_stats,
        }
        resolved = {key: self.elements.require(key) for key in (*texts, *visibility)}

        for key, text in texts.items():
            if resolved[key] is not None:
                p.set_text(resolved[key], text)
        for key, visible in visibility.items():
            if resolved[key] is not None:
                p.set_visible(resolved[key], visible)
