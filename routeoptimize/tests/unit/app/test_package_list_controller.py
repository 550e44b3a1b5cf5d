from __future__ import annotations

import pytest

from routeoptimize.adapters.shell_layout import build_memory_shell
from routeoptimize.app.package_list_controller import PackageListController
from routeoptimize.domain.errors import MissingElementError
from routeoptimize.domain.packages import PackageCard, PackageStatus
from routeoptimize.tests.helpers import make_session, visible_card_ids
from routeoptimize.usecases.element_access import ElementAccess
from routeoptimize.viewmodels.shell_state import ShellState


def test_active_tab_shows_only_active_cards() -> None:
    session, ui, _ = make_session()

    shown = session.packages.set_tab("active", "pkg-tab-active")

    visible = visible_card_ids(ui)
    assert shown == len(visible) == 3
    assert all(ui.get_element(i).data["status"] == "active" for i in visible)


def test_tab_selection_is_exclusive() -> None:
    session, ui, _ = make_session()
    pending_tab = ui.get_element("pkg-tab-pending")

    session.packages.set_tab(PackageStatus.PENDING, pending_tab)

    active_tabs = [t.element_id for t in ui.query_all(".pkg-tab") if "active" in t.classes]
    assert active_tabs == ["pkg-tab-pending"]
    assert len(visible_card_ids(ui)) == 2
    assert session.state.active_tab is PackageStatus.PENDING


def test_completed_tab_is_empty_for_demo_data() -> None:
    session, ui, _ = make_session()

    assert session.packages.set_tab("completed", "pkg-tab-completed") == 0
    assert visible_card_ids(ui) == []


def test_completed_tab_filters_generically_when_data_has_completed_cards() -> None:
    cards = (
        PackageCard("PKG-1", "A", "1 Road", PackageStatus.ACTIVE),
        PackageCard("PKG-2", "B", "2 Road", PackageStatus.COMPLETED),
    )
    ui = build_memory_shell(cards)
    controller = PackageListController(
        presentation=ui, state=ShellState(), elements=ElementAccess(ui)
    )

    assert controller.set_tab("completed", "pkg-tab-completed") == 1
    assert visible_card_ids(ui) == ["pkg-card-pkg-2"]


def test_unknown_tab_is_rejected() -> None:
    session, _, _ = make_session()
    with pytest.raises(ValueError):
        session.packages.set_tab("archived", "pkg-tab-active")


def test_toggle_expanded_is_per_card() -> None:
    session, ui, _ = make_session()
    first, second = ui.query_all(".pkg-card")[:2]

    assert session.packages.toggle_expanded(first) is True
    assert session.packages.toggle_expanded(second.element_id) is True
    assert "open" in first.classes and "open" in second.classes

    assert session.packages.toggle_expanded(first) is False
    assert "open" not in first.classes
    assert "open" in second.classes


def test_filter_by_text_is_case_insensitive_substring() -> None:
    session, ui, _ = make_session()

    shown = session.packages.filter_by_text("drv-2026")

    assert shown == 3
    assert visible_card_ids(ui) == [
        "pkg-card-pkg-drv-2026-0141",
        "pkg-card-pkg-drv-2026-0142",
        "pkg-card-pkg-drv-2026-0157",
    ]


def test_filter_matches_any_rendered_text() -> None:
    session, ui, _ = make_session()
    assert session.packages.filter_by_text("ELM STREET") == 1
    assert visible_card_ids(ui) == ["pkg-card-pkg-rtn-2026-0034"]


def test_empty_query_shows_every_card() -> None:
    session, ui, _ = make_session()
    session.packages.filter_by_text("nothing matches this")
    assert visible_card_ids(ui) == []

    assert session.packages.filter_by_text("") == 5
    assert session.state.search_query == ""


def test_unknown_tab_control_keeps_current_tab_active() -> None:
    session, ui, _ = make_session()

    with pytest.raises(MissingElementError):
        session.packages.set_tab("pending", "pkg-tab-unknown")

    active_tabs = [t.element_id for t in ui.query_all(".pkg-tab") if "active" in t.classes]
    assert active_tabs == ["pkg-tab-active"]
    assert session.state.active_tab is PackageStatus.ACTIVE
