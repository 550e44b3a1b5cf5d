from __future__ import annotations

from routeoptimize.adapters.presentation_memory import MemoryPresentation
from routeoptimize.adapters.shell_layout import build_memory_shell


def test_selectors_match_ids_and_classes() -> None:
    ui = MemoryPresentation()
    parent = ui.add("outer", classes=("card",))
    child = ui.add("inner", parent=parent, classes=("toggle", "on"), text="x")

    assert ui.get_element("inner") is child
    assert ui.query_all("#outer") == [parent]
    assert ui.query_all(".card") == [parent]
    assert ui.query_descendant(parent, ".toggle") is child
    assert ui.query_descendant(child, ".toggle") is None


def test_text_content_includes_descendants() -> None:
    ui = MemoryPresentation()
    card = ui.add("card", text="PKG-1")
    ui.add(parent=card, text="12 Main St")
    ui.add(parent=card, text="")

    assert ui.text_content(card) == "PKG-1 12 Main St"


def test_toggle_class_with_force() -> None:
    ui = MemoryPresentation()
    el = ui.add("el")
    assert ui.toggle_class(el, "on") is True
    assert ui.toggle_class(el, "on", True) is True
    assert ui.toggle_class(el, "on", False) is False
    assert not ui.has_class(el, "on")


def test_confirm_uses_scripted_answers_then_default() -> None:
    ui = MemoryPresentation(default_confirm=False)
    ui.confirm_answers.extend([True])

    assert ui.confirm("first?") is True
    assert ui.confirm("second?") is False
    assert ui.prompts == ["first?", "second?"]


def test_shell_layout_starts_on_login() -> None:
    ui = build_memory_shell()
    screens = ui.query_all(".screen")

    assert [s.element_id for s in screens if "hidden" not in s.classes] == ["screen-login"]
    assert ui.get_element("admin-home-banner").visible is False
    assert ui.get_element("login-pw").value == ""


def test_shell_layout_omit_hides_element_from_lookups() -> None:
    ui = build_memory_shell(omit=("home-name",))
    assert ui.get_element("home-name") is None
    assert ui.get_element("home-greeting") is not None
