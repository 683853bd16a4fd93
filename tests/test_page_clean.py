from __future__ import annotations

from fieldcard.text_clean.page_clean import normalize_whitespace, select_page_text


def test_long_selection_wins():
    sel = "x" * 81
    assert select_page_text(f"  {sel}  ", "body text") == sel


def test_short_selection_falls_back_to_body():
    assert select_page_text("x" * 80, "body text") == "body text"
    assert select_page_text(None, "body text") == "body text"


def test_body_is_cut():
    assert len(select_page_text("", "b" * 20000)) == 12000
    assert select_page_text(None, None) == ""


def test_normalize_whitespace():
    raw = "Step  one\t\there \r\n\r\n\r\n\r\nStep two   \n"
    assert normalize_whitespace(raw) == "Step one here\n\nStep two"
