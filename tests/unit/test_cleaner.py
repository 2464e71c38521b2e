"""Unit tests for the skills text helpers."""

import pytest

from cleaner import join_skills, parse_skills


@pytest.mark.unit
def test_parse_skills_trims_each_name():
    assert parse_skills("Go, Rust,  TypeScript") == ["Go", "Rust", "TypeScript"]


@pytest.mark.unit
def test_join_skills_uses_comma_space():
    assert join_skills(["Go", "Rust", "TypeScript"]) == "Go, Rust, TypeScript"


@pytest.mark.unit
def test_parse_then_join_normalizes_whitespace():
    assert join_skills(parse_skills("Go,Rust ,   TypeScript")) == "Go, Rust, TypeScript"


@pytest.mark.unit
def test_edge_separators_become_empty_entries():
    assert parse_skills(",Go,,Rust,") == ["", "Go", "", "Rust", ""]
    assert join_skills(parse_skills(",Go,,Rust,")) == ", Go, , Rust, "


@pytest.mark.unit
def test_empty_text_is_a_single_empty_skill():
    assert parse_skills("") == [""]
    assert join_skills([""]) == ""


@pytest.mark.unit
def test_newlines_are_trimmed_like_spaces():
    assert parse_skills("Python,\nSQL") == ["Python", "SQL"]
