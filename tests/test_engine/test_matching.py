from acekey.matching import (
    base_pool,
    filter_candidates,
    filter_exact_matches,
    match_base_full_key,
    match_exact_case,
    match_whole_label,
)
from acekey.runes import build_candidates


def indices(candidates):
    return [c.index for c in candidates]


def test_base_pool_marker_includes_long_flags():
    candidates = build_candidates(["--long", "-s", "git"])
    assert indices(base_pool(candidates, "-")) == [0, 1]
    assert indices(base_pool(candidates, "g")) == [2]


def test_filter_candidates_lone_marker():
    candidates = build_candidates(["--long", "-s", "git"])
    assert indices(filter_candidates(candidates, "-", "-")) == [0, 1]


def test_filter_candidates_prefix():
    candidates = build_candidates(["git", "gitk", "grep"])
    assert indices(filter_candidates(candidates, "gi", "g")) == [0, 1]
    assert indices(filter_candidates(candidates, "gx", "g")) == []


def test_filter_candidates_uses_collapsed_form():
    candidates = build_candidates(["jjui", "ju"])
    assert indices(filter_candidates(candidates, "jui", "j")) == [0]


def test_match_whole_label():
    candidates = build_candidates(["cp", "cat"])
    match = match_whole_label(candidates, "cp", "cp", "c")
    assert match is not None and match.index == 0


def test_match_whole_label_keeps_shared_left_unit_ambiguous():
    candidates = build_candidates(["c", "cp", "cat"])
    assert match_whole_label(candidates, "c", "c", "c") is None

    lonely = build_candidates(["c", "x"])
    match = match_whole_label(lonely, "c", "c", "c")
    assert match is not None and match.index == 0


def test_match_exact_case_prefers_original_case():
    candidates = build_candidates(["Git", "gitk"])
    assert match_exact_case(candidates, "G").index == 0
    assert match_exact_case(candidates, "g").index == 1
    assert match_exact_case(candidates, "") is None


def test_match_exact_case_ambiguous():
    candidates = build_candidates(["git", "gitk"])
    assert match_exact_case(candidates, "gi") is None


def test_filter_exact_matches():
    assert indices(filter_exact_matches(build_candidates(["cat", "cut"]), "cat")) == [0]
    assert indices(
        filter_exact_matches(build_candidates(["cat", "catalog"]), "cat")
    ) == [0, 1]
    assert indices(filter_exact_matches(build_candidates(["cat", "cut"]), "")) == [0, 1]


def test_match_base_full_key_single_holder():
    candidates = build_candidates(["cat", "cut"])
    match = match_base_full_key(candidates, "c", "cu", "cu")
    assert match is not None and match.index == 1


def test_match_base_full_key_claim_walk():
    candidates = build_candidates(["abc", "abd"])
    match = match_base_full_key(candidates, "a", "ab", "ab")
    assert match is not None and match.index == 0


def test_match_base_full_key_no_match():
    candidates = build_candidates(["cat", "cut"])
    assert match_base_full_key(candidates, "c", "cx", "cx") is None
    assert match_base_full_key(candidates, "c", "c", "c") is None


def test_match_base_full_key_fallback_skips_holder():
    candidates = build_candidates(["cab", "cut"])
    match = match_base_full_key(candidates, "c", "cb", "cb")
    assert match is not None and match.index == 0
    assert match_base_full_key(candidates, "c", "cb", "cb", fallback=True) is None
