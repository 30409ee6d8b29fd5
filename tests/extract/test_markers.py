from autopatch.extract import pair_markers, tokenize_markers
from autopatch.extract.fences import outer_fence_body


def test_tokenize_finds_start_and_end_in_order():
    text = "<!-- FILE_START: a.txt -->x<!--FILE_END:a.txt-->"
    tokens = tokenize_markers(text)
    assert [(t.kind, t.path) for t in tokens] == [("start", "a.txt"), ("end", "a.txt")]
    assert tokens[0].start == 0
    assert tokens[1].end == len(text)


def test_pairing_requires_identical_path():
    tokens = tokenize_markers(
        "<!-- FILE_START: a -->\n<!-- FILE_END: a -->\n"
        "<!-- FILE_START: b -->\n<!-- FILE_END: B -->"
    )
    pairs = pair_markers(tokens)
    assert [(s.path, e.path) for s, e in pairs] == [("a", "a")]


def test_stray_end_marker_is_skipped():
    tokens = tokenize_markers("<!-- FILE_END: a -->\n<!-- FILE_START: b -->\n<!-- FILE_END: b -->")
    assert [s.path for s, _ in pair_markers(tokens)] == ["b"]


def test_outer_fence_uses_last_closing_fence():
    region = "\n```md\nA\n```\nB\n```\n"
    assert outer_fence_body(region) == ("md", "A\n```\nB\n")


def test_outer_fence_rejects_missing_closer():
    assert outer_fence_body("\n```\nonly an opener\n") is None
    assert outer_fence_body("\nno fence at all\n") is None


def test_pairing_skips_markers_inside_a_claimed_block():
    tokens = tokenize_markers(
        "<!-- FILE_START: outer -->\n"
        "<!-- FILE_START: inner -->\n<!-- FILE_END: inner -->\n"
        "<!-- FILE_END: outer -->\n"
        "<!-- FILE_START: next -->\n<!-- FILE_END: next -->"
    )
    assert [(s.path, e.path) for s, e in pair_markers(tokens)] == [("outer", "outer"), ("next", "next")]


def test_unmatched_start_is_dropped_and_scanning_resumes():
    tokens = tokenize_markers(
        "<!-- FILE_START: lost -->\n"
        "<!-- FILE_START: kept -->\n<!-- FILE_END: kept -->"
    )
    assert [s.path for s, _ in pair_markers(tokens)] == ["kept"]
