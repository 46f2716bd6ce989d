from excerpt.trimmer import (
    MAX_TAIL_WORDS,
    cleanup,
    coarse_cut,
    refine,
    scan_boundaries,
    trim_excerpt,
)


def test_full_sentence_preserved():
    """A budget reaching just past the first sentence keeps exactly that sentence."""
    result = trim_excerpt("This is a sentence. This is another.", 20)
    assert result == "This is a sentence."


def test_tail_rules_under_budget():
    """Tails after the last clause stop survive only when short and closed."""
    text = "Buy now, save big today and more words after that."
    test_cases = [
        (text, 100, text),
        (text, 30, "Buy now..."),
        (text, 40, "Buy now..."),
        (text, 45, "Buy now..."),
        ("Buy now, big (today only) and more words here", 25, "Buy now, big (today only)"),
        ("Buy now, save big — today only! Offer ends soon and more words", 35, "Buy now, save big — today only!"),
        ("Buy now, save big — today only and more", 100, "Buy now..."),
    ]

    for source, budget, expected in test_cases:
        result = trim_excerpt(source, budget)
        assert result == expected, f"Trimming failed for '{source}' at {budget}"


def test_long_tail_dropped():
    result = trim_excerpt("First part, then many more words follow here without end", 200)
    assert result == "First part..."
    assert "without" not in result


def test_short_dangling_tail_dropped():
    assert trim_excerpt("It ended well. But then", 100) == "It ended well."


def test_short_closed_tail_kept():
    assert trim_excerpt("It ended. (Mostly true)", 100) == "It ended. (Mostly true)"


def test_long_closed_tail_dropped():
    text = "It ended. (Mostly true as far as anyone knows)"
    assert trim_excerpt(text, 100) == "It ended."


def test_no_boundary_gets_ellipsis():
    result = trim_excerpt("Hello world without any punctuation at all", 20)
    assert result == "Hello world without..."


def test_untrimmed_text_gets_no_ellipsis():
    test_cases = [
        ("Hello world", 100, "Hello world"),
        ("Hello world,", 100, "Hello world"),
        (": — hello there", 100, "hello there"),
    ]

    for text, budget, expected in test_cases:
        result = trim_excerpt(text, budget)
        assert result == expected, f"Trimming failed for '{text}'"


def test_ellipsis_never_outgrows_input():
    assert trim_excerpt("ab c", 2) == "ab"
    assert trim_excerpt("abc defg", 3) == "abc..."


def test_leading_clutter_not_counted_in_budget():
    test_cases = [
        ("&nbsp;Supercalifragilistic", 5, "Super..."),
        ("— Supercalifragilistic", 5, "Super..."),
        ("\u0301Super fragile", 5, "Super..."),
    ]

    for text, budget, expected in test_cases:
        result = trim_excerpt(text, budget)
        assert result == expected, f"Trimming failed for {text!r}"


def test_wide_script_stops():
    """Full-width stops close a sentence even with no space after them."""
    test_cases = [
        ("東京は大きい。Tokyo is big and busy every day", 25, "東京は大きい。"),
        ("最初の文です。次の文は長く続きます――そしてまだ続く", 20, "最初の文です。"),
        ("Tokyo is big. Tokyo is big and busy every day", 25, "Tokyo is big."),
    ]

    for text, budget, expected in test_cases:
        result = trim_excerpt(text, budget)
        assert result == expected, f"Trimming failed for '{text}'"

    scan = scan_boundaries("一。二。三")
    assert scan.last_stop == 4
    assert scan.tail_words == 1


def test_emoji_sequences_not_split():
    family = "\U0001f468\u200d\U0001f469\u200d\U0001f467"
    assert trim_excerpt(family + "family", 2) == family + "..."
    assert coarse_cut("👍\U0001f3fd ok", 1) == "👍\U0001f3fd"


def test_flags_not_split():
    flags = "\U0001f1ef\U0001f1f5\U0001f1eb\U0001f1f7 flags"
    test_cases = [
        (1, "\U0001f1ef\U0001f1f5"),
        (2, "\U0001f1ef\U0001f1f5"),
        (3, "\U0001f1ef\U0001f1f5\U0001f1eb\U0001f1f7"),
    ]

    for budget, expected in test_cases:
        result = coarse_cut(flags, budget)
        assert result == expected, f"Coarse cut split a flag at {budget}"


def test_empty_and_zero_budget():
    test_cases = [
        ("", 100),
        ("   \n\t ", 100),
        ("Hello world.", 0),
        ("Hello world.", -5),
        (None, 100),
        ("— — —", 10),
    ]

    for text, budget in test_cases:
        assert trim_excerpt(text, budget) == "", f"Expected empty excerpt for {text!r}, {budget}"


def test_leading_punctuation_stripped():
    result = trim_excerpt(": — hello there", 100)
    assert result == "hello there"
    for char in (":", "—", " "):
        assert not result.startswith(char)


def test_inverted_marks_kept_at_start():
    assert trim_excerpt("¿Qué pasa? Nada.", 100) == "¿Qué pasa? Nada."


def test_entities_count_as_one_character():
    assert trim_excerpt("Tom &amp; Jerry", 100) == "Tom & Jerry"
    # Decoded "A & B." is six characters, so the period is within reach.
    assert trim_excerpt("A &amp; B.", 5) == "A & B."


def test_texturized_output():
    test_cases = [
        ("It's a dog's life.", "It’s a dog’s life."),
        ("Wait -- what?", "Wait — what?"),
        ("Loading... please wait", "Loading…"),
    ]

    for text, expected in test_cases:
        result = trim_excerpt(text, 100)
        assert result == expected, f"Trimming failed for '{text}'"


def test_giant_word_cut_at_budget():
    assert trim_excerpt("a" * 300, 10) == "a" * 10 + "..."


def test_non_string_input_coerced():
    assert trim_excerpt(12345, 100) == "12345"


def test_idempotent_with_same_budget():
    test_cases = [
        ("This is a sentence. This is another.", 20),
        ("It ended well. But then", 100),
        ("Tom &amp; Jerry", 100),
        ("It ended. (Mostly true)", 100),
    ]

    for text, budget in test_cases:
        once = trim_excerpt(text, budget)
        assert trim_excerpt(once, budget) == once, f"Re-trimming changed '{once}'"


def test_never_longer_than_input():
    texts = [
        "Hello world without any punctuation at all",
        "ab c",
        "First part, then many more words follow here without end",
        "It ended well. But then",
    ]

    for text in texts:
        for budget in (1, 3, 5, 10, 20, 200):
            result = trim_excerpt(text, budget)
            assert len(result) <= len(text), f"'{result}' outgrew '{text}' at {budget}"


def test_coarse_cut():
    test_cases = [
        ("Hello world", 0, ""),
        ("Hello world", 100, "Hello world"),
        ("Hello world again", 8, "Hello"),
        ("Supercalifragilistic", 5, "Super"),
        ("Hi. There", 2, "Hi."),
        ("  padded text  ", 100, "padded text"),
    ]

    for text, budget, expected in test_cases:
        result = coarse_cut(text, budget)
        assert result == expected, f"Coarse cut failed for '{text}' at {budget}"


def test_coarse_cut_respects_budget():
    text = "One two, three—four. Five six seven eight nine ten."
    for budget in range(0, len(text) + 2):
        assert len(coarse_cut(text, budget)) <= budget + 1


def test_coarse_cut_keeps_combining_marks():
    assert coarse_cut("cafe\u0301 noir", 4) == "cafe\u0301"
    assert coarse_cut("abcde\u0301fgh", 5) == "abcde\u0301"


def test_scan_boundaries():
    scan = scan_boundaries("Done. One two three")
    assert scan.body_start == 0
    assert scan.last_stop == 5
    assert scan.sentence_open
    assert scan.tail_words == 3
    assert not scan.tail_closed

    scan = scan_boundaries("— Done!")
    assert scan.body_start == 2
    assert scan.last_stop == 7
    assert not scan.sentence_open


def test_stops_need_a_word_boundary():
    """Decimal points and detached symbols do not end a sentence."""
    assert scan_boundaries("Version 3.5 is out").last_stop is None
    assert scan_boundaries("Fish & chips").last_stop is None


def test_refine_rules():
    test_cases = [
        ("Done. Then more.", "Done. Then more."),
        ("He said “Stop.”", "He said “Stop.”"),
        ("Done. Then what", "Done."),
        ("Sure, maybe (later)", "Sure, maybe (later)"),
        ("No stops here", "No stops here"),
        ("...", ""),
    ]

    for text, expected in test_cases:
        result = refine(text)
        assert result == expected, f"Refining failed for '{text}'"


def test_cleanup():
    test_cases = [
        ("Hello world,", True, None, "Hello world..."),
        ("Hello world,", False, None, "Hello world"),
        ("Hello world.", True, None, "Hello world."),
        ("; — Hello world —", True, None, "Hello world..."),
        ("Closed (bracket)", True, None, "Closed (bracket)"),
        ("cafe\u0301", True, None, "cafe\u0301..."),
        ("short", True, 6, "short"),
        ("", True, None, ""),
    ]

    for text, truncated, source_length, expected in test_cases:
        result = cleanup(text, truncated, source_length)
        assert result == expected, f"Cleanup failed for '{text}'"


def test_tail_word_counting():
    """Words restart after closers and soft boundaries; marks stay inside their word."""
    test_cases = [
        ("Done. (one)two", 2, False),
        ("Done. cafe\u0301 noir", 2, False),
        ("Done. one—two", 2, False),
        ("Done. a b c)", MAX_TAIL_WORDS, True),
        ("A. b. c d", 2, False),
        ("Done.\u0301 next", 1, False),
    ]

    for text, words, closed in test_cases:
        scan = scan_boundaries(text)
        assert scan.tail_words == words, f"Wrong word count for {text!r}"
        assert scan.tail_closed is closed, f"Wrong closed flag for {text!r}"


def test_stop_resets_tail():
    scan = scan_boundaries("A. b. c d")
    assert scan.last_stop == 5

    scan = scan_boundaries("Done.\u0301 next")
    assert scan.last_stop == 6

    scan = scan_boundaries("Done. Next.")
    assert scan.tail_words == 0
    assert not scan.sentence_open


def test_closed_tail_limit():
    closed = "Done. (" + " ".join(["word"] * MAX_TAIL_WORDS) + ")"
    too_long = "Done. (" + " ".join(["word"] * (MAX_TAIL_WORDS + 1)) + ")"
    assert refine(closed) == closed
    assert refine(too_long) == "Done."


def test_body_skips_leading_clutter():
    test_cases = [
        ("  ¿Qué?", 2),
        (": — hello", 4),
        ("\u0301x", 1),
        ("— —", None),
    ]

    for text, body_start in test_cases:
        assert scan_boundaries(text).body_start == body_start, f"Wrong body start for {text!r}"
