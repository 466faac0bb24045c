"""
test_all.py - Comprehensive tests for the lyric analyzer

Run with: python -m pytest tests/test_all.py -v
Or just: python tests/test_all.py
"""

import re
import sys
from pathlib import Path

import pytest

# Add parent to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))


def test_syllable_counting():
    """Test the vowel-run syllable heuristic"""
    print("\n" + "="*60)
    print("TEST: Syllable Counting")
    print("="*60)

    from analysis.syllables import count_syllables, count_line_syllables

    assert count_syllables("hello") == 2
    assert count_syllables("there") == 1, "silent e should be dropped"
    assert count_syllables("the") == 1, "silent e never drops below one"
    assert count_syllables("beautiful") == 3
    assert count_syllables("goodbye") == 1
    assert count_syllables("rhythm") == 1, "y counts as a vowel"
    assert count_syllables("hmm") == 1, "no vowels still one syllable"
    assert count_syllables("One's") == 2
    assert count_syllables("!!!") == 0
    assert count_syllables("") == 0
    print("  hello=2, there=1, beautiful=3, rhythm=1, hmm=1")

    assert count_line_syllables("Hello there") == 3
    assert count_line_syllables("  No   one's\tnear  ") == 4
    assert count_line_syllables("") == 0
    print("  Line sums OK")

    print("  PASSED")
    return True


def test_split_lines():
    """Test line splitting and blank-line filtering"""
    from analysis.syllables import split_lines

    assert split_lines("a\n\n  b  \n\t\nc\r\n") == ["a", "b", "c"]
    assert split_lines("   \n \n") == []
    assert split_lines("") == []
    return True


def test_rhyme_comparator():
    """Test suffix-based rhyme matching"""
    print("\n" + "="*60)
    print("TEST: Rhyme Comparator")
    print("="*60)

    from analysis.rhyme_detector import words_rhyme, get_ending_word

    assert words_rhyme("cat", "hat")
    assert words_rhyme("near", "dear")
    assert words_rhyme("at", "cat"), "shorter word compares as a whole"
    assert words_rhyme("nation", "station")
    assert not words_rhyme("there", "near")
    assert not words_rhyme("dear", "there")
    assert not words_rhyme("time", "time"), "identical words do not rhyme"
    assert not words_rhyme("", "cat")
    assert not words_rhyme("a", "ba"), "endings shorter than two never match"
    print("  cat/hat, near/dear, at/cat rhyme; there/near does not")

    assert get_ending_word("Goodbye my dear!") == "dear"
    assert get_ending_word("No one's") == "ones"
    assert get_ending_word("   ") == ""
    assert get_ending_word("stop ...") == ""
    assert get_ending_word("Café") == "caf"
    assert get_ending_word("HEY_YOU") == "hey_you"
    print("  Ending word extraction OK")

    print("  PASSED")
    return True


def test_label_sequence():
    """Test rhyme label minting past Z"""
    print("\n" + "="*60)
    print("TEST: Label Sequence")
    print("="*60)

    from analysis.rhyme_detector import next_label, RhymeDetector

    assert next_label("A") == "B"
    assert next_label("Y") == "Z"
    assert next_label("Z") == "AA"
    assert next_label("AA") == "AB"
    assert next_label("AY") == "AZ"
    assert next_label("AZ") == "AAA"
    print("  A->B, Z->AA, AZ->AAA")

    # 27 ending words with pairwise distinct two-letter endings
    words = ["k" + chr(ord("a") + i) + "x" for i in range(26)] + ["kay"]
    scheme = RhymeDetector().analyze(words)

    expected = [chr(ord("A") + i) for i in range(26)] + ["AA"]
    assert scheme.labels == expected, f"Got {scheme.labels}"
    assert scheme.patterns == []
    print(f"  27th group labelled {scheme.labels[-1]}")

    print("  PASSED")
    return True


def test_rhyme_scheme():
    """Test rhyme scheme assignment on known lyrics"""
    print("\n" + "="*60)
    print("TEST: Rhyme Scheme")
    print("="*60)

    from analysis.rhyme_detector import RhymeDetector, detect_rhymes

    detector = RhymeDetector()

    scheme = detector.analyze(["Hello there", "No one's near", "Goodbye my dear"])
    assert scheme.pattern == "A B B"
    assert scheme.ending_words == ["there", "near", "dear"]
    print(f"  there/near/dear: {scheme.pattern}")

    scheme = detector.analyze(["cat", "hat", "bat"])
    assert scheme.pattern == "A A A"
    assert len(scheme.patterns) == 1
    assert scheme.patterns[0].lines == [1, 2, 3]
    print(f"  cat/hat/bat: {scheme.pattern}")

    # Repeated word with no rhyme partner comes back through the memo
    scheme = detector.analyze(["sky", "ground", "sky"])
    assert scheme.pattern == "A B A"

    # Lines without an ending word are skipped, not grouped
    scheme = detector.analyze(["cat", "!!!", "hat"])
    assert scheme.labels == ["A", "-", "A"]
    assert [g.label for g in scheme.groups] == ["A"]

    result = detect_rhymes(["day", "night", "way", "light", "play"])
    assert result["pattern"] == "A B A B A"
    assert [g["label"] for g in result["groups"]] == ["A", "B"]
    assert [g["size"] for g in result["groups"]] == [3, 2]
    print(f"  Pattern ordering: {result['groups']}")

    print("  PASSED")
    return True


def test_pattern_sorting():
    """Groups sort by size, ties keep first-seen order"""
    from analysis.rhyme_detector import RhymeDetector

    lines = ["go", "cat", "run", "hat", "fun", "bat", "ago"]
    scheme = RhymeDetector().analyze(lines)

    assert scheme.pattern == "A B C B C B A"
    assert [(g.label, g.size) for g in scheme.patterns] == [("B", 3), ("A", 2), ("C", 2)]
    return True


def test_analyze_reports():
    """Test full report text"""
    print("\n" + "="*60)
    print("TEST: Analyzer Reports")
    print("="*60)

    from pipeline import analyze_lyrics

    result = analyze_lyrics("Hello there\nNo one's near\nGoodbye my dear")

    assert result.syllable_report == (
        "Total Lines: 3\n"
        "Total Syllables: 10\n"
        "Average Syllables per Line: 3.3\n"
        "Range: 3 - 4 syllables\n"
        "\n"
        "Line-by-Line Breakdown:\n"
        'Line 1: 3 syllables - "Hello there"\n'
        'Line 2: 4 syllables - "No one\'s near"\n'
        'Line 3: 3 syllables - "Goodbye my dear"'
    )

    assert result.rhyme_report == (
        "Rhyme Scheme: A B B\n"
        "\n"
        "Rhyming Patterns Found:\n"
        "  B: Lines 2, 3 (2 lines)\n"
        "\n"
        "Detailed Rhyme Mapping:\n"
        'Line 1 (A): "Hello there" - ending: "there"\n'
        'Line 2 (B): "No one\'s near" - ending: "near"\n'
        'Line 3 (B): "Goodbye my dear" - ending: "dear"\n'
    )
    print(result.rhyme_report)

    result = analyze_lyrics("cat\nhat\nbat")
    assert "Rhyme Scheme: A A A" in result.rhyme_report
    assert "  A: Lines 1, 2, 3 (3 lines)\n" in result.rhyme_report
    assert 'Line 1: 1 syllable - "cat"' in result.syllable_report

    result = analyze_lyrics("sun\nmoon")
    assert "No clear rhyming patterns detected.\n" in result.rhyme_report
    assert "Rhyming Patterns Found" not in result.rhyme_report

    print("  PASSED")
    return True


def test_report_details():
    """Truncation, rounding and zero-syllable lines"""
    from pipeline import analyze_lyrics

    long_line = "a" * 60
    result = analyze_lyrics(long_line)
    assert f'Line 1: 1 syllable - "{"a" * 50}..."' in result.syllable_report
    assert f'"{long_line}" - ending: "{long_line}"' in result.rhyme_report

    exact = "b" * 49 + "a"
    result = analyze_lyrics(exact)
    assert f'"{exact}"' in result.syllable_report

    # 9 syllables over 4 lines = 2.25, rounded half up
    result = analyze_lyrics("cat dog\ncat dog\ncat dog\ncat dog cow")
    assert "Average Syllables per Line: 2.3\n" in result.syllable_report

    result = analyze_lyrics("cat\n!!!\nhat")
    assert "Range: 0 - 1 syllables" in result.syllable_report
    assert 'Line 2: 0 syllables - "!!!"' in result.syllable_report
    assert 'Line 2 (-): "!!!" - ending: ""' in result.rhyme_report
    return True


def test_report_totals_consistent():
    """Totals in the header match the per-line breakdown"""
    from pipeline import analyze_lyrics

    lyrics = (
        "Tonight we ride beneath the neon glow\n"
        "\n"
        "The city hums a song we used to know\n"
        "   Every window flickers like a star\n"
        "And every road reminds me where you are\n"
    )
    report = analyze_lyrics(lyrics).syllable_report

    per_line = [int(n) for n in re.findall(r"^Line \d+: (\d+) syllables?", report, re.M)]
    total = int(re.search(r"Total Syllables: (\d+)", report).group(1))
    lines = int(re.search(r"Total Lines: (\d+)", report).group(1))
    average = re.search(r"Average Syllables per Line: ([\d.]+)", report).group(1)

    assert lines == 4 == len(per_line)
    assert total == sum(per_line)
    assert abs(float(average) - total / lines) <= 0.05 + 1e-9
    return True


def test_whitespace_set():
    """Line and word splitting use the standard whitespace set"""
    from analysis.syllables import split_lines, split_words, trim
    from pipeline import analyze_lyrics

    # Information separators and NEL are text, not whitespace
    assert trim("cat\x1f") == "cat\x1f"
    assert split_words("a\u3000b\x85c") == ["a", "b\x85c"]
    assert split_words("\u00a0one\u2003two\t") == ["one", "two"]

    # A byte-order mark is trimmed like a space
    assert split_lines("\ufeffcat\nhat\ufeff") == ["cat", "hat"]

    result = analyze_lyrics("cat\x1f\nhat")
    assert 'Line 1: 1 syllable - "cat\x1f"' in result.syllable_report
    assert 'Line 1 (A): "cat\x1f" - ending: "cat"' in result.rhyme_report
    assert "Rhyme Scheme: A A" in result.rhyme_report

    result = analyze_lyrics("\ufeff \n\ufeff")
    assert result.syllable_report == "No lyrics provided."
    return True


def test_empty_and_invalid_input():
    """Empty input is a result, non-strings are errors"""
    print("\n" + "="*60)
    print("TEST: Empty / Invalid Input")
    print("="*60)

    from pipeline import analyze_lyrics
    from exceptions import AnalysisError, InvalidInputError

    for empty in ("", "   ", "\n\n \t\n"):
        result = analyze_lyrics(empty)
        assert result.syllable_report == "No lyrics provided."
        assert result.rhyme_report == "No lyrics provided."
    print("  Empty input returns placeholder reports")

    for bad in (None, 42, ["cat", "hat"]):
        with pytest.raises(AnalysisError) as excinfo:
            analyze_lyrics(bad)
        assert str(excinfo.value) == "Analysis failed: Invalid lyrics input: lyrics must be a string"
        assert isinstance(excinfo.value.__cause__, InvalidInputError)
    print("  Non-string input raises AnalysisError")

    print("  PASSED")
    return True


def test_idempotence():
    """Same input, byte-identical output"""
    from pipeline import analyze_lyrics

    lyrics = "Rolling down the river\nShining like a sliver\nCold wind makes me shiver"
    first = analyze_lyrics(lyrics)
    second = analyze_lyrics(lyrics)

    assert first == second
    assert first.to_dict() == {
        "syllableAnalysis": first.syllable_report,
        "rhymeAnalysis": first.rhyme_report,
    }
    return True


def run_all_tests():
    """Run all tests and report results"""
    print("\n" + "#"*60)
    print("# LYRICSLICE - TEST SUITE")
    print("#"*60)

    tests = [
        ("Syllable Counting", test_syllable_counting),
        ("Split Lines", test_split_lines),
        ("Rhyme Comparator", test_rhyme_comparator),
        ("Label Sequence", test_label_sequence),
        ("Rhyme Scheme", test_rhyme_scheme),
        ("Pattern Sorting", test_pattern_sorting),
        ("Analyzer Reports", test_analyze_reports),
        ("Report Details", test_report_details),
        ("Report Totals", test_report_totals_consistent),
        ("Whitespace Set", test_whitespace_set),
        ("Empty / Invalid Input", test_empty_and_invalid_input),
        ("Idempotence", test_idempotence),
    ]

    results = []
    for name, test_func in tests:
        try:
            passed = test_func()
            results.append((name, passed, None))
        except Exception as e:
            results.append((name, False, str(e)))
            print(f"  FAILED: {e}")

    # Summary
    print("\n" + "="*60)
    print("TEST SUMMARY")
    print("="*60)

    passed = sum(1 for _, p, _ in results if p)
    total = len(results)

    for name, p, err in results:
        status = "PASS" if p else "FAIL"
        print(f"  [{status}] {name}")
        if err:
            print(f"         Error: {err}")

    print(f"\n  {passed}/{total} tests passed")

    if passed == total:
        print("\n  ALL TESTS PASSED!")
        return 0
    else:
        print(f"\n  {total - passed} tests failed")
        return 1


if __name__ == "__main__":
    sys.exit(run_all_tests())
