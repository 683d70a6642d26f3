#!/usr/bin/env python3
"""
test_core.py - Tests for the SememeSimilarity Main Class and CLI
=================================================================

Runs end-to-end on the sample dictionary shipped with the package.

Usage:
    python test_core.py
"""

import os
import sys
import tempfile
import warnings

import pytest

# Add parent directory (package root) to path for imports
package_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if package_root not in sys.path:
    sys.path.insert(0, package_root)


TOL = 1e-12


def test_initialization():
    """Load the packaged hierarchy and glossary."""
    from sememe_similarity import SememeSimilarity

    print("=" * 60)
    print("TEST: SememeSimilarity Initialization")
    print("=" * 60)

    ss = SememeSimilarity.from_files(verbose=True)
    print(f"  {ss}")
    assert len(ss.hierarchy) == 44
    assert "牛" in ss.vocab
    assert ss.store.frozen
    assert len(ss.store.lookup("地")) == 2

    print("\n✓ Initialization test PASSED")


def test_query_entry_points():
    from sememe_similarity import SememeSimilarity

    print("\n" + "=" * 60)
    print("TEST: Query Entry Points")
    print("=" * 60)

    ss = SememeSimilarity.from_files()

    assert ss.distance_of_primitives("雇用", "争斗") == 2
    assert abs(ss.similarity_of_primitives("雇用", "争斗") - 1.6 / 3.6) < TOL
    assert ss.distance_of_primitives("牲畜", "雇用") == 20
    assert ss.distance_of_primitives("牲畜", "牲畜") == 0
    assert ss.similarity_of_primitives("牲畜", "牲畜") == 1.0

    assert abs(ss.similarity_of_words("牛", "猪") - 1.0) < TOL
    assert ss.similarity_of_words("的", "牛") == 0.0

    # Same first primitive; other primitives share 国都 and 专 but not the literal
    other = 2.0 / 3.0
    expected = 0.5 + 0.2 * other + 0.17 * other + 0.13 * other
    assert abs(ss.similarity_of_words("北京", "阿布扎比") - expected) < TOL

    sim = ss.similarity_of_words("中国", "联合国")
    print(f"  sim(中国, 联合国) = {sim:.4f}")
    assert 0.0 < sim < 0.5

    with warnings.catch_warnings(record=True):
        warnings.simplefilter("always")
        assert ss.similarity_of_words("牛", "电脑") == 0.0

    print("\n✓ Query test PASSED")


def test_explain():
    from sememe_similarity import SememeSimilarity

    ss = SememeSimilarity.from_files()
    comparison = ss.explain("地", "北京")
    report = comparison.report()
    print(report)
    assert comparison.sense1.pos == "N"
    assert comparison.kind == "content"
    assert "地 ↔ 北京" in report

    comparison = ss.explain("的", "了")
    assert comparison.kind == "structural"
    assert comparison.total == 0.0


def test_batch_scoring():
    from sememe_similarity import SememeSimilarity

    ss = SememeSimilarity.from_files()
    words = ["男人", "女人", "孩子", "牛"]
    matrix = ss.similarity_matrix(words)
    assert matrix.shape == (4, 4)
    assert matrix[0, 1] > matrix[0, 3]
    assert matrix[0, 2] > matrix[0, 3]

    ranked = ss.most_similar("牛", top_k=2)
    assert sorted(w for w, _ in ranked) == ["猪", "马"]


def test_load_glossary_replaces_store():
    from sememe_similarity import SememeSimilarity

    ss = SememeSimilarity.from_files()
    old_engine = ss.engine
    with tempfile.TemporaryDirectory() as tmp:
        path = os.path.join(tmp, "glossary.dat")
        with open(path, "w", encoding="utf-8") as f:
            f.write("羊 N livestock|牲畜\n牛 N livestock|牲畜\n")
        ss.load_glossary(path)

    assert ss.vocab == ["羊", "牛"]
    assert abs(ss.similarity_of_words("羊", "牛") - 1.0) < TOL
    # The previous engine still answers from the previous store
    assert abs(old_engine.word_similarity("牛", "猪") - 1.0) < TOL


def test_load_errors():
    from sememe_similarity import SememeSimilarity, GlossaryLoadError

    with tempfile.TemporaryDirectory() as tmp:
        with pytest.raises(GlossaryLoadError):
            SememeSimilarity.from_files(glossary_path=os.path.join(tmp, "missing.dat"))


def test_load_default_shared():
    from sememe_similarity import load_default

    assert load_default() is load_default()


def test_cli():
    from sememe_similarity.cli import main

    print("\n" + "=" * 60)
    print("TEST: Command Line")
    print("=" * 60)

    assert main(["牛", "猪"]) == 0
    assert main(["男人", "女人", "孩子"]) == 0

    with tempfile.TemporaryDirectory() as tmp:
        assert main(["牛", "猪", "--glossary", os.path.join(tmp, "missing.dat")]) == 1

    with pytest.raises(SystemExit):
        main(["牛"])

    print("\n✓ CLI test PASSED")


def main():
    print("#" * 70)
    print("# CORE MODULE TESTS")
    print("#" * 70)

    tests = [
        test_initialization,
        test_query_entry_points,
        test_explain,
        test_batch_scoring,
        test_load_glossary_replaces_store,
        test_load_errors,
        test_load_default_shared,
        test_cli,
    ]
    failed = 0
    for test in tests:
        try:
            test()
        except AssertionError as e:
            failed += 1
            print(f"✗ {test.__name__} FAILED: {e}")

    print("\n" + "#" * 70)
    print("# ALL TESTS PASSED ✓" if failed == 0 else f"# {failed} TEST(S) FAILED ✗")
    print("#" * 70)
    return 0 if failed == 0 else 1


if __name__ == "__main__":
    sys.exit(main())
