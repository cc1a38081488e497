"""Tests for support, confidence and lift."""

import pytest

from liftminer import Corpus, InsufficientData, InvalidInput, ItemsetRec, lift, score


class TestItemsetRec:
    def test_drops_duplicates_keeps_order(self):
        assert list(ItemsetRec([3, 1, 3])) == [3, 1]

    def test_empty_itemset_is_invalid(self):
        with pytest.raises(InvalidInput):
            ItemsetRec.of([])

    def test_scored_itemsets_carry_their_counts(self):
        corpus = Corpus([[1, 2], [1], [2, 3]])
        record = score([1], [2, 3], corpus)
        assert (record.a.count, record.b.count) == (2, 1)
        assert (record.count_a, record.count_b) == (2, 1)
        assert record.support_a == corpus.count_to_support(2)

    def test_with_count_copies(self):
        itemset = ItemsetRec([4, 5])
        counted = itemset.with_count(7)
        assert counted == [4, 5]
        assert counted.count == 7
        assert itemset.count == 0


class TestCorpus:
    def test_counts_presence_not_duplicates(self):
        corpus = Corpus([[1, 1, 2], [1], [2, 3]])
        assert len(corpus) == 3
        assert corpus.count([1]) == 2
        assert corpus.count([1, 2]) == 1

    def test_unknown_item_has_empty_cover(self):
        corpus = Corpus([[1, 2]])
        assert corpus.get_tids([42]) == frozenset()
        assert corpus.count([1, 42]) == 0

    def test_get_tids(self):
        corpus = Corpus([[1, 2], [2], [1, 2, 3]])
        assert corpus.get_tids([2, 1]) == frozenset({0, 2})

    def test_of_reuses_corpus(self):
        corpus = Corpus([[1]])
        assert Corpus.of(corpus) is corpus

    def test_items(self):
        assert Corpus([[1, 2], [3]]).items == frozenset({1, 2, 3})


class TestLift:
    def test_positive_support_everywhere(self):
        # count_a=3, count_b=2, count_ab=2
        corpus = [[1, 2], [1, 2], [1, 3]]
        record = score([1], [2], corpus)
        assert (record.count_a, record.count_b, record.count_ab) == (3, 2, 2)
        assert record.support_a == 1.0
        assert record.support_b == pytest.approx(2 / 3)
        assert record.support_ab == pytest.approx(2 / 3)
        assert record.confidence == pytest.approx(2 / 3)
        assert lift([1], [2], corpus) == pytest.approx(1.0)

    def test_never_together(self):
        corpus = [[1], [2], [3]]
        assert lift([1], [2], corpus) == 0.0
        assert score([1], [2], corpus).confidence == 0.0

    def test_antecedent_absent_raises(self):
        with pytest.raises(InsufficientData) as excinfo:
            lift([1], [2], [[2], [3]])
        record = excinfo.value.record
        assert record.count_a == 0
        assert record.count_b == 1
        assert not record.defined

    def test_consequent_absent_raises(self):
        with pytest.raises(InsufficientData):
            lift([1], [9], [[1], [1, 2]])

    def test_score_flags_undefined_instead_of_nan(self):
        record = score([1], [2], [[2], [3]])
        assert record.defined is False
        assert record.confidence is None
        assert record.lift is None
        assert record.support_a == 0.0
        assert record.support_b == 0.5

    def test_positive_association(self):
        corpus = [[1, 2], [1, 2], [3], [4]]
        # support_ab=0.5, support_a=support_b=0.5
        assert lift([1], [2], corpus) == pytest.approx(2.0)

    def test_negative_association(self):
        corpus = [[1, 2], [1], [2], [1], [2], [1, 2]]
        # support_ab=1/3, support_a=support_b=2/3
        assert lift([1], [2], corpus) == pytest.approx(0.75)
        assert lift([1], [2], corpus) < 1.0

    def test_all_transactions_hold_both(self):
        corpus = [[1, 2], [2, 1, 5]]
        assert lift([1], [2], corpus) == pytest.approx(1.0)

    def test_symmetry(self):
        corpus = [[1, 2, 3], [1, 3], [2, 3], [1, 2], [3], [1, 3, 2]]
        assert lift([1, 3], [2], corpus) == lift([2], [1, 3], corpus)
        assert lift([1], [2], corpus) == lift([2], [1], corpus)

    def test_multi_item_sets_are_conjunctive(self):
        corpus = [[1, 2, 3], [1, 3], [1, 2], [3]]
        record = score([1, 2], [3], corpus)
        assert (record.count_a, record.count_b, record.count_ab) == (2, 3, 1)

    def test_duplicates_in_transactions_do_not_matter(self):
        plain = [[1, 2], [1], [2, 3]]
        repeated = [[1, 1, 2, 2], [1, 1], [2, 3, 3]]
        assert lift([1], [2], plain) == lift([1], [2], repeated)

    def test_accepts_prebuilt_corpus(self):
        transactions = [[1, 2], [1, 2], [1, 3]]
        assert lift([1], [2], Corpus(transactions)) == lift([1], [2], transactions)

    def test_repeated_calls_agree(self):
        corpus = Corpus([[1, 2], [2, 3], [1, 3], [1, 2, 3]])
        first = score([1], [2, 3], corpus)
        second = score([1], [2, 3], corpus)
        assert first == second
        assert first.lift == second.lift
        assert corpus.count([1]) == 3

    def test_empty_itemsets_are_invalid(self):
        with pytest.raises(InvalidInput):
            lift([], [2], [[2]])
        with pytest.raises(InvalidInput):
            score([1], [], [[1]])

    def test_empty_corpus_is_invalid(self):
        with pytest.raises(InvalidInput):
            lift([1], [2], [])

    def test_invalid_input_is_a_value_error(self):
        with pytest.raises(ValueError):
            score([1], [2], [])
