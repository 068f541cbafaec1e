from nlpfeatures.core.stopword_removal.config import StopwordConfig
from nlpfeatures.core.stopword_removal.removal import (
    DefaultStopwordRemover,
    build_stopword_set,
    filter_stopwords,
    is_punctuation,
)


def test_filter_drops_stopwords_and_lowercases(stopwords):
    tokens = ["The", "Dog", "is", "in", "the", "Garden"]
    assert filter_stopwords(tokens, stopwords) == ["dog", "garden"]


def test_filter_drops_punctuation_only_tokens(stopwords):
    tokens = ["dog", ",", "!!", "...", "cat", "-", "$"]
    assert filter_stopwords(tokens, stopwords) == ["dog", "cat"]


def test_filter_keeps_mixed_tokens():
    assert filter_stopwords(["e-mail", "x2", "_"], set()) == ["e-mail", "x2"]


def test_filter_matches_uppercase_stopword_entries():
    assert filter_stopwords(["the", "dog"], {"THE"}) == ["dog"]


def test_filter_is_idempotent(stopwords):
    tokens = ["A", "cat", ",", "AND", "a", "Dog", "of", "war", "."]
    once = filter_stopwords(tokens, stopwords)
    assert filter_stopwords(once, stopwords) == once


def test_filter_preserves_order_and_unknown_tokens(stopwords):
    tokens = ["zebra", "the", "aardvark", "quokka"]
    assert filter_stopwords(tokens, stopwords) == ["zebra", "aardvark", "quokka"]


def test_filter_empty_input(stopwords):
    assert filter_stopwords([], stopwords) == []


def test_remover_reports_removed_tokens(stopwords):
    remover = DefaultStopwordRemover(stopwords=stopwords)
    cleaned, removed = remover.remove(["The", "dog", "!", "barked"])
    assert cleaned == ["dog", "barked"]
    assert removed == ["The", "!"]


def test_build_set_applies_custom_and_exclude():
    cfg = StopwordConfig(
        custom_stopwords=frozenset({"Hotel"}),
        exclude_stopwords=frozenset({"the"}),
    )
    assert build_stopword_set(cfg, base={"the", "a"}) == frozenset({"a", "hotel"})


def test_preserve_negations():
    cfg = StopwordConfig(preserve_negations=True)
    remover = DefaultStopwordRemover(cfg, stopwords={"not", "no", "never", "a"})
    cleaned, _ = remover.remove(["not", "a", "good", "idea"])
    assert cleaned == ["not", "good", "idea"]
    assert remover.stopwords == frozenset({"a"})


def test_keep_punctuation_when_configured():
    remover = DefaultStopwordRemover(
        StopwordConfig(drop_punctuation=False), stopwords=set()
    )
    assert remover.remove(["hi", "!"]) == (["hi", "!"], [])


def test_is_punctuation():
    assert is_punctuation("?!")
    assert is_punctuation("")
    assert not is_punctuation("a.")
