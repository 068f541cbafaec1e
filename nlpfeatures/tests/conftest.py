import pytest

from nlpfeatures.core.lemmatization.lemmatizer import StaticLemmaMap


@pytest.fixture
def stopwords():
    return frozenset({"the", "a", "an", "and", "is", "of", "to", "in", "not"})


@pytest.fixture
def lemma_map():
    return StaticLemmaMap(
        {
            "running": "run",
            "runs": "run",
            ("ran", "v"): "run",
            "agreed": "agree",
            "played": "play",
            "mice": "mouse",
            ("better", "a"): "good",
        }
    )
