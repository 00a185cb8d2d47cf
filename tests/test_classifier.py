import pytest

from orderdesk.agent.classifier import (KeywordClassifier, RemoteClassifier, build_classifier,
                                        request_from_dict)
from orderdesk.agent.models import Intent, Sentiment


@pytest.fixture
def classifier():
    return KeywordClassifier()


class TestKeywordClassifier:
    @pytest.mark.parametrize("text,intent", [
        ("I want a refund", Intent.REFUND),
        ("Please REPLACE it", Intent.REPLACEMENT),
        ("can I exchange this?", Intent.REPLACEMENT),
        ("refund or replacement, whatever", Intent.REFUND),
        ("where is my parcel", Intent.UNKNOWN),
    ])
    def test_intent(self, classifier, text, intent):
        assert classifier.classify(text).intent == intent

    @pytest.mark.parametrize("text,sentiment", [
        ("the zipper snapped", Sentiment.NEGATIVE),
        ("Defective seam", Sentiment.NEGATIVE),
        ("thanks so much", Sentiment.POSITIVE),
        ("refund please", Sentiment.NEUTRAL),
    ])
    def test_sentiment(self, classifier, text, sentiment):
        assert classifier.classify(text).sentiment == sentiment

    @pytest.mark.parametrize("text,order_id", [
        ("order ORD-123 is wrong", "ORD-123"),
        ("ord-77 please", "ORD-77"),
        ("Order #456 broke", "ORD-456"),
        ("order number: 9", "ORD-9"),
        ("no id here", None),
    ])
    def test_order_id(self, classifier, text, order_id):
        assert classifier.classify(text).order_id == order_id

    @pytest.mark.parametrize("text", ["", "   ", None])
    def test_empty_text(self, classifier, text):
        req = classifier.classify(text)
        assert req.intent == Intent.UNKNOWN
        assert req.sentiment == Sentiment.NEUTRAL
        assert req.order_id is None


def test_request_from_dict_tolerates_bad_values():
    req = request_from_dict({"order_id": "ORD-1", "intent": "replacement", "sentiment": "angry"})
    assert req.intent == Intent.REPLACEMENT
    assert req.sentiment == Sentiment.NEUTRAL
    assert request_from_dict({}).order_id is None


def test_remote_classifier_posts_text():
    class FakeClient:
        def __init__(self):
            self.calls = []

        def post(self, path, body, trace_id=None):
            self.calls.append((path, body))
            return {"order_id": "ORD-5", "intent": "REFUND", "sentiment": "NEGATIVE"}

    client = FakeClient()
    req = RemoteClassifier(client).classify("it broke")
    assert client.calls == [("/classify", {"text": "it broke"})]
    assert req.order_id == "ORD-5"
    assert req.intent == Intent.REFUND
    assert req.sentiment == Sentiment.NEGATIVE


def test_build_classifier_from_config():
    c = build_classifier({"orders": {"id_prefix": "SO-"}})
    assert isinstance(c, KeywordClassifier)
    assert c.classify("so-12 refund").order_id == "SO-12"
    remote = build_classifier({"support": {"classifier": "remote"},
                               "services": {"classifier": {"base_url": "http://clf"}}})
    assert isinstance(remote, RemoteClassifier)
