import pytest
from azure.ai.textanalytics import (
    DocumentError,
    SentenceSentiment,
    SentimentConfidenceScores,
    TextAnalyticsError,
)

from conftest import make_entity_result, make_language_result, make_sentiment_result
from web.backend.api.v1.formatting import (
    DocumentResultError,
    ResultCountMismatch,
    format_entity_results,
    format_language_results,
    format_sentiment_results,
)
from web.backend.api.v1.schemas import Document


@pytest.fixture
def documents():
    return [
        Document(id="1", text="I love this!"),
        Document(id="2", text="Seattle has the Space Needle.", language="en"),
    ]


def test_sentiment_projection(documents):
    results = format_sentiment_results(
        documents, [make_sentiment_result("x"), make_sentiment_result("y", "negative")]
    )
    first = results[0].model_dump(by_alias=True)

    assert first == {
        "id": "1",
        "text": "I love this!",
        "overallSentiment": "positive",
        "confidenceScores": {"positive": 0.98, "neutral": 0.01, "negative": 0.01},
        "sentences": [
            {
                "sentenceSentiment": "positive",
                "confidenceScores": {"positive": 0.98, "neutral": 0.01, "negative": 0.01},
                "minedOpinions": [
                    {
                        "targetText": "food",
                        "targetSentiment": "positive",
                        "targetConfidenceScores": {
                            "positive": 0.99,
                            "neutral": 0.0,
                            "negative": 0.01,
                        },
                        "targetAssessments": [{"text": "great", "sentiment": "positive"}],
                    }
                ],
            }
        ],
    }
    assert results[1].overall_sentiment == "negative"


def test_sentence_without_opinion_mining_has_no_opinions(documents):
    result = make_sentiment_result()
    result.sentences = [
        SentenceSentiment(
            text="I love this!",
            sentiment="positive",
            confidence_scores=SentimentConfidenceScores(positive=1.0, neutral=0.0, negative=0.0),
            mined_opinions=None,
        )
    ]

    formatted = format_sentiment_results(documents[:1], [result])

    assert formatted[0].sentences[0].mined_opinions == []


def test_ids_and_text_come_from_input_position(documents):
    results = format_entity_results(
        documents, [make_entity_result("remote-b"), make_entity_result("remote-a")]
    )

    assert [(r.id, r.text) for r in results] == [(d.id, d.text) for d in documents]


def test_entity_projection(documents):
    entity = format_entity_results(documents[:1], [make_entity_result()])[0]

    assert entity.model_dump(by_alias=True)["entities"] == [
        {"text": "Seattle", "category": "Location", "subCategory": "GPE", "confidenceScore": 0.95},
        {"text": "Space Needle", "category": "Location", "subCategory": None, "confidenceScore": 0.88},
    ]


def test_language_projection(documents):
    result = format_language_results(documents[:1], [make_language_result()])[0]

    assert result.model_dump(by_alias=True) == {
        "id": "1",
        "text": "I love this!",
        "primaryLanguage": {"name": "English", "iso6391Name": "en", "confidenceScore": 1.0},
    }


@pytest.mark.parametrize("count", [1, 3])
def test_result_count_mismatch(documents, count):
    with pytest.raises(ResultCountMismatch) as exc_info:
        format_language_results(documents, [make_language_result() for _ in range(count)])

    assert exc_info.value.expected == 2
    assert exc_info.value.actual == count


def test_document_error_in_results(documents):
    error = DocumentError(
        id="2",
        error=TextAnalyticsError(code="InvalidDocument", message="Document text is empty."),
    )

    with pytest.raises(DocumentResultError) as exc_info:
        format_entity_results(documents, [make_entity_result(), error])

    assert exc_info.value.index == 1
    assert exc_info.value.code == "InvalidDocument"
