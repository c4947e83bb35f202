import os

# 测试环境不写文件日志，也不依赖真实的 Azure 配置
os.environ["LOG_DIR"] = ""
os.environ.setdefault("API_ENDPOINT", "https://example.cognitiveservices.azure.com/")
os.environ.setdefault("API_KEY", "test-key")

import pytest
from azure.ai.textanalytics import (
    AnalyzeSentimentResult,
    AssessmentSentiment,
    CategorizedEntity,
    DetectedLanguage,
    DetectLanguageResult,
    MinedOpinion,
    RecognizeEntitiesResult,
    SentenceSentiment,
    SentimentConfidenceScores,
    TargetSentiment,
)
from fastapi.testclient import TestClient

from langapi.nlp.text_analytics import TextAnalysisService
from web.backend.api.v1.services import TextAnalysisGateway, get_gateway
from web.backend.main import app


def make_sentiment_result(doc_id="1", sentiment="positive"):
    scores = SentimentConfidenceScores(positive=0.98, neutral=0.01, negative=0.01)
    opinion = MinedOpinion(
        target=TargetSentiment(
            text="food",
            sentiment="positive",
            confidence_scores=SentimentConfidenceScores(positive=0.99, neutral=0.0, negative=0.01),
            length=4,
            offset=4,
        ),
        assessments=[
            AssessmentSentiment(
                text="great",
                sentiment="positive",
                confidence_scores=SentimentConfidenceScores(positive=0.99, neutral=0.0, negative=0.01),
                length=5,
                offset=13,
                is_negated=False,
            )
        ],
    )
    sentence = SentenceSentiment(
        text="I love this!",
        sentiment=sentiment,
        confidence_scores=scores,
        length=12,
        offset=0,
        mined_opinions=[opinion],
    )
    return AnalyzeSentimentResult(
        id=doc_id,
        sentiment=sentiment,
        warnings=[],
        statistics=None,
        confidence_scores=scores,
        sentences=[sentence],
    )


def make_entity_result(doc_id="1"):
    return RecognizeEntitiesResult(
        id=doc_id,
        entities=[
            CategorizedEntity(
                text="Seattle",
                category="Location",
                subcategory="GPE",
                length=7,
                offset=0,
                confidence_score=0.95,
            ),
            CategorizedEntity(
                text="Space Needle",
                category="Location",
                subcategory=None,
                length=12,
                offset=20,
                confidence_score=0.88,
            ),
        ],
        warnings=[],
        statistics=None,
    )


def make_language_result(doc_id="1"):
    return DetectLanguageResult(
        id=doc_id,
        primary_language=DetectedLanguage(
            name="English", iso6391_name="en", confidence_score=1.0
        ),
        warnings=[],
        statistics=None,
    )


class FakeTextAnalysisService(TextAnalysisService):
    """确定性的远程服务替身：按输入条数返回结果，并记录调用"""

    def __init__(self, error=None):
        self.error = error
        self.calls = []

    def _respond(self, name, documents, factory, **kwargs):
        self.calls.append((name, list(documents), kwargs))
        if self.error is not None:
            raise self.error
        # 故意回传不同的 id，调用方必须按位置取原始 id
        return [factory(doc_id=f"remote-{i}") for i, _ in enumerate(documents)]

    def analyze_sentiment(self, documents, include_opinion_mining=True):
        return self._respond(
            "analyze_sentiment",
            documents,
            make_sentiment_result,
            include_opinion_mining=include_opinion_mining,
        )

    def recognize_entities(self, documents):
        return self._respond("recognize_entities", documents, make_entity_result)

    def detect_language(self, documents):
        return self._respond("detect_language", documents, make_language_result)


@pytest.fixture
def fake_service():
    return FakeTextAnalysisService()


@pytest.fixture
def client(fake_service):
    app.dependency_overrides[get_gateway] = lambda: TextAnalysisGateway(service=fake_service)
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
