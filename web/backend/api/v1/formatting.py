"""Projection of raw text analytics results onto the public response shapes.

``id`` and ``text`` always come from the submitted document at the same
position; anything the remote service echoes back is ignored.
"""

from typing import Any, List, Sequence

from web.backend.api.v1.schemas import (
    ConfidenceScores,
    Document,
    Entity,
    EntityResult,
    LanguageResult,
    MinedOpinion,
    PrimaryLanguage,
    SentenceResult,
    SentimentResult,
    TargetAssessment,
)


class ResultFormatError(Exception):
    """The remote service response does not fit the expected contract."""


class ResultCountMismatch(ResultFormatError):
    def __init__(self, expected: int, actual: int):
        super().__init__(f"expected {expected} results, remote service returned {actual}")
        self.expected = expected
        self.actual = actual


class DocumentResultError(ResultFormatError):
    """The remote service returned an error in place of a document result."""

    def __init__(self, index: int, code: Any, message: Any):
        super().__init__(f"document #{index} failed remotely: {code} {message}")
        self.index = index
        self.code = code
        self.message = message


def _pair(documents: Sequence[Document], results: Sequence[Any]):
    results = list(results)
    if len(results) != len(documents):
        raise ResultCountMismatch(len(documents), len(results))
    for i, (document, result) in enumerate(zip(documents, results)):
        if getattr(result, "is_error", False):
            error = getattr(result, "error", None)
            raise DocumentResultError(
                i, getattr(error, "code", None), getattr(error, "message", None)
            )
        yield document, result


def _scores(scores: Any) -> ConfidenceScores:
    return ConfidenceScores(
        positive=scores.positive, neutral=scores.neutral, negative=scores.negative
    )


def _opinion(opinion: Any) -> MinedOpinion:
    target = opinion.target
    return MinedOpinion(
        target_text=target.text,
        target_sentiment=target.sentiment,
        target_confidence_scores=_scores(target.confidence_scores),
        target_assessments=[
            TargetAssessment(text=a.text, sentiment=a.sentiment)
            for a in opinion.assessments or []
        ],
    )


def _sentence(sentence: Any) -> SentenceResult:
    # 未开启观点挖掘时 mined_opinions 为 None
    return SentenceResult(
        sentence_sentiment=sentence.sentiment,
        confidence_scores=_scores(sentence.confidence_scores),
        mined_opinions=[_opinion(o) for o in sentence.mined_opinions or []],
    )


def format_sentiment_results(
    documents: Sequence[Document], results: Sequence[Any]
) -> List[SentimentResult]:
    return [
        SentimentResult(
            id=document.id,
            text=document.text,
            overall_sentiment=result.sentiment,
            confidence_scores=_scores(result.confidence_scores),
            sentences=[_sentence(s) for s in result.sentences],
        )
        for document, result in _pair(documents, results)
    ]


def format_entity_results(
    documents: Sequence[Document], results: Sequence[Any]
) -> List[EntityResult]:
    return [
        EntityResult(
            id=document.id,
            text=document.text,
            entities=[
                Entity(
                    text=e.text,
                    category=e.category,
                    sub_category=e.subcategory,
                    confidence_score=e.confidence_score,
                )
                for e in result.entities
            ],
        )
        for document, result in _pair(documents, results)
    ]


def format_language_results(
    documents: Sequence[Document], results: Sequence[Any]
) -> List[LanguageResult]:
    return [
        LanguageResult(
            id=document.id,
            text=document.text,
            primary_language=PrimaryLanguage(
                name=result.primary_language.name,
                iso6391_name=result.primary_language.iso6391_name,
                confidence_score=result.primary_language.confidence_score,
            ),
        )
        for document, result in _pair(documents, results)
    ]
