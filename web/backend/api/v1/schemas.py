from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import List, Literal, Optional


# ------------------------------------------------------
# 抽象类
# ------------------------------------------------------
class CamelModel(BaseModel):
    """对外输出统一使用 camelCase 字段名"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ErrorResponse(BaseModel):
    error: str


# ------------------------------------------------------
# 输入文档
# ------------------------------------------------------
class Document(BaseModel):
    id: str
    text: str
    language: Optional[str] = None

    def to_input(self) -> dict:
        """转换成远程服务接受的文档字典"""
        item = {"id": self.id, "text": self.text}
        if self.language:
            item["language"] = self.language
        return item


class ValidationFailure(BaseModel):
    """单条校验失败信息"""

    rule: Literal["NotAnArray", "EmptyBatch", "MissingField", "InvalidFieldValue"]
    field: Optional[str] = None
    msg: str
    location: str = "body"


class ValidationErrorResponse(BaseModel):
    errors: List[ValidationFailure]


# ------------------------------------------------------
# sentiment
# ------------------------------------------------------
Sentiment = Literal["positive", "negative", "neutral", "mixed"]


class ConfidenceScores(CamelModel):
    positive: float
    neutral: float
    negative: float


class TargetAssessment(CamelModel):
    text: str
    sentiment: str


class MinedOpinion(CamelModel):
    target_text: str
    target_sentiment: str
    target_confidence_scores: ConfidenceScores
    target_assessments: List[TargetAssessment]


class SentenceResult(CamelModel):
    sentence_sentiment: str
    confidence_scores: ConfidenceScores
    mined_opinions: List[MinedOpinion]


class SentimentResult(CamelModel):
    id: str
    text: str
    overall_sentiment: Sentiment
    confidence_scores: ConfidenceScores
    sentences: List[SentenceResult]


# ------------------------------------------------------
# ner
# ------------------------------------------------------
class Entity(CamelModel):
    text: str
    category: str
    sub_category: Optional[str] = None
    confidence_score: float


class EntityResult(CamelModel):
    id: str
    text: str
    entities: List[Entity]


# ------------------------------------------------------
# language detection
# ------------------------------------------------------
class PrimaryLanguage(CamelModel):
    name: str
    iso6391_name: str = Field(alias="iso6391Name")
    confidence_score: float


class LanguageResult(CamelModel):
    id: str
    text: str
    primary_language: PrimaryLanguage
